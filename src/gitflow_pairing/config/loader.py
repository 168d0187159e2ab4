"""YAML configuration loading, saving and environment variable expansion."""

import logging
import os
from pathlib import Path
from typing import Any, Optional, Union

import yaml
from dotenv import load_dotenv

from ..utils.fs import atomic_write
from ..models import Developer, RepositoryConfig
from .errors import ConfigurationError, handle_yaml_error
from .schema import Config

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "GITFLOW_PAIRING_CONFIG"
DEFAULT_CONFIG_FILENAME = ".gitflow-pairing.yaml"

EXAMPLE_CONFIG = (
    "devs:\n"
    "     alice: {name: Alice A, email: alice@example.com}\n"
    "   repos:\n"
    "     /home/alice/src/project:\n"
    "       devs: [alice]"
)


class ConfigLoader:
    """Load and save the developer/repository configuration file."""

    @staticmethod
    def default_config_path() -> Path:
        """Return $GITFLOW_PAIRING_CONFIG, or ~/.gitflow-pairing.yaml."""
        override = os.environ.get(CONFIG_ENV_VAR)
        if override:
            return Path(override).expanduser()
        return Path.home() / DEFAULT_CONFIG_FILENAME

    @classmethod
    def load(cls, config_path: Union[Path, str, None] = None) -> Config:
        """Load configuration from a YAML file.

        A missing or empty file yields an empty configuration so that the
        first ``add-dev`` can create it.

        Args:
            config_path: Path to the configuration file (default location if None)

        Returns:
            Loaded configuration

        Raises:
            ConfigurationError: If the file cannot be read or is invalid
            YAMLParseError: If YAML parsing fails
        """
        config_path = Path(config_path) if config_path else cls.default_config_path()

        if not config_path.exists():
            logger.debug(f"No configuration at {config_path}, starting empty")
            return Config(path=config_path)

        cls._load_environment(config_path)
        data = cls._load_yaml(config_path)

        developers = cls._process_developers(data.get("devs"), config_path)
        repositories = cls._process_repositories(data.get("repos"), config_path)

        logger.debug(
            f"Loaded {len(developers)} developers and {len(repositories)} repos from {config_path}"
        )
        return Config(developers=developers, repositories=repositories, path=config_path)

    @classmethod
    def save(cls, config: Config, config_path: Union[Path, str, None] = None) -> Path:
        """Write the whole configuration back to disk atomically.

        Returns:
            The path written

        Raises:
            ConfigurationError: If the file cannot be written
        """
        target = Path(config_path or config.path or cls.default_config_path())
        text = yaml.safe_dump(config.to_dict(), default_flow_style=False, sort_keys=False)

        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            atomic_write(target, text)
        except OSError as e:
            raise ConfigurationError(f"Failed to write configuration file: {e}", target) from e

        logger.info(f"Saved configuration to {target}")
        return target

    @classmethod
    def _load_environment(cls, config_path: Path) -> None:
        """Load .env then .env.local from the config file's directory."""
        for env_file in (config_path.parent / ".env", config_path.parent / ".env.local"):
            if env_file.exists():
                load_dotenv(env_file, override=True)
                logger.debug(f"Loaded environment variables from {env_file}")

    @classmethod
    def _load_yaml(cls, config_path: Path) -> dict[str, Any]:
        """Load and parse the YAML file into a mapping."""
        try:
            with open(config_path, encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            handle_yaml_error(e, config_path)
        except PermissionError as e:
            raise ConfigurationError(
                f"Permission denied reading configuration file: {config_path}", config_path
            ) from e
        except OSError as e:
            raise ConfigurationError(f"Failed to read configuration file: {e}", config_path) from e

        if data is None:
            return {}

        if not isinstance(data, dict):
            raise ConfigurationError(
                "Configuration must be a mapping at the root",
                config_path,
                suggestion=f"Use the layout:\n   {EXAMPLE_CONFIG}",
            )

        return data

    @classmethod
    def _process_developers(cls, devs_data: Any, config_path: Path) -> dict[str, Developer]:
        if devs_data is None:
            return {}
        if not isinstance(devs_data, dict):
            raise ConfigurationError("'devs' must be a mapping of id to developer", config_path)

        developers = {}
        for developer_id, entry in devs_data.items():
            if not isinstance(entry, dict) or "name" not in entry or "email" not in entry:
                raise ConfigurationError(
                    f"Developer '{developer_id}' must define 'name' and 'email'",
                    config_path,
                    suggestion=f"Example:\n   {developer_id}: {{name: Jane Doe, email: jane@example.com}}",
                )
            developers[str(developer_id)] = Developer(
                name=cls._resolve_env_var(str(entry["name"])),
                email=cls._resolve_env_var(str(entry["email"])),
            )
        return developers

    @classmethod
    def _process_repositories(
        cls, repos_data: Any, config_path: Path
    ) -> dict[str, RepositoryConfig]:
        if repos_data is None:
            return {}
        if not isinstance(repos_data, dict):
            raise ConfigurationError("'repos' must be a mapping of path to repo", config_path)

        repositories = {}
        for path, entry in repos_data.items():
            entry = entry or {}
            if not isinstance(entry, dict):
                raise ConfigurationError(f"Repo '{path}' must be a mapping", config_path)

            devs = entry.get("devs") or []
            if not isinstance(devs, list):
                raise ConfigurationError(
                    f"'devs' of repo '{path}' must be a list of developer ids", config_path
                )

            issue_id = entry.get("issueId")
            repositories[cls._resolve_env_var(str(path))] = RepositoryConfig(
                developers=[str(developer_id) for developer_id in devs],
                issue_id=cls._resolve_env_var(str(issue_id)) if issue_id is not None else "",
            )
        return repositories

    @staticmethod
    def _resolve_env_var(value: str) -> str:
        """Resolve a ``${VAR}`` reference; other values are returned unchanged.

        Raises:
            ConfigurationError: If the referenced variable is not set
        """
        if value.startswith("${") and value.endswith("}"):
            env_var = value[2:-1]
            resolved: Optional[str] = os.environ.get(env_var)
            if not resolved:
                raise ConfigurationError(
                    f"Environment variable {env_var} is not set",
                    suggestion=f"Export {env_var} or define it in a .env file next to the config",
                )
            return resolved
        return value
