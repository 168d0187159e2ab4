"""Configuration error types and YAML error formatting."""

from pathlib import Path
from typing import NoReturn, Optional, Union

import yaml

from ..errors import PairingError


class ConfigurationError(PairingError):
    """Raised when the configuration store cannot be read, parsed or written."""

    def __init__(
        self,
        message: str,
        config_path: Optional[Union[Path, str]] = None,
        suggestion: Optional[str] = None,
    ) -> None:
        self.config_path = Path(config_path) if config_path else None
        self.suggestion = suggestion

        full_message = message
        if self.config_path:
            full_message = f"{message}\n   File: {self.config_path}"
        if suggestion:
            full_message = f"{full_message}\n   💡 {suggestion}"
        super().__init__(full_message)


class YAMLParseError(ConfigurationError):
    """Raised when the configuration file is not valid YAML."""


def handle_yaml_error(error: yaml.YAMLError, config_path: Path) -> NoReturn:
    """Convert a PyYAML error into a YAMLParseError with location details.

    Args:
        error: The error raised by ``yaml.safe_load``
        config_path: Path of the file being parsed

    Raises:
        YAMLParseError: Always
    """
    location = ""
    mark = getattr(error, "problem_mark", None)
    if mark is not None:
        # PyYAML marks are zero-based
        location = f" at line {mark.line + 1}, column {mark.column + 1}"

    problem = getattr(error, "problem", None) or str(error)
    raise YAMLParseError(
        f"Invalid YAML{location}: {problem}",
        config_path,
        suggestion="Check indentation and quote values containing ':' or '#'.",
    ) from error
