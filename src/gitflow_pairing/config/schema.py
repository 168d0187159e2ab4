"""Configuration store schema: developer registry and repository rosters."""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional, Sequence

from ..errors import UnknownDeveloperError, UnresolvableRepositoryError
from ..models import Developer, RepositoryConfig
from ..utils.glob_matcher import matches_repository_path

logger = logging.getLogger(__name__)


@dataclass
class Config:
    """In-memory view of the configuration file.

    The rewriter treats an instance as a read-only snapshot; the mutation
    methods are used by the CLI commands that edit the store.
    """

    developers: dict[str, Developer] = field(default_factory=dict)
    repositories: dict[str, RepositoryConfig] = field(default_factory=dict)
    path: Optional[Path] = None

    def lookup_developer(self, developer_id: str) -> Optional[Developer]:
        """Return the developer registered under ``developer_id``, if any."""
        return self.developers.get(developer_id)

    def lookup_repository(self, path: str) -> Optional[tuple[str, RepositoryConfig]]:
        """Find the repository configured for ``path``.

        An exact key wins; otherwise the first key (in file order) that
        ``path`` is a direct child of.

        Returns:
            Tuple of (matched key, repository config), or None
        """
        repository = self.repositories.get(path)
        if repository is not None:
            return path, repository

        for key, repository in self.repositories.items():
            if matches_repository_path(path, key):
                logger.debug(f"Path {path} matched repo {key}")
                return key, repository

        return None

    def validate_developer_ids(self, developer_ids: Sequence[str]) -> None:
        """Raise UnknownDeveloperError for the first unregistered id."""
        for developer_id in developer_ids:
            if self.lookup_developer(developer_id) is None:
                raise UnknownDeveloperError(developer_id)

    def add_developer(self, developer_id: str, name: str, email: str) -> Developer:
        """Register a developer, replacing any developer with the same id."""
        developer = Developer(name=name, email=email)
        self.developers[developer_id] = developer
        return developer

    def add_repository(
        self, path: str, developer_ids: Sequence[str], issue_id: str = ""
    ) -> RepositoryConfig:
        """Configure the default roster for a repository path.

        Raises:
            UnknownDeveloperError: If any developer id is not registered
        """
        self.validate_developer_ids(developer_ids)
        repository = RepositoryConfig(developers=list(developer_ids), issue_id=issue_id)
        self.repositories[path] = repository
        return repository

    def update_repository_developers(self, path: str, developer_ids: Sequence[str]) -> str:
        """Replace the roster of the repository that ``path`` belongs to.

        Returns:
            The matched repository key

        Raises:
            UnresolvableRepositoryError: If no repository matches ``path``
            UnknownDeveloperError: If any developer id is not registered
        """
        match = self.lookup_repository(path)
        if match is None:
            raise UnresolvableRepositoryError(path)

        self.validate_developer_ids(developer_ids)
        key, repository = match
        repository.developers = list(developer_ids)
        return key

    def to_dict(self) -> dict[str, Any]:
        """Return the configuration in its on-disk shape."""
        return {
            "devs": {
                developer_id: developer.to_dict()
                for developer_id, developer in self.developers.items()
            },
            "repos": {
                path: repository.to_dict() for path, repository in self.repositories.items()
            },
        }
