"""Decide which issue id and developers a commit is credited with."""

import logging
from typing import Callable, Optional, Sequence

from ..errors import UnknownDeveloperError
from ..models import Developer, ResolvedAttribution, ScannedMessage
from .scanner import is_issue_id

logger = logging.getLogger(__name__)

DeveloperLookup = Callable[[str], Optional[Developer]]


class AttributionResolver:
    """Resolve attribution from message metadata and the developer registry.

    Precedence, highest first:

    1. First-line tags. When present they replace any existing co-authors.
       A tag that is not a developer id is taken as the issue id if it is
       the first tag and looks like one; otherwise it is an error.
    2. Existing ``Co-authored-by`` lines and ``Issue-id:`` line.
    3. The repository's default roster, used only when steps 1 and 2 yield
       no developers at all.

    Self-attribution is left to the renderer so the result depends only on
    the inputs here.
    """

    def __init__(self, lookup_developer: DeveloperLookup) -> None:
        self.lookup_developer = lookup_developer

    def resolve(
        self,
        scanned: ScannedMessage,
        repository_developers: Sequence[str] = (),
        repository_path: str = "",
    ) -> ResolvedAttribution:
        """Resolve the final issue id and developer set.

        Args:
            scanned: Output of the message scanner
            repository_developers: Default developer ids of the repository
            repository_path: Matched repository key, used in error messages

        Returns:
            The resolved attribution

        Raises:
            UnknownDeveloperError: If a tag or a roster id is not registered
        """
        resolved = ResolvedAttribution(issue_id=scanned.existing_issue_id)
        for developer in scanned.existing_co_authors:
            resolved.add(developer)

        if scanned.first_line_tags:
            resolved.developers = {}
            self._apply_tags(resolved, scanned.first_line_tags)

        # Repo defaults are a last resort, never merged with explicit devs.
        if not resolved.developers:
            for developer_id in repository_developers:
                developer = self.lookup_developer(developer_id)
                if developer is None:
                    raise UnknownDeveloperError(
                        developer_id, f"marked as working for repo {repository_path}"
                    )
                resolved.add(developer)
            if resolved.developers:
                logger.debug(f"Using default developers of repo {repository_path}")

        return resolved

    def _apply_tags(self, resolved: ResolvedAttribution, tags: Sequence[str]) -> None:
        for index, tag in enumerate(tags):
            developer = self.lookup_developer(tag)
            if developer is not None:
                resolved.add(developer)
                continue

            if index == 0 and is_issue_id(tag):
                # The first tag, when not a developer, names the issue.
                resolved.issue_id = tag
                continue

            raise UnknownDeveloperError(tag, "provided in the first line")
