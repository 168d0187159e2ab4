"""The commit message rewriting pipeline: scan, resolve, render, write.

Each call is independent: the configuration is a snapshot loaded by the
caller, and nothing is kept between invocations.
"""

import logging
from pathlib import Path
from typing import Callable, Optional, Union

from ..config.schema import Config
from ..errors import PairingError, UnresolvableRepositoryError
from .git_identity import get_author_ident
from .identity import parse_identity
from .renderer import MESSAGE_ERRORS, render_message, write_message
from .resolver import AttributionResolver
from .scanner import scan_message

logger = logging.getLogger(__name__)


def rewrite_message(message: str, working_dir: str, config: Config, author_ident: str) -> str:
    """Rewrite a commit message with its issue id and co-author trailers.

    Args:
        message: Raw commit message text
        working_dir: Directory the commit is made from, used to find the repo
        config: Configuration snapshot
        author_ident: Author identity, ``Name <email>`` optionally labelled

    Returns:
        The rewritten message

    Raises:
        UnresolvableRepositoryError: If ``working_dir`` matches no repository
        UnknownDeveloperError: If a tag or roster id is not registered
        MalformedIdentityError: If the author or a co-author line is malformed
    """
    match = config.lookup_repository(working_dir)
    if match is None:
        raise UnresolvableRepositoryError(working_dir)
    repository_path, repository = match
    logger.debug(f"Using repo {repository_path} for {working_dir}")

    author = parse_identity(author_ident)
    scanned = scan_message(message)

    resolver = AttributionResolver(config.lookup_developer)
    attribution = resolver.resolve(
        scanned,
        repository_developers=repository.developers,
        repository_path=repository_path,
    )
    total = ", ".join(str(dev) for dev in attribution.developers.values()) or "none"
    logger.info(f"Total devs: {total}")

    return render_message(scanned.body, attribution, author)


class MessageRewriter:
    """Rewrite commit message files in place for a configured repository."""

    def __init__(
        self,
        config: Config,
        author_ident_source: Optional[Callable[[str], str]] = None,
    ) -> None:
        self.config = config
        self.author_ident_source = author_ident_source or get_author_ident

    def process_file(self, message_file: Union[Path, str], working_dir: Union[Path, str]) -> str:
        """Rewrite ``message_file`` and return the text written.

        The file is only replaced once the new message is fully rendered;
        any error leaves it unchanged.

        Raises:
            PairingError: If the message cannot be rewritten
        """
        working_dir = str(working_dir)
        if self.config.lookup_repository(working_dir) is None:
            raise UnresolvableRepositoryError(working_dir)

        author_ident = self.author_ident_source(working_dir)

        message_path = Path(message_file)
        try:
            message = message_path.read_text(encoding="utf-8", errors=MESSAGE_ERRORS)
        except (OSError, UnicodeError) as e:
            raise PairingError(f"read commit msg from file {message_path} failed: {e}") from e

        rewritten = rewrite_message(message, working_dir, self.config, author_ident)

        try:
            write_message(message_path, rewritten)
        except (OSError, UnicodeError) as e:
            raise PairingError(f"write commit msg to file {message_path} failed: {e}") from e

        logger.info(f"Rewrote commit message {message_path}")
        return rewritten
