"""Rendering of the rewritten commit message and atomic write-back."""

import logging
import re
from pathlib import Path
from typing import Union

from ..models import ResolvedAttribution
from ..utils.fs import atomic_write
from .identity import format_identity
from .scanner import CO_AUTHOR_LABEL, ISSUE_ID_LABEL

logger = logging.getLogger(__name__)

# Accepts what a strict decimal integer parse accepts: optional sign, digits.
_DECIMAL_RE = re.compile(r"[+-]?[0-9]+")

# Commit messages need not be UTF-8; undecodable bytes round-trip as surrogates.
MESSAGE_ERRORS = "surrogateescape"


def format_issue_line(issue_id: str) -> str:
    """Render the ``Issue-id:`` trailer, prefixing purely numeric ids with '#'."""
    if _DECIMAL_RE.fullmatch(issue_id):
        return f"{ISSUE_ID_LABEL}#{issue_id}"
    return f"{ISSUE_ID_LABEL}{issue_id}"


def render_message(
    body: str, attribution: ResolvedAttribution, author: tuple[str, str]
) -> str:
    """Render the body followed by the issue and co-author trailers.

    Co-authors are ordered by email. A developer whose name and email both
    equal the author's is not credited.

    Args:
        body: Message body with all metadata removed
        attribution: Resolved issue id and developers
        author: The commit author's (name, email)

    Returns:
        The full replacement text for the commit message file
    """
    parts = [body.strip(), "\n\n"]

    if attribution.issue_id:
        parts.append(f"{format_issue_line(attribution.issue_id)}\n\n")

    author_name, author_email = author
    for email in sorted(attribution.developers):
        developer = attribution.developers[email]
        if developer.name == author_name and developer.email == author_email:
            logger.debug(f"Skipping {developer} (same as author)")
            continue
        parts.append(f"{CO_AUTHOR_LABEL} {format_identity(developer.name, developer.email)}\n")
        logger.debug(f"Added {developer} as co-author")

    return "".join(parts)


def write_message(path: Union[Path, str], text: str) -> None:
    """Overwrite the commit message file at ``path`` with ``text`` atomically.

    Bytes that were not valid UTF-8 when read are written back unchanged.
    """
    atomic_write(path, text, errors=MESSAGE_ERRORS)
