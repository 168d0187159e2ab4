"""Extraction of issue ids, co-authors and first-line tags from commit messages.

Scanning happens in two passes. The first pass records where each piece of
recognized metadata sits in the raw text (``MetadataSpan``); the second
builds the cleaned body by slicing around those spans.
"""

import logging
import re
from typing import Optional

from ..models import Developer, MetadataKind, MetadataSpan, ScannedMessage
from .identity import parse_identity

logger = logging.getLogger(__name__)

ISSUE_ID_LABEL = "Issue-id: "
CO_AUTHOR_PREFIX = "Co-authored-by"
CO_AUTHOR_LABEL = "Co-authored-by:"

# Optional leading '#', anything, then at least one digit. Used unanchored.
_ISSUE_ID_RE = re.compile(r"#?.*[0-9]+")

# A tag group must close before this character index on the first line.
MAX_TAG_GROUP_INDEX = 50


def is_issue_id(candidate: str) -> bool:
    """Return True when ``candidate`` is a well-formed issue identifier."""
    return _ISSUE_ID_RE.search(candidate) is not None


def _lines(text: str) -> list[str]:
    # Split like git does: on '\n', dropping one trailing '\r' per line.
    return [line[:-1] if line.endswith("\r") else line for line in text.split("\n")]


def extract_issue_id(message: str) -> str:
    """Return the first valid ``Issue-id:`` value in the message, or ''.

    Lines whose value is not a well-formed issue id are skipped.
    """
    for line in _lines(message):
        if not line.startswith(ISSUE_ID_LABEL):
            continue
        issue_id = line[len(ISSUE_ID_LABEL) :]
        if is_issue_id(issue_id):
            return issue_id
    return ""


def extract_co_authors(message: str) -> list[Developer]:
    """Return the developers named by ``Co-authored-by`` lines, in file order.

    Raises:
        MalformedIdentityError: If a co-author line has no ``<email>`` part
    """
    co_authors: list[Developer] = []
    for line in _lines(message):
        if not line.startswith(CO_AUTHOR_PREFIX):
            continue
        name, email = parse_identity(line)
        co_authors.append(Developer(name=name, email=email))
    return co_authors


def extract_first_line_tags(message: str) -> tuple[list[str], int]:
    """Return the ids of a leading ``[a,b]`` / ``[a|b]`` / ``[a]`` group.

    Returns:
        Tuple of (tags, offset right after the closing bracket). When the
        message has no valid tag group the result is ``([], 0)``.
    """
    if not message.startswith("["):
        return [], 0

    for idx, char in enumerate(message):
        if idx > MAX_TAG_GROUP_INDEX or char == "\n":
            return [], 0
        if char == "]":
            inner = message[1:idx]
            if "," in inner:
                return inner.split(","), idx + 1
            if "|" in inner:
                return inner.split("|"), idx + 1
            return [inner], idx + 1

    return [], 0


def _label_spans(message: str, label: str, kind: MetadataKind, start: int) -> list[MetadataSpan]:
    spans = []
    idx = message.find(label, start)
    while idx != -1:
        spans.append(MetadataSpan(kind=kind, start=idx, end=idx + len(label)))
        idx = message.find(label, idx + len(label))
    return spans


def _body_bounds(scanned: ScannedMessage, message: str) -> tuple[int, int]:
    tag_group = scanned.first_span(MetadataKind.TAG_GROUP)
    start = tag_group.end if tag_group is not None else 0

    cut: Optional[MetadataSpan] = scanned.first_span(MetadataKind.ISSUE_LABEL)
    if cut is None:
        cut = scanned.first_span(MetadataKind.CO_AUTHOR_LABEL)
    return start, cut.start if cut is not None else len(message)


def scan_message(message: str) -> ScannedMessage:
    """Scan a raw commit message for metadata and the cleaned body.

    The existing issue id and co-authors are read from the whole message.
    The body starts after the tag group and stops at the first issue label,
    or failing that the first co-author label, then is whitespace-trimmed.

    Raises:
        MalformedIdentityError: If a co-author line is malformed
    """
    tags, tags_end = extract_first_line_tags(message)
    scanned = ScannedMessage(
        existing_issue_id=extract_issue_id(message),
        existing_co_authors=extract_co_authors(message),
        first_line_tags=tags,
        tags_end=tags_end,
    )

    if tags:
        scanned.spans.append(MetadataSpan(MetadataKind.TAG_GROUP, 0, tags_end))
    scanned.spans.extend(
        _label_spans(message, ISSUE_ID_LABEL, MetadataKind.ISSUE_LABEL, tags_end)
    )
    scanned.spans.extend(
        _label_spans(message, CO_AUTHOR_LABEL, MetadataKind.CO_AUTHOR_LABEL, tags_end)
    )

    start, end = _body_bounds(scanned, message)
    scanned.body = message[start:end].strip()

    logger.debug(
        f"Scanned message: tags={scanned.first_line_tags} "
        f"issue={scanned.existing_issue_id!r} co_authors={len(scanned.existing_co_authors)}"
    )
    return scanned
