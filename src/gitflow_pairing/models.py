"""Data models shared by the configuration store and the message rewriter."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


@dataclass(frozen=True)
class Developer:
    """A developer that can be credited on a commit.

    Two developers with the same email are the same credited developer,
    even when their names differ.
    """

    name: str
    email: str

    def __str__(self) -> str:
        return f"{self.name} <{self.email}>"

    def to_dict(self) -> dict[str, str]:
        return {"name": self.name, "email": self.email}


@dataclass
class RepositoryConfig:
    """Default roster of developer ids for one repository path."""

    developers: list[str] = field(default_factory=list)
    issue_id: str = ""

    def to_dict(self) -> dict:
        data: dict = {"devs": list(self.developers)}
        if self.issue_id:
            data["issueId"] = self.issue_id
        return data


class MetadataKind(Enum):
    """Kinds of metadata the scanner recognizes in a commit message."""

    TAG_GROUP = "tag_group"
    ISSUE_LABEL = "issue_label"
    CO_AUTHOR_LABEL = "co_author_label"


@dataclass(frozen=True)
class MetadataSpan:
    """Location of a recognized metadata element in the raw message."""

    kind: MetadataKind
    start: int
    end: int


@dataclass
class ScannedMessage:
    """Everything the scanner extracted from one raw commit message."""

    existing_issue_id: str = ""
    existing_co_authors: list[Developer] = field(default_factory=list)
    first_line_tags: list[str] = field(default_factory=list)
    tags_end: int = 0
    spans: list[MetadataSpan] = field(default_factory=list)
    body: str = ""

    def first_span(self, kind: MetadataKind) -> Optional[MetadataSpan]:
        """Return the earliest span of ``kind``, or None."""
        matching = [span for span in self.spans if span.kind is kind]
        return min(matching, key=lambda span: span.start) if matching else None


@dataclass
class ResolvedAttribution:
    """The issue id and developers a commit should be credited with.

    ``developers`` is keyed by email; assigning an email twice keeps the
    developer assigned last.
    """

    issue_id: str = ""
    developers: dict[str, Developer] = field(default_factory=dict)

    def add(self, developer: Developer) -> None:
        self.developers[developer.email] = developer
