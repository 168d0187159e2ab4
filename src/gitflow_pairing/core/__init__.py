"""Commit message rewriting engine: scan, resolve, render."""

from .identity import format_identity, parse_identity
from .renderer import render_message, write_message
from .resolver import AttributionResolver
from .scanner import is_issue_id, scan_message

__all__ = [
    "AttributionResolver",
    "format_identity",
    "is_issue_id",
    "parse_identity",
    "render_message",
    "scan_message",
    "write_message",
]
