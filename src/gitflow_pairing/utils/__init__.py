"""Utility modules for GitFlow Pairing."""

from .debug import is_debug_mode
from .fs import atomic_write
from .glob_matcher import matches_path_pattern, matches_repository_path

__all__ = [
    "atomic_write",
    "is_debug_mode",
    "matches_path_pattern",
    "matches_repository_path",
]
