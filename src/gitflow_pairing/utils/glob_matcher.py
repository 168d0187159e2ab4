"""Glob matching of working directories against configured repository paths.

Patterns are matched one path segment at a time, so ``*`` and ``?`` never
match across a ``/``. A repository key ``/src/team`` therefore covers
``/src/team`` itself and its direct children such as ``/src/team/api``.
"""

import fnmatch
import re


def matches_path_pattern(path: str, pattern: str) -> bool:
    """Check whether ``path`` matches ``pattern`` segment by segment.

    Args:
        path: The slash-separated path to check
        pattern: A glob pattern whose wildcards stay within one segment

    Returns:
        True if every segment of the path matches the pattern's segment
    """
    if not path or not pattern:
        return False

    path_parts = path.split("/")
    pattern_parts = pattern.split("/")
    if len(path_parts) != len(pattern_parts):
        return False

    try:
        return all(
            fnmatch.fnmatchcase(part, part_pattern)
            for part, part_pattern in zip(path_parts, pattern_parts)
        )
    except re.error:
        # Invalid pattern - treat as no match
        return False


def matches_repository_path(path: str, repository_key: str) -> bool:
    """Return True if ``path`` is the repository key or a direct child of it."""
    if path == repository_key:
        return True
    return matches_path_pattern(path, repository_key.rstrip("/") + "/*")
