"""Author identity lookup through git."""

import logging
from pathlib import Path
from typing import Optional, Union

import git

from ..errors import GitIdentityError

logger = logging.getLogger(__name__)


def get_git_var(name: str, cwd: Optional[Union[Path, str]] = None) -> str:
    """Return the value of a ``git var`` logical variable.

    Args:
        name: Variable name, e.g. ``GIT_AUTHOR_IDENT``
        cwd: Directory to run git in (current directory if None)

    Raises:
        GitIdentityError: If git is missing or the variable cannot be read
    """
    try:
        return git.Git(str(cwd) if cwd else None).var(name)
    except git.GitCommandError as e:
        raise GitIdentityError(f"git var {name} failed") from e
    except git.GitCommandNotFound as e:
        raise GitIdentityError("git executable not found") from e


def get_author_ident(cwd: Optional[Union[Path, str]] = None) -> str:
    """Return the author identity git would record, ``Name <email> <date>``."""
    # GIT_COMMITTER_IDENT would give the committer instead.
    ident = get_git_var("GIT_AUTHOR_IDENT", cwd)
    logger.debug(f"Author ident: {ident}")
    return ident
