"""Installation of the git hooks that run ``add-info`` on each commit."""

import logging
import os
import stat
from pathlib import Path
from typing import Union

from ..errors import HookInstallError

logger = logging.getLogger(__name__)

HOOK_FILES = ("hooks/prepare-commit-msg", "hooks/commit-msg")

HOOK_TEMPLATE = """#!/bin/sh
{executable} add-info $1
"""

HOOK_MODE = stat.S_IRWXU | stat.S_IRGRP | stat.S_IXGRP | stat.S_IROTH | stat.S_IXOTH  # 0o755


def install_hooks(
    repo_path: Union[Path, str], executable: str, overwrite: bool = False
) -> list[Path]:
    """Write the commit message hooks into ``<repo_path>/.git/hooks``.

    Nothing is written unless every hook can be written: without
    ``overwrite`` an existing hook file aborts the installation up front.

    Args:
        repo_path: Working tree root containing ``.git``
        executable: Command the hooks invoke
        overwrite: Replace existing hook files

    Returns:
        Paths of the hook files written

    Raises:
        HookInstallError: If ``.git`` is missing, a hook exists, or a write fails
    """
    git_dir = Path(repo_path) / ".git"
    if not git_dir.is_dir():
        raise HookInstallError(f".git not found in {repo_path}")

    hook_paths = [git_dir / hook_file for hook_file in HOOK_FILES]

    if not overwrite:
        for hook_path in hook_paths:
            # TODO: Recognize hooks written by a previous install and allow replacing them.
            if hook_path.exists():
                raise HookInstallError(f"{hook_path.relative_to(git_dir)} is already defined")

    content = HOOK_TEMPLATE.format(executable=executable)
    for hook_path in hook_paths:
        try:
            hook_path.parent.mkdir(parents=True, exist_ok=True)
            hook_path.write_text(content)
            os.chmod(hook_path, HOOK_MODE)
        except OSError as e:
            raise HookInstallError(f"create hook file {hook_path} failed: {e}") from e
        logger.info(f"Installed hook {hook_path}")

    return hook_paths
