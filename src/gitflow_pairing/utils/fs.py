"""Filesystem helpers.

Atomic writes use a temporary file in the destination directory and replace
the target in a single step, so readers see either the old or the new
content and never a truncated file.
"""

import os
import tempfile
from pathlib import Path
from typing import Union


def atomic_write(
    path: Union[Path, str], text: str, encoding: str = "utf-8", errors: str = "strict"
) -> None:
    """Replace the contents of ``path`` with ``text``.

    The permission bits of an existing target are carried over to the new
    file. On any failure the temporary file is removed and the target is
    left as it was.
    """
    target = Path(path)
    fd, temp_name = tempfile.mkstemp(prefix=f".{target.name}.", suffix=".tmp", dir=target.parent)
    try:
        with os.fdopen(fd, "w", encoding=encoding, errors=errors, newline="") as handle:
            handle.write(text)
            handle.flush()
            os.fsync(handle.fileno())
        if target.exists():
            os.chmod(temp_name, target.stat().st_mode & 0o7777)
        os.replace(temp_name, target)
    except BaseException:
        if os.path.exists(temp_name):
            os.unlink(temp_name)
        raise
