"""Small filesystem helpers: atomic writes and directory handling."""

from __future__ import annotations

import contextlib
import os
import shutil
import stat
import tempfile
from pathlib import Path
from typing import Union

PathLike = Union[str, "os.PathLike[str]"]


def safe_write(path: PathLike, data: bytes | str, mode: int = 0o644) -> None:
    """Write data to path atomically via a temporary file in the same directory."""
    target = Path(path)
    directory = target.parent
    os.makedirs(directory, 0o755, exist_ok=True)
    payload = data.encode("utf-8") if isinstance(data, str) else bytes(data)

    fd, tmp_name = tempfile.mkstemp(prefix=".tmp-", dir=directory)
    try:
        with os.fdopen(fd, "wb") as handle:
            handle.write(payload)
            handle.flush()
            os.fsync(handle.fileno())
        os.chmod(tmp_name, mode)
        os.replace(tmp_name, target)
    except BaseException:
        with contextlib.suppress(OSError):
            os.remove(tmp_name)
        raise


def ensure_dir(path: PathLike, mode: int = 0o755) -> None:
    """Create a directory and its parents if they do not exist."""
    os.makedirs(path, mode, exist_ok=True)


def remove_dir(path: PathLike) -> None:
    """Remove a path and everything beneath it; a missing path is not an error."""
    target = Path(path)
    if target.is_dir() and not target.is_symlink():
        shutil.rmtree(target)
    else:
        with contextlib.suppress(FileNotFoundError):
            target.unlink()


def exists(path: PathLike) -> bool:
    """Return whether the path exists; other stat failures propagate."""
    try:
        os.stat(path)
    except FileNotFoundError:
        return False
    return True


def is_dir(path: PathLike) -> bool:
    """Return whether the path is a directory; raises if it cannot be examined."""
    return stat.S_ISDIR(os.stat(path).st_mode)