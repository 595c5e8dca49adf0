"""
File I/O utilities: atomic text writes and directory setup.

All functions operate on explicit paths.
"""

from __future__ import annotations

import os
import tempfile
from pathlib import Path

from loguru import logger

from freewrite.core.types import PathLike


def atomic_write(filepath: PathLike, content: str, encoding: str = "utf-8") -> None:
    """Replace ``filepath`` with ``content`` so readers only ever see old or new data.

    The text goes to a temporary file in the same directory, is flushed and
    fsynced, then renamed over the target with ``os.replace``. On any failure
    the temporary file is removed and the target is left untouched.

    Raises:
        OSError: The write, sync or rename failed.
        UnicodeEncodeError: ``content`` cannot be encoded.
    """
    target = Path(filepath)
    fd, tmp_name = tempfile.mkstemp(prefix=f".{target.name}.", suffix=".tmp", dir=target.parent)
    try:
        with os.fdopen(fd, "w", encoding=encoding, newline="") as f:
            f.write(content)
            f.flush()
            os.fsync(f.fileno())
        os.replace(tmp_name, target)
    except BaseException:
        try:
            os.unlink(tmp_name)
        except FileNotFoundError:
            pass
        raise


def ensure_directory(path: PathLike) -> bool:
    """Create ``path`` (and parents) if missing. Returns False instead of raising."""
    try:
        Path(path).mkdir(parents=True, exist_ok=True)
    except OSError as e:
        logger.error(f"Could not create directory {path}: {e}")
        return False
    return True
