"""
File I/O utilities: parent directory creation and atomic writes.

All functions operate on explicit paths — no implicit directory lookups.
Errors propagate as ``OSError``; callers decide how to wrap them.
"""

from __future__ import annotations

import os
import tempfile
from pathlib import Path

from loguru import logger


def ensure_parent_dir(filepath: str | Path) -> Path:
    """Create the parent directory of ``filepath`` (recursively) if missing."""
    parent = Path(filepath).expanduser().parent
    parent.mkdir(parents=True, exist_ok=True)
    return parent


def atomic_write_bytes(filepath: str | Path, data: bytes) -> None:
    """Write bytes via a temp file in the same directory, then rename over the target.

    A crash mid-write leaves the previous file intact rather than a
    truncated one.
    """
    path = Path(filepath).expanduser()
    parent = ensure_parent_dir(path)

    fd, tmp = tempfile.mkstemp(dir=parent, prefix=f".{path.name}.", suffix=".tmp")
    try:
        with os.fdopen(fd, "wb") as f:
            f.write(data)
            f.flush()
            os.fsync(f.fileno())
        os.replace(tmp, path)  # atomic on POSIX
    except BaseException:
        try:
            os.unlink(tmp)
        except OSError:
            pass
        raise

    logger.debug(f"Wrote {len(data)} bytes to {path}")
