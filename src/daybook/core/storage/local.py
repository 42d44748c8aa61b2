"""
Local filesystem storage for a single binary file.

Synchronous by design: one user, one process, blocking I/O. Two processes
writing the same path race and the last writer wins.
"""

from __future__ import annotations

from pathlib import Path

from loguru import logger

from ..exceptions import FileIOError, StoragePermissionError
from ..utils.file_io import atomic_write_bytes


class LocalFile:
    """A single storage file on the local filesystem."""

    def __init__(self, path: str | Path):
        self.path = Path(path).expanduser()

    def __repr__(self) -> str:
        return f"LocalFile('{self.path}')"

    def exists(self) -> bool:
        return self.path.exists()

    def load(self) -> bytes:
        """Read the whole file. Raises FileIOError if it cannot be read."""
        try:
            data = self.path.read_bytes()
        except PermissionError as e:
            raise StoragePermissionError(f"Cannot read {self.path}: {e}") from e
        except OSError as e:
            raise FileIOError(f"Cannot read {self.path}: {e}") from e

        logger.debug(f"Read {len(data)} bytes from {self.path}")
        return data

    def save(self, data: bytes) -> None:
        """Write the whole file, creating parent directories as needed."""
        try:
            atomic_write_bytes(self.path, data)
        except PermissionError as e:
            raise StoragePermissionError(f"Cannot write to {self.path}: {e}") from e
        except OSError as e:
            raise FileIOError(f"Cannot write to {self.path}: {e}") from e
