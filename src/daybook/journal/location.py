"""Storage location resolution.

The journal lives in one file. By default that is ``db`` inside the XDG user
data directory for daybook; ``paths.db_file`` in the config overrides it.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from platformdirs import user_data_dir

from ..core.config import APP_NAME
from ..core.exceptions import ConfigurationError

DB_FILE_NAME = "db"


@dataclass(frozen=True)
class DbLocation:
    """Resolved path of the journal storage file."""

    path: Path

    @classmethod
    def locate(cls, config=None) -> DbLocation:
        """Resolve the storage file path.

        Args:
            config: Optional Config. ``paths.db_file`` wins, then
                ``paths.data_dir``/db, then the platform user data dir.

        Raises:
            ConfigurationError: If no usable absolute path can be resolved.
        """
        configured = ""
        data_dir = ""
        if config is not None:
            configured = str(config.get("paths.db_file", "") or "")
            data_dir = str(config.get("paths.data_dir", "") or "")

        try:
            if configured:
                path = Path(configured).expanduser()
            else:
                base = Path(data_dir).expanduser() if data_dir else Path(user_data_dir(APP_NAME))
                path = base / DB_FILE_NAME
        except (OSError, RuntimeError) as e:
            raise ConfigurationError(f"Cannot resolve journal location: {e}") from e

        if not path.is_absolute():
            raise ConfigurationError(f"Journal location must be an absolute path, got '{path}'")

        return cls(path)

    @classmethod
    def from_path(cls, path: str | Path) -> DbLocation:
        return cls(Path(path).expanduser())

    def __str__(self) -> str:
        return str(self.path)
