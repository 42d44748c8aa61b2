"""Typed journal settings.

A pure data container with sensible defaults. Build it from a ``Config``
with ``JournalConfig.from_config`` or pass values to the constructor.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..core.exceptions import ConfigurationError

_TRUE_STRINGS = {"1", "true", "yes", "on"}
_FALSE_STRINGS = {"0", "false", "no", "off", ""}


@dataclass
class JournalConfig:
    """Settings for rendering and persisting a journal.

    Attributes:
        overview_width: Display width descriptions are truncated to in the overview.
        compress: Gzip the storage file body on write.
    """

    overview_width: int = 40
    compress: bool = False

    def __post_init__(self):
        if self.overview_width < 0:
            raise ConfigurationError(f"overview_width must be non-negative, got {self.overview_width}")

    @classmethod
    def from_config(cls, config) -> JournalConfig:
        """Read ``journal.overview_width`` and ``storage.compress`` from a Config.

        Env-var overrides arrive as strings, so values are coerced here.
        """
        width = config.get("journal.overview_width", cls.overview_width)
        compress = config.get("storage.compress", cls.compress)
        try:
            width = int(width)
        except (TypeError, ValueError) as e:
            raise ConfigurationError(f"journal.overview_width must be an integer, got {width!r}") from e
        return cls(overview_width=width, compress=_to_bool(compress, "storage.compress"))


def _to_bool(value, key: str) -> bool:
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text in _TRUE_STRINGS:
        return True
    if text in _FALSE_STRINGS:
        return False
    raise ConfigurationError(f"{key} must be a boolean, got {value!r}")
