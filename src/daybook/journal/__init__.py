"""Journal entries and their collection.

Provides the Entry model, the sorted Db collection with binary
persistence, storage location resolution, and typed journal settings.
"""

from .config import JournalConfig
from .db import Db
from .location import DbLocation
from .models import Entry

__all__ = [
    "Db",
    "DbLocation",
    "Entry",
    "JournalConfig",
]
