"""Core data model for journal entries."""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date, datetime

# Extended form only: a bare number like "20240101" on the first line stays text
_EXTENDED_DATE = re.compile(r"\d{4}-\d{2}-\d{2}(?:[T ]|\Z)")


def to_naive_local(value: datetime) -> datetime:
    """Convert an aware datetime to naive local time; naive values pass through."""
    if value.tzinfo is None:
        return value
    return value.astimezone().replace(tzinfo=None)


def parse_timestamp(text: str) -> datetime | None:
    """Parse an ISO-8601 date or date-time, or return None.

    Only the extended ``YYYY-MM-DD[THH:MM[:SS]]`` form is accepted. Date-only
    values become midnight. Aware values are converted to naive local time so
    they compare with entries stamped by ``datetime.now()``.
    """
    text = text.strip()
    if not _EXTENDED_DATE.match(text):
        return None
    try:
        parsed = to_naive_local(datetime.fromisoformat(text))
    except (ValueError, OverflowError, OSError):
        return None
    return parsed


@dataclass(frozen=True)
class Entry:
    """One journal record.

    Immutable: the collection swaps in a new Entry to change a description.

    Attributes:
        description: The entry text. ``parse`` always trims it.
        timestamp: Naive local date-time the entry belongs to.
    """

    description: str
    timestamp: datetime

    def __post_init__(self):
        # Aware and naive datetimes cannot be compared, so normalize on creation
        if isinstance(self.timestamp, datetime) and self.timestamp.tzinfo is not None:
            object.__setattr__(self, "timestamp", to_naive_local(self.timestamp))

    @classmethod
    def parse(cls, raw: str) -> Entry:
        """Build an entry from free-form text. Never fails.

        If the first line is a date or date-time (e.g. ``2023-05-01`` or
        ``2023-05-01T08:30:00``) it becomes the timestamp and the rest is the
        description. Otherwise the whole text is the description, stamped now.
        """
        text = raw.strip()

        first_line, sep, rest = text.partition("\n")
        if sep:
            timestamp = parse_timestamp(first_line)
            if timestamp is not None:
                return cls(description=rest.strip(), timestamp=timestamp)

        return cls(description=text, timestamp=datetime.now())

    @property
    def date(self) -> date:
        return self.timestamp.date()

    def __repr__(self) -> str:
        preview = self.description[:30] + "..." if len(self.description) > 30 else self.description
        return f"Entry(timestamp='{self.timestamp.isoformat()}', description='{preview}')"
