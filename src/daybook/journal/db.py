"""The journal collection and its persistence.

``Db`` keeps entries sorted by timestamp. Mutating methods never touch the
disk; callers persist explicitly with ``Db.write`` after a change.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field, replace
from pathlib import Path

from loguru import logger

from ..core.exceptions import EntryIndexError
from ..core.storage import LocalFile, decode_records, encode_records
from ..core.utils.text import single_line, truncate
from .location import DbLocation
from .models import Entry

DEFAULT_OVERVIEW_WIDTH = 40


def _resolve_path(location: DbLocation | str | Path) -> Path:
    if isinstance(location, DbLocation):
        return location.path
    return Path(location).expanduser()


@dataclass
class Db:
    """An ordered collection of journal entries.

    Entries are sorted ascending by timestamp after every insertion; equal
    timestamps keep their insertion order. Indices are positions in that
    order and shift whenever an entry is added or removed, so re-render
    ``entry_overview()`` after each mutation before picking another index.
    """

    entries: list[Entry] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[Entry]:
        return iter(self.entries)

    def is_empty(self) -> bool:
        return not self.entries

    # ── Mutation ─────────────────────────────────────────────

    def push_entry(self, entry: Entry) -> None:
        """Add an entry, keeping the collection sorted by timestamp."""
        # sorted is stable, so ties stay in insertion order. Sorting a new list
        # leaves the collection untouched if the comparison fails.
        self.entries = sorted([*self.entries, entry], key=lambda e: e.timestamp)
        logger.debug(f"Added entry for {entry.timestamp.isoformat()} ({len(self.entries)} total)")

    def delete_entry(self, index: int) -> Entry:
        """Remove and return the entry at ``index``. Later indices shift down by one."""
        self._check_index(index)
        removed = self.entries.pop(index)
        logger.debug(f"Deleted entry {index} ({removed.date.isoformat()})")
        return removed

    def replace_entry_description(self, index: int, description: str) -> None:
        """Overwrite the description at ``index``. The text is stored as given."""
        self._check_index(index)
        self.entries[index] = replace(self.entries[index], description=description)
        logger.debug(f"Replaced description of entry {index}")

    def get_entry_description(self, index: int) -> str:
        self._check_index(index)
        return self.entries[index].description

    def _check_index(self, index: int) -> None:
        # Negative indices are rejected rather than counted from the end
        if not 0 <= index < len(self.entries):
            raise EntryIndexError(index, len(self.entries))

    # ── Rendering ────────────────────────────────────────────

    def markdown(self) -> str:
        """Render as a markdown list: ``- YYYY-MM-DD: description`` per entry."""
        return "\n".join(f"- {entry.date.isoformat()}: {entry.description}" for entry in self.entries)

    def entry_overview(self, width: int = DEFAULT_OVERVIEW_WIDTH) -> str:
        """Render a numbered listing: ``[NNNN] YYYY-MM-DD: truncated description``.

        The bracketed numbers are the indices accepted by ``delete_entry`` and
        ``replace_entry_description``. Multi-line descriptions are shown
        on one line so every entry keeps exactly one numbered row.
        """
        return "\n".join(
            f"[{idx:04}] {entry.date.isoformat()}: {truncate(single_line(entry.description), width)}"
            for idx, entry in enumerate(self.entries)
        )

    # ── Persistence ──────────────────────────────────────────

    @classmethod
    def read(cls, location: DbLocation | str | Path, compress: bool = False) -> Db:
        """Load the collection stored at ``location``.

        A missing file is the first run: an empty collection is written
        there (gzipped when ``compress`` is set) and returned. Existing files
        are decoded whatever their compression.

        Raises:
            FileIOError: The file exists but cannot be read.
            DecodeError: The file contents are not a valid journal.
        """
        storage = LocalFile(_resolve_path(location))

        if not storage.exists():
            logger.info(f"No journal at {storage.path}, creating an empty one")
            db = cls()
            db.write(location, compress=compress)
            return db

        records = decode_records(storage.load())
        entries = [Entry(description=description, timestamp=timestamp) for description, timestamp in records]
        logger.debug(f"Loaded {len(entries)} entries from {storage.path}")
        # Stored order is trusted; write() only ever persists sorted collections
        return cls(entries=entries)

    def write(self, location: DbLocation | str | Path, compress: bool = False) -> None:
        """Persist the whole collection to ``location``, creating parent directories.

        Raises:
            FileIOError: The file or its directory cannot be written.
            EncodeError: An entry cannot be serialized.
        """
        storage = LocalFile(_resolve_path(location))
        data = encode_records(((entry.description, entry.timestamp) for entry in self.entries), compress=compress)
        storage.save(data)
        logger.debug(f"Saved {len(self.entries)} entries to {storage.path} (compressed={compress})")
