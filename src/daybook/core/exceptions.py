"""
Daybook exception hierarchy.

All daybook exceptions inherit from DaybookError, making it easy for callers
to catch library-level errors while still distinguishing specific failure modes
(re-prompt on a bad index, abort on a corrupt storage file).
"""


class DaybookError(Exception):
    """Base exception class for all daybook errors."""


class ConfigurationError(DaybookError):
    """Raised when configuration or the storage location cannot be resolved."""


class FileIOError(DaybookError):
    """Raised when the storage file cannot be created, opened, read, or written."""


class StoragePermissionError(FileIOError):
    """Raised when a storage operation is not permitted by the filesystem."""


class DataProcessingError(DaybookError):
    """Raised for data encoding and decoding errors."""


class DecodeError(DataProcessingError):
    """Raised when stored bytes do not match the expected binary layout."""


class EncodeError(DataProcessingError):
    """Raised when a collection cannot be serialized."""


class EntryIndexError(DaybookError, IndexError):
    """Raised when an entry index is not present in the collection."""

    def __init__(self, index: int, size: int):
        self.index = index
        self.size = size
        super().__init__(f"No entry at index {index} (journal has {size} entries)")
