"""
Storage for daybook.

A compact binary codec for journal records, optional gzip compression of
the body, and synchronous single-file access on the local filesystem.
"""

from .codec import FORMAT_VERSION, MAGIC, decode_records, encode_records
from .compression import compress_bytes, decompress_bytes
from .local import LocalFile

__all__ = [
    "FORMAT_VERSION",
    "MAGIC",
    "LocalFile",
    "compress_bytes",
    "decode_records",
    "decompress_bytes",
    "encode_records",
]
