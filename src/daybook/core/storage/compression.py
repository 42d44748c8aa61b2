"""
Gzip compression for the storage file body.
"""

import gzip
from io import BytesIO


def compress_bytes(data: bytes) -> bytes:
    """Gzip ``data``. Identical input always gives identical output."""
    buffer = BytesIO()
    # mtime=0 keeps the header free of the current time
    with gzip.GzipFile(fileobj=buffer, mode="wb", compresslevel=6, mtime=0) as gz:
        gz.write(data)
    return buffer.getvalue()


def decompress_bytes(data: bytes) -> bytes:
    """Inverse of ``compress_bytes``. Raises ``gzip.BadGzipFile``/``EOFError`` on corrupt input."""
    return gzip.decompress(data)
