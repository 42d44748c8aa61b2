"""
Binary codec for the journal storage file.

Layout (all integers little-endian)::

    header : magic b"DYBK" | version u8 | flags u8
    body   : count u32 | count x record        (gzip-compressed when FLAG_GZIP)
    record : year u16 | month u8 | day u8 | hour u8 | minute u8 | second u8
             | microsecond u32 | desc_len u32 | desc (utf-8)

The codec works on plain ``(description, timestamp)`` pairs so it has no
dependency on the journal models. Decoding is all-or-nothing: any mismatch
raises ``DecodeError``.
"""

from __future__ import annotations

import struct
import zlib
from collections.abc import Iterable
from datetime import datetime

from ..exceptions import DecodeError, EncodeError
from .compression import compress_bytes, decompress_bytes

MAGIC = b"DYBK"
FORMAT_VERSION = 1

FLAG_GZIP = 0x01
_KNOWN_FLAGS = FLAG_GZIP

_HEADER = struct.Struct("<4sBB")
_COUNT = struct.Struct("<I")
_TIMESTAMP = struct.Struct("<HBBBBBI")
_LENGTH = struct.Struct("<I")

_U32_MAX = 0xFFFFFFFF

Record = tuple[str, datetime]


def encode_records(records: Iterable[Record], compress: bool = False) -> bytes:
    """Serialize ``(description, timestamp)`` pairs into the storage format."""
    records = list(records)
    if len(records) > _U32_MAX:
        raise EncodeError(f"Too many entries to encode: {len(records)}")

    parts = [_COUNT.pack(len(records))]
    for position, (description, timestamp) in enumerate(records):
        parts.append(_encode_timestamp(timestamp, position))
        try:
            raw = description.encode("utf-8")
        except (AttributeError, UnicodeEncodeError) as e:
            raise EncodeError(f"Entry {position}: description is not encodable text: {e}") from e
        if len(raw) > _U32_MAX:
            raise EncodeError(f"Entry {position}: description too long ({len(raw)} bytes)")
        parts.append(_LENGTH.pack(len(raw)))
        parts.append(raw)

    body = b"".join(parts)
    flags = 0
    if compress:
        body = compress_bytes(body)
        flags |= FLAG_GZIP

    return _HEADER.pack(MAGIC, FORMAT_VERSION, flags) + body


def decode_records(data: bytes) -> list[Record]:
    """Parse storage bytes back into ``(description, timestamp)`` pairs."""
    if len(data) < _HEADER.size:
        raise DecodeError(f"Storage data too short for header ({len(data)} bytes)")

    magic, version, flags = _HEADER.unpack_from(data, 0)
    if magic != MAGIC:
        raise DecodeError(f"Not a daybook storage file (magic {magic!r})")
    if version != FORMAT_VERSION:
        raise DecodeError(f"Unsupported storage format version {version} (expected {FORMAT_VERSION})")
    if flags & ~_KNOWN_FLAGS:
        raise DecodeError(f"Unknown storage flags 0x{flags:02x}")

    body = data[_HEADER.size :]
    if flags & FLAG_GZIP:
        try:
            body = decompress_bytes(body)
        except (OSError, EOFError, zlib.error) as e:
            raise DecodeError(f"Corrupt compressed body: {e}") from e

    return _decode_body(body)


def _decode_body(body: bytes) -> list[Record]:
    try:
        (count,) = _COUNT.unpack_from(body, 0)
        offset = _COUNT.size

        records: list[Record] = []
        for position in range(count):
            fields = _TIMESTAMP.unpack_from(body, offset)
            offset += _TIMESTAMP.size
            (length,) = _LENGTH.unpack_from(body, offset)
            offset += _LENGTH.size

            raw = body[offset : offset + length]
            if len(raw) != length:
                raise DecodeError(f"Entry {position}: description truncated ({len(raw)} of {length} bytes)")
            offset += length

            records.append((raw.decode("utf-8"), _decode_timestamp(fields, position)))
    except struct.error as e:
        raise DecodeError(f"Storage data truncated: {e}") from e
    except UnicodeDecodeError as e:
        raise DecodeError(f"Description is not valid UTF-8: {e}") from e

    if offset != len(body):
        raise DecodeError(f"Unexpected {len(body) - offset} trailing bytes after {count} entries")

    return records


def _encode_timestamp(timestamp: datetime, position: int) -> bytes:
    if not isinstance(timestamp, datetime):
        raise EncodeError(f"Entry {position}: timestamp must be a datetime, got {type(timestamp).__name__}")
    if timestamp.tzinfo is not None:
        raise EncodeError(f"Entry {position}: timestamp must be naive local time, got {timestamp.isoformat()}")
    return _TIMESTAMP.pack(
        timestamp.year,
        timestamp.month,
        timestamp.day,
        timestamp.hour,
        timestamp.minute,
        timestamp.second,
        timestamp.microsecond,
    )


def _decode_timestamp(fields: tuple[int, ...], position: int) -> datetime:
    try:
        return datetime(*fields)
    except ValueError as e:
        raise DecodeError(f"Entry {position}: invalid timestamp {fields}: {e}") from e
