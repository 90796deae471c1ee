"""
Primitive encodings of the Bitcoin wire format.

COMPACT SIZE
------------
Counts and script lengths are prefixed with a "compact size" integer::

    value < 0xfd          1 byte   [value]
    value <= 0xffff       3 bytes  [0xfd][uint16 LE]
    value <= 0xffffffff   5 bytes  [0xfe][uint32 LE]
    otherwise             9 bytes  [0xff][uint64 LE]

A value must use the shortest form. Longer forms are rejected as
non-canonical, matching what a node accepts.

HASHES
------
Block and transaction identifiers are the double SHA-256 of the serialized
structure, held in the byte order the hash function produced.
"""

from __future__ import annotations

import hashlib
import struct
from typing import IO


class CodecError(Exception):
    """Raised when a byte buffer does not parse as the expected structure.

    This covers all wire format errors:
      - Truncated buffers
      - Non-canonical compact size integers
      - Trailing bytes after a complete structure
    """


def double_sha256(data: bytes) -> bytes:
    """Return SHA-256 applied twice to `data`."""
    return hashlib.sha256(hashlib.sha256(data).digest()).digest()


def read_exact(stream: IO[bytes], size: int, what: str) -> bytes:
    """
    Read exactly `size` bytes from `stream`.

    Raises:
        CodecError: If the stream ends first.
    """
    data = stream.read(size)
    if len(data) != size:
        raise CodecError(f"Unexpected end of data reading {what}: needed {size} bytes, got {len(data)}")
    return data


def read_uint32(stream: IO[bytes], what: str) -> int:
    """Read a little-endian unsigned 32-bit integer."""
    return int(struct.unpack("<I", read_exact(stream, 4, what))[0])


def read_int32(stream: IO[bytes], what: str) -> int:
    """Read a little-endian signed 32-bit integer."""
    return int(struct.unpack("<i", read_exact(stream, 4, what))[0])


def read_uint64(stream: IO[bytes], what: str) -> int:
    """Read a little-endian unsigned 64-bit integer."""
    return int(struct.unpack("<Q", read_exact(stream, 8, what))[0])


def read_compact_size(stream: IO[bytes], what: str) -> int:
    """
    Read a compact size integer.

    Raises:
        CodecError: If the stream is truncated or the encoding is non-canonical.
    """
    prefix = read_exact(stream, 1, what)[0]
    if prefix < 0xFD:
        return prefix

    if prefix == 0xFD:
        value, minimum = struct.unpack("<H", read_exact(stream, 2, what))[0], 0xFD
    elif prefix == 0xFE:
        value, minimum = struct.unpack("<I", read_exact(stream, 4, what))[0], 0x10000
    else:
        value, minimum = struct.unpack("<Q", read_exact(stream, 8, what))[0], 0x100000000

    if value < minimum:
        raise CodecError(f"Non-canonical compact size for {what}: {value}")
    return int(value)


def encode_compact_size(value: int) -> bytes:
    """
    Encode a non-negative integer as a compact size.

    Raises:
        ValueError: If value is negative or does not fit in 64 bits.
    """
    if value < 0:
        raise ValueError("Compact size value must be non-negative")
    if value < 0xFD:
        return bytes([value])
    if value <= 0xFFFF:
        return b"\xfd" + struct.pack("<H", value)
    if value <= 0xFFFFFFFF:
        return b"\xfe" + struct.pack("<I", value)
    if value <= 0xFFFFFFFFFFFFFFFF:
        return b"\xff" + struct.pack("<Q", value)
    raise ValueError(f"Compact size value too large: {value}")


def read_var_bytes(stream: IO[bytes], what: str) -> bytes:
    """Read a compact-size-prefixed byte string."""
    length = read_compact_size(stream, what)
    return read_exact(stream, length, what)


def encode_var_bytes(data: bytes) -> bytes:
    """Encode a byte string with its compact size prefix."""
    return encode_compact_size(len(data)) + data
