"""
Block header.

The header is a fixed 80-byte structure::

    version          int32   4 bytes
    prev_block_hash          32 bytes
    merkle_root              32 bytes
    timestamp        uint32  4 bytes
    bits             uint32  4 bytes   (compact target)
    nonce            uint32  4 bytes

All integers are little-endian. The block hash is the double SHA-256 of
exactly these 80 bytes.
"""

from __future__ import annotations

import io
import struct
from typing import IO

from pydantic import Field
from typing_extensions import Self

from fandango.types import StrictBaseModel

from .encoding import CodecError, read_exact, read_int32, read_uint32
from .hash import BlockHash, Sha256dHash

HEADER_SIZE = 80
"""Serialized size of a block header in bytes."""

_UINT32_MAX = 0xFFFFFFFF


class BlockHeader(StrictBaseModel):
    """The header of a block."""

    version: int = Field(ge=-(2**31), le=2**31 - 1)
    """Block version, including any version-bits signalling."""

    prev_block_hash: BlockHash
    """Hash of the previous block (zero for genesis)."""

    merkle_root: Sha256dHash
    """Merkle root of the block's transaction ids."""

    timestamp: int = Field(ge=0, le=_UINT32_MAX)
    """Unix time claimed by the miner."""

    bits: int = Field(ge=0, le=_UINT32_MAX)
    """Proof-of-work target in compact form."""

    nonce: int = Field(ge=0, le=_UINT32_MAX)
    """Nonce varied by the miner."""

    @classmethod
    def deserialize(cls, stream: IO[bytes]) -> Self:
        """
        Read one header from `stream`.

        Raises:
            CodecError: If fewer than 80 bytes are available.
        """
        version = read_int32(stream, "header version")
        prev_block_hash = BlockHash(read_exact(stream, 32, "previous block hash"))
        merkle_root = Sha256dHash(read_exact(stream, 32, "merkle root"))
        timestamp = read_uint32(stream, "header timestamp")
        bits = read_uint32(stream, "header bits")
        nonce = read_uint32(stream, "header nonce")
        return cls(
            version=version,
            prev_block_hash=prev_block_hash,
            merkle_root=merkle_root,
            timestamp=timestamp,
            bits=bits,
            nonce=nonce,
        )

    @classmethod
    def decode_bytes(cls, data: bytes) -> Self:
        """
        Parse a header from exactly 80 bytes.

        Raises:
            CodecError: If `data` is not exactly 80 bytes.
        """
        if len(data) != HEADER_SIZE:
            raise CodecError(f"Block header must be {HEADER_SIZE} bytes, got {len(data)}")
        return cls.deserialize(io.BytesIO(data))

    def encode_bytes(self) -> bytes:
        """Return the 80-byte serialization."""
        return (
            struct.pack("<i", self.version)
            + bytes(self.prev_block_hash)
            + bytes(self.merkle_root)
            + struct.pack("<III", self.timestamp, self.bits, self.nonce)
        )

    def hash(self) -> BlockHash:
        """Return the block hash."""
        return BlockHash.of(self.encode_bytes())

    def target(self) -> int:
        """Expand `bits` into the full 256-bit target."""
        exponent = self.bits >> 24
        mantissa = self.bits & 0x007FFFFF
        if exponent <= 3:
            return mantissa >> (8 * (3 - exponent))
        return mantissa << (8 * (exponent - 3))

    def difficulty(self) -> float:
        """
        Return the difficulty relative to the minimum (difficulty 1) target.

        Computed from `bits` the same way a node reports it in
        `getblockheader`, so values compare directly with node output.
        """
        shift = (self.bits >> 24) & 0xFF
        mantissa = self.bits & 0x00FFFFFF
        if mantissa == 0:
            return float("inf")

        difficulty = 0x0000FFFF / mantissa
        while shift < 29:
            difficulty *= 256.0
            shift += 1
        while shift > 29:
            difficulty /= 256.0
            shift -= 1
        return difficulty
