"""
Full block.

A serialized block is the 80-byte header, a compact-size transaction count,
then the transactions back to back. This is exactly the body a node serves
from `/rest/block/<hash>.bin`.
"""

from __future__ import annotations

import io

from typing_extensions import Self

from fandango.types import StrictBaseModel

from .encoding import CodecError, encode_compact_size, read_compact_size
from .hash import BlockHash
from .header import BlockHeader
from .transaction import Transaction


class Block(StrictBaseModel):
    """A complete block: header plus transactions."""

    header: BlockHeader
    """The block header."""

    transactions: tuple[Transaction, ...]
    """Transactions in block order. The first is the coinbase."""

    @property
    def num_tx(self) -> int:
        """Number of transactions in the block."""
        return len(self.transactions)

    @classmethod
    def decode_bytes(cls, data: bytes) -> Self:
        """
        Parse a block from its full serialization.

        The buffer must contain exactly one block.

        Raises:
            CodecError: If the data is truncated, malformed, or has trailing bytes.
        """
        stream = io.BytesIO(data)
        header = BlockHeader.deserialize(stream)
        count = read_compact_size(stream, "transaction count")
        transactions = tuple(Transaction.deserialize(stream) for _ in range(count))

        trailing = len(data) - stream.tell()
        if trailing:
            raise CodecError(f"{trailing} trailing bytes after block of {count} transactions")

        return cls(header=header, transactions=transactions)

    def encode_bytes(self) -> bytes:
        """Return the full serialization."""
        parts = [self.header.encode_bytes(), encode_compact_size(len(self.transactions))]
        parts.extend(tx.encode_bytes() for tx in self.transactions)
        return b"".join(parts)

    def hash(self) -> BlockHash:
        """Return the block hash (the hash of its header)."""
        return self.header.hash()
