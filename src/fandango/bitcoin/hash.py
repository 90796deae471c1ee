"""
Double SHA-256 hash types.

Block hashes and transaction ids are the double SHA-256 of the serialized
structure. Nodes display them (and exchange them over JSON-RPC and REST)
with the bytes reversed, so the familiar leading zeros of a mined block
appear at the front. For the genesis block::

    internal: 6fe28c0ab6f1b372...68d6190000000000
    display:  000000000019d668...72b3f1b60a8ce26f

These types always hold the internal order. Conversion to and from the
display form happens only in `from_hex` and `__str__`.
"""

from __future__ import annotations

from typing_extensions import Self

from fandango.types import Bytes32

from .encoding import double_sha256


class Sha256dHash(Bytes32):
    """A 32-byte double SHA-256 digest in internal byte order."""

    @classmethod
    def from_hex(cls, display: str) -> Self:
        """
        Parse a hash from its 64-character display form.

        Raises:
            ValueError: If `display` is not 64 hex characters.
        """
        if len(display) != 2 * cls.LENGTH:
            raise ValueError(
                f"{cls.__name__} hex must be {2 * cls.LENGTH} characters, got {len(display)}"
            )
        return cls(bytes.fromhex(display)[::-1])

    @classmethod
    def of(cls, data: bytes) -> Self:
        """Hash `data` with double SHA-256."""
        return cls(double_sha256(data))

    def to_hex(self) -> str:
        """Return the display form: reversed bytes, lowercase hex."""
        return bytes(self)[::-1].hex()

    def __str__(self) -> str:
        return self.to_hex()


class BlockHash(Sha256dHash):
    """Identifier of a block: the double SHA-256 of its header."""


class TxId(Sha256dHash):
    """Identifier of a transaction: the double SHA-256 of its serialization."""
