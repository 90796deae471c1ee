"""
Transactions in their legacy serialization.

Layout::

    version      int32
    input count  compact size
    inputs       [prev txid 32][prev index uint32][script var bytes][sequence uint32]
    output count compact size
    outputs      [value uint64][script var bytes]
    lock_time    uint32

Scripts are kept as opaque bytes. Nothing here evaluates them.
"""

from __future__ import annotations

import struct
from typing import IO

from pydantic import Field
from typing_extensions import Self

from fandango.types import ZERO_HASH, StrictBaseModel

from .encoding import (
    encode_compact_size,
    encode_var_bytes,
    read_compact_size,
    read_exact,
    read_int32,
    read_uint32,
    read_uint64,
    read_var_bytes,
)
from .hash import TxId

COINBASE_PREV_INDEX = 0xFFFFFFFF
"""Output index referenced by a coinbase input."""


class OutPoint(StrictBaseModel):
    """Reference to an output of an earlier transaction."""

    txid: TxId
    index: int = Field(ge=0, le=0xFFFFFFFF)


class TxInput(StrictBaseModel):
    """A transaction input."""

    prev_output: OutPoint
    script_sig: bytes
    sequence: int = Field(ge=0, le=0xFFFFFFFF)

    @classmethod
    def deserialize(cls, stream: IO[bytes]) -> Self:
        txid = TxId(read_exact(stream, 32, "input txid"))
        index = read_uint32(stream, "input index")
        script_sig = read_var_bytes(stream, "input script")
        sequence = read_uint32(stream, "input sequence")
        return cls(
            prev_output=OutPoint(txid=txid, index=index),
            script_sig=script_sig,
            sequence=sequence,
        )

    def encode_bytes(self) -> bytes:
        return (
            bytes(self.prev_output.txid)
            + struct.pack("<I", self.prev_output.index)
            + encode_var_bytes(self.script_sig)
            + struct.pack("<I", self.sequence)
        )

    def is_coinbase(self) -> bool:
        """Whether this input is a coinbase input (spends nothing)."""
        prev = self.prev_output
        return prev.txid == ZERO_HASH and prev.index == COINBASE_PREV_INDEX


class TxOutput(StrictBaseModel):
    """A transaction output."""

    value: int = Field(ge=0)
    """Amount in satoshis."""

    script_pubkey: bytes

    @classmethod
    def deserialize(cls, stream: IO[bytes]) -> Self:
        value = read_uint64(stream, "output value")
        script_pubkey = read_var_bytes(stream, "output script")
        return cls(value=value, script_pubkey=script_pubkey)

    def encode_bytes(self) -> bytes:
        return struct.pack("<Q", self.value) + encode_var_bytes(self.script_pubkey)


class Transaction(StrictBaseModel):
    """A transaction."""

    version: int = Field(ge=-(2**31), le=2**31 - 1)
    inputs: tuple[TxInput, ...]
    outputs: tuple[TxOutput, ...]
    lock_time: int = Field(ge=0, le=0xFFFFFFFF)

    @classmethod
    def deserialize(cls, stream: IO[bytes]) -> Self:
        """
        Read one transaction from `stream`.

        Raises:
            CodecError: If the stream is truncated or malformed.
        """
        version = read_int32(stream, "transaction version")
        inputs = tuple(
            TxInput.deserialize(stream)
            for _ in range(read_compact_size(stream, "input count"))
        )
        outputs = tuple(
            TxOutput.deserialize(stream)
            for _ in range(read_compact_size(stream, "output count"))
        )
        lock_time = read_uint32(stream, "lock time")
        return cls(version=version, inputs=inputs, outputs=outputs, lock_time=lock_time)

    def encode_bytes(self) -> bytes:
        """Return the legacy serialization."""
        parts = [struct.pack("<i", self.version), encode_compact_size(len(self.inputs))]
        parts.extend(tx_in.encode_bytes() for tx_in in self.inputs)
        parts.append(encode_compact_size(len(self.outputs)))
        parts.extend(tx_out.encode_bytes() for tx_out in self.outputs)
        parts.append(struct.pack("<I", self.lock_time))
        return b"".join(parts)

    def txid(self) -> TxId:
        """Return the transaction id."""
        return TxId.of(self.encode_bytes())

    def is_coinbase(self) -> bool:
        """Whether this is a coinbase transaction."""
        return len(self.inputs) == 1 and self.inputs[0].is_coinbase()
