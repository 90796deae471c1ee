"""
Bitcoin wire format codec.

Parses the byte buffers a node returns into blocks, headers and
transactions. The node clients hand buffers to this package and never
look inside the resulting values.
"""

from .block import Block
from .encoding import CodecError, double_sha256
from .hash import BlockHash, Sha256dHash, TxId
from .header import HEADER_SIZE, BlockHeader
from .transaction import OutPoint, Transaction, TxInput, TxOutput

__all__ = [
    "Block",
    "BlockHash",
    "BlockHeader",
    "CodecError",
    "HEADER_SIZE",
    "OutPoint",
    "Sha256dHash",
    "Transaction",
    "TxId",
    "TxInput",
    "TxOutput",
    "double_sha256",
]
