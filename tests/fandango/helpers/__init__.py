"""Test helpers: known chain data and mock nodes."""

from .builders import (
    GENESIS_BLOCK_BYTES,
    GENESIS_COINBASE_HEX,
    GENESIS_HASH_HEX,
    GENESIS_HEADER_HEX,
    GENESIS_MERKLE_ROOT_HEX,
    TIP_HASH_HEX,
    make_header,
)
from .fake_node import FakeNode, start_fake_node
from .mocks import MockNode, rpc_error, rpc_result

__all__ = [
    "GENESIS_BLOCK_BYTES",
    "GENESIS_COINBASE_HEX",
    "GENESIS_HASH_HEX",
    "GENESIS_HEADER_HEX",
    "GENESIS_MERKLE_ROOT_HEX",
    "FakeNode",
    "MockNode",
    "TIP_HASH_HEX",
    "make_header",
    "rpc_error",
    "rpc_result",
    "start_fake_node",
]
