"""
Async client for Bitcoin SV node communication.

Talks to a node over two interfaces:

- JSON-RPC for chain metadata (tip hash, headers)
- REST in binary mode for full blocks

Example::

    from fandango import SvNodeClient

    client = SvNodeClient.from_url("http://localhost:8332", "user", "password")
    tip = await client.get_best_block_hash()
    print(f"Best block hash: {tip}")
"""

from .bitcoin import Block, BlockHash, BlockHeader
from .errors import (
    AuthRequiredError,
    ConfigError,
    DecodeError,
    FandangoError,
    HttpStatusError,
    InvalidAddressError,
    MalformedResponseError,
    RemoteError,
    TransportError,
)
from .node import NodeClient, RestClient, RpcClient, SvNodeClient

__version__ = "0.1.0"

__all__ = [
    "AuthRequiredError",
    "Block",
    "BlockHash",
    "BlockHeader",
    "ConfigError",
    "DecodeError",
    "FandangoError",
    "HttpStatusError",
    "InvalidAddressError",
    "MalformedResponseError",
    "NodeClient",
    "RemoteError",
    "RestClient",
    "RpcClient",
    "SvNodeClient",
    "TransportError",
]
