"""
Node client facade.

`NodeClient` is the interface callers depend on. `SvNodeClient` implements
it for a Bitcoin SV node by routing each operation to the protocol that is
authoritative for it:

- metadata (tip hash, headers) over JSON-RPC
- full blocks over the binary REST interface

Another node implementation speaking a different wire protocol can be
substituted by any object providing the same three coroutines.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

import httpx
from typing_extensions import Self

from fandango.bitcoin import Block, BlockHash, BlockHeader

from .rest import RestClient
from .rpc import RpcClient
from .transport import DEFAULT_TIMEOUT


class NodeClient(Protocol):
    """
    Protocol for reading chain data from a node.

    Uses structural subtyping - any class with matching methods satisfies the protocol.
    Implementations raise `FandangoError` subclasses and never retry.
    """

    async def get_best_block_hash(self) -> BlockHash:
        """Return the hash of the tip of the most-work chain."""
        ...

    async def get_block_header(self, block_hash: BlockHash) -> BlockHeader:
        """
        Return the header of the block with `block_hash`.

        Args:
            block_hash: Hash of the block, in internal byte order.
        """
        ...

    async def get_block(self, block_hash: BlockHash) -> Block:
        """
        Return the complete block with `block_hash`.

        Args:
            block_hash: Hash of the block, in internal byte order.
        """
        ...


@dataclass(frozen=True, slots=True)
class SvNodeClient:
    """
    Client for a Bitcoin SV node.

    Holds one JSON-RPC and one REST sub-client for the same base URL.

    Example::

        client = SvNodeClient.from_url("http://localhost:8332", "user", "password")
        tip = await client.get_best_block_hash()
        block = await client.get_block(tip)
    """

    rpc: RpcClient
    """Sub-client for metadata calls."""

    rest: RestClient
    """Sub-client for full block downloads."""

    @classmethod
    def from_url(
        cls,
        url: str,
        username: str | None = None,
        password: str | None = None,
        *,
        http_client: httpx.AsyncClient | None = None,
        timeout: float | None = DEFAULT_TIMEOUT,
    ) -> Self:
        """
        Create a client for the node at `url`.

        Args:
            url: Base URL of the node (e.g., "http://localhost:8332").
            username: Optional RPC username.
            password: Optional RPC password.
            http_client: Optional shared httpx client used by both sub-clients.
            timeout: Timeout for per-call clients when no shared client is given.

        Raises:
            InvalidAddressError: If `url` lacks an http:// or https:// scheme.
        """
        return cls(
            rpc=RpcClient.from_url(
                url, username, password, http_client=http_client, timeout=timeout
            ),
            rest=RestClient.from_url(url, http_client=http_client, timeout=timeout),
        )

    async def get_best_block_hash(self) -> BlockHash:
        return await self.rpc.get_best_block_hash()

    async def get_block_header(self, block_hash: BlockHash) -> BlockHeader:
        return await self.rpc.get_block_header(block_hash)

    async def get_block(self, block_hash: BlockHash) -> Block:
        return await self.rest.get_block(block_hash)
