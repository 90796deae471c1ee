"""
REST client for bulk block retrieval.

Uses the node's unauthenticated REST interface in binary mode::

    GET {base}/rest/block/<display hash>.bin

A 2xx answer carries the serialized block as the raw body. Any other
status is a rejection and its body has no defined shape.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

import httpx
from typing_extensions import Self

from fandango.bitcoin import Block, BlockHash, CodecError
from fandango.errors import DecodeError, HttpStatusError

from .address import NodeAddress
from .transport import DEFAULT_TIMEOUT, send

logger = logging.getLogger(__name__)

BLOCK_ENDPOINT = "/rest/block/{hash}.bin"
"""Path template for binary block requests."""


@dataclass(frozen=True, slots=True)
class RestClient:
    """Client for a node's REST interface. Immutable and cheap to copy."""

    address: NodeAddress
    """Base URL the REST paths are appended to."""

    http_client: httpx.AsyncClient | None = None
    """Optional shared httpx client, owned by the caller."""

    timeout: float | None = DEFAULT_TIMEOUT
    """Timeout for per-call clients. Ignored when `http_client` is set."""

    @classmethod
    def from_url(
        cls,
        url: str,
        *,
        http_client: httpx.AsyncClient | None = None,
        timeout: float | None = DEFAULT_TIMEOUT,
    ) -> Self:
        """
        Create a client for the node at `url`.

        Raises:
            InvalidAddressError: If `url` lacks an http:// or https:// scheme.
        """
        return cls(address=NodeAddress.parse(url), http_client=http_client, timeout=timeout)

    def block_url(self, block_hash: BlockHash) -> str:
        """Return the binary block URL for `block_hash`."""
        return self.address.join(BLOCK_ENDPOINT.format(hash=block_hash.to_hex()))

    async def get_block(self, block_hash: BlockHash) -> Block:
        """
        Fetch and decode the full block with `block_hash`.

        Raises:
            TransportError: If the HTTP exchange fails.
            HttpStatusError: If the node answers with a non-2xx status.
            DecodeError: If the body does not parse as a block.
        """
        url = self.block_url(block_hash)
        response = await send(
            self.http_client,
            "GET",
            url,
            timeout=self.timeout,
            headers={"Accept": "application/octet-stream"},
        )

        if not response.is_success:
            raise HttpStatusError(response.status_code, response.reason_phrase, url)

        data = response.content
        logger.debug("Downloaded %d bytes of block %s", len(data), block_hash)

        try:
            return Block.decode_bytes(data)
        except CodecError as exc:
            raise DecodeError("Block", str(exc)) from exc
