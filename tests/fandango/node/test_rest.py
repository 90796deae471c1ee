"""Tests for the REST sub-client."""

from __future__ import annotations

from unittest.mock import patch

import httpx
import pytest

from fandango.bitcoin import Block, BlockHash
from fandango.errors import DecodeError, HttpStatusError, RemoteError, TransportError
from fandango.node import RestClient
from tests.fandango.helpers import GENESIS_BLOCK_BYTES, GENESIS_HASH_HEX, MockNode

GENESIS_HASH = BlockHash.from_hex(GENESIS_HASH_HEX)


class TestBlockUrl:
    """Tests for request path construction."""

    def test_uses_display_hash_and_bin_suffix(self) -> None:
        client = RestClient.from_url("http://localhost:8332")
        assert client.block_url(GENESIS_HASH) == (
            f"http://localhost:8332/rest/block/{GENESIS_HASH_HEX}.bin"
        )

    def test_trailing_separator_gives_identical_paths(self) -> None:
        plain = RestClient.from_url("http://h")
        padded = RestClient.from_url("http://h/")
        assert plain.block_url(GENESIS_HASH) == padded.block_url(GENESIS_HASH)


class TestGetBlock:
    """Tests for binary block retrieval."""

    @pytest.mark.asyncio
    async def test_success_decodes_body(self) -> None:
        node = MockNode(lambda _: httpx.Response(200, content=GENESIS_BLOCK_BYTES))
        async with node.http_client() as http:
            client = RestClient.from_url("http://localhost:8332/", http_client=http)
            block = await client.get_block(GENESIS_HASH)

        request = node.last_request
        assert request.method == "GET"
        assert request.url.path == f"/rest/block/{GENESIS_HASH_HEX}.bin"
        assert "Authorization" not in request.headers
        assert block.num_tx == 1
        assert block.hash() == GENESIS_HASH

    @pytest.mark.asyncio
    async def test_body_is_handed_to_codec_unmodified(self) -> None:
        node = MockNode(lambda _: httpx.Response(200, content=GENESIS_BLOCK_BYTES))
        async with node.http_client() as http:
            client = RestClient.from_url("http://localhost:8332", http_client=http)
            with patch.object(Block, "decode_bytes", wraps=Block.decode_bytes) as decode:
                await client.get_block(GENESIS_HASH)

        decode.assert_called_once_with(GENESIS_BLOCK_BYTES)

    @pytest.mark.asyncio
    @pytest.mark.parametrize("status", [400, 404, 500, 503])
    async def test_error_status_skips_codec(self, status: int) -> None:
        node = MockNode(lambda _: httpx.Response(status, content=b"Block not found"))
        async with node.http_client() as http:
            client = RestClient.from_url("http://localhost:8332", http_client=http)
            with patch.object(Block, "decode_bytes") as decode:
                with pytest.raises(HttpStatusError) as exc_info:
                    await client.get_block(GENESIS_HASH)

        decode.assert_not_called()
        assert isinstance(exc_info.value, RemoteError)
        assert exc_info.value.status == status
        assert exc_info.value.code == status
        assert exc_info.value.url.endswith(f"{GENESIS_HASH_HEX}.bin")

    @pytest.mark.asyncio
    async def test_garbage_body_is_decode_error(self) -> None:
        node = MockNode(lambda _: httpx.Response(200, content=b"\x00" * 10))
        async with node.http_client() as http:
            client = RestClient.from_url("http://localhost:8332", http_client=http)
            with pytest.raises(DecodeError) as exc_info:
                await client.get_block(GENESIS_HASH)

        assert exc_info.value.type_name == "Block"

    @pytest.mark.asyncio
    async def test_transport_failure(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("Connection refused", request=request)

        node = MockNode(handler)
        async with node.http_client() as http:
            client = RestClient.from_url("http://localhost:8332", http_client=http)
            with pytest.raises(TransportError, match="Connection refused"):
                await client.get_block(GENESIS_HASH)

        assert len(node.requests) == 1
