"""
JSON-RPC client for node metadata queries.

Wire Format
-----------
Request, POSTed to the node's base URL::

    {"jsonrpc": "1.0", "id": "fandango", "method": "<name>", "params": [...]}

Response::

    {"result": <value or null>, "error": {"code": <int>, "message": <str>} | null, "id": ...}

Exactly one of `result` and `error` is expected. The HTTP status is not a
reliable signal: nodes answer some JSON-RPC errors with 404 or 500 and a
well-formed envelope, so the body is parsed whatever the status.

Result Decoding
---------------
`result` arrives as a generic JSON value. Each call names the Python type it
expects and the value is validated against it strictly, so a number where a
string is expected is a malformed response, not a silent conversion.
"""

from __future__ import annotations

import functools
import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any, TypeVar

import httpx
from pydantic import BaseModel, ConfigDict, TypeAdapter, ValidationError
from typing_extensions import Self

from fandango.bitcoin import BlockHash, BlockHeader, CodecError
from fandango.errors import (
    AuthRequiredError,
    DecodeError,
    HttpStatusError,
    MalformedResponseError,
    RemoteError,
)

from .address import Credentials, NodeAddress
from .transport import DEFAULT_TIMEOUT, send

logger = logging.getLogger(__name__)

T = TypeVar("T")

RPC_VERSION = "1.0"
"""JSON-RPC protocol version tag sent with every request."""

RPC_REQUEST_ID = "fandango"
"""Correlation id sent with every request. Constant: one request per HTTP exchange."""

_AUTH_FAILURE_STATUSES = frozenset({401, 403})


class _Envelope(BaseModel):
    """Frozen base for envelope models. Unknown fields from the node are ignored."""

    model_config = ConfigDict(frozen=True, strict=True, extra="ignore")


class RpcRequest(_Envelope):
    """A JSON-RPC request."""

    jsonrpc: str = RPC_VERSION
    id: str = RPC_REQUEST_ID
    method: str
    params: list[Any]


class RpcErrorObject(_Envelope):
    """The error member of a JSON-RPC response."""

    code: int
    message: str


class RpcResponse(_Envelope):
    """A JSON-RPC response. `result` stays untyped until the call decodes it."""

    result: Any = None
    error: RpcErrorObject | None = None
    id: str | int | None = None


@functools.cache
def _adapter(result_type: Any) -> TypeAdapter[Any]:
    return TypeAdapter(result_type)


def decode_result(method: str, value: Any, result_type: type[T]) -> T:
    """
    Validate a generic JSON result against the type a call expects.

    Raises:
        MalformedResponseError: If the value does not match `result_type`.
    """
    try:
        return _adapter(result_type).validate_python(value, strict=True)
    except ValidationError as exc:
        raise MalformedResponseError(
            f"{method}: unexpected result type {type(value).__name__}, "
            f"expected {getattr(result_type, '__name__', result_type)}"
        ) from exc


@dataclass(frozen=True, slots=True)
class RpcClient:
    """
    Client for a node's JSON-RPC interface.

    Immutable and cheap to copy. Concurrent calls share only this
    configuration, never per-request state.
    """

    address: NodeAddress
    """Base URL requests are POSTed to."""

    credentials: Credentials | None = None
    """Basic auth credentials. None sends requests anonymously."""

    http_client: httpx.AsyncClient | None = None
    """Optional shared httpx client, owned by the caller."""

    timeout: float | None = DEFAULT_TIMEOUT
    """Timeout for per-call clients. Ignored when `http_client` is set."""

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

        Credentials are used only when both `username` and `password` are given.

        Raises:
            InvalidAddressError: If `url` lacks an http:// or https:// scheme.
        """
        return cls(
            address=NodeAddress.parse(url),
            credentials=Credentials.from_parts(username, password),
            http_client=http_client,
            timeout=timeout,
        )

    async def call(self, method: str, params: Sequence[Any], result_type: type[T]) -> T:
        """
        Invoke `method` with positional `params` and decode its result.

        Args:
            method: JSON-RPC method name.
            params: Positional arguments, already JSON-native values.
            result_type: Type the result must validate as.

        Returns:
            The decoded result.

        Raises:
            TransportError: If the HTTP exchange fails.
            AuthRequiredError: If the node rejects the credentials.
            RemoteError: If the node returns a JSON-RPC error object.
            MalformedResponseError: If the response is not a usable envelope.
        """
        request = RpcRequest(method=method, params=list(params))
        url = self.address.url

        kwargs: dict[str, Any] = {
            "content": request.model_dump_json(),
            "headers": {"Content-Type": "application/json"},
        }
        if self.credentials is not None:
            kwargs["auth"] = self.credentials.auth()

        logger.debug("RPC %s with %d params", method, len(request.params))
        response = await send(self.http_client, "POST", url, timeout=self.timeout, **kwargs)

        if response.status_code in _AUTH_FAILURE_STATUSES:
            raise AuthRequiredError(response.status_code, url)

        try:
            envelope = RpcResponse.model_validate_json(response.content)
        except ValidationError as exc:
            if not response.is_success:
                raise HttpStatusError(response.status_code, response.reason_phrase, url) from exc
            raise MalformedResponseError(
                f"{method}: response body is not a JSON-RPC envelope"
            ) from exc

        if envelope.error is not None:
            raise RemoteError(envelope.error.code, envelope.error.message)

        if envelope.result is None:
            raise MalformedResponseError(f"{method}: response has neither result nor error")

        return decode_result(method, envelope.result, result_type)

    async def get_best_block_hash(self) -> BlockHash:
        """
        Return the hash of the tip of the most-work chain.

        The node returns the display form. It is reversed into internal order.
        """
        display = await self.call("getbestblockhash", [], str)
        try:
            return BlockHash.from_hex(display)
        except ValueError as exc:
            raise MalformedResponseError(
                f"getbestblockhash: invalid block hash {display!r}"
            ) from exc

    async def get_block_header(self, block_hash: BlockHash) -> BlockHeader:
        """
        Return the header of the block with `block_hash`.

        Requests the non-verbose form: the 80 serialized bytes as hex.
        """
        header_hex = await self.call("getblockheader", [block_hash.to_hex(), False], str)
        try:
            raw = bytes.fromhex(header_hex)
        except ValueError as exc:
            raise MalformedResponseError("getblockheader: result is not valid hex") from exc

        try:
            return BlockHeader.decode_bytes(raw)
        except CodecError as exc:
            raise DecodeError("BlockHeader", str(exc)) from exc
