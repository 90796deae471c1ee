"""Mock node transports for client tests."""

from __future__ import annotations

import json
from collections.abc import Callable
from typing import Any

import httpx

Handler = Callable[[httpx.Request], httpx.Response]


def rpc_result(result: Any, request_id: str = "fandango") -> httpx.Response:
    """A successful JSON-RPC response."""
    return httpx.Response(200, json={"result": result, "error": None, "id": request_id})


def rpc_error(code: int, message: str, status: int = 500) -> httpx.Response:
    """A JSON-RPC error response, with the HTTP status a node would use."""
    return httpx.Response(
        status,
        json={"result": None, "error": {"code": code, "message": message}, "id": "fandango"},
    )


class MockNode:
    """
    Answers HTTP requests from a handler and records them.

    Plugs into the clients through an httpx MockTransport, so no sockets are opened.
    """

    def __init__(self, handler: Handler) -> None:
        self.handler = handler
        self.requests: list[httpx.Request] = []

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.handler(request)

    def http_client(self) -> httpx.AsyncClient:
        """Return an httpx client whose requests reach this mock."""
        return httpx.AsyncClient(transport=httpx.MockTransport(self._handle))

    @property
    def last_request(self) -> httpx.Request:
        assert self.requests, "no request was sent"
        return self.requests[-1]

    def last_rpc_body(self) -> dict[str, Any]:
        """Decode the JSON-RPC body of the most recent request."""
        return json.loads(self.last_request.content)
