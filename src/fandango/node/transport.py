"""
Single HTTP exchanges against a node.

Both sub-clients funnel their requests through `send`, which is the one
place where httpx failures become `TransportError`.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from fandango.errors import TransportError

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 60.0
"""HTTP timeout in seconds for per-call clients. Full blocks can be large."""


async def send(
    http_client: httpx.AsyncClient | None,
    method: str,
    url: str,
    *,
    timeout: float | None = DEFAULT_TIMEOUT,
    **kwargs: Any,
) -> httpx.Response:
    """
    Perform one HTTP request and return the fully read response.

    Uses `http_client` when given; the caller owns its lifecycle and its
    timeout settings. Otherwise a short-lived client is opened for this
    request alone, so concurrent calls share nothing.

    The response status is not checked here.

    Raises:
        TransportError: If the exchange fails before a response arrives, or if
            httpx rejects the request URL.
    """
    logger.debug("%s %s", method, url)
    try:
        if http_client is not None:
            return await http_client.request(method, url, **kwargs)

        async with httpx.AsyncClient(timeout=timeout) as client:
            return await client.request(method, url, **kwargs)

    except (httpx.RequestError, httpx.InvalidURL) as exc:
        raise TransportError(url, str(exc) or type(exc).__name__) from exc
