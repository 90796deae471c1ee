"""
Exception hierarchy for node client operations.

Every failure surfaced by the clients is a `FandangoError`. The subclasses
separate where the failure happened:

- `TransportError`: the HTTP exchange itself failed.
- `RemoteError`: the node answered and rejected the request.
- `MalformedResponseError`: the node answered with something that is not
  the expected protocol shape.
- `DecodeError`: the payload arrived intact but the codec rejected it.
- `InvalidAddressError` / `ConfigError`: misuse before any network access.

Nothing here is retried. Retry policy belongs to the caller.
"""

from __future__ import annotations


class FandangoError(Exception):
    """
    Base exception for all node client errors.

    Attributes:
        message: Human-readable error description.
    """

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r})"


class TransportError(FandangoError):
    """
    Raised when the underlying HTTP exchange fails.

    Covers connection refusal, timeouts, TLS failures and broken streams.
    The original httpx exception is chained as `__cause__`.

    Attributes:
        url: The URL that was being requested.
        detail: Description of the underlying failure.
    """

    def __init__(self, url: str, detail: str) -> None:
        self.url = url
        self.detail = detail
        super().__init__(f"HTTP request to {url} failed: {detail}")


class RemoteError(FandangoError):
    """
    Raised when the node processed the request and rejected it.

    For JSON-RPC this carries the error object from the response. For the
    REST interface it carries the HTTP status (see `HttpStatusError`).

    Attributes:
        code: JSON-RPC error code, or HTTP status code.
        message: Error message reported by the node.
    """

    def __init__(self, code: int, message: str) -> None:
        self.code = code
        super().__init__(message)

    def __str__(self) -> str:
        return f"Node error {self.code}: {self.message}"


class HttpStatusError(RemoteError):
    """
    Raised when the node answers with a non-success HTTP status.

    Attributes:
        status: The HTTP status code. Same value as `code`.
        url: The URL that was requested.
    """

    def __init__(self, status: int, reason: str, url: str) -> None:
        self.status = status
        self.url = url
        super().__init__(status, reason or f"HTTP {status}")

    def __str__(self) -> str:
        return f"HTTP {self.status} from {self.url}: {self.message}"


class AuthRequiredError(HttpStatusError):
    """Raised when the node rejects the request's credentials (or their absence)."""

    def __init__(self, status: int, url: str) -> None:
        super().__init__(status, "authentication required or credentials rejected", url)


class MalformedResponseError(FandangoError):
    """
    Raised when a response violates the expected protocol shape.

    Examples: a body that is not JSON, an envelope with neither `result` nor
    `error`, or a result of the wrong type for the call.
    """


class DecodeError(FandangoError):
    """
    Raised when the codec rejects a successfully retrieved payload.

    Attributes:
        type_name: The domain type that failed to decode.
        detail: The codec's description of the failure.
    """

    def __init__(self, type_name: str, detail: str) -> None:
        self.type_name = type_name
        self.detail = detail
        super().__init__(f"Failed to decode {type_name}: {detail}")


class InvalidAddressError(FandangoError):
    """
    Raised at construction time when a node address is unusable.

    Attributes:
        address: The rejected address string.
    """

    def __init__(self, address: str, detail: str) -> None:
        self.address = address
        super().__init__(f"Invalid node address {address!r}: {detail}")


class ConfigError(FandangoError):
    """Raised when process configuration is inconsistent."""
