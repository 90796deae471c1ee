"""Node base address and credentials."""

from __future__ import annotations

from dataclasses import dataclass

import httpx
from typing_extensions import Self

from fandango.errors import InvalidAddressError

SUPPORTED_SCHEMES: tuple[str, ...] = ("http://", "https://")
"""Scheme prefixes a node address must start with."""

MAX_PORT = 65535


@dataclass(frozen=True, slots=True)
class NodeAddress:
    """
    Validated base URL of a node.

    Always starts with a supported scheme and never ends with `/`, so paths
    can be appended with a single separator.
    """

    url: str
    """Normalized base URL."""

    @classmethod
    def parse(cls, raw: str) -> Self:
        """
        Validate and normalize a base URL.

        Raises:
            InvalidAddressError: If the scheme or host is missing, or if httpx
                cannot use the authority.
        """
        scheme = next((s for s in SUPPORTED_SCHEMES if raw.startswith(s)), None)
        if scheme is None:
            raise InvalidAddressError(raw, "URL must start with http:// or https://")

        url = raw.rstrip("/")
        if len(url) <= len(scheme):
            raise InvalidAddressError(raw, "URL has no host")

        try:
            parsed = httpx.URL(url)
        except httpx.InvalidURL as exc:
            raise InvalidAddressError(raw, str(exc)) from exc

        if not parsed.host:
            raise InvalidAddressError(raw, "URL has no host")
        if parsed.port is not None and not 0 <= parsed.port <= MAX_PORT:
            raise InvalidAddressError(raw, f"port {parsed.port} is out of range 0-{MAX_PORT}")
        return cls(url=url)

    def join(self, path: str) -> str:
        """Append an absolute path (`/...`) to the base URL."""
        return f"{self.url}{path}"

    def __str__(self) -> str:
        return self.url


@dataclass(frozen=True, slots=True)
class Credentials:
    """Username and password for HTTP Basic authentication."""

    username: str
    password: str

    @classmethod
    def from_parts(cls, username: str | None, password: str | None) -> Self | None:
        """
        Build credentials when both parts are given.

        Returns None when either is missing, meaning requests go out anonymously.
        """
        if username is None or password is None:
            return None
        return cls(username=username, password=password)

    def auth(self) -> httpx.BasicAuth:
        """Return the httpx auth object for these credentials."""
        return httpx.BasicAuth(self.username, self.password)

    def __repr__(self) -> str:
        return f"Credentials(username={self.username!r}, password='***')"
