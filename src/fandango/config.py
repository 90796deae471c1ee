"""
Process configuration for connecting to a node.

Values come from explicit arguments first, then the environment:

- `BSV_NODE_URL`: base URL of the node (default: http://localhost:18332)
- `BSV_NODE_USER`: RPC username (optional)
- `BSV_NODE_PASSWORD`: RPC password (optional)
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

from typing_extensions import Self

from fandango.errors import ConfigError

DEFAULT_NODE_URL = "http://localhost:18332"
"""Default node URL: a local testnet node's RPC port."""

ENV_NODE_URL = "BSV_NODE_URL"
ENV_NODE_USER = "BSV_NODE_USER"
ENV_NODE_PASSWORD = "BSV_NODE_PASSWORD"


@dataclass(frozen=True, slots=True)
class NodeConfig:
    """Connection settings for one node."""

    url: str = DEFAULT_NODE_URL
    """Base URL of the node."""

    username: str | None = None
    """RPC username."""

    password: str | None = None
    """RPC password."""

    @classmethod
    def resolve(
        cls,
        url: str | None = None,
        username: str | None = None,
        password: str | None = None,
        environ: Mapping[str, str] | None = None,
    ) -> Self:
        """
        Resolve settings from arguments, falling back to the environment.

        Empty environment values count as unset.

        Raises:
            ConfigError: If only one of username and password is set.
        """
        env = os.environ if environ is None else environ

        url = url or env.get(ENV_NODE_URL) or DEFAULT_NODE_URL
        username = username or env.get(ENV_NODE_USER) or None
        password = password or env.get(ENV_NODE_PASSWORD) or None

        if (username is None) != (password is None):
            raise ConfigError(
                f"RPC credentials need both a username and a password "
                f"(set both {ENV_NODE_USER} and {ENV_NODE_PASSWORD}, or neither)"
            )

        return cls(url=url, username=username, password=password)
