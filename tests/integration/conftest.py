"""Fixtures for tests against a running node."""

from __future__ import annotations

import pytest

from fandango.node import SvNodeClient


@pytest.fixture
def node_client(request: pytest.FixtureRequest) -> SvNodeClient:
    """
    Provide a client for the node given by --node-url.

    Skips the test when no URL is given.
    """
    url = request.config.getoption("--node-url")
    if not url:
        pytest.skip("no --node-url given")
    return SvNodeClient.from_url(
        url,
        request.config.getoption("--node-user"),
        request.config.getoption("--node-password"),
    )
