"""Fixtures for node client tests."""

from __future__ import annotations

from collections.abc import AsyncIterator

import pytest_asyncio

from tests.fandango.helpers import FakeNode, start_fake_node


@pytest_asyncio.fixture
async def fake_node() -> AsyncIterator[FakeNode]:
    """Provide a running fake node for one test."""
    node = FakeNode()
    runner = await start_fake_node(node)
    try:
        yield node
    finally:
        await runner.cleanup()
