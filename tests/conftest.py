"""Pytest configuration and shared fixtures."""

import pytest
from hypothesis import settings

# Create a profile named "no_deadline" with deadline disabled.
settings.register_profile("no_deadline", deadline=None)
settings.load_profile("no_deadline")


def pytest_addoption(parser: pytest.Parser) -> None:
    """Add options for running the live tests against a real node."""
    parser.addoption(
        "--node-url",
        action="store",
        default=None,
        help="Base URL of a running node. Live tests are skipped without it.",
    )
    parser.addoption("--node-user", action="store", default=None, help="RPC username")
    parser.addoption("--node-password", action="store", default=None, help="RPC password")
