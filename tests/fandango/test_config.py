"""Tests for process configuration."""

import pytest

from fandango.config import DEFAULT_NODE_URL, NodeConfig
from fandango.errors import ConfigError


def test_defaults_with_empty_environment() -> None:
    config = NodeConfig.resolve(environ={})
    assert config == NodeConfig(url=DEFAULT_NODE_URL, username=None, password=None)


def test_environment_values() -> None:
    config = NodeConfig.resolve(
        environ={
            "BSV_NODE_URL": "http://node:8332",
            "BSV_NODE_USER": "bitcoin",
            "BSV_NODE_PASSWORD": "secret",
        }
    )
    assert config == NodeConfig("http://node:8332", "bitcoin", "secret")


def test_arguments_override_environment() -> None:
    config = NodeConfig.resolve(
        "https://other",
        "alice",
        "pw",
        environ={"BSV_NODE_URL": "http://node:8332", "BSV_NODE_USER": "bitcoin"},
    )
    assert config == NodeConfig("https://other", "alice", "pw")


def test_empty_values_count_as_unset() -> None:
    config = NodeConfig.resolve(
        environ={"BSV_NODE_URL": "", "BSV_NODE_USER": "", "BSV_NODE_PASSWORD": ""}
    )
    assert config.url == DEFAULT_NODE_URL
    assert config.username is None


@pytest.mark.parametrize(
    "environ",
    [{"BSV_NODE_USER": "bitcoin"}, {"BSV_NODE_PASSWORD": "secret"}],
)
def test_half_configured_credentials_rejected(environ: dict[str, str]) -> None:
    with pytest.raises(ConfigError, match="both a username and a password"):
        NodeConfig.resolve(environ=environ)


def test_reads_process_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("BSV_NODE_URL", "http://from-env:1")
    monkeypatch.delenv("BSV_NODE_USER", raising=False)
    monkeypatch.delenv("BSV_NODE_PASSWORD", raising=False)
    assert NodeConfig.resolve().url == "http://from-env:1"
