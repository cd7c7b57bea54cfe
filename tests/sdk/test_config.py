"""Tests for ClientConfig defaults and overrides."""

from __future__ import annotations

import pytest

from robohash_client import __version__
from robohash_client.protocol.errors import InvalidArgumentError
from robohash_client.sdk.config import ClientConfig


class TestClientConfig:
    """ClientConfig default values and derivation."""

    def test_default_config(self):
        c = ClientConfig()
        assert c.timeout == 10.0
        assert c.user_agent == f"robohash-client/{__version__}"
        assert c.follow_redirects is True

    def test_custom_timeout(self):
        assert ClientConfig(timeout=2.5).timeout == 2.5

    def test_env_var_override(self, monkeypatch):
        monkeypatch.setenv("ROBOHASH_TIMEOUT", "3")
        monkeypatch.setenv("ROBOHASH_USER_AGENT", "my-app/1.0")
        c = ClientConfig()
        assert c.timeout == 3.0
        assert c.user_agent == "my-app/1.0"

    def test_explicit_overrides_env_var(self, monkeypatch):
        monkeypatch.setenv("ROBOHASH_TIMEOUT", "3")
        monkeypatch.setenv("ROBOHASH_USER_AGENT", "my-app/1.0")
        c = ClientConfig(timeout=7.0, user_agent="explicit/2.0")
        assert c.timeout == 7.0
        assert c.user_agent == "explicit/2.0"

    def test_invalid_env_timeout(self, monkeypatch):
        monkeypatch.setenv("ROBOHASH_TIMEOUT", "soon")
        with pytest.raises(InvalidArgumentError, match="ROBOHASH_TIMEOUT"):
            ClientConfig()

    @pytest.mark.parametrize("timeout", [0, -1.0])
    def test_non_positive_timeout_rejected(self, timeout):
        with pytest.raises(ValueError, match="timeout"):
            ClientConfig(timeout=timeout)

    @pytest.mark.parametrize("timeout", ["5", True, [1.0]])
    def test_non_numeric_timeout_rejected(self, timeout):
        with pytest.raises(InvalidArgumentError, match="timeout must be a number"):
            ClientConfig(timeout=timeout)

    @pytest.mark.parametrize("timeout", [float("nan"), float("inf")])
    def test_non_finite_timeout_rejected(self, timeout):
        with pytest.raises(InvalidArgumentError, match="timeout"):
            ClientConfig(timeout=timeout)

    @pytest.mark.parametrize("value", ["nan", "inf", "-inf"])
    def test_non_finite_env_timeout_rejected(self, monkeypatch, value):
        monkeypatch.setenv("ROBOHASH_TIMEOUT", value)
        with pytest.raises(InvalidArgumentError, match="timeout"):
            ClientConfig()
