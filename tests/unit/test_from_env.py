"""Unit tests for environment resolution."""

import os

import pytest

from envconfig.errors import ConfigError, InvalidLogFormatError
from envconfig.from_env import resolve_environment


class TestResolveEnvironment:
    """Tests for resolve_environment function."""

    def test_returns_given_mapping(self) -> None:
        env = {"MISC_LOG_FORMAT": "json"}
        assert resolve_environment(env) is env

    def test_empty_mapping_is_kept(self) -> None:
        """An empty mapping is not replaced by os.environ."""
        env: dict[str, str] = {}
        assert resolve_environment(env) is env

    def test_defaults_to_process_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CHAIN_ETH_NETWORK", "mainnet")
        env = resolve_environment(None)
        assert env is os.environ
        assert env["CHAIN_ETH_NETWORK"] == "mainnet"


class TestErrors:
    """Tests for the configuration error hierarchy."""

    def test_config_error_attributes(self) -> None:
        error = ConfigError("broken", variable="SOME_VAR")
        assert error.message == "broken"
        assert error.variable == "SOME_VAR"
        assert str(error) == "broken"

    def test_config_error_without_variable(self) -> None:
        assert ConfigError("broken").variable is None

    def test_invalid_log_format_error(self) -> None:
        error = InvalidLogFormatError("xml")
        assert isinstance(error, ConfigError)
        assert error.value == "xml"
        assert error.message == "MISC_LOG_FORMAT has an unexpected value xml"
