"""Shared test fixtures for the envconfig test suite."""

from collections.abc import Generator

import pytest
import structlog

OBSERVABILITY_VARS = (
    "MISC_SENTRY_URL",
    "CHAIN_ETH_NETWORK",
    "CHAIN_ETH_ZKSYNC_NETWORK",
    "MISC_LOG_FORMAT",
)


@pytest.fixture(autouse=True)
def clean_observability_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove observability variables from the process environment.

    Tests that read os.environ start from a known-empty state and set
    what they need with monkeypatch.setenv.
    """
    for name in OBSERVABILITY_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def reset_structlog() -> Generator[None, None, None]:
    """Restore structlog defaults after each test."""
    yield
    structlog.reset_defaults()
    structlog.contextvars.clear_contextvars()


@pytest.fixture
def mainnet_env() -> dict[str, str]:
    """A fully populated synthetic environment."""
    return {
        "MISC_SENTRY_URL": "https://public@sentry.example.com/1",
        "CHAIN_ETH_NETWORK": "mainnet",
        "CHAIN_ETH_ZKSYNC_NETWORK": "zksync-mainnet",
        "MISC_LOG_FORMAT": "json",
    }
