"""Observability: structured logging and Sentry error reporting.

Uses structlog for logging and sentry-sdk for error reporting, both
driven by an ObservabilityConfig.
"""

from envconfig.observability.logging import SecretRedactor, get_logger, setup_logging
from envconfig.observability.sentry import init_sentry
from envconfig.observability.setup import setup_observability

__all__ = [
    "SecretRedactor",
    "get_logger",
    "init_sentry",
    "setup_logging",
    "setup_observability",
]
