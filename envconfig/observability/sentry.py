"""Sentry error reporting."""

import sentry_sdk

from envconfig.models.observability import ObservabilityConfig
from envconfig.observability.logging import get_logger, redact_url

logger = get_logger(__name__)


def init_sentry(config: ObservabilityConfig) -> bool:
    """Initialise the Sentry SDK when the config names a DSN.

    Returns:
        True if Sentry was initialised, False if reporting is disabled
    """
    if config.sentry_url is None:
        logger.info("sentry_disabled")
        return False

    sentry_sdk.init(
        dsn=config.sentry_url,
        environment=config.sentry_environment,
    )
    logger.info(
        "sentry_initialized",
        endpoint=redact_url(config.sentry_url),
        environment=config.sentry_environment,
    )
    return True
