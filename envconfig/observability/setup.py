"""One-call observability bootstrap for process startup."""

from envconfig.from_env import Environment
from envconfig.loaders.observability import ObservabilityConfigLoader
from envconfig.models.observability import ObservabilityConfig
from envconfig.observability.logging import get_logger, setup_logging
from envconfig.observability.sentry import init_sentry


def setup_observability(
    config: ObservabilityConfig | None = None,
    *,
    env: Environment | None = None,
    level: str = "INFO",
) -> ObservabilityConfig:
    """Configure logging and Sentry.

    Args:
        config: Settings to apply. Loaded from *env* when omitted.
        env: Variables to load from; defaults to the process environment
        level: Minimum log level

    Returns:
        The config that was applied

    Raises:
        InvalidLogFormatError: If the config is loaded and MISC_LOG_FORMAT is invalid
    """
    if config is None:
        config = ObservabilityConfigLoader(env).load()

    setup_logging(level=level, format=config.log_format)
    sentry_enabled = init_sentry(config)

    get_logger(__name__).info(
        "observability_initialized",
        log_format=config.log_format,
        sentry_enabled=sentry_enabled,
    )
    return config
