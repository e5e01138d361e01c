"""Configuration values built from environment variables.

Usage:
    from envconfig import ObservabilityConfigLoader

    config = ObservabilityConfigLoader().load()
    config.log_format
"""

from envconfig.errors import ConfigError, InvalidLogFormatError
from envconfig.from_env import Environment, FromEnv
from envconfig.loaders.observability import (
    ObservabilityConfigLoader,
    load_observability_config,
)
from envconfig.models.observability import ObservabilityConfig

__all__ = [
    "ConfigError",
    "Environment",
    "FromEnv",
    "InvalidLogFormatError",
    "ObservabilityConfig",
    "ObservabilityConfigLoader",
    "load_observability_config",
]
