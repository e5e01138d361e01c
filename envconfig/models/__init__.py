"""Configuration model exports.

    from envconfig.models import ObservabilityConfig
"""

from envconfig.models.observability import LOG_FORMATS, LogFormat, ObservabilityConfig

__all__ = [
    "LOG_FORMATS",
    "LogFormat",
    "ObservabilityConfig",
]
