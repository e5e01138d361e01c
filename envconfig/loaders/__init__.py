"""Environment loaders, one per config type."""

from envconfig.loaders.observability import (
    ObservabilityConfigLoader,
    load_observability_config,
)

__all__ = ["ObservabilityConfigLoader", "load_observability_config"]
