"""Observability config loader.

The rules here reproduce how deployments have always configured logging
and Sentry through the environment. Existing deployments rely on them,
so they are kept as is rather than tidied up:

- ``MISC_SENTRY_URL`` set to the literal ``unset`` disables Sentry, same
  as leaving it out.
- The Sentry environment label needs both network variables; one alone
  produces no label at all.
- A missing ``MISC_LOG_FORMAT`` defaults to ``plain``, but an unknown
  value is an error.
"""

from envconfig.errors import InvalidLogFormatError
from envconfig.from_env import Environment, resolve_environment
from envconfig.models.observability import LOG_FORMATS, LogFormat, ObservabilityConfig

SENTRY_URL_VAR = "MISC_SENTRY_URL"
L1_NETWORK_VAR = "CHAIN_ETH_NETWORK"
L2_NETWORK_VAR = "CHAIN_ETH_ZKSYNC_NETWORK"
LOG_FORMAT_VAR = "MISC_LOG_FORMAT"

# Legacy opt-out value for MISC_SENTRY_URL.
SENTRY_URL_UNSET = "unset"

DEFAULT_LOG_FORMAT: LogFormat = "plain"


class ObservabilityConfigLoader:
    """Builds ObservabilityConfig from environment variables.

    Args:
        env: Variables to read from. Defaults to the process environment,
            which is consulted afresh on every ``load()``.
    """

    def __init__(self, env: Environment | None = None) -> None:
        self._env = env

    def load(self) -> ObservabilityConfig:
        """Read the environment and build the config.

        Raises:
            InvalidLogFormatError: If MISC_LOG_FORMAT is neither plain nor json
        """
        env = resolve_environment(self._env)
        return ObservabilityConfig(
            sentry_url=_sentry_url(env),
            sentry_environment=_sentry_environment(env),
            log_format=_log_format(env),
        )


def load_observability_config(env: Environment | None = None) -> ObservabilityConfig:
    """Shortcut for ``ObservabilityConfigLoader(env).load()``."""
    return ObservabilityConfigLoader(env).load()


def _sentry_url(env: Environment) -> str | None:
    sentry_url = env.get(SENTRY_URL_VAR)
    if sentry_url is None or sentry_url == SENTRY_URL_UNSET:
        return None
    return sentry_url


def _sentry_environment(env: Environment) -> str | None:
    l1_network = env.get(L1_NETWORK_VAR)
    l2_network = env.get(L2_NETWORK_VAR)
    if l1_network is None or l2_network is None:
        return None
    return f"{l1_network} - {l2_network}"


def _log_format(env: Environment) -> LogFormat:
    log_format = env.get(LOG_FORMAT_VAR)
    if log_format is None:
        return DEFAULT_LOG_FORMAT
    if log_format not in LOG_FORMATS:
        raise InvalidLogFormatError(log_format)
    return log_format  # type: ignore[return-value]
