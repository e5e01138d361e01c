"""Environment-backed construction of configuration values.

Each config type gets its own loader implementing FromEnv. Loaders take
an optional mapping so tests can supply a synthetic environment instead
of mutating the process one.
"""

import os
from collections.abc import Mapping
from typing import Protocol, TypeVar

T_co = TypeVar("T_co", covariant=True)

Environment = Mapping[str, str]


class FromEnv(Protocol[T_co]):
    """Something that can build a config value from environment variables."""

    def load(self) -> T_co:
        """Build the value from the current environment snapshot."""
        ...


def resolve_environment(env: Environment | None) -> Environment:
    """Return the given mapping, or the live process environment."""
    if env is None:
        return os.environ
    return env
