"""Configuration error hierarchy.

All configuration construction failures inherit from ConfigError, which
carries the message and the environment variable that caused it.
"""


class ConfigError(Exception):
    """Base exception for configuration construction failures."""

    def __init__(self, message: str, variable: str | None = None) -> None:
        self.message = message
        self.variable = variable
        super().__init__(message)


class InvalidLogFormatError(ConfigError):
    """Raised when MISC_LOG_FORMAT holds something other than plain or json."""

    def __init__(self, value: str) -> None:
        super().__init__(
            f"MISC_LOG_FORMAT has an unexpected value {value}",
            variable="MISC_LOG_FORMAT",
        )
        self.value = value
