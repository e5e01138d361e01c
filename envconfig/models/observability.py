"""Observability configuration model."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

LogFormat = Literal["plain", "json"]

LOG_FORMATS: tuple[LogFormat, ...] = ("plain", "json")


class ObservabilityConfig(BaseModel):
    """Logging and error-reporting settings for a deployment."""

    model_config = ConfigDict(frozen=True)

    log_format: LogFormat = Field(default="plain", description="Log output format")
    sentry_url: str | None = Field(
        default=None,
        description="Sentry DSN; None disables error reporting",
    )
    sentry_environment: str | None = Field(
        default=None,
        description="Deployment label attached to reported errors",
    )
