# SPDX-FileCopyrightText: 2024-2025 Contributors to the timekit project
#
# SPDX-License-Identifier: MPL-2.0

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from timekit.logging.logger_types import LoggerType

DEFAULT_SCALE_THRESHOLDS: dict[str, int] = {
    "second": 1,
    "minute": 60,
    "hour": 60 * 60,
    "day": 24 * 60 * 60,
    "week": 7 * 24 * 60 * 60,
    "month": 28 * 24 * 60 * 60,
    "quarter": 89 * 24 * 60 * 60,
    "year": 365 * 24 * 60 * 60,
}


class AppSettings(BaseSettings):
    """Global app settings."""

    model_config = SettingsConfigDict(
        env_prefix="timekit_", env_file=".env", extra="ignore"
    )

    logger_type: LoggerType = Field(
        LoggerType.STRUCTLOG,
        description="The type of logger to use.",
    )

    # Logging settings.
    log_level: str = Field("INFO", description="Log level used for logging statements.")

    scale_thresholds: dict[str, int] = Field(
        default_factory=lambda: dict(DEFAULT_SCALE_THRESHOLDS),
        description="Inclusive lower bound in seconds of every time scale bucket. "
        "The median difference of an index is classified as the coarsest bucket whose "
        "threshold it reaches.",
    )
    future_max_candidate_multiple: int = Field(
        10,
        gt=0,
        description="Upper bound on generated candidates when extending an index, "
        "expressed as a multiple of the requested number of points.",
    )
    default_calendar: str = Field(
        "NYSE", description="Holiday calendar used when none is given."
    )
