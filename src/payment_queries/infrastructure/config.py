"""Runtime configuration for payment-queries.

Pydantic-based settings, overridable through environment variables.

Environment Variables:
- PAYMENT_QUERIES_TIMEZONE: IANA zone used by the system clock (default: UTC)
- PAYMENT_QUERIES_LOG_LEVEL: Logging level (default: INFO)
- PAYMENT_QUERIES_JSON_LOGS: Render logs as JSON instead of console output (default: false)
"""

from __future__ import annotations

from datetime import tzinfo
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class PaymentQueriesSettings(BaseSettings):
    """Settings for the clock and logging.

    Example:
        >>> import os
        >>> settings = PaymentQueriesSettings()
        >>> settings.timezone
        'UTC'
        >>> os.environ["PAYMENT_QUERIES_TIMEZONE"] = "Europe/Warsaw"
        >>> PaymentQueriesSettings().zone
        zoneinfo.ZoneInfo(key='Europe/Warsaw')
    """

    model_config = SettingsConfigDict(
        env_prefix="PAYMENT_QUERIES_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    timezone: str = Field(
        default="UTC",
        description="IANA time zone deciding which calendar month 'now' belongs to",
    )

    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )

    json_logs: bool = Field(
        default=False,
        description="Render logs as JSON (production) instead of console output",
    )

    @field_validator("timezone")
    @classmethod
    def validate_timezone(cls, v: str) -> str:
        try:
            ZoneInfo(v)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ValueError(f"Unknown time zone: {v}") from e
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}, got {v}")
        return level

    @property
    def zone(self) -> tzinfo:
        return ZoneInfo(self.timezone)
