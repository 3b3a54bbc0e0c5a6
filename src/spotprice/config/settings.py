# src/spotprice/config/settings.py
"""
Settings - Pydantic-based Configuration Management

Provides centralized configuration management using Pydantic Settings.
Every value has a default, so the pipeline runs without any environment;
environment variables or a .env file override them.

Files that USE this module:
- spotprice.adapters.providers.* (endpoint URLs, timeouts, demo delay)
- spotprice.application.dashboard (weekly endpoint, local time zone)
- spotprice.shared.logging_conf (log settings)

Files that this module USES:
- spotprice.shared.validators (validation functions for settings)
"""

from __future__ import annotations  # Enable postponed evaluation of annotations

from typing import Optional  # Type hints for optional values
from zoneinfo import ZoneInfo  # IANA time zone lookup

from pydantic import Field, field_validator  # Data validation and field configuration
from pydantic_settings import BaseSettings, SettingsConfigDict  # Settings management with Pydantic

from spotprice.shared.validators import (
    validate_http_url,  # Absolute http(s) URL check
    validate_log_level,  # Standard logging level name check
    validate_timezone,  # IANA time zone name check
)

DEFAULT_PRICE_URL = "https://api.spot-hinta.fi/TodayAndDayForward"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # --- Endpoints ---
    spot_price_url: str = Field(default=DEFAULT_PRICE_URL, alias="SPOT_PRICE_URL")
    # spot-hinta.fi has no history endpoint; the weekly card reuses the same feed
    weekly_price_url: str = Field(default=DEFAULT_PRICE_URL, alias="WEEKLY_PRICE_URL")

    # --- HTTP Settings ---
    http_connect_timeout_seconds: float = Field(
        default=10.0, alias="HTTP_CONNECT_TIMEOUT_SECONDS", gt=0, le=60
    )
    http_read_timeout_seconds: float = Field(
        default=10.0, alias="HTTP_READ_TIMEOUT_SECONDS", gt=0, le=60
    )

    # --- Presentation ---
    local_timezone: str = Field(default="Europe/Helsinki", alias="LOCAL_TIMEZONE")

    # --- Demo data ---
    demo_delay_seconds: float = Field(default=1.0, alias="DEMO_DELAY_SECONDS", ge=0, le=30)

    # --- Logging ---
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    log_file: Optional[str] = Field(default=None, alias="LOG_FILE")
    log_dir: Optional[str] = Field(default=None, alias="LOG_DIR")
    log_stdout: bool = Field(default=True, alias="SPOTPRICE_LOG_STDOUT")
    log_max_bytes: int = Field(default=10 * 1024 * 1024, alias="LOG_MAX_BYTES")  # 10MB
    log_backup_count: int = Field(default=5, alias="LOG_BACKUP_COUNT")

    @property
    def tzinfo(self) -> ZoneInfo:
        return ZoneInfo(self.local_timezone)

    @field_validator("spot_price_url", "weekly_price_url")
    @classmethod
    def validate_url(cls, v: str) -> str:
        """Validate endpoint URL format."""
        if not validate_http_url(v):
            raise ValueError("Endpoint URL must be an absolute http(s) URL")
        return v

    @field_validator("local_timezone")
    @classmethod
    def validate_local_timezone(cls, v: str) -> str:
        if not validate_timezone(v):
            raise ValueError(f"Unknown time zone: {v}")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        if not validate_log_level(v):
            raise ValueError(f"Invalid LOG_LEVEL: {v}")
        return v.upper()


# Global settings instance
settings = Settings()
