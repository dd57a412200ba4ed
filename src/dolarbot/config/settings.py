"""
Settings - Pydantic-based Configuration Management

Provides centralized configuration management using Pydantic Settings.
Values are read from environment variables (or a .env file) and validated
once at startup.

Files that USE this module:
- dolarbot.app (loads settings for logging and client wiring)
- dolarbot.application.api_calls (builds the cache and the client from settings)
- dolarbot.adapters.providers.dolar_argentina (API URL, timeout and tax percent)
- dolarbot.shared.cache (cache TTL)

Files that this module USES:
- dolarbot.shared.validators (validation functions for settings)
"""

from __future__ import annotations  # Enable postponed evaluation of annotations

from datetime import timedelta  # Cache TTL as a time delta
from typing import Optional  # Type hints for optional values

from pydantic import Field, field_validator  # Data validation and field configuration
from pydantic_settings import BaseSettings, SettingsConfigDict  # Settings management with Pydantic

from dolarbot.shared.validators import validate_api_url  # Validate upstream base URL format


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # --- Upstream API ---
    api_url: str = Field(..., alias="API_URL")
    # Kept as raw text: it is parsed on every tax-adjusted request
    dollar_tax_percent: Optional[str] = Field(default=None, alias="DOLLAR_TAX_PERCENT")

    # --- HTTP Settings ---
    http_timeout_seconds: int = Field(default=10, alias="HTTP_TIMEOUT_SECONDS", ge=1, le=60)

    # --- Cache Settings (in minutes) ---
    cache_minutes: int = Field(default=5, alias="CACHE_MINUTES", ge=1, le=1440)

    # --- Logging ---
    log_file: Optional[str] = Field(default=None, alias="LOG_FILE")
    log_dir: Optional[str] = Field(default=None, alias="LOG_DIR")
    log_max_bytes: int = Field(default=10 * 1024 * 1024, alias="LOG_MAX_BYTES")  # 10MB
    log_backup_count: int = Field(default=5, alias="LOG_BACKUP_COUNT")

    @property
    def cache_ttl(self) -> timedelta:
        """Time-to-live applied to every cached API response."""
        return timedelta(minutes=self.cache_minutes)

    @field_validator("api_url")
    @classmethod
    def validate_api_url(cls, v: str) -> str:
        """Validate API URL format and drop any trailing slash."""
        if not validate_api_url(v):
            raise ValueError("API_URL must be an absolute http(s) URL")
        return v.rstrip("/")


# Global settings instance
settings = Settings()
