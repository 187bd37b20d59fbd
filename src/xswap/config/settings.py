"""
Settings - Pydantic-based Configuration Management

Provides centralized configuration management using Pydantic Settings.
Supports environment variables and an optional .env file, with validation.

Files that USE this module:
- xswap.app (wires the controller and logging from settings)
- xswap.adapters.providers.prices (feed URL, timeout, cache TTL)
- xswap.adapters.icons (icon base URL)

Files that this module USES:
- xswap.shared.validators (currency code validation)
- xswap.domain.currencies (default currency pair)
"""

from __future__ import annotations  # Enable postponed evaluation of annotations

from typing import Optional  # Type hints for optional values

from pydantic import Field, field_validator, model_validator  # Data validation and field configuration
from pydantic_settings import BaseSettings, SettingsConfigDict  # Settings management with Pydantic

from xswap.domain.currencies import DEFAULT_FROM_CURRENCY, DEFAULT_TO_CURRENCY
from xswap.shared.validators import validate_currency_code


class Settings(BaseSettings):
    """Engine settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    # --- Price feed ---
    prices_url: str = Field(
        default="https://interview.switcheo.com/prices.json", alias="PRICES_URL"
    )
    http_timeout_seconds: int = Field(default=10, alias="HTTP_TIMEOUT_SECONDS", ge=1, le=60)
    price_cache_minutes: int = Field(default=5, alias="PRICE_CACHE_MINUTES", ge=1, le=1440)

    # --- Icons ---
    token_icons_url: str = Field(
        default="https://raw.githubusercontent.com/Switcheo/token-icons/main/tokens",
        alias="TOKEN_ICONS_URL",
    )

    # --- Session defaults ---
    default_from_currency: str = Field(default=DEFAULT_FROM_CURRENCY, alias="DEFAULT_FROM_CURRENCY")
    default_to_currency: str = Field(default=DEFAULT_TO_CURRENCY, alias="DEFAULT_TO_CURRENCY")

    # --- Submission ---
    submit_latency_ms: int = Field(default=2000, alias="SUBMIT_LATENCY_MS", ge=0)

    # --- Logging ---
    log_file: Optional[str] = Field(default=None, alias="LOG_FILE")
    log_dir: Optional[str] = Field(default=None, alias="LOG_DIR")
    log_stdout: bool = Field(default=True, alias="XSWAP_LOG_STDOUT")
    log_max_bytes: int = Field(default=10 * 1024 * 1024, alias="LOG_MAX_BYTES")  # 10MB
    log_backup_count: int = Field(default=5, alias="LOG_BACKUP_COUNT")

    @field_validator("default_from_currency", "default_to_currency")
    @classmethod
    def validate_currency(cls, v: str) -> str:
        """Validate currency code format."""
        if not validate_currency_code(v):
            raise ValueError(f"Invalid currency code: {v!r}")
        return v

    @field_validator("prices_url", "token_icons_url")
    @classmethod
    def validate_url(cls, v: str) -> str:
        """Require an http(s) URL; trailing slashes are dropped."""
        if not v.startswith(("http://", "https://")):
            raise ValueError("URL must start with http:// or https://")
        return v.rstrip("/")

    @model_validator(mode="after")
    def validate_default_pair(self) -> Settings:
        """The default pair must be swappable."""
        if self.default_from_currency == self.default_to_currency:
            raise ValueError("DEFAULT_FROM_CURRENCY and DEFAULT_TO_CURRENCY must differ")
        return self


# Global settings instance
settings = Settings()
