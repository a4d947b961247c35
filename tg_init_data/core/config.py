"""
Configuration for initData verification.

The Settings object centralizes environment-driven configuration with strict
typing so callers that wire the verifier from the environment share one
source of truth for the bot token and the validity window.
"""

from __future__ import annotations

from datetime import timedelta
from functools import lru_cache

from pydantic import Field, SecretStr, ValidationInfo, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Verifier configuration loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=(".env",),
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    telegram_bot_token: SecretStr = Field(alias="TELEGRAM_BOT_TOKEN")
    init_data_ttl_seconds: int = Field(
        default=86_400,
        alias="INIT_DATA_TTL_SECONDS",
        description="Maximum initData age in seconds (0 disables the auth_date check).",
    )
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    @field_validator("telegram_bot_token", mode="after")
    @classmethod
    def _validate_secret(cls, secret: SecretStr, info: ValidationInfo) -> SecretStr:
        if not secret.get_secret_value().strip():
            field = (info.field_name or "value").upper()
            raise ValueError(f"{field} must not be empty.")
        return secret

    @field_validator("init_data_ttl_seconds")
    @classmethod
    def _validate_ttl(cls, value: int) -> int:
        if value < 0:
            raise ValueError("INIT_DATA_TTL_SECONDS must be >= 0.")
        return value

    @property
    def init_data_valid_for(self) -> timedelta | None:
        """Validity window for auth_date, or None when the check is disabled."""
        if self.init_data_ttl_seconds == 0:
            return None
        return timedelta(seconds=self.init_data_ttl_seconds)


@lru_cache
def get_settings() -> Settings:
    """Return a cached Settings instance so configuration is evaluated once."""
    # BaseSettings loads required values from env/.env during instantiation.
    return Settings()  # type: ignore[call-arg]
