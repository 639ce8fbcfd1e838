"""Runtime configuration based on environment variables."""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import AnyHttpUrl, Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_BASE_URL = "https://api.search.brave.com/res/v1"


class ToolSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="BRAVE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    environment: Literal["dev", "staging", "prod"] = "prod"
    api_key: SecretStr | None = Field(
        default=None,
        description="Brave Search subscription token sent as X-Subscription-Token.",
    )
    base_url: AnyHttpUrl = Field(default=DEFAULT_BASE_URL)
    request_timeout_seconds: int = Field(default=10, ge=1, le=60)
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

    @field_validator("api_key", mode="before")
    @classmethod
    def _empty_str_to_none(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_log_level(cls, value):
        if isinstance(value, str):
            return value.strip().upper()
        return value

    def api_root(self) -> str:
        return str(self.base_url).rstrip("/")


@lru_cache
def get_settings() -> ToolSettings:
    """Return cached settings instance."""

    return ToolSettings()


__all__ = ["DEFAULT_BASE_URL", "ToolSettings", "get_settings"]
