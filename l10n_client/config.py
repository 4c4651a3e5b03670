"""Runtime configuration based on environment variables."""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class RedisSettings(BaseModel):
    url: str | None = Field(default=None, description="Redis URL backing the persistent text cache.")


class L10nSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="L10N_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__"
    )

    base_url: str = Field(
        default="http://localhost",
        description="Origin that relative endpoint and script URLs are resolved against.",
    )
    gettext_url: str = "/l10n/gettext"
    locale: str | None = Field(
        default=None,
        description="Pins the startup locale instead of reading the ambient environment.",
    )
    default_locale: str = "en"
    secure: bool | None = Field(
        default=None,
        description="Overrides the secure-context flag derived from the base URL scheme.",
    )
    not_found_marker: str = "!NOTFOUND!"
    script_marker: str = Field(default="ISO", min_length=1)
    execute_scripts: bool = Field(
        default=False,
        description="Run downloaded Python scripts in-process. Only enable for trusted origins.",
    )
    request_timeout_seconds: int = Field(default=10, ge=1, le=120)
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

    redis: RedisSettings = Field(default_factory=RedisSettings)

    @field_validator("locale", mode="before")
    @classmethod
    def _empty_str_to_none(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value


@lru_cache
def get_settings() -> L10nSettings:
    """Return cached settings instance."""

    return L10nSettings()


__all__ = ["L10nSettings", "RedisSettings", "get_settings"]
