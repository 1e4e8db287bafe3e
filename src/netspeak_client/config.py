"""Client configuration powered by Pydantic settings."""

from __future__ import annotations

from functools import lru_cache
from typing import cast

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_BASE_URL = "https://api.netspeak.org/netspeak4/search?"
"""Endpoint of the public Netspeak service, as published on netspeak.org."""


class Settings(BaseSettings):
    """Runtime configuration loaded from environment variables."""

    base_url: str = Field(
        DEFAULT_BASE_URL,
        alias="NETSPEAK_BASE_URL",
        description="Service endpoint the query string is appended to (no parameters).",
    )
    timeout: float = Field(
        10.0,
        alias="NETSPEAK_TIMEOUT",
        ge=0.5,
        le=120.0,
        description="Timeout in seconds applied to every Netspeak HTTP call.",
    )
    max_workers: int = Field(
        8,
        alias="NETSPEAK_MAX_WORKERS",
        ge=1,
        le=64,
        description="Size of the shared thread pool backing asynchronous searches.",
    )
    log_level: str = Field("INFO", alias="LOG_LEVEL")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        validate_by_name=True,
    )

    @field_validator("base_url", mode="before")
    @classmethod
    def ensure_base_url_has_value(cls, value: str | None) -> str:
        """Fallback to the public endpoint when an empty string is provided.

        Container runtimes forward undefined variables as empty strings, which
        would otherwise produce a client pointing nowhere.
        """
        default_url = cast(str, cls.model_fields["base_url"].default)
        if value is None or not str(value).strip():
            return default_url
        return str(value).strip()


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return a cached settings instance."""
    return Settings()  # type: ignore[call-arg]


__all__ = ["DEFAULT_BASE_URL", "Settings", "get_settings"]
