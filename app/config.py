"""Application configuration settings."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_FILE = ".env"
ENV_FILE_ENCODING = "utf-8"


class Settings(BaseSettings):
    """Application configuration values loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=ENV_FILE, env_file_encoding=ENV_FILE_ENCODING, extra="ignore"
    )

    app_name: str = Field(
        default="Greeting API",
        description="Title published in the OpenAPI document",
        min_length=1,
    )
    app_version: str = Field(
        default="1.0.0",
        description="Version published in the OpenAPI document",
        min_length=1,
    )
    host: str = Field(
        default="0.0.0.0",
        description="Interface the HTTP server binds to",
    )
    port: int = Field(
        default=8080,
        description="Port the HTTP server listens on",
        gt=0,
        le=65535,
    )
    log_level: str = Field(
        default="INFO",
        description="Root logging level (DEBUG, INFO, WARNING, ERROR)",
    )
    cors_origins: list[str] = Field(
        default_factory=lambda: ["*"],
        description="Origins allowed to call the API, as a JSON array",
    )


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings instance."""

    return Settings()


def reset_settings_cache() -> None:
    """Clear the settings cache to force reloading from the environment."""

    get_settings.cache_clear()


__all__ = ["Settings", "get_settings", "reset_settings_cache"]
