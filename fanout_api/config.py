"""Application configuration settings."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_FILE = ".env"
ENV_FILE_ENCODING = "utf-8"

DEFAULT_EXCLUDED_DISCRIMINATORS = ["attachment", "blogPost"]
DEFAULT_ENTITY_TYPE_IDS = [1, 2, 3, 4, 5, 6, 7, 8, 49, 50]


class Settings(BaseSettings):
    """Application configuration values loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=ENV_FILE, env_file_encoding=ENV_FILE_ENCODING, extra="ignore"
    )

    database_url: str = Field(
        description="Database connection URL used by SQLAlchemy to connect to the DB",
        min_length=1,
    )
    database_pool_size: int = Field(
        default=10,
        description="Number of connections kept open in the shared pool",
        gt=0,
    )
    database_max_overflow: int = Field(
        default=10,
        description="Connections allowed beyond the pool size under load",
        ge=0,
    )
    database_pool_timeout: int = Field(
        default=30,
        description="Seconds to wait for a pooled connection before failing",
        gt=0,
    )
    app_timezone: str = Field(
        default="UTC",
        description="IANA timezone name or UTC offset used for stored dates",
    )
    log_level: str = Field(default="INFO", description="Root logging level")
    notification_excluded_discriminators: list[str] = Field(
        default_factory=lambda: list(DEFAULT_EXCLUDED_DISCRIMINATORS),
        description="Object kinds whose notifications are never listed",
    )
    notification_entity_type_ids: list[int] = Field(
        default_factory=lambda: list(DEFAULT_ENTITY_TYPE_IDS),
        description="Entity types whose notifications may be listed",
    )


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings instance."""

    return Settings()


def reset_settings_cache() -> None:
    """Clear the settings cache to force reloading from the environment."""

    get_settings.cache_clear()


__all__ = ["Settings", "get_settings", "reset_settings_cache"]
