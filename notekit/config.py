"""Library configuration settings."""

from __future__ import annotations

import logging
from functools import lru_cache

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_FILE = ".env"
ENV_FILE_ENCODING = "utf-8"
ENV_PREFIX = "NOTEKIT_"

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """Configuration values loaded from ``NOTEKIT_*`` environment variables."""

    model_config = SettingsConfigDict(
        env_file=ENV_FILE,
        env_file_encoding=ENV_FILE_ENCODING,
        env_prefix=ENV_PREFIX,
        extra="ignore",
    )

    notify_on_redundant_override_removal: bool = Field(
        default=True,
        description=(
            "Notify the parent notification when an action override is removed "
            "even if no override was set"
        ),
    )
    strict_urls: bool = Field(
        default=True,
        description="Validate payload links as absolute URLs before exposing them",
    )


@lru_cache
def get_settings() -> Settings:
    """Return cached library settings instance."""

    return Settings()


@lru_cache
def get_effective_settings() -> Settings:
    """Return settings for parsing code paths, which must never raise.

    An invalid ``NOTEKIT_*`` value is logged once and every field falls back to
    its default.
    """

    try:
        return get_settings()
    except ValidationError:
        logger.warning("Invalid %s* configuration; using default settings", ENV_PREFIX, exc_info=True)
        return Settings.model_construct()


def reset_settings_cache() -> None:
    """Clear the settings cache to force reloading from the environment."""

    get_settings.cache_clear()
    get_effective_settings.cache_clear()


__all__ = ["Settings", "get_effective_settings", "get_settings", "reset_settings_cache"]
