"""Configuration management using Pydantic Settings."""

from __future__ import annotations

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # ImageKit credentials. Left empty here so that a missing value is
    # reported by the client gateway on first use, not at import time.
    imagekit_public_key: str = ""
    imagekit_private_key: str = ""
    imagekit_url_endpoint: str = ""

    # ImageKit REST surfaces
    imagekit_api_base_url: str = "https://api.imagekit.io"
    imagekit_upload_url: str = "https://upload.imagekit.io/api/v1/files/upload"

    # Inter-service auth for the HTTP module service (empty = dev mode)
    service_auth_token: str = ""

    # Logging
    log_level: str = "INFO"

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


@lru_cache
def get_settings() -> Settings:
    """Return cached settings instance."""
    return Settings()
