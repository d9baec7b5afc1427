"""
Application settings - pydantic-settings configuration.

This module defines application configuration using pydantic-settings
for environment variable loading with validation and defaults.

The bcrypt work factor is intentionally not configurable here; it is a
fixed constant of the credential hasher.
"""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    app_name: str = "accounts"

    # Logging
    log_level: str = "INFO"
    log_json: bool = True  # JSON lines on stdout; False for plain text

    # HTTP server
    host: str = "0.0.0.0"
    port: int = 8080
    timeout_keep_alive: int = 5  # seconds an idle connection is held open


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
