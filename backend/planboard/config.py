"""
Application settings for Planboard.

Values come from environment variables (or a local .env file).
"""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Database
    database_url: str = "sqlite+aiosqlite:///./planboard.db"

    # Logging
    debug: bool = False
    log_level: str | None = None
    log_json: bool = False

    # Firebase service account key; falls back to GOOGLE_APPLICATION_CREDENTIALS
    firebase_credentials_path: str | None = None


@lru_cache
def get_settings() -> Settings:
    """Return the cached settings instance."""
    return Settings()
