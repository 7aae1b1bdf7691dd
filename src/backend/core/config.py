"""
Application configuration using Pydantic Settings.

All configuration is loaded from environment variables or a local .env file.
"""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # Application
    APP_NAME: str = "MoodRoom"
    APP_ENV: str = "development"
    DEBUG: bool = False

    # Database - SQLite via aiosqlite by default
    DATABASE_URL: str = "sqlite+aiosqlite:///./emotions.db"
    DATABASE_ECHO: bool = False

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = False  # JSON lines for production log shipping

    # CORS - stored as comma-separated string to avoid pydantic-settings JSON parsing issues
    CORS_ORIGINS: str = "http://localhost:3000"

    # Vote freshness
    VOTE_WINDOW_MINUTES: int = 30  # Votes older than this are ignored

    # Fairness strategy
    FAIRNESS_LOOKBACK: int = 20  # Fairness selections consulted for distance
    FAIRNESS_UNSEEN_DISTANCE: int = 100  # Distance for emotions not in the lookback

    # Satisfaction metric
    COVERAGE_LOOKBACK: int = 10  # Recent selections per strategy counted as "played"

    # Stats
    STATS_HISTORY_LIMIT: int = 100

    @field_validator(
        "VOTE_WINDOW_MINUTES",
        "FAIRNESS_LOOKBACK",
        "FAIRNESS_UNSEEN_DISTANCE",
        "COVERAGE_LOOKBACK",
        "STATS_HISTORY_LIMIT",
    )
    @classmethod
    def validate_positive(cls, v: int, info) -> int:
        """Reject zero or negative tuning values."""
        if v <= 0:
            raise ValueError(f"{info.field_name} must be positive")
        return v

    @property
    def cors_origins_list(self) -> list[str]:
        """Get CORS origins as a list."""
        import json

        try:
            return json.loads(self.CORS_ORIGINS)
        except json.JSONDecodeError:
            return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


settings = get_settings()
