"""Application settings via pydantic-settings."""

from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables with LUMEN_ prefix."""

    model_config = SettingsConfigDict(
        env_prefix="LUMEN_",
        env_file=".env",
        case_sensitive=False,
    )

    # --- Core ---
    app_version: str = "0.1.0"
    debug: bool = False
    environment: str = "development"
    cors_origins: list[str] = ["*"]
    log_level: str = "INFO"
    log_format: str = "json"

    # --- Store ---
    # "none" leaves the store unbound; every game endpoint then answers 500 KV_NOT_BOUND.
    store_backend: Literal["redis", "memory", "none"] = "redis"
    redis_url: str = "redis://localhost:6379/0"
    redis_max_connections: int = 50

    # --- Game ---
    seed_brightness: float = 100.0
    leaderboard_size: int = 100
    stats_cache_seconds: int = 30
    leaderboard_cache_seconds: int = 60


@lru_cache
def get_settings() -> Settings:
    """Get cached application settings."""
    return Settings()
