"""Environment-driven settings for the monitor-intervals command line."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings loaded from MONITOR_INTERVALS_* environment variables or a local .env file."""

    LOG_LEVEL: str = "WARNING"
    LOG_JSON: bool = False

    model_config = SettingsConfigDict(
        env_prefix="MONITOR_INTERVALS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
