"""
Content Merkle - Configuration
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


class Settings(BaseSettings):
    """Library settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="CONTENT_MERKLE_",
        case_sensitive=True,
        extra="ignore",
    )

    # Runtime
    ENV: str = "development"
    LOG_LEVEL: str = "INFO"

    # Hashing
    DEFAULT_HASH_STRATEGY: str = Field(default="sha256", min_length=1)

    # Metrics
    METRICS_ENABLED: bool = True

    @field_validator("LOG_LEVEL")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"LOG_LEVEL must be one of {sorted(LOG_LEVELS)}, got {value!r}")
        return level


@lru_cache
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
