"""Configuration management for filesniff."""

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_PREFIX_SIZE = 4096


class Settings(BaseSettings):
    """Runtime settings, read from FILESNIFF_* environment variables."""

    model_config = SettingsConfigDict(env_prefix="FILESNIFF_")

    # bytes handed to the matcher by every adapter
    prefix_size: int = Field(default=DEFAULT_PREFIX_SIZE, ge=1)
    http_timeout: float = Field(default=30.0, gt=0)

    log_level: str = "WARNING"
    log_format: Literal["console", "json"] = "console"

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {v}")
        return level


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
