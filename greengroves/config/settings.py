"""Client settings using Pydantic Settings."""

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Global settings loaded from GREENGROVES_* environment variables / .env file."""

    # Backend
    api_base_url: str = Field(
        default="http://localhost:8000/api",
        description="Base URL of the Laravel API, without trailing slash",
    )
    login_route: str = Field(default="/login", description="Route handed to the unauthorized hook")

    # Token storage
    storage_backend: Literal["memory", "file", "redis"] = "memory"
    storage_path: str = "~/.greengroves/storage.json"
    redis_url: str = "redis://localhost:6379/0"
    storage_namespace: str = "greengroves"

    # Legacy behaviour: list fetchers return [] on network failure instead of raising
    lenient_list_fetches: bool = False

    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_prefix="GREENGROVES_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @field_validator("api_base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    @field_validator("log_level")
    @classmethod
    def upper_log_level(cls, v: str) -> str:
        return v.upper()


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
