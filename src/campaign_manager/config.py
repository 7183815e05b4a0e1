"""
Application configuration with environment-driven settings.
"""

from functools import lru_cache
import os
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "campaign-manager"
    app_env: Literal["dev", "qa", "uat", "prod"] = "dev"
    debug: bool = False
    log_level: str = "INFO"

    # Storage
    storage_backend: Literal["memory", "sql"] = Field(
        default="memory",
        description="Record store backend: in-process ordered maps or SQL table",
    )
    database_url: str = Field(
        default="sqlite:///./campaign_manager.db",
        description="SQLAlchemy connection URL used by the sql backend",
    )

    # CORS
    cors_origins: str = Field(
        default="http://localhost:8080",
        description="Comma-separated list of allowed CORS origins",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        """Store log level upper-cased so logging accepts it directly."""
        return str(v).strip().upper()

    @property
    def cors_origins_list(self) -> list[str]:
        """Parse CORS origins into a list."""
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


@lru_cache
def _get_settings_cached() -> Settings:
    return Settings()


def get_settings() -> Settings:
    # Under pytest, env vars are monkeypatched between tests; don't freeze them.
    if os.environ.get("PYTEST_CURRENT_TEST"):
        return Settings()
    return _get_settings_cached()
