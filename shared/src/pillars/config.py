"""Application configuration from environment variables."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Diagnostic settings loaded from environment variables."""

    # Ephemeris
    ephe_path: str = Field(default="", alias="SWISSEPH_EPHE_PATH")
    natal_house_system: str = Field(default="P", alias="NATAL_HOUSE_SYSTEM")
    destination_house_system: str = Field(default="W", alias="DESTINATION_HOUSE_SYSTEM")

    # Orchestration
    orchestrator_timeout_seconds: float = Field(default=10.0, alias="ORCHESTRATOR_TIMEOUT_SECONDS", gt=0)

    # Zone used to resolve "today" for personal-year and date-range checks
    timezone: str = Field(default="UTC", alias="DIAGNOSTIC_TIMEZONE")

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


def reset_settings_cache() -> None:
    """Clear cached settings (useful in tests)."""
    get_settings.cache_clear()
