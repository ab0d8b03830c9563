"""
Application settings.

Values come from ``LEARNING_PROJECTS_*`` environment variables or a local
``.env`` file. Services never read settings themselves; the CLI reads them
once and passes what each service needs to its constructor.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from learning_projects.schemas import OrphanPolicy


class Settings(BaseSettings):
    """Runtime configuration."""

    model_config = SettingsConfigDict(
        env_prefix="LEARNING_PROJECTS_",
        env_file=".env",
        extra="ignore",
    )

    app_name: str = "learning-projects"
    app_env: str = "development"
    debug: bool = False

    data_dir: Path = Path("data")

    github_api_url: str = "https://api.github.com"
    http_timeout: float = Field(default=30.0, gt=0)
    http_retries: int = Field(default=0, ge=0)

    weather_delay_seconds: float = Field(default=1.0, ge=0)

    favorites_key: str = "favoriteRepos"
    favorites_strict: bool = False

    orphan_policy: OrphanPolicy = OrphanPolicy.BLOCK


@lru_cache
def get_settings() -> Settings:
    """Return the process-wide settings instance."""
    return Settings()
