"""
Application settings.

Values come from environment variables prefixed with ``GYM_PROGRESS_``
(or a local ``.env`` file), e.g. ``GYM_PROGRESS_LOG_LEVEL=DEBUG``.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from gym_progress.schemas import OutcomeMetric


class Settings(BaseSettings):
    """Runtime configuration for the CLI and build flow."""

    model_config = SettingsConfigDict(
        env_prefix="GYM_PROGRESS_",
        env_file=".env",
        extra="ignore",
    )

    app_name: str = "gym-progress"
    app_env: str = "development"
    debug: bool = False

    log_level: str = "INFO"
    log_file: Path | None = None

    site_dir: Path = Path("site")
    export_filename: str = "gym_progress_data.csv"
    default_metric: OutcomeMetric = OutcomeMetric.MUSCLE_GAIN

    api_port: int = Field(default=8000, ge=1, le=65535)


@lru_cache
def get_settings() -> Settings:
    """Return the process-wide settings instance."""
    return Settings()
