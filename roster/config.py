"""Application Configuration: environment-driven settings via pydantic-settings.

Invariants:
    - Every setting reads from a ROSTER_-prefixed environment variable or .env
    - get_settings() is cached (lru_cache): single instance per process

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Defaults for everything: the tool works with no configuration at all
"""

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="ROSTER_", env_file=".env", case_sensitive=False, extra="ignore",
    )

    # Storage
    records_file: Path = Path("students.txt")
    load_policy: Literal["strict", "skip"] = "strict"

    # Shell
    progress_interval_seconds: float = Field(0.5, ge=0)
    progress_steps: int = Field(3, ge=0)

    # Observability
    log_level: str = "WARNING"
    log_format: Literal["text", "json"] = "text"

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        level = v.strip().upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"unknown log level: {v}")
        return level


@lru_cache
def get_settings() -> Settings:
    return Settings()
