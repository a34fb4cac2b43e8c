"""Application configuration — environment-driven settings via pydantic-settings.

Every setting can be overridden with a ``KITCHENPOS_``-prefixed environment
variable or a ``.env`` file.  get_settings() is cached: one instance per process.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Resolve data directory relative to the project root.
# When installed in editable mode the project root is the repo root.
_DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="KITCHENPOS_", env_file=".env", case_sensitive=False
    )

    # Persistence
    data_dir: Path = _DEFAULT_DATA_DIR

    # Profanity check
    purgomalum_url: str = "https://www.purgomalum.com"
    purgomalum_timeout_seconds: float = 5.0

    # Observability
    log_level: str = "INFO"
    log_format: str = "text"

    @field_validator("purgomalum_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    @field_validator("log_format")
    @classmethod
    def check_log_format(cls, v: str) -> str:
        if v not in ("json", "text"):
            raise ValueError(f"log_format must be 'json' or 'text', got {v!r}")
        return v


@lru_cache
def get_settings() -> Settings:
    return Settings()
