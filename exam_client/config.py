"""Client Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - get_settings() is cached (lru_cache) — single instance per process
    - api_base_url never ends with "/" (paths are appended as "/api/...")

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - EXAM_CLIENT_ prefix: the UI process may share its environment with the backend
"""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


DEFAULT_BASE_URL = "http://localhost:8088"


class Settings(BaseSettings):
    """Client settings from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="EXAM_CLIENT_",
        case_sensitive=False,
        extra="ignore",
    )

    # Backend
    api_base_url: str = DEFAULT_BASE_URL

    @field_validator("api_base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        v = v.strip().rstrip("/")
        if not v:
            raise ValueError("api_base_url cannot be empty")
        return v

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
