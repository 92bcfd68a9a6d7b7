"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - All secrets come from environment variables (never hardcoded)
    - get_settings() is cached (lru_cache) — single instance per process
    - gemini_api_key may be unset at startup; its absence fails each request, not the boot

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Injected into routes via Depends(get_settings): tests override without touching env
"""

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Gemini
    gemini_api_key: str | None = None
    gemini_model: str = "gemini-2.5-flash-preview-05-20"
    gemini_base_url: str = "https://generativelanguage.googleapis.com/v1beta"
    gemini_timeout_seconds: float = 120.0

    @field_validator("gemini_api_key", mode="before")
    @classmethod
    def blank_key_is_unset(cls, v: str | None) -> str | None:
        """An empty GEMINI_API_KEY= line in .env means "not configured"."""
        if isinstance(v, str) and not v.strip():
            return None
        return v

    # API
    cors_origins: list[str] = ["*"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
