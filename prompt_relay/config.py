"""Application Configuration: environment-driven settings via pydantic-settings.

Invariants:
    - The Gemini credential comes from the environment (never hardcoded)
    - A missing credential fails the request, never the process
    - get_settings() is cached (lru_cache): single instance per process

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Blank GEMINI_API_KEY normalized to None so "unset" and "empty" behave the same
"""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Gemini
    gemini_api_key: str | None = None
    gemini_api_base_url: str = "https://generativelanguage.googleapis.com/v1beta"
    gemini_model: str = "gemini-2.0-flash"
    upstream_timeout_seconds: float = 30.0

    @field_validator("gemini_api_key", mode="before")
    @classmethod
    def blank_key_is_missing(cls, v: str | None) -> str | None:
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator("gemini_api_base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    # API
    cors_origins: list[str] = ["*"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"
    prompt_log_snippet_chars: int = 100

    @property
    def gemini_generate_url(self) -> str:
        """Full generateContent endpoint for the configured model."""
        return f"{self.gemini_api_base_url}/models/{self.gemini_model}:generateContent"


@lru_cache
def get_settings() -> Settings:
    return Settings()
