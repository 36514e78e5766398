"""Application Configuration - environment-driven settings via pydantic-settings.

Invariants:
    - base_url never ends with "/" (endpoints always start with one)
    - get_settings() is cached (lru_cache), single instance per process

Design Decisions:
    - Env prefix API_BRIDGE_ keeps variables out of other tools' namespaces
    - http_timeout_seconds unset means httpx's own default timeout applies
"""

from functools import lru_cache
from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Client settings from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env", env_prefix="API_BRIDGE_", case_sensitive=False,
    )

    # Service
    base_url: str = "https://fi.jcaguilar.dev/v1"
    persona_endpoint: str = "/escuela/persona"
    http_timeout_seconds: float | None = None

    @field_validator("base_url", mode="before")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        if isinstance(v, str):
            return v.rstrip("/")
        return v

    @field_validator("persona_endpoint", mode="before")
    @classmethod
    def ensure_leading_slash(cls, v: str) -> str:
        if isinstance(v, str) and not v.startswith("/"):
            return "/" + v
        return v

    # Save behavior - a transport failure on save closes the form unless set
    report_save_failures: bool = False

    # Observability
    log_level: str = "INFO"
    log_format: Literal["json", "text"] = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
