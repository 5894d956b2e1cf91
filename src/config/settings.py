"""Application-wide configuration loading and validation."""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Centralized environment configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    environment: Literal["local", "dev", "prod"] = Field(default="local")
    log_level: str = Field(default="INFO")

    # Tropo
    tropo_api_token: str | None = Field(
        default=None,
        description="Tropo voice token, found on the application's page in the Tropo portal.",
    )
    tropo_session_api_url: str = Field(
        default="https://api.tropo.com/1.0/sessions",
        description="Session API used to create outbound sessions.",
    )
    public_base_url: str | None = Field(
        default=None,
        description="Public base URL of this service, used for absolute links (e.g. https://<ngrok>.ngrok-free.app).",
    )

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, value: str) -> str:
        return value.strip().upper()


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return a cached Settings instance."""

    return Settings()
