"""Application configuration."""

import os
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")
_SETTINGS_CONFIG = SettingsConfigDict(
    env_file=(f".env.{_ENVIRONMENT}", ".env"),
    extra="ignore",
)
_RECIPE_SOURCES = {"static", "supabase"}


class Settings(BaseSettings):
    """API settings loaded from environment variables."""

    supabase_url: str
    supabase_service_key: str
    admin_token: str
    recipe_source: str = "static"
    local_profile_path: Path = Path(".diet_hub/health_profiles.json")
    environment: str = _ENVIRONMENT

    model_config = _SETTINGS_CONFIG


class ClientSettings(BaseSettings):
    """Settings for the command-line client."""

    api_base_url: str = "http://localhost:8000"
    admin_token: str | None = None
    local_profile_path: Path = Path(".diet_hub/health_profiles.json")

    model_config = _SETTINGS_CONFIG


def parse_recipe_source(raw: str | None) -> str:
    """Normalize the configured recipe source, defaulting to the static catalog."""
    if raw is None:
        return "static"
    cleaned = raw.strip().lower()
    if cleaned in _RECIPE_SOURCES:
        return cleaned
    return "static"
