"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")

DEFAULT_COUNTRY_CODE = "GB"
PLACEHOLDER_USER_AGENT = "WeGig/0.0.0 (missing MB_USER_AGENT; contact unknown)"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    ticketmaster_api_key: str | None = None
    ticketmaster_country_code: str | None = DEFAULT_COUNTRY_CODE
    ticketmaster_base_url: str = "https://app.ticketmaster.com/discovery/v2"
    mb_user_agent: str | None = None
    musicbrainz_base_url: str = "https://musicbrainz.org/ws/2"
    musicbrainz_min_interval_seconds: float = 1.0
    http_timeout_seconds: float = 15
    supabase_url: str | None = None
    supabase_service_key: str | None = None
    cors_allow_origins: str = "*"
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )


def resolve_country_code(raw: str | None) -> str:
    """Return the configured country code, falling back to the default."""
    if raw is None or not raw.strip():
        return DEFAULT_COUNTRY_CODE
    return raw.strip()


def resolve_user_agent(raw: str | None) -> str:
    """Return the MusicBrainz user agent or a clearly marked placeholder."""
    if raw is None or not raw.strip():
        return PLACEHOLDER_USER_AGENT
    return raw.strip()


def parse_allowed_origins(raw: str | None) -> list[str]:
    """Parse CORS origins from a comma-separated env value."""
    if raw is None:
        return ["*"]
    origins = [chunk.strip() for chunk in raw.split(",") if chunk.strip()]
    return origins or ["*"]
