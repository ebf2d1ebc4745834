from __future__ import annotations

from functools import lru_cache
from typing import Dict, List, Optional

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Central application configuration."""

    app_name: str = Field(default="google-calendar-mcp")
    debug: bool = Field(default=False)
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=8080)
    log_level: str = Field(default="INFO")

    # Tenants: client key -> environment prefix for its Google credentials
    tenant_prefixes: Dict[str, str] = Field(
        default_factory=lambda: {"demo-salon": "SALON", "demo-dentist": "DENTIST"},
        validation_alias=AliasChoices("TENANT_PREFIXES", "CLIENT_PREFIXES"),
    )

    # Event defaults
    default_summary: str = Field(default="Appointment")
    default_description: str = Field(default="")
    default_time_zone: str = Field(default="America/New_York")
    default_calendar_id: str = Field(default="primary")

    # Google Calendar
    calendar_scopes: List[str] = Field(
        default_factory=lambda: ["https://www.googleapis.com/auth/calendar"],
    )
    google_token_uri: str = Field(default="https://oauth2.googleapis.com/token")
    provider_timeout_seconds: Optional[float] = Field(default=None)

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
