"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    edamam_app_id: str
    edamam_app_key: str
    edamam_base_url: str = "https://api.edamam.com"
    mercury_api_key: str
    mercury_base_url: str = "https://mercury.postlight.com"
    supabase_url: str
    supabase_service_key: str
    edamam_flag_key: str = "enableEdamam"
    search_ttl_seconds: int = 3600
    random_meals_query: str = "Tacos"
    http_timeout_seconds: float = 15
    log_level: str = "INFO"
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )
