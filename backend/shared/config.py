"""
Centralized configuration for the Tubeline backend.

All settings are loaded from environment variables with sensible defaults.
Module-specific settings should be namespaced (e.g., SUPABASE_*, ACCESS_TOKEN_*).
"""

from functools import lru_cache
from typing import Literal
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "Tubeline API"
    app_version: str = "0.1.0"
    debug: bool = False

    # Server
    host: str = "0.0.0.0"
    port: int = 8000
    reload: bool = False
    log_level: str = "INFO"

    # CORS settings
    cors_origins: list[str] = ["http://localhost:5173", "http://localhost:3000"]
    cors_allow_credentials: bool = True
    cors_allow_methods: list[str] = ["*"]
    cors_allow_headers: list[str] = ["*"]

    # Supabase (database + storage)
    supabase_url: str = ""
    supabase_service_role_key: str = ""
    supabase_schema: str = "public"
    supabase_timeout_seconds: int = 10
    media_bucket: str = "media"

    # Tokens
    access_token_secret: str = ""
    access_token_expiry_minutes: int = 60
    refresh_token_secret: str = ""
    refresh_token_expiry_days: int = 10

    # Credentials
    bcrypt_rounds: int = 10

    # Transport cookies
    cookie_secure: bool = True
    cookie_samesite: Literal["lax", "strict", "none"] = "lax"


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()
