# =============================================================================
# app/config.py - Application Settings
# =============================================================================
# This module loads configuration from environment variables using pydantic-settings.
# It provides a single Settings class with all configuration values.
#
# Usage:
#   from app.config import settings
#   print(settings.DATABASE_URL)
#
# Environment variables are loaded from:
# 1. System environment variables
# 2. .env file in project root (if exists)
#
# The Settings class validates all values at startup, so a missing
# SESSION_SECRET fails the process before the first request.
# =============================================================================

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    All settings are accessed via the global `settings` instance.
    """

    # -------------------------------------------------------------------------
    # Database Configuration
    # -------------------------------------------------------------------------

    DATABASE_URL: str = Field(
        default="sqlite:///./jokes.db",
        description="SQLAlchemy database URL (e.g., postgresql://user:pw@host/db)"
    )

    DATABASE_ECHO: bool = Field(
        default=False,
        description="Log every SQL statement emitted by SQLAlchemy"
    )

    # -------------------------------------------------------------------------
    # Session Cookie Configuration
    # -------------------------------------------------------------------------
    # SESSION_SECRET is required - app won't start without it

    SESSION_SECRET: str = Field(
        ...,
        min_length=16,
        description="Secret key for signing session cookies"
    )

    SESSION_COOKIE_NAME: str = Field(
        default="RJ_session",
        description="Name of the cookie carrying the signed session"
    )

    SESSION_MAX_AGE_SECONDS: int = Field(
        default=60 * 60 * 24 * 30,
        ge=60,
        description="Session lifetime in seconds (cookie max-age and token expiry)"
    )

    SESSION_ALGORITHM: Literal["HS256", "HS384", "HS512"] = Field(
        default="HS256",
        description="JWT algorithm used to sign the session token"
    )

    # -------------------------------------------------------------------------
    # Application Settings
    # -------------------------------------------------------------------------

    ENVIRONMENT: Literal["development", "staging", "production"] = Field(
        default="development",
        description="Current environment"
    )

    DEBUG: bool = Field(
        default=False,
        description="Enable debug mode (verbose logging)"
    )

    API_HOST: str = Field(
        default="0.0.0.0",
        description="Host to bind the server to"
    )

    API_PORT: int = Field(
        default=8000,
        ge=1,
        le=65535,
        description="Port for the server"
    )

    # -------------------------------------------------------------------------
    # Pydantic Settings Configuration
    # -------------------------------------------------------------------------

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        case_sensitive=True,
    )

    # -------------------------------------------------------------------------
    # Computed Properties
    # -------------------------------------------------------------------------

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.ENVIRONMENT == "development"

    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.ENVIRONMENT == "production"

    @property
    def session_cookie_secure(self) -> bool:
        """Only mark the session cookie Secure when served over HTTPS."""
        return self.is_production


@lru_cache
def get_settings() -> Settings:
    """
    Get cached Settings instance.

    Using lru_cache ensures we only parse .env and validate once,
    not on every access.
    """
    return Settings()


# Global settings instance for easy importing
# Usage: from app.config import settings
settings = get_settings()
