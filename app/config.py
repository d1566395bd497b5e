# =============================================================================
# app/config.py - Application Settings
# =============================================================================
# This module loads configuration from environment variables using pydantic-settings.
# It provides a single Settings class with all configuration values.
#
# Usage:
#   from app.config import settings
#   print(settings.DB_URL)
#
# Outside production a .env file in the project root is loaded first
# (python-dotenv), so local development needs no exported variables.
# In production the database URL and session secret must be set explicitly.
# =============================================================================

import os
from functools import lru_cache
from typing import Literal

from dotenv import load_dotenv
from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_DB_URL = "mongodb://localhost:27017/YelpCamp"
DEFAULT_SECRET = "thisshouldbeabettersecret"


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Every value has a development default. The defaults for DB_URL and
    SECRET are refused when ENVIRONMENT is "production".
    """

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

    HOST: str = Field(
        default="0.0.0.0",
        description="Host to bind the web server to"
    )

    PORT: int = Field(
        default=3000,
        ge=1,
        le=65535,
        description="Port for the web server"
    )

    # -------------------------------------------------------------------------
    # Document Store (MongoDB)
    # -------------------------------------------------------------------------

    DB_URL: str = Field(
        default=DEFAULT_DB_URL,
        description="MongoDB connection URL; the path names the database"
    )

    # -------------------------------------------------------------------------
    # Sessions
    # -------------------------------------------------------------------------

    SECRET: str = Field(
        default=DEFAULT_SECRET,
        min_length=16,
        description="Secret used to sign session cookies"
    )

    SESSION_BACKEND: Literal["mongo", "redis", "memory"] = Field(
        default="mongo",
        description="Where server-side session data is kept"
    )

    REDIS_URL: str = Field(
        default="redis://localhost:6379/0",
        description="Redis connection URL (SESSION_BACKEND=redis only)"
    )

    SESSION_COOKIE_NAME: str = Field(
        default="session",
        description="Name of the session cookie"
    )

    SESSION_MAX_AGE_SECONDS: int = Field(
        default=7 * 24 * 3600,
        ge=60,
        description="Session lifetime, both cookie max-age and store TTL"
    )

    SESSION_TOUCH_AFTER_SECONDS: int = Field(
        default=24 * 3600,
        ge=0,
        description="Minimum interval between expiry refreshes of an unchanged session"
    )

    COOKIE_SECURE: bool = Field(
        default=False,
        description="Send the session cookie over HTTPS only"
    )

    # -------------------------------------------------------------------------
    # Content Security Policy / Seeding
    # -------------------------------------------------------------------------

    CLOUDINARY_CLOUD_NAME: str = Field(
        default="",
        description="Cloudinary account allowed as an image source"
    )

    SEED_AUTHOR_ID: str = Field(
        default="641af2bb4929465a40608aa4",
        pattern=r"^[0-9a-f]{24}$",
        description="User id recorded as author of seeded campgrounds"
    )

    # -------------------------------------------------------------------------
    # Pydantic Settings Configuration
    # -------------------------------------------------------------------------

    model_config = SettingsConfigDict(
        env_ignore_empty=True,
        case_sensitive=True,
    )

    @model_validator(mode="after")
    def _require_explicit_secrets_in_production(self) -> "Settings":
        if self.ENVIRONMENT != "production":
            return self
        missing = [
            name for name in ("DB_URL", "SECRET")
            if name not in self.model_fields_set
        ]
        if missing:
            raise ValueError(
                f"{', '.join(missing)} must be set explicitly in production"
            )
        return self

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


@lru_cache
def get_settings() -> Settings:
    """
    Get cached Settings instance.

    Loads .env into the process environment first unless ENVIRONMENT is
    already "production".
    """
    if os.getenv("ENVIRONMENT") != "production":
        load_dotenv()
    return Settings()


# Global settings instance for easy importing
# Usage: from app.config import settings
settings = get_settings()
