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
# =============================================================================

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Every third-party key is optional: the catalog API runs without them,
    and the features that need them degrade (AI falls back to static
    content, imports answer 503).
    """

    # -------------------------------------------------------------------------
    # Database Configuration
    # -------------------------------------------------------------------------

    DATABASE_URL: str = Field(
        default="sqlite:///./mobileprices.db",
        description="SQLAlchemy database URL (postgresql+psycopg2://... in production)"
    )

    DATABASE_POOL_SIZE: int = Field(
        default=5,
        ge=1,
        le=50,
        description="Connection pool size (use 1 for short-lived serverless functions)"
    )

    SEED_SAMPLE_DATA: bool = Field(
        default=True,
        description="Insert the sample brands/mobiles on startup when the catalog is empty"
    )

    # -------------------------------------------------------------------------
    # Redis Configuration (for Celery)
    # -------------------------------------------------------------------------

    REDIS_URL: str = Field(
        default="redis://localhost:6379/0",
        description="Redis connection URL for Celery broker"
    )

    # -------------------------------------------------------------------------
    # OpenAI / LLM Configuration
    # -------------------------------------------------------------------------
    # Optional - without a key the AI service serves fallback content

    OPENAI_API_KEY: str | None = Field(
        default=None,
        description="OpenAI API key for AI enhancement and analysis"
    )

    OPENAI_MODEL: str = Field(
        default="gpt-4o",
        description="Chat model used for AI features (must support JSON mode)"
    )

    # -------------------------------------------------------------------------
    # Phone Data Sources
    # -------------------------------------------------------------------------

    RAPIDAPI_KEY: str | None = Field(
        default=None,
        description="RapidAPI key for the GSMArena parser API"
    )

    RAPIDAPI_HOST: str = Field(
        default="gsmarenaparser.p.rapidapi.com",
        description="RapidAPI host header for the GSMArena parser API"
    )

    MOBILEAPI_KEY: str | None = Field(
        default=None,
        description="MobileAPI.dev API key"
    )

    MOBILEAPI_BASE_URL: str = Field(
        default="https://api.mobileapi.dev",
        description="MobileAPI.dev base URL"
    )

    IMPORT_SOURCE: Literal["rapidapi", "mobileapi"] = Field(
        default="rapidapi",
        description="Default phone data source for import endpoints"
    )

    IMPORT_REQUEST_DELAY: float = Field(
        default=0.1,
        ge=0.0,
        le=10.0,
        description="Seconds to wait between upstream calls during an import"
    )

    IMPORT_TIMEOUT_SECONDS: float = Field(
        default=30.0,
        gt=0.0,
        description="HTTP timeout for phone data source requests"
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

    SITE_URL: str = Field(
        default="https://mobile-price.com",
        description="Public site URL used in sitemap.xml and robots.txt"
    )

    FEATURED_LIMIT: int = Field(
        default=8,
        ge=1,
        le=100,
        description="Number of mobiles returned by the featured endpoint"
    )

    # -------------------------------------------------------------------------
    # Security
    # -------------------------------------------------------------------------

    SECRET_KEY: str = Field(
        default="mobile-admin-secret-key-dev",
        min_length=16,
        description="Secret key for signing admin JWTs"
    )

    JWT_ALGORITHM: str = Field(
        default="HS256",
        description="Algorithm used to sign admin JWTs"
    )

    JWT_EXPIRE_HOURS: int = Field(
        default=24,
        ge=1,
        le=720,
        description="Lifetime of an admin JWT (and its cookie)"
    )

    AUTH_COOKIE_NAME: str = Field(
        default="auth-token",
        description="Name of the HttpOnly cookie carrying the admin JWT"
    )

    ADMIN_USERNAME: str = Field(
        default="admin",
        description="Admin panel username"
    )

    ADMIN_PASSWORD: str = Field(
        default="admin123",
        description="Admin panel password"
    )

    # CORS origins (comma-separated string that gets parsed)
    CORS_ORIGINS: str = Field(
        default="http://localhost:5173",
        description="Allowed CORS origins (comma-separated)"
    )

    # -------------------------------------------------------------------------
    # Pydantic Settings Configuration
    # -------------------------------------------------------------------------

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        # Empty values count as unset, so OPENAI_API_KEY= disables AI
        env_ignore_empty=True,
        case_sensitive=True,
        extra="ignore",
    )

    # -------------------------------------------------------------------------
    # Computed Properties
    # -------------------------------------------------------------------------

    @property
    def cors_origins_list(self) -> list[str]:
        """
        Parse CORS_ORIGINS string into a list.

        Example: "http://localhost:5173, https://mobile-price.com" -> [...]
        """
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",")]

    @property
    def ai_enabled(self) -> bool:
        """True when an OpenAI key is configured."""
        return bool(self.OPENAI_API_KEY)

    @property
    def is_sqlite(self) -> bool:
        return self.DATABASE_URL.startswith("sqlite")

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

    Using lru_cache ensures we only parse .env and validate once,
    not on every access.
    """
    return Settings()


# Global settings instance for easy importing
# Usage: from app.config import settings
settings = get_settings()
