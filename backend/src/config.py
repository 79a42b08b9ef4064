"""Application configuration via environment variables.

Provides type-safe settings loading using pydantic-settings.
Environment variables can be loaded from a .env file.
"""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    Environment Variables:
        DATABASE_URL: SQLAlchemy connection string for the product store
        LOG_LEVEL: Logging level (default INFO)
        LOG_JSON: Emit JSON log lines (default True)
        HOST: Bind address for uvicorn (default 0.0.0.0)
        PORT: Bind port for uvicorn (default 8000)
        ENVIRONMENT: Deployment name; docs endpoints are hidden in production
        DEBUG: Enable debug mode (default False)
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # Database
    DATABASE_URL: str = "sqlite:///./checkout.db"

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = True

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 8000

    # Application
    ENVIRONMENT: str = "development"
    DEBUG: bool = False


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance.

    Uses lru_cache for singleton behavior.
    Call get_settings.cache_clear() to reload settings.
    """
    return Settings()
