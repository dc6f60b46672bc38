"""
Plugin Configuration Module

Process-level settings for the MySQL plugin using Pydantic Settings.
Environment variables are loaded from .env file automatically.

Datasource credentials are NOT settings: they arrive per call from the
host as a DatasourceConfiguration.

Usage:
    from config.settings import settings

    print(settings.MYSQL_CONNECTION_TIMEOUT_MS)
"""

from pydantic_settings import BaseSettings
from pydantic import Field, ConfigDict
from functools import lru_cache


class Settings(BaseSettings):
    """
    Plugin settings loaded from environment variables.

    Variable names are case-insensitive.
    """

    # ==========================================================================
    # Connection Configuration
    # ==========================================================================
    MYSQL_CONNECTION_TIMEOUT_MS: int = Field(
        default=30000,
        gt=0,
        description="Connect timeout for execute/metadata, in milliseconds"
    )

    # ==========================================================================
    # Logging
    # ==========================================================================
    DEBUG: bool = Field(
        default=False,
        description="Enable debug logging (connection lifecycle messages)"
    )
    LOG_JSON: bool = Field(
        default=False,
        description="Emit logs as JSON objects instead of colored text"
    )

    model_config = ConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Returns:
        Settings: Plugin settings instance
    """
    return Settings()


settings = get_settings()
