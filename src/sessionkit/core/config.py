"""Configuration management for SessionKit.

This module uses Pydantic Settings to load and validate configuration from
environment variables and .env files. Configuration is loaded at application
startup and is immutable during runtime.
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration settings.

    Settings are loaded from environment variables prefixed with
    ``SESSIONKIT_`` and from a ``.env`` file.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="SESSIONKIT_",
        case_sensitive=False,
        extra="ignore",
    )

    # Application Settings
    app_name: str = "SessionKit"
    app_version: str = "0.1.0"
    environment: Literal["development", "production", "testing"] = "development"
    debug: bool = False
    api_prefix: str = "/api"

    # Server Settings
    host: str = "0.0.0.0"
    port: int = 8000

    # Database Settings
    database_url: str = "sqlite+aiosqlite:///./sk_data/sessionkit.db"
    db_pool_size: int = 5
    db_max_overflow: int = 10
    db_pool_timeout: int = 30
    db_pool_recycle: int = 3600
    db_echo: bool = False

    # Token Settings
    access_token_secret: str = Field(
        default="change-me-access-token-secret",
        description="Secret key for signing access tokens",
    )
    refresh_token_secret: str = Field(
        default="change-me-refresh-token-secret",
        description="Secret key for signing refresh tokens",
    )
    jwt_algorithm: str = "HS256"
    access_token_expire_minutes: int = 15
    refresh_token_expire_days: int = 7
    refresh_token_retention_days: int = Field(
        default=7,
        description="Stored refresh tokens older than this are purged by cleanup",
    )

    # Expired Token Cleanup
    token_cleanup_enabled: bool = True
    token_cleanup_interval_seconds: int = 86400  # daily

    # Cookie Settings
    cookie_secure: bool | None = Field(
        default=None,
        description="Send auth cookies with the Secure flag (defaults to on in production)",
    )

    # Logging Settings
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    log_format: Literal["json", "console"] = "json"

    @model_validator(mode="after")
    def validate_token_secrets(self) -> "Settings":
        """Access and refresh tokens must be signed with different keys."""
        if self.access_token_secret == self.refresh_token_secret:
            raise ValueError(
                "access_token_secret and refresh_token_secret must differ, "
                "otherwise a refresh token would verify as an access token."
            )
        return self

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == "production"

    @property
    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.environment == "development"

    @property
    def is_testing(self) -> bool:
        """Check if running in testing environment."""
        return self.environment == "testing"

    @property
    def secure_cookies(self) -> bool:
        if self.cookie_secure is None:
            return self.is_production
        return self.cookie_secure


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance.

    Settings are loaded once and reused for the lifetime of the process.

    Returns:
        Settings: Cached application settings instance.
    """
    return Settings()
