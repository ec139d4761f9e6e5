"""
Configuration management using Pydantic Settings.

Type-safe, validated configuration loaded from environment variables
(prefix ``TIMECRAFT_``) or an optional ``.env`` file.

Architecture:
- Flat Settings structure (no nesting)
- Defaults reproduce the reference login screen (2 s round trip, 1.5 s
  redirect, demo credential pair)
- Type validation via Pydantic

Usage:
    from timecraft_auth.core.config import get_settings

    settings = get_settings()
    delay = settings.auth_delay_seconds

    if settings.is_development:
        # Dev-specific behavior
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from timecraft_auth.core.enums import Environment


class Settings(BaseSettings):
    """
    Login flow settings (flat structure).

    Configuration precedence:
        1. Environment variables (TIMECRAFT_*)
        2. Values from .env
        3. Default values

    Returns:
        Settings: Configuration loaded from environment.
    """

    model_config = SettingsConfigDict(
        env_prefix="TIMECRAFT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Environment detection
    environment: Environment = Field(
        default=Environment.DEVELOPMENT,
        description="Application environment (development, testing, ci, production)",
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )

    # Simulated authentication
    auth_delay_seconds: float = Field(
        default=2.0,
        ge=0,
        description="Simulated network round trip before a submission resolves",
    )
    redirect_delay_seconds: float = Field(
        default=1.5,
        ge=0,
        description="Delay between a successful login and the logged-in flag",
    )
    demo_email: str = Field(
        default="demo@timecraft.com",
        description="Email accepted by the simulated authenticator",
    )
    demo_password: str = Field(
        default="demo123",
        description="Password accepted by the simulated authenticator",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalize and validate the log level name.

        Args:
            v: Level name from the environment.

        Returns:
            Upper-case level name.

        Raises:
            ValueError: If the level is not one of the five standard levels.
        """
        level = v.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Invalid log level: {v}")
        return level

    @property
    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.environment == Environment.DEVELOPMENT

    @property
    def is_testing(self) -> bool:
        """Check if running in testing or CI environment."""
        return self.environment in (Environment.TESTING, Environment.CI)

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == Environment.PRODUCTION


@lru_cache
def get_settings() -> Settings:
    """Return cached settings instance.

    Call ``get_settings.cache_clear()`` after changing the environment
    (tests do this).
    """
    return Settings()
