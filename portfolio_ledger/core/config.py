"""
Configuration management using Pydantic Settings.

Type-safe, validated configuration loaded from environment variables.

Architecture:
- Flat Settings structure (no nesting)
- All config loaded from environment variables
- Type validation via Pydantic

Usage:
    from portfolio_ledger.core.config import settings

    db_url = settings.database_url
    if settings.reject_progress_on_completed_goals:
        ...
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from portfolio_ledger.core.enums import Environment


class Settings(BaseSettings):
    """
    Main application settings (flat structure).

    Configuration precedence:
        1. Environment variables
        2. Default values

    Returns:
        Settings: Application configuration loaded from environment.
    """

    # Environment detection
    environment: Environment = Field(
        default=Environment.DEVELOPMENT,
        description="Application environment (development, testing, ci, production)",
    )

    # Core application settings
    debug: bool = Field(
        default=False,
        description="Enable debug mode (verbose logging)",
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )

    # Application metadata
    app_name: str = Field(
        default="portfolio-ledger",
        description="Application name",
    )
    app_version: str = Field(
        default="0.1.0",
        description="Application version",
    )

    # Database configuration
    database_url: str = Field(
        default="sqlite+pysqlite:///:memory:",
        description="SQLAlchemy database URL for the ledger record store",
    )
    db_echo: bool = Field(
        default=False,
        description="Log all SQL statements",
    )

    # Ledger behavior
    portfolio_address_domain: str = Field(
        default="portfolio",
        description="Domain tag mixed into every portfolio address derivation",
    )
    reject_progress_on_completed_goals: bool = Field(
        default=False,
        description="Reject goal progress once a goal is completed "
        "(GoalAlreadyCompleted) instead of accepting overshoot",
    )

    model_config = SettingsConfigDict(
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """
        Validate and normalize the log level name.

        Args:
            v: Log level name (any case).

        Returns:
            str: Uppercase log level name.

        Raises:
            ValueError: If the level is not a standard logging level.
        """
        normalized = v.upper()
        if normalized not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Invalid log level: {v}")
        return normalized

    @field_validator("portfolio_address_domain")
    @classmethod
    def validate_address_domain(cls, v: str) -> str:
        """
        Validate the address domain tag is non-empty.

        Args:
            v: Domain tag.

        Returns:
            str: The domain tag, stripped.

        Raises:
            ValueError: If the tag is blank.
        """
        if not v.strip():
            raise ValueError("portfolio_address_domain cannot be empty")
        return v.strip()

    @property
    def is_development(self) -> bool:
        """
        Check if running in development environment.

        Returns:
            bool: True if environment is DEVELOPMENT, False otherwise.
        """
        return self.environment == Environment.DEVELOPMENT

    @property
    def is_testing(self) -> bool:
        """
        Check if running in testing or CI environment.

        Returns:
            bool: True if environment is TESTING or CI, False otherwise.
        """
        return self.environment in {Environment.TESTING, Environment.CI}

    @property
    def is_production(self) -> bool:
        """
        Check if running in production environment.

        Returns:
            bool: True if environment is PRODUCTION, False otherwise.
        """
        return self.environment == Environment.PRODUCTION


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are loaded only once per process.

    Returns:
        Settings: Cached settings instance.
    """
    return Settings()


# Global settings instance (singleton pattern)
settings = get_settings()
