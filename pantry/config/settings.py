"""Pantry settings using Pydantic.

Environment-based configuration with validation. Every field can be
overridden by a ``PANTRY_``-prefixed environment variable or a ``.env`` file.

Environment Variables:
    PANTRY_ENVIRONMENT: development | staging | production
    PANTRY_LOG_LEVEL: DEBUG | INFO | WARNING | ERROR | CRITICAL
    PANTRY_LOG_FORMAT: json | console
    PANTRY_RECHECK_POLICY: replace | reject
    PANTRY_HISTORY_PAGE_SIZE: default page size for session history

Example .env file:
    PANTRY_ENVIRONMENT=production
    PANTRY_LOG_FORMAT=json
    PANTRY_RECHECK_POLICY=replace
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Pantry core settings.

    Handlers отримують explicit constructor arguments і fall back до цих
    значень тільки коли argument не передано.
    """

    model_config = SettingsConfigDict(
        env_prefix="PANTRY_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ==================== Core ====================
    app_name: str = "Pantry Shopping Core"
    environment: Literal["development", "staging", "production"] = "development"

    # ==================== Logging ====================
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    log_format: Literal["json", "console"] = "json"

    # ==================== Shopping sessions ====================
    recheck_policy: Literal["replace", "reject"] = Field(
        default="replace",
        description="What happens when an ingredient is checked twice in one session",
    )
    recent_sessions_limit: int = Field(default=10, ge=1, le=100)

    # ==================== Pagination ====================
    history_page_size: int = Field(default=20, ge=1)
    max_page_size: int = Field(default=100, ge=1)

    # ==================== Statistics ====================
    statistics_period_days: int = Field(default=30, ge=1, le=3650)
    top_checked_limit: int = Field(default=5, ge=1, le=50)
    quick_access_limit: int = Field(default=10, ge=1, le=100)

    # ==================== Ingredients ====================
    expiring_within_days: int = Field(default=7, ge=0, le=365)

    @model_validator(mode="after")
    def check_page_sizes(self) -> "Settings":
        """history_page_size must fit under max_page_size."""
        if self.history_page_size > self.max_page_size:
            raise ValueError("history_page_size cannot exceed max_page_size")
        return self

    @property
    def is_production(self) -> bool:
        """Check if running in production."""
        return self.environment == "production"

    @property
    def is_development(self) -> bool:
        """Check if running in development."""
        return self.environment == "development"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    Call get_settings.cache_clear() to reload.

    Returns:
        Settings instance.
    """
    return Settings()
