"""Pantry Configuration.

Uses pydantic-settings for type-safe configuration from environment variables
and structlog for structured logging.

Usage:
    from pantry.config import get_settings, setup_logging
    settings = get_settings()
    setup_logging(settings)  # Call once at startup
"""

from .settings import Settings, get_settings
from .logging import setup_logging

__all__ = [
    "Settings",
    "get_settings",
    "setup_logging",
]
