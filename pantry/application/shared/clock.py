"""Clock - injectable source of "now" для handlers."""

from datetime import datetime, timezone
from typing import Callable

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    """Default clock (timezone-aware UTC)."""
    return datetime.now(timezone.utc)
