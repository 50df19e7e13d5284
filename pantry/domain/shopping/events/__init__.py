"""Domain Events для Shopping bounded context."""

from .session_events import (
    ItemChecked,
    ShoppingSessionAbandoned,
    ShoppingSessionCompleted,
    ShoppingSessionStarted,
)

__all__ = [
    "ShoppingSessionStarted",
    "ItemChecked",
    "ShoppingSessionCompleted",
    "ShoppingSessionAbandoned",
]
