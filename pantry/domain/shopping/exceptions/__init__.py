"""Shopping domain exceptions."""

from .session_exceptions import (
    ActiveSessionExistsError,
    IngredientAccessDeniedError,
    ItemAlreadyCheckedError,
    SessionAccessDeniedError,
    SessionAlreadyCompletedError,
    SessionNotActiveError,
    ShoppingSessionNotFoundError,
)

__all__ = [
    "ShoppingSessionNotFoundError",
    "ActiveSessionExistsError",
    "SessionNotActiveError",
    "SessionAlreadyCompletedError",
    "ItemAlreadyCheckedError",
    "SessionAccessDeniedError",
    "IngredientAccessDeniedError",
]
