"""Repository ports для Shopping bounded context."""

from .shopping_session_repository import SessionHistoryCriteria, ShoppingSessionRepository

__all__ = ["ShoppingSessionRepository", "SessionHistoryCriteria"]
