"""Entities для Shopping bounded context."""

from .shopping_session import ShoppingSession

__all__ = ["ShoppingSession"]
