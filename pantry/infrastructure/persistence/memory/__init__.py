"""In-memory persistence adapter (reference implementation of the ports)."""

from .mappers import IngredientMapper, ShoppingSessionMapper
from .repositories import (
    InMemoryCategoryRepository,
    InMemoryIngredientRepository,
    InMemoryShoppingSessionRepository,
    InMemoryUnitRepository,
)
from .repository_factory import InMemoryRepositoryFactory
from .store import InMemoryStore, InMemoryTransaction
from .transaction_manager import InMemoryTransactionManager

__all__ = [
    "InMemoryStore",
    "InMemoryTransaction",
    "InMemoryTransactionManager",
    "InMemoryRepositoryFactory",
    "InMemoryIngredientRepository",
    "InMemoryShoppingSessionRepository",
    "InMemoryCategoryRepository",
    "InMemoryUnitRepository",
    "IngredientMapper",
    "ShoppingSessionMapper",
]
