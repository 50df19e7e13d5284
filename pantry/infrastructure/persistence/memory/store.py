"""InMemoryStore - shared tables для in-memory adapter."""

from dataclasses import dataclass, field
from typing import Iterable

from pantry.domain.ingredients.entities import Category, Unit

from .records import IngredientRecord, ShoppingSessionRecord


@dataclass(frozen=True)
class StoreSnapshot:
    """Point-in-time copy of every table."""

    ingredients: dict[str, IngredientRecord]
    shopping_sessions: dict[str, ShoppingSessionRecord]


class InMemoryStore:
    """Tables keyed by ID.

    Ingredient rows ніколи не видаляються (soft delete = ``deleted_at``).
    Categories / units - master data, seeded один раз.

    Example:
        >>> store = InMemoryStore()
        >>> store.seed_categories([Category(CategoryId("cat_veg"), "Vegetables")])
        >>> factory = InMemoryRepositoryFactory(store)
    """

    def __init__(self) -> None:
        self.ingredients: dict[str, IngredientRecord] = {}
        self.shopping_sessions: dict[str, ShoppingSessionRecord] = {}
        self.categories: dict[str, Category] = {}
        self.units: dict[str, Unit] = {}

    def seed_categories(self, categories: Iterable[Category]) -> None:
        for category in categories:
            self.categories[str(category.id)] = category

    def seed_units(self, units: Iterable[Unit]) -> None:
        for unit in units:
            self.units[str(unit.id)] = unit

    def snapshot(self) -> StoreSnapshot:
        return StoreSnapshot(
            ingredients=dict(self.ingredients),
            shopping_sessions=dict(self.shopping_sessions),
        )

    def restore(self, snapshot: StoreSnapshot) -> None:
        self.ingredients = dict(snapshot.ingredients)
        self.shopping_sessions = dict(snapshot.shopping_sessions)


@dataclass
class InMemoryTransaction:
    """Transaction context passed to ``TransactionManager.run`` callbacks."""

    store: InMemoryStore
    writes: list[str] = field(default_factory=list)
    """IDs записані в цьому scope (для логів)."""
