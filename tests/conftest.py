"""Pytest configuration and fixtures."""

from datetime import date, datetime, timedelta, timezone
from decimal import Decimal
from typing import Optional

import pytest

from pantry.config import Settings
from pantry.domain.ingredients.entities import Category, Ingredient, Unit
from pantry.domain.ingredients.value_objects import (
    CategoryId,
    ExpiryInfo,
    IngredientName,
    IngredientStock,
    StorageLocation,
    StorageType,
    UnitId,
    UnitType,
)
from pantry.infrastructure.messaging import EventBus
from pantry.infrastructure.persistence.memory import (
    InMemoryRepositoryFactory,
    InMemoryStore,
    InMemoryTransactionManager,
)

OWNER_ID = "user-1"
OTHER_USER_ID = "user-2"

FIXED_NOW = datetime(2026, 3, 15, 10, 0, tzinfo=timezone.utc)
TODAY = FIXED_NOW.date()

VEGETABLES = CategoryId("cat_vegetables")
DAIRY = CategoryId("cat_dairy")
PIECE = UnitId("unt_piece")
GRAM = UnitId("unt_gram")


class FakeClock:
    """Controllable clock для tests (``clock.advance(minutes=5)``)."""

    def __init__(self, now: datetime = FIXED_NOW) -> None:
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> datetime:
        self.now = self.now + timedelta(**kwargs)
        return self.now


def build_ingredient(
    name: str = "Tomato",
    quantity: str = "5",
    threshold: Optional[str] = "2",
    user_id: str = OWNER_ID,
    category_id: CategoryId = VEGETABLES,
    unit_id: UnitId = PIECE,
    storage_type: StorageType = StorageType.REFRIGERATED,
    best_before_date: Optional[date] = None,
    use_by_date: Optional[date] = None,
    created_at: datetime = FIXED_NOW,
) -> Ingredient:
    """Build Ingredient aggregate (events cleared)."""
    ingredient = Ingredient.create(
        user_id=user_id,
        name=IngredientName(name),
        category_id=category_id,
        stock=IngredientStock(
            quantity=Decimal(quantity),
            unit_id=unit_id,
            storage_location=StorageLocation(storage_type),
            threshold=Decimal(threshold) if threshold is not None else None,
        ),
        purchase_date=TODAY - timedelta(days=1),
        expiry_info=ExpiryInfo.from_dates(best_before_date, use_by_date),
        now=created_at,
    )
    ingredient.clear_domain_events()
    return ingredient


@pytest.fixture
def settings():
    """Settings без .env (defaults)."""
    return Settings(_env_file=None)


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def store():
    """InMemoryStore з seeded categories та units."""
    store = InMemoryStore()
    store.seed_categories([
        Category(VEGETABLES, "Vegetables", display_order=1),
        Category(DAIRY, "Dairy", display_order=2),
    ])
    store.seed_units([
        Unit(PIECE, "piece", "pcs", UnitType.COUNT, display_order=1),
        Unit(GRAM, "gram", "g", UnitType.WEIGHT, display_order=2),
    ])
    return store


@pytest.fixture
def repository_factory(store):
    return InMemoryRepositoryFactory(store)


@pytest.fixture
def transaction_manager(store):
    return InMemoryTransactionManager(store)


@pytest.fixture
def event_bus():
    return EventBus()


@pytest.fixture
def published_events(event_bus):
    """Collect every published event of the given types.

    Usage:
        >>> events = published_events(ItemChecked, ShoppingSessionCompleted)
    """
    collected = []

    async def collect(event):
        collected.append(event)

    def subscribe(*event_types):
        for event_type in event_types:
            event_bus.subscribe(event_type, collect)
        return collected

    return subscribe


@pytest.fixture
def ingredient_repository(repository_factory):
    return repository_factory.create_ingredient_repository()


@pytest.fixture
def shopping_session_repository(repository_factory):
    return repository_factory.create_shopping_session_repository()


@pytest.fixture
def category_repository(repository_factory):
    return repository_factory.create_category_repository()


@pytest.fixture
def unit_repository(repository_factory):
    return repository_factory.create_unit_repository()
