"""Domain Events для Ingredient lifecycle."""

from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

from pantry.domain.shared import DomainEvent


@dataclass(frozen=True)
class IngredientCreated(DomainEvent):
    """Event: Ingredient додано в pantry."""

    ingredient_id: str
    user_id: str
    name: str
    category_id: str
    quantity: Decimal
    unit_id: str


@dataclass(frozen=True)
class IngredientUpdated(DomainEvent):
    """Event: Ingredient змінено.

    ``changed_fields`` - імена полів що реально змінились (для audit).
    """

    ingredient_id: str
    user_id: str
    changed_fields: tuple[str, ...]


@dataclass(frozen=True)
class IngredientDeleted(DomainEvent):
    """Event: Ingredient soft-deleted.

    Row залишається для history, але зникає з усіх lookups.
    """

    ingredient_id: str
    user_id: str
    name: str


@dataclass(frozen=True)
class StockLevelLow(DomainEvent):
    """Event: Stock опустився до threshold або нижче.

    Subscribers можуть:
    - Додати ingredient в shopping list
    - Відправити reminder
    """

    ingredient_id: str
    user_id: str
    name: str
    quantity: Decimal
    threshold: Optional[Decimal]


@dataclass(frozen=True)
class StockDepleted(DomainEvent):
    """Event: Quantity досягла 0."""

    ingredient_id: str
    user_id: str
    name: str


@dataclass(frozen=True)
class StockReplenished(DomainEvent):
    """Event: Quantity збільшилась (покупка або ручне оновлення)."""

    ingredient_id: str
    user_id: str
    previous_quantity: Decimal
    new_quantity: Decimal


@dataclass(frozen=True)
class StockConsumed(DomainEvent):
    """Event: Частина stock використана."""

    ingredient_id: str
    user_id: str
    consumed_amount: Decimal
    remaining_quantity: Decimal
