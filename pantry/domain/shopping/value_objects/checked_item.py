"""CheckedItem value object - point-in-time snapshot перевіреного ingredient."""

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional

from pantry.domain.ingredients.value_objects import (
    ExpiryStatus,
    IngredientId,
    IngredientName,
    StockStatus,
)
from pantry.domain.shared import ValueObject, validate_value_object


@dataclass(frozen=True)
class CheckedItem(ValueObject):
    """Snapshot of an ingredient's classification at check time.

    Snapshot не тримає live reference на Ingredient: пізніші зміни ingredient
    не змінюють вже записані snapshots.

    Example:
        >>> item = CheckedItem.create(
        ...     ingredient_id=ingredient.id,
        ...     ingredient_name=ingredient.name,
        ...     stock_status=StockStatus.LOW_STOCK,
        ...     expiry_status=ExpiryStatus.CRITICAL,
        ... )
        >>> item.needs_attention  # True
        >>> item.priority  # 2 + 4 = 6
    """

    ingredient_id: IngredientId
    ingredient_name: IngredientName
    stock_status: StockStatus
    expiry_status: ExpiryStatus
    checked_at: datetime

    def __post_init__(self) -> None:
        validate_value_object(
            isinstance(self.ingredient_id, IngredientId), "ingredient_id must be an IngredientId"
        )
        validate_value_object(
            isinstance(self.ingredient_name, IngredientName),
            "ingredient_name must be an IngredientName",
        )
        validate_value_object(
            isinstance(self.stock_status, StockStatus), "stock_status must be a StockStatus"
        )
        validate_value_object(
            isinstance(self.expiry_status, ExpiryStatus), "expiry_status must be an ExpiryStatus"
        )
        validate_value_object(isinstance(self.checked_at, datetime), "checked_at must be a datetime")

    @classmethod
    def create(
        cls,
        ingredient_id: IngredientId,
        ingredient_name: IngredientName,
        stock_status: StockStatus,
        expiry_status: ExpiryStatus,
        checked_at: Optional[datetime] = None,
    ) -> "CheckedItem":
        return cls(
            ingredient_id=ingredient_id,
            ingredient_name=ingredient_name,
            stock_status=stock_status,
            expiry_status=expiry_status,
            checked_at=checked_at or datetime.now(timezone.utc),
        )

    @property
    def needs_attention(self) -> bool:
        """Stock потребує поповнення або expiry не FRESH."""
        return self.stock_status.needs_replenishment or self.expiry_status.needs_attention

    @property
    def priority(self) -> int:
        """Combined priority (stock priority + expiry priority)."""
        return self.stock_status.priority + self.expiry_status.priority
