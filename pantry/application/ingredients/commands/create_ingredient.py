"""CreateIngredient Command - додати ingredient в pantry."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Optional

from pantry.application.shared import Command
from pantry.domain.ingredients.value_objects import StorageType


@dataclass(frozen=True)
class CreateIngredientCommand(Command):
    """Command для створення ingredient.

    Orchestrates:
    1. Check category та unit існують
    2. Duplicate detection (name, expiry info, storage location)
    3. Create Ingredient aggregate
    4. Save + publish IngredientCreated

    Example:
        >>> command = CreateIngredientCommand(
        ...     name="Tomato",
        ...     category_id="cat_vegetables",
        ...     quantity=Decimal("5"),
        ...     unit_id="unt_piece",
        ...     storage_type=StorageType.REFRIGERATED,
        ...     purchase_date=date(2026, 1, 1),
        ...     threshold=Decimal("2"),
        ... )
        >>> dto = await handler.execute(command, owner_id="user-1")
    """

    name: str
    category_id: str
    quantity: Decimal
    unit_id: str
    storage_type: StorageType
    purchase_date: date
    storage_detail: Optional[str] = None
    threshold: Optional[Decimal] = None
    memo: Optional[str] = None
    price: Optional[Decimal] = None
    best_before_date: Optional[date] = None
    use_by_date: Optional[date] = None
