"""UpdateIngredient Command - partial update ingredient."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Optional

from pantry.application.shared import UNSET, Command, Maybe
from pantry.domain.ingredients.value_objects import StorageType


@dataclass(frozen=True)
class UpdateIngredientCommand(Command):
    """Command для partial update.

    Кожне поле має три стани:
    - ``UNSET`` (default) - залишити як є
    - ``None`` - очистити (тільки nullable поля: memo, price, dates, detail, threshold)
    - value - замінити

    Example:
        >>> command = UpdateIngredientCommand(
        ...     ingredient_id="ing_abc",
        ...     quantity=Decimal("2"),
        ...     memo=None,  # clear memo
        ... )
        >>> dto = await handler.execute(command, owner_id="user-1")
    """

    ingredient_id: str
    name: Maybe[str] = UNSET
    category_id: Maybe[str] = UNSET
    memo: Maybe[Optional[str]] = UNSET
    price: Maybe[Optional[Decimal]] = UNSET
    purchase_date: Maybe[date] = UNSET
    best_before_date: Maybe[Optional[date]] = UNSET
    use_by_date: Maybe[Optional[date]] = UNSET
    quantity: Maybe[Decimal] = UNSET
    unit_id: Maybe[str] = UNSET
    storage_type: Maybe[StorageType] = UNSET
    storage_detail: Maybe[Optional[str]] = UNSET
    threshold: Maybe[Optional[Decimal]] = UNSET
