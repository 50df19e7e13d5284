"""IngredientStock value object - поточний snapshot запасу."""

from dataclasses import dataclass, replace
from decimal import Decimal, InvalidOperation
from typing import Optional

from pantry.domain.shared import ValueObject, validate_value_object

from .enums import StockStatus
from .identifiers import UnitId
from .storage_location import StorageLocation


def _as_decimal(value: object, field_name: str) -> Decimal:
    validate_value_object(
        isinstance(value, (Decimal, int, str)) and not isinstance(value, bool),
        f"{field_name} must be a Decimal, int or str",
        value=repr(value),
    )
    try:
        result = value if isinstance(value, Decimal) else Decimal(str(value))
    except InvalidOperation:
        result = Decimal("NaN")
    validate_value_object(result.is_finite(), f"{field_name} must be a number", value=str(value))
    validate_value_object(result >= 0, f"{field_name} must be non-negative", value=str(result))
    return result


@dataclass(frozen=True)
class IngredientStock(ValueObject):
    """Quantity, unit, storage location and low-stock threshold as one unit.

    Stock immutable: зміни кількості створюють новий IngredientStock
    (``with_quantity``), а Ingredient замінює свій snapshot.

    Example:
        >>> stock = IngredientStock(
        ...     quantity=Decimal("5"),
        ...     unit_id=UnitId("unt_piece"),
        ...     storage_location=StorageLocation(StorageType.REFRIGERATED),
        ...     threshold=Decimal("2"),
        ... )
        >>> stock.status  # StockStatus.IN_STOCK
        >>> stock.with_quantity(Decimal("2")).status  # StockStatus.LOW_STOCK
    """

    quantity: Decimal
    unit_id: UnitId
    storage_location: StorageLocation
    threshold: Optional[Decimal] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "quantity", _as_decimal(self.quantity, "Quantity"))
        if self.threshold is not None:
            object.__setattr__(self, "threshold", _as_decimal(self.threshold, "Threshold"))
        validate_value_object(isinstance(self.unit_id, UnitId), "unit_id must be a UnitId")
        validate_value_object(
            isinstance(self.storage_location, StorageLocation),
            "storage_location must be a StorageLocation",
        )

    @property
    def status(self) -> StockStatus:
        """Derived stock classification."""
        return StockStatus.classify(self.quantity, self.threshold)

    @property
    def is_out_of_stock(self) -> bool:
        return self.quantity == 0

    @property
    def is_low(self) -> bool:
        """True для LOW_STOCK (не OUT_OF_STOCK)."""
        return self.status is StockStatus.LOW_STOCK

    def with_quantity(self, quantity: Decimal) -> "IngredientStock":
        return replace(self, quantity=quantity)

    def with_storage_location(self, storage_location: StorageLocation) -> "IngredientStock":
        return replace(self, storage_location=storage_location)
