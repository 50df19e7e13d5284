"""Category та Unit - read-only master data."""

from pantry.domain.shared import Entity

from ..value_objects import CategoryId, UnitId, UnitType


class Category(Entity):
    """Ingredient category (Vegetables, Dairy, ...)."""

    def __init__(self, id: CategoryId, name: str, display_order: int = 0) -> None:
        super().__init__(id)
        self.name = name
        self.display_order = display_order

    def __repr__(self) -> str:
        return f"Category(id={self.id}, name={self.name!r})"


class Unit(Entity):
    """Measurement unit (pcs, g, ml, ...).

    Example:
        >>> Unit(id=UnitId("unt_gram"), name="gram", symbol="g", type=UnitType.WEIGHT)
    """

    def __init__(
        self,
        id: UnitId,
        name: str,
        symbol: str,
        type: UnitType,
        display_order: int = 0,
    ) -> None:
        super().__init__(id)
        self.name = name
        self.symbol = symbol
        self.type = type
        self.display_order = display_order

    def __repr__(self) -> str:
        return f"Unit(id={self.id}, symbol={self.symbol!r})"
