"""Base Entity class for domain model.

Entity - об'єкт з унікальною ідентичністю, який відрізняється від інших
не атрибутами, а ID. Два ingredient з однаковими атрибутами але різними ID -
це різні об'єкти.
"""

from abc import ABC
from typing import Any


class Entity(ABC):
    """Base class for all domain entities.

    Entity має унікальний ідентифікатор (id) і порівнюється за ID, а не за значенням атрибутів.
    ID у цьому домені - prefixed value object (IngredientId, ShoppingSessionId, ...),
    тому він відомий ще до збереження в repository.

    Example:
        >>> a = Category(id=CategoryId("cat_vegetables"), name="Vegetables")
        >>> b = Category(id=CategoryId("cat_vegetables"), name="Veg")
        >>> a == b  # True (same ID)
    """

    def __init__(self, id: Any) -> None:
        """Initialize entity.

        Args:
            id: Unique identifier (value object).
        """
        self._id = id

    @property
    def id(self) -> Any:
        """Get entity ID."""
        return self._id

    def __eq__(self, other: object) -> bool:
        """Entities порівнюються за ID і типом, не за атрибутами."""
        if not isinstance(other, Entity) or type(self) is not type(other):
            return False

        if self._id is None and other._id is None:
            return self is other

        return self._id == other._id

    def __hash__(self) -> int:
        if self._id is None:
            return hash(id(self))
        return hash((type(self).__name__, self._id))

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(id={self._id})"
