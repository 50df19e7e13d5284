"""Category / Unit repository ports (read-only master data)."""

from abc import ABC, abstractmethod
from typing import Optional

from ..entities import Category, Unit
from ..value_objects import CategoryId, UnitId


class CategoryRepository(ABC):
    """Read-only access to categories."""

    @abstractmethod
    async def find_by_id(self, category_id: CategoryId) -> Optional[Category]:
        pass

    @abstractmethod
    async def find_all(self) -> list[Category]:
        """All categories ordered by display order."""
        pass


class UnitRepository(ABC):
    """Read-only access to units."""

    @abstractmethod
    async def find_by_id(self, unit_id: UnitId) -> Optional[Unit]:
        pass

    @abstractmethod
    async def find_all(self) -> list[Unit]:
        """All units ordered by display order."""
        pass
