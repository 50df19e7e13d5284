"""IngredientRepository Port - interface для persistence ingredient aggregates."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Optional

from ..entities import Ingredient
from ..value_objects import CategoryId, ExpiryInfo, IngredientId, StockStatus, StorageLocation


class ExpiryFilter(str, Enum):
    """Expiry bucket для ingredient listings."""

    ALL = "all"
    """Без фільтра."""

    EXPIRED = "expired"
    """Effective date вже минула."""

    EXPIRING = "expiring"
    """Спливає протягом ``expiring_within_days`` (включно з сьогодні)."""

    FRESH = "fresh"
    """Без дат або спливає пізніше ніж ``expiring_within_days``."""


class IngredientSortField(str, Enum):
    """Sort key для ingredient listings."""

    NAME = "name"
    PURCHASE_DATE = "purchase_date"
    EXPIRY_DATE = "expiry_date"
    CREATED_AT = "created_at"


class SortOrder(str, Enum):
    ASC = "asc"
    DESC = "desc"


@dataclass(frozen=True)
class IngredientCriteria:
    """Filter + sort + window для ``find_many`` / ``count``.

    ``count`` ігнорує sort і window.
    """

    user_id: str
    search: Optional[str] = None
    category_id: Optional[CategoryId] = None
    stock_status: Optional[StockStatus] = None
    expiry_filter: ExpiryFilter = ExpiryFilter.ALL
    expiring_within_days: int = 7
    as_of: Optional[date] = None
    sort_by: IngredientSortField = IngredientSortField.CREATED_AT
    sort_order: SortOrder = SortOrder.DESC
    offset: int = 0
    limit: Optional[int] = None


class IngredientRepository(ABC):
    """Abstract interface для ingredient persistence.

    Всі finders виключають soft-deleted ingredients і scoped по owner,
    тому чужий ingredient виглядає як "not found".

    Example (Domain uses):
        >>> ingredient = await ingredient_repo.find_by_id(owner_id, ingredient_id)
        >>> if ingredient is None:
        ...     raise IngredientNotFoundError(ingredient_id=str(ingredient_id))
        >>> ingredient.delete()
        >>> await ingredient_repo.update(ingredient)
    """

    @abstractmethod
    async def save(self, ingredient: Ingredient) -> Ingredient:
        """Persist new ingredient.

        Args:
            ingredient: Ingredient entity to save.

        Returns:
            Saved ingredient.
        """
        pass

    @abstractmethod
    async def update(self, ingredient: Ingredient) -> Ingredient:
        """Persist changes of an existing ingredient (including soft delete)."""
        pass

    @abstractmethod
    async def find_by_id(self, user_id: str, ingredient_id: IngredientId) -> Optional[Ingredient]:
        """Get ingredient by ID, scoped by owner.

        Args:
            user_id: Owner ID.
            ingredient_id: Ingredient ID.

        Returns:
            Ingredient або None (absent, deleted або чужий).
        """
        pass

    @abstractmethod
    async def find_by_user_id(self, user_id: str) -> list[Ingredient]:
        """All live ingredients of the owner."""
        pass

    @abstractmethod
    async def find_duplicates(
        self,
        user_id: str,
        name: str,
        expiry_info: Optional[ExpiryInfo],
        storage_location: StorageLocation,
    ) -> list[Ingredient]:
        """Find ingredients з тим самим (name, expiry info, storage location).

        Note:
            Update handler сам виключає власний ID з результату.
        """
        pass

    @abstractmethod
    async def find_expiring_soon(
        self, user_id: str, days: int, *, as_of: Optional[date] = None
    ) -> list[Ingredient]:
        """Ingredients whose effective date is within ``days`` (not yet expired).

        Returns:
            Ordered by effective expiry date ascending.
        """
        pass

    @abstractmethod
    async def find_expired(self, user_id: str, *, as_of: Optional[date] = None) -> list[Ingredient]:
        """Ingredients whose effective date is before ``as_of``."""
        pass

    @abstractmethod
    async def find_by_category(self, user_id: str, category_id: CategoryId) -> list[Ingredient]:
        pass

    @abstractmethod
    async def find_many(self, criteria: IngredientCriteria) -> list[Ingredient]:
        """Filtered, sorted, windowed listing."""
        pass

    @abstractmethod
    async def count(self, criteria: IngredientCriteria) -> int:
        """Number of ingredients matching the filters of ``criteria``."""
        pass
