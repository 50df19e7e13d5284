"""Ingredient queries (read-only)."""

from dataclasses import dataclass
from typing import Literal, Optional

from pantry.application.shared import Query
from pantry.domain.ingredients.repositories import ExpiryFilter, IngredientSortField, SortOrder
from pantry.domain.ingredients.value_objects import StockStatus


@dataclass(frozen=True)
class GetIngredientsQuery(Query):
    """Filtered, sorted, paged ingredient listing.

    Example:
        >>> query = GetIngredientsQuery(
        ...     search="tom",
        ...     expiry_filter=ExpiryFilter.EXPIRING,
        ...     sort_by=IngredientSortField.EXPIRY_DATE,
        ...     sort_order=SortOrder.ASC,
        ... )
    """

    search: Optional[str] = None
    category_id: Optional[str] = None
    stock_status: Optional[StockStatus] = None
    expiry_filter: ExpiryFilter = ExpiryFilter.ALL
    sort_by: IngredientSortField = IngredientSortField.CREATED_AT
    sort_order: SortOrder = SortOrder.DESC
    page: int = 1
    limit: Optional[int] = None
    """None → settings.history_page_size."""


@dataclass(frozen=True)
class GetIngredientByIdQuery(Query):
    """Single ingredient (IngredientNotFoundError якщо відсутній)."""

    ingredient_id: str


@dataclass(frozen=True)
class GetIngredientsByCategoryQuery(Query):
    """Ingredients of one category for the shopping view."""

    category_id: str
    sort_by: Literal["stock_status", "name"] = "stock_status"
    """stock_status: OUT_OF_STOCK → LOW_STOCK → IN_STOCK, потім name."""


@dataclass(frozen=True)
class GetExpiringIngredientsQuery(Query):
    """Ingredients expiring within N days (not yet expired)."""

    within_days: Optional[int] = None
    """None → settings.expiring_within_days."""


@dataclass(frozen=True)
class GetCategoriesQuery(Query):
    """All categories (master data)."""


@dataclass(frozen=True)
class GetUnitsQuery(Query):
    """All units (master data)."""
