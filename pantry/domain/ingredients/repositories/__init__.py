"""Repository ports для Ingredients bounded context."""

from .ingredient_repository import (
    ExpiryFilter,
    IngredientCriteria,
    IngredientRepository,
    IngredientSortField,
    SortOrder,
)
from .master_data_repository import CategoryRepository, UnitRepository

__all__ = [
    "IngredientRepository",
    "IngredientCriteria",
    "ExpiryFilter",
    "IngredientSortField",
    "SortOrder",
    "CategoryRepository",
    "UnitRepository",
]
