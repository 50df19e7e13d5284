"""Ingredients domain exceptions."""

from .ingredient_exceptions import (
    CategoryNotFoundError,
    DuplicateIngredientError,
    IngredientDeletedError,
    IngredientNotFoundError,
    InsufficientStockError,
    UnitNotFoundError,
)

__all__ = [
    "IngredientNotFoundError",
    "CategoryNotFoundError",
    "UnitNotFoundError",
    "DuplicateIngredientError",
    "IngredientDeletedError",
    "InsufficientStockError",
]
