"""Ingredient DTOs."""

from .ingredient_dto import (
    CategoryDTO,
    CategorySummaryDTO,
    IngredientDTO,
    IngredientListDTO,
    IngredientsByCategoryDTO,
    UnitDTO,
)

__all__ = [
    "IngredientDTO",
    "IngredientListDTO",
    "IngredientsByCategoryDTO",
    "CategorySummaryDTO",
    "CategoryDTO",
    "UnitDTO",
]
