"""Ingredient queries."""

from .ingredient_queries import (
    GetCategoriesQuery,
    GetExpiringIngredientsQuery,
    GetIngredientByIdQuery,
    GetIngredientsByCategoryQuery,
    GetIngredientsQuery,
    GetUnitsQuery,
)

__all__ = [
    "GetIngredientsQuery",
    "GetIngredientByIdQuery",
    "GetIngredientsByCategoryQuery",
    "GetExpiringIngredientsQuery",
    "GetCategoriesQuery",
    "GetUnitsQuery",
]
