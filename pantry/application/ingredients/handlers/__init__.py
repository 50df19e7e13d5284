"""Ingredient command and query handlers."""

from .create_ingredient_handler import CreateIngredientHandler
from .delete_ingredient_handler import DeleteIngredientHandler
from .ingredient_query_handlers import (
    GetCategoriesHandler,
    GetExpiringIngredientsHandler,
    GetIngredientByIdHandler,
    GetIngredientsByCategoryHandler,
    GetIngredientsHandler,
    GetUnitsHandler,
)
from .update_ingredient_handler import UpdateIngredientHandler

__all__ = [
    "CreateIngredientHandler",
    "UpdateIngredientHandler",
    "DeleteIngredientHandler",
    "GetIngredientsHandler",
    "GetIngredientByIdHandler",
    "GetIngredientsByCategoryHandler",
    "GetExpiringIngredientsHandler",
    "GetCategoriesHandler",
    "GetUnitsHandler",
]
