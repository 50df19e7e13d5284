"""Ingredient commands."""

from .create_ingredient import CreateIngredientCommand
from .delete_ingredient import DeleteIngredientCommand
from .update_ingredient import UpdateIngredientCommand

__all__ = [
    "CreateIngredientCommand",
    "UpdateIngredientCommand",
    "DeleteIngredientCommand",
]
