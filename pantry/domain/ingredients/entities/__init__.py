"""Entities для Ingredients bounded context."""

from .ingredient import Ingredient
from .master_data import Category, Unit

__all__ = ["Ingredient", "Category", "Unit"]
