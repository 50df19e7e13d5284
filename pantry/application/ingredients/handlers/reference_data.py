"""Batch lookup of categories / units for DTO building."""

from typing import Iterable

from pantry.domain.ingredients.entities import Category, Ingredient, Unit
from pantry.domain.ingredients.repositories import CategoryRepository, UnitRepository


async def load_reference_data(
    category_repository: CategoryRepository,
    unit_repository: UnitRepository,
    ingredients: Iterable[Ingredient],
) -> tuple[dict[str, Category], dict[str, Unit]]:
    """Load categories and units referenced by ``ingredients``, keyed by ID string.

    Missing master data просто відсутня в dict (DTO отримає None).
    """
    ingredients = list(ingredients)
    categories: dict[str, Category] = {}
    units: dict[str, Unit] = {}

    for category_id in {i.category_id for i in ingredients}:
        category = await category_repository.find_by_id(category_id)
        if category is not None:
            categories[str(category_id)] = category

    for unit_id in {i.stock.unit_id for i in ingredients}:
        unit = await unit_repository.find_by_id(unit_id)
        if unit is not None:
            units[str(unit_id)] = unit

    return categories, units
