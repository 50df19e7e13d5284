"""Identifiers для Ingredients bounded context."""

from pantry.domain.shared import PrefixedId


class IngredientId(PrefixedId):
    """Ingredient aggregate ID (``ing_...``)."""

    prefix = "ing_"


class CategoryId(PrefixedId):
    """Category master data ID (``cat_...``)."""

    prefix = "cat_"


class UnitId(PrefixedId):
    """Unit master data ID (``unt_...``)."""

    prefix = "unt_"
