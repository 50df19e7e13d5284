"""Domain Events для Ingredients bounded context."""

from .ingredient_events import (
    IngredientCreated,
    IngredientDeleted,
    IngredientUpdated,
    StockConsumed,
    StockDepleted,
    StockLevelLow,
    StockReplenished,
)

__all__ = [
    "IngredientCreated",
    "IngredientUpdated",
    "IngredientDeleted",
    "StockLevelLow",
    "StockDepleted",
    "StockReplenished",
    "StockConsumed",
]
