"""Shopping queries."""

from .shopping_queries import (
    GetActiveShoppingSessionQuery,
    GetIngredientCheckStatisticsQuery,
    GetQuickAccessIngredientsQuery,
    GetRecentSessionsQuery,
    GetSessionHistoryQuery,
    GetShoppingStatisticsQuery,
)

__all__ = [
    "GetActiveShoppingSessionQuery",
    "GetRecentSessionsQuery",
    "GetSessionHistoryQuery",
    "GetShoppingStatisticsQuery",
    "GetQuickAccessIngredientsQuery",
    "GetIngredientCheckStatisticsQuery",
]
