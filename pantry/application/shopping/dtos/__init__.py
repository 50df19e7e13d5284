"""Shopping DTOs."""

from .shopping_session_dto import (
    CheckedItemDTO,
    SessionHistoryDTO,
    ShoppingLocationDTO,
    ShoppingSessionDTO,
)
from .statistics_dto import (
    IngredientCheckStatisticsDTO,
    MonthlyCountDTO,
    QuickAccessIngredientDTO,
    ShoppingStatisticsDTO,
    StockStatusBreakdownDTO,
    TopCheckedIngredientDTO,
)

__all__ = [
    "ShoppingSessionDTO",
    "ShoppingLocationDTO",
    "CheckedItemDTO",
    "SessionHistoryDTO",
    "ShoppingStatisticsDTO",
    "TopCheckedIngredientDTO",
    "MonthlyCountDTO",
    "QuickAccessIngredientDTO",
    "IngredientCheckStatisticsDTO",
    "StockStatusBreakdownDTO",
]
