"""Shopping command and query handlers."""

from .abandon_shopping_session_handler import AbandonShoppingSessionHandler
from .check_ingredient_handler import CheckIngredientHandler
from .complete_shopping_session_handler import CompleteShoppingSessionHandler
from .shopping_query_handlers import (
    GetActiveShoppingSessionHandler,
    GetIngredientCheckStatisticsHandler,
    GetQuickAccessIngredientsHandler,
    GetRecentSessionsHandler,
    GetSessionHistoryHandler,
    GetShoppingStatisticsHandler,
)
from .start_shopping_session_handler import StartShoppingSessionHandler

__all__ = [
    "StartShoppingSessionHandler",
    "CheckIngredientHandler",
    "CompleteShoppingSessionHandler",
    "AbandonShoppingSessionHandler",
    "GetActiveShoppingSessionHandler",
    "GetRecentSessionsHandler",
    "GetSessionHistoryHandler",
    "GetShoppingStatisticsHandler",
    "GetQuickAccessIngredientsHandler",
    "GetIngredientCheckStatisticsHandler",
]
