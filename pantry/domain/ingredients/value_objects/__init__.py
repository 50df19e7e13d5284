"""Value Objects для Ingredients bounded context."""

from .enums import ExpiryStatus, StockStatus, StorageType, UnitType
from .expiry_info import ExpiryInfo
from .identifiers import CategoryId, IngredientId, UnitId
from .ingredient_stock import IngredientStock
from .price import Price
from .storage_location import StorageLocation
from .text import IngredientName, Memo

__all__ = [
    # Identifiers
    "IngredientId",
    "CategoryId",
    "UnitId",
    # Enums
    "StockStatus",
    "ExpiryStatus",
    "StorageType",
    "UnitType",
    # Value objects
    "IngredientName",
    "Memo",
    "Price",
    "StorageLocation",
    "IngredientStock",
    "ExpiryInfo",
]
