"""Value Objects для Shopping bounded context."""

from .checked_item import CheckedItem
from .enums import DeviceType, RecheckPolicy, SessionStatus
from .identifiers import ShoppingSessionId
from .shopping_location import ShoppingLocation

__all__ = [
    "ShoppingSessionId",
    "SessionStatus",
    "DeviceType",
    "RecheckPolicy",
    "ShoppingLocation",
    "CheckedItem",
]
