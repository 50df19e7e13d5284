"""Shopping commands (write operations)."""

from .abandon_shopping_session import AbandonShoppingSessionCommand
from .check_ingredient import CheckIngredientCommand
from .complete_shopping_session import CompleteShoppingSessionCommand
from .start_shopping_session import StartShoppingSessionCommand

__all__ = [
    "StartShoppingSessionCommand",
    "CheckIngredientCommand",
    "CompleteShoppingSessionCommand",
    "AbandonShoppingSessionCommand",
]
