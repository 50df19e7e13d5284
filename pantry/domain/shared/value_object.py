"""Base ValueObject class for domain model.

ValueObject - immutable об'єкт, який порівнюється за значенням атрибутів,
а не за ідентичністю. Два VO з однаковими атрибутами - це один і той же об'єкт.
"""

from abc import ABC
from dataclasses import dataclass
from typing import Any

from .exceptions import ValidationError


@dataclass(frozen=True, eq=True)
class ValueObject(ABC):
    """Base class for all domain value objects.

    ValueObject характеристики:
    - **Immutable**: Не можна змінити після створення (frozen=True)
    - **Equality by value**: Порівнюється за значенням атрибутів, не за ID
    - **No identity**: Не має власного ID
    - **Replaceable**: Якщо треба змінити, створюємо новий VO

    Example:
        >>> price1 = Price(Decimal("1.50"))
        >>> price2 = Price(Decimal("1.50"))
        >>> price1 == price2  # True (same value)

    Why frozen?
        Immutability гарантує, що VO не зміниться неочікувано:
        >>> price = Price(Decimal("1.50"))
        >>> price.amount = Decimal("2")  # FrozenInstanceError!
    """

    def __post_init__(self) -> None:
        """Hook для валідації після ініціалізації.

        Override цей метод для додавання бізнес-правил валідації.

        Raises:
            ValidationError: If validation fails.
        """
        pass


def validate_value_object(condition: bool, message: str, **context: Any) -> None:
    """Helper для валідації в value objects.

    Args:
        condition: Умова яка має бути True.
        message: Повідомлення помилки якщо condition False.
        **context: Offending values, attached to the exception.

    Raises:
        ValidationError: If condition is False.

    Example:
        >>> validate_value_object(amount >= 0, "Price must be non-negative", amount=str(amount))
    """
    if not condition:
        raise ValidationError(message, **context)
