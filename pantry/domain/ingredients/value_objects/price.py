"""Price value object."""

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

from pantry.domain.shared import ValueObject, validate_value_object

_CENT = Decimal("0.01")


def _has_at_most_two_places(amount: Decimal) -> bool:
    if amount.as_tuple().exponent >= -2:
        return True
    # quantize fails beyond context precision
    try:
        return amount == amount.quantize(_CENT)
    except InvalidOperation:
        return False


@dataclass(frozen=True)
class Price(ValueObject):
    """Purchase price of an ingredient.

    Non-negative, at most 2 decimal places. Accepts Decimal, int або str;
    floats відхиляються бо binary representation губить precision.

    Example:
        >>> Price(Decimal("2.50")).amount  # Decimal("2.50")
        >>> Price("1.999")  # ValidationError (3 decimal places)
    """

    amount: Decimal

    def __post_init__(self) -> None:
        validate_value_object(
            isinstance(self.amount, (Decimal, int, str)) and not isinstance(self.amount, bool),
            "Price must be a Decimal, int or str",
            amount=repr(self.amount),
        )
        try:
            amount = Decimal(self.amount) if not isinstance(self.amount, Decimal) else self.amount
        except InvalidOperation:
            amount = Decimal("NaN")

        validate_value_object(amount.is_finite(), "Price must be a number", amount=str(self.amount))
        validate_value_object(amount >= 0, "Price must be non-negative", amount=str(amount))
        validate_value_object(
            _has_at_most_two_places(amount),
            "Price can have at most 2 decimal places",
            amount=str(amount),
        )
        object.__setattr__(self, "amount", amount)

    def __str__(self) -> str:
        return str(self.amount)
