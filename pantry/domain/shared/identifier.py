"""Prefixed identifier value object.

Всі aggregate IDs в pantry - opaque strings з type prefix (``ing_``, ``ses_``, ...).
Prefix робить ID self-describing у логах і не дає переплутати ID різних aggregates.
"""

import re
from dataclasses import dataclass
from typing import ClassVar, TypeVar
from uuid import uuid4

from .value_object import ValueObject, validate_value_object

TId = TypeVar("TId", bound="PrefixedId")


@dataclass(frozen=True)
class PrefixedId(ValueObject):
    """Base class для prefixed identifiers.

    Subclass задає ``prefix``; valid ID = prefix + одна або більше ASCII letters/digits.

    Example:
        >>> class IngredientId(PrefixedId):
        ...     prefix = "ing_"
        >>> IngredientId.generate()  # IngredientId("ing_3f2a...")
        >>> IngredientId("ses_123")  # ValidationError (wrong prefix)
    """

    value: str

    prefix: ClassVar[str] = ""

    def __post_init__(self) -> None:
        name = type(self).__name__
        validate_value_object(
            isinstance(self.value, str) and self.value != "",
            f"{name} cannot be empty",
        )
        validate_value_object(
            re.fullmatch(rf"{re.escape(self.prefix)}[A-Za-z0-9]+", self.value) is not None,
            f"{name} must start with '{self.prefix}' followed by letters or digits",
            value=self.value,
        )

    @classmethod
    def generate(cls: type[TId]) -> TId:
        """Generate new ID (prefix + 32 hex chars)."""
        return cls(f"{cls.prefix}{uuid4().hex}")

    def __str__(self) -> str:
        return self.value
