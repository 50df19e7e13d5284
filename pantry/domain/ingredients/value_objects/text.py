"""Length-bounded text value objects (name, memo)."""

from dataclasses import dataclass
from typing import Optional

from pantry.domain.shared import ValueObject, validate_value_object

INGREDIENT_NAME_MAX_LENGTH = 50
MEMO_MAX_LENGTH = 200


@dataclass(frozen=True)
class IngredientName(ValueObject):
    """Ingredient name, stripped, 1-50 chars.

    Example:
        >>> IngredientName("  Tomato ").value  # "Tomato"
        >>> IngredientName("   ")  # ValidationError
    """

    value: str

    def __post_init__(self) -> None:
        validate_value_object(isinstance(self.value, str), "Ingredient name must be a string")
        stripped = self.value.strip()
        validate_value_object(stripped != "", "Ingredient name is required")
        validate_value_object(
            len(stripped) <= INGREDIENT_NAME_MAX_LENGTH,
            f"Ingredient name must be at most {INGREDIENT_NAME_MAX_LENGTH} characters",
            length=len(stripped),
        )
        object.__setattr__(self, "value", stripped)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Memo(ValueObject):
    """Free-text note on an ingredient (<= 200 chars)."""

    value: str

    def __post_init__(self) -> None:
        validate_value_object(isinstance(self.value, str), "Memo must be a string")
        validate_value_object(
            len(self.value) <= MEMO_MAX_LENGTH,
            f"Memo must be at most {MEMO_MAX_LENGTH} characters",
            length=len(self.value),
        )

    @classmethod
    def parse(cls, raw: Optional[str]) -> Optional["Memo"]:
        """None або blank string → None (no memo)."""
        if raw is None or raw.strip() == "":
            return None
        return cls(raw)

    def __str__(self) -> str:
        return self.value
