"""Exceptions для Ingredients bounded context."""

from typing import Any

from pantry.domain.shared import AggregateNotFound, BusinessRuleViolation, DuplicateError


class IngredientNotFoundError(AggregateNotFound):
    """Raised коли ingredient не знайдений для (id, owner).

    Soft-deleted та чужі ingredients теж дають цю помилку.
    """

    default_code = "INGREDIENT_NOT_FOUND"

    def __init__(self, message: str = "Ingredient not found", **context: Any) -> None:
        super().__init__(message, **context)


class CategoryNotFoundError(AggregateNotFound):
    """Raised коли category master data не існує."""

    default_code = "CATEGORY_NOT_FOUND"

    def __init__(self, message: str = "Category not found", **context: Any) -> None:
        super().__init__(message, **context)


class UnitNotFoundError(AggregateNotFound):
    """Raised коли unit master data не існує."""

    default_code = "UNIT_NOT_FOUND"

    def __init__(self, message: str = "Unit not found", **context: Any) -> None:
        super().__init__(message, **context)


class DuplicateIngredientError(DuplicateError):
    """Raised коли (name, expiry info, storage location) вже зайняті іншим ingredient."""

    default_code = "DUPLICATE_INGREDIENT"

    def __init__(
        self, message: str = "An identical ingredient already exists", **context: Any
    ) -> None:
        super().__init__(message, **context)


class IngredientDeletedError(BusinessRuleViolation):
    """Raised при спробі змінити soft-deleted ingredient."""

    default_code = "INGREDIENT_DELETED"


class InsufficientStockError(BusinessRuleViolation):
    """Raised коли consume amount більший за поточну кількість."""

    default_code = "INSUFFICIENT_STOCK"
