"""Exceptions для Shopping bounded context."""

from typing import Any

from pantry.domain.shared import AggregateNotFound, BusinessRuleViolation


class ShoppingSessionNotFoundError(AggregateNotFound):
    """Raised коли session не знайдена."""

    default_code = "SHOPPING_SESSION_NOT_FOUND"

    def __init__(self, message: str = "Shopping session not found", **context: Any) -> None:
        super().__init__(message, **context)


class ActiveSessionExistsError(BusinessRuleViolation):
    """Raised при старті session коли у користувача вже є ACTIVE session."""

    default_code = "ACTIVE_SESSION_EXISTS"

    def __init__(
        self, message: str = "An active shopping session already exists", **context: Any
    ) -> None:
        super().__init__(message, **context)


class SessionNotActiveError(BusinessRuleViolation):
    """Raised при операції над COMPLETED / ABANDONED session."""

    default_code = "SESSION_NOT_ACTIVE"


class SessionAlreadyCompletedError(SessionNotActiveError):
    """Raised при повторному complete() вже завершеної session."""

    default_code = "SESSION_ALREADY_COMPLETED"

    def __init__(
        self, message: str = "Shopping session is already completed", **context: Any
    ) -> None:
        super().__init__(message, **context)


class ItemAlreadyCheckedError(BusinessRuleViolation):
    """Raised під RecheckPolicy.REJECT при повторному check того ж ingredient."""

    default_code = "ITEM_ALREADY_CHECKED"

    def __init__(
        self, message: str = "Ingredient is already checked in this session", **context: Any
    ) -> None:
        super().__init__(message, **context)


class SessionAccessDeniedError(BusinessRuleViolation):
    """Raised коли session належить іншому користувачу."""

    default_code = "SESSION_ACCESS_DENIED"

    def __init__(
        self,
        message: str = "You do not have access to this shopping session",
        **context: Any,
    ) -> None:
        super().__init__(message, **context)


class IngredientAccessDeniedError(BusinessRuleViolation):
    """Raised коли ingredient що перевіряється належить іншому користувачу."""

    default_code = "INGREDIENT_ACCESS_DENIED"

    def __init__(
        self,
        message: str = "You do not have access to this ingredient",
        **context: Any,
    ) -> None:
        super().__init__(message, **context)
