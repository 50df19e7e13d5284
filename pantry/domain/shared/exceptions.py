"""Base domain exceptions.

Domain exceptions представляють порушення бізнес-правил.
Вони частина domain layer і не залежать від infrastructure.

Кожен exception несе ``kind`` (тег) + ``code`` + structured ``context``,
тому presentation layer може зробити exhaustive ``match exc.kind`` замість
глибокої перевірки ієрархії класів:

    >>> try:
    ...     await handler.execute(command, owner_id)
    ... except DomainException as exc:
    ...     match exc.kind:
    ...         case ErrorKind.VALIDATION: status = 400
    ...         case ErrorKind.NOT_FOUND: status = 404
    ...         case ErrorKind.BUSINESS_RULE: status = 422
    ...         case ErrorKind.DUPLICATE: status = 409
"""

from enum import Enum
from typing import Any, ClassVar


class ErrorKind(str, Enum):
    """Kind of domain failure."""

    VALIDATION = "validation"
    """Malformed або out-of-range input (raised by value objects)."""

    NOT_FOUND = "not_found"
    """Aggregate відсутній для (id, owner) pair, включно з soft-deleted."""

    BUSINESS_RULE = "business_rule"
    """Існуючий aggregate не може виконати transition."""

    DUPLICATE = "duplicate"
    """Create/rename створив би другий однаковий ingredient."""


class DomainException(Exception):
    """Base exception for all domain errors.

    Domain exceptions - це business rule violations, не technical errors.

    Example:
        >>> raise BusinessRuleViolation(
        ...     "Cannot check items in a finished session",
        ...     code="SESSION_NOT_ACTIVE",
        ...     session_id="ses_abc",
        ... )
    """

    kind: ClassVar[ErrorKind] = ErrorKind.BUSINESS_RULE
    default_code: ClassVar[str] = "DOMAIN_ERROR"

    def __init__(self, message: str, *, code: str | None = None, **context: Any) -> None:
        """Initialize domain exception.

        Args:
            message: Human-readable error message.
            code: Stable machine-readable code (defaults per class).
            **context: Additional context (user_id, ingredient_id, etc).
        """
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.context = context

    def to_dict(self) -> dict[str, Any]:
        """Structured payload for the caller."""
        return {
            "kind": self.kind.value,
            "code": self.code,
            "message": self.message,
            "context": dict(self.context),
        }

    def __str__(self) -> str:
        if self.context:
            context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            return f"{self.message} ({context_str})"
        return self.message


class ValidationError(DomainException, ValueError):
    """Exception raised when a value object rejects its input.

    Також є ``ValueError``, тому код що ловить ValueError продовжує працювати.
    """

    kind = ErrorKind.VALIDATION
    default_code = "VALIDATION_ERROR"


class AggregateNotFound(DomainException):
    """Exception raised when aggregate is not found.

    Example:
        >>> ingredient = await repo.find_by_id(owner_id, ingredient_id)
        >>> if ingredient is None:
        ...     raise IngredientNotFoundError(ingredient_id=str(ingredient_id))
    """

    kind = ErrorKind.NOT_FOUND
    default_code = "NOT_FOUND"


class BusinessRuleViolation(DomainException):
    """Exception raised when business rule is violated.

    Example:
        >>> if not session.is_active:
        ...     raise BusinessRuleViolation(
        ...         "Cannot abandon a session that is not active",
        ...         session_id=str(session.id),
        ...         current_status=session.status.value,
        ...     )
    """

    kind = ErrorKind.BUSINESS_RULE
    default_code = "BUSINESS_RULE_VIOLATION"


class DuplicateError(DomainException):
    """Exception raised when an aggregate would duplicate an existing one."""

    kind = ErrorKind.DUPLICATE
    default_code = "DUPLICATE"
