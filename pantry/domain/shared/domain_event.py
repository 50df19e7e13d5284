"""DomainEvent - base для events, що aggregates записують і handlers публікують."""

from abc import ABC
from dataclasses import dataclass, field
from datetime import datetime, timezone
from uuid import UUID, uuid4


@dataclass(frozen=True)
class DomainEvent(ABC):
    """Base class for all domain events.

    Event - immutable факт у минулому часі (IngredientCreated, ItemChecked) з власним
    ``event_id`` та UTC ``occurred_at``.

    Example:
        >>> @dataclass(frozen=True)
        ... class IngredientDeleted(DomainEvent):
        ...     ingredient_id: str
        ...     user_id: str

        >>> event_bus.subscribe(IngredientDeleted, audit_handler)
    """

    event_id: UUID = field(default_factory=uuid4, init=False)
    """Унікальний ID події (auto-generated)."""

    occurred_at: datetime = field(
        default_factory=lambda: datetime.now(timezone.utc), init=False
    )
    """Час коли подія сталась (auto-generated, UTC)."""

    @property
    def event_name(self) -> str:
        """Event class name (e.g., "ItemChecked")."""
        return self.__class__.__name__

    def __repr__(self) -> str:
        return f"{self.event_name}(event_id={self.event_id}, occurred_at={self.occurred_at})"
