"""AggregateRoot - consistency boundary + domain event recording."""

from typing import Any, List

from .domain_event import DomainEvent
from .entity import Entity


class AggregateRoot(Entity):
    """Base class for aggregate roots in DDD.

    Ingredient та ShoppingSession - aggregate roots: всі зміни йдуть через їхні методи,
    repository зберігає і завантажує aggregate цілком, а recorded events публікує handler
    після commit.

    Example:
        >>> session = ShoppingSession.start(user_id="user-1")
        >>> session.check_item(ingredient)
        >>> session.complete()
        >>> events = session.get_domain_events()
        >>> # [ShoppingSessionStarted(...), ItemChecked(...), ShoppingSessionCompleted(...)]
    """

    def __init__(self, id: Any) -> None:
        super().__init__(id)
        self._domain_events: List[DomainEvent] = []

    def add_domain_event(self, event: DomainEvent) -> None:
        """Record event; handler публікує його після commit."""
        self._domain_events.append(event)

    def get_domain_events(self) -> List[DomainEvent]:
        """Get all pending domain events.

        Returns:
            Copy of the events recorded since the last clear.
        """
        return self._domain_events.copy()

    def clear_domain_events(self) -> None:
        """Drop recorded events (після publish або коли event bus не підключений)."""
        self._domain_events.clear()

    @property
    def has_domain_events(self) -> bool:
        """Check if aggregate has pending domain events."""
        return len(self._domain_events) > 0
