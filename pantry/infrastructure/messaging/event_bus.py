"""Event Bus - in-process pub/sub для domain events.

- Aggregates record events (IngredientCreated, ItemChecked, ...)
- Handlers publish them після successful commit
- Subscribers (notifications, audit, statistics) не знають про handlers
"""

import logging
from collections import defaultdict
from typing import Awaitable, Callable, Iterable, Type

from pantry.domain.shared import AggregateRoot, DomainEvent

logger = logging.getLogger(__name__)

# Event handler signature: async function that takes DomainEvent
EventHandler = Callable[[DomainEvent], Awaitable[None]]


def _handler_name(handler: EventHandler) -> str:
    return getattr(handler, "__name__", repr(handler))


class EventBus:
    """Event Bus для domain events.

    Instance створюється caller'ом і inject'иться в handlers (no global singleton).
    Subscriber failures логуються і не ламають use case.

    Example:
        >>> event_bus = EventBus()
        >>> event_bus.subscribe(StockDepleted, add_to_shopping_list)
        >>> event_bus.subscribe(ShoppingSessionCompleted, refresh_statistics)

        >>> # Handler після commit:
        >>> await event_bus.publish_from(ingredient, session)
    """

    def __init__(self) -> None:
        self._subscribers: dict[Type[DomainEvent], list[EventHandler]] = defaultdict(list)

    def subscribe(self, event_type: Type[DomainEvent], handler: EventHandler) -> None:
        """Subscribe handler to event type.

        Args:
            event_type: Type of event (e.g., ItemChecked).
            handler: Async function to call when event published.
        """
        self._subscribers[event_type].append(handler)
        logger.debug(
            "event_bus.subscription_added",
            extra={
                "event_type": event_type.__name__,
                "handler": _handler_name(handler),
            },
        )

    def unsubscribe(self, event_type: Type[DomainEvent], handler: EventHandler) -> None:
        """Unsubscribe handler from event type (no-op if not subscribed)."""
        if handler in self._subscribers.get(event_type, []):
            self._subscribers[event_type].remove(handler)
            logger.debug(
                "event_bus.subscription_removed",
                extra={
                    "event_type": event_type.__name__,
                    "handler": _handler_name(handler),
                },
            )

    async def publish(self, event: DomainEvent) -> None:
        """Publish single domain event to every subscriber of its type.

        Args:
            event: Domain event to publish.
        """
        event_type = type(event)
        handlers = list(self._subscribers.get(event_type, []))

        if not handlers:
            logger.debug(
                "event_bus.no_subscribers",
                extra={"event_type": event_type.__name__},
            )
            return

        logger.info(
            "event_bus.publishing",
            extra={
                "event_type": event_type.__name__,
                "handlers_count": len(handlers),
                "event_id": str(event.event_id),
            },
        )

        for handler in handlers:
            try:
                await handler(event)
            except Exception as e:
                # Log error but continue with other handlers
                logger.error(
                    "event_bus.handler_failed",
                    extra={
                        "event_type": event_type.__name__,
                        "handler": _handler_name(handler),
                        "error": str(e),
                    },
                    exc_info=True,
                )

    async def publish_all(self, events: Iterable[DomainEvent]) -> None:
        """Publish multiple domain events in order."""
        for event in events:
            await self.publish(event)

    async def publish_from(self, *aggregates: AggregateRoot) -> None:
        """Publish pending events of aggregates, then clear them.

        Викликати тільки після commit.
        """
        for aggregate in aggregates:
            events = aggregate.get_domain_events()
            aggregate.clear_domain_events()
            await self.publish_all(events)

    def clear_subscribers(self) -> None:
        """Clear all subscribers (useful for testing)."""
        self._subscribers.clear()

    def get_subscribers_count(self, event_type: Type[DomainEvent]) -> int:
        return len(self._subscribers.get(event_type, []))
