"""CompleteShoppingSession Handler."""

import logging
from typing import Optional

from pantry.application.shared import Clock, CommandHandler, RepositoryFactory, TransactionManager, utc_now
from pantry.application.shopping.commands import CompleteShoppingSessionCommand
from pantry.application.shopping.dtos import ShoppingSessionDTO
from pantry.domain.shopping.entities import ShoppingSession
from pantry.domain.shopping.value_objects import ShoppingSessionId
from pantry.infrastructure.messaging import EventBus

from .session_access import load_owned_session

logger = logging.getLogger(__name__)


class CompleteShoppingSessionHandler(CommandHandler[CompleteShoppingSessionCommand, ShoppingSessionDTO]):
    """Handler для CompleteShoppingSession command.

    Flow:
    1. Load session + ownership check
    2. session.complete() (SessionAlreadyCompletedError / SessionNotActiveError)
    3. Update в transaction
    4. Publish ShoppingSessionCompleted
    """

    def __init__(
        self,
        transaction_manager: TransactionManager,
        repository_factory: RepositoryFactory,
        event_bus: Optional[EventBus] = None,
        clock: Clock = utc_now,
    ) -> None:
        """Initialize handler."""
        self.transaction_manager = transaction_manager
        self.repository_factory = repository_factory
        self.event_bus = event_bus
        self.clock = clock

    async def execute(self, command: CompleteShoppingSessionCommand, owner_id: str) -> ShoppingSessionDTO:
        session_id = ShoppingSessionId(command.session_id)
        now = self.clock()

        async def complete(tx) -> ShoppingSession:
            sessions = self.repository_factory.create_shopping_session_repository(tx)
            session = await load_owned_session(sessions, session_id, owner_id)
            session.complete(now)
            await sessions.update(session)
            return session

        session = await self.transaction_manager.run(complete)

        logger.info(
            "shopping_session.completed",
            extra={
                "user_id": owner_id,
                "session_id": str(session_id),
                "duration_seconds": session.get_duration_seconds(),
                "checked_items_count": session.checked_items_count,
            },
        )

        if self.event_bus is not None:
            await self.event_bus.publish_from(session)
        else:
            session.clear_domain_events()

        return ShoppingSessionDTO.from_entity(session, now)
