"""AbandonShoppingSession Handler."""

import logging
from typing import Optional

from pantry.application.shared import Clock, CommandHandler, RepositoryFactory, TransactionManager, utc_now
from pantry.application.shopping.commands import AbandonShoppingSessionCommand
from pantry.application.shopping.dtos import ShoppingSessionDTO
from pantry.domain.shopping.entities import ShoppingSession
from pantry.domain.shopping.value_objects import ShoppingSessionId
from pantry.infrastructure.messaging import EventBus

from .session_access import load_owned_session

logger = logging.getLogger(__name__)


class AbandonShoppingSessionHandler(CommandHandler[AbandonShoppingSessionCommand, ShoppingSessionDTO]):
    """Handler для AbandonShoppingSession command (ACTIVE → ABANDONED)."""

    def __init__(
        self,
        transaction_manager: TransactionManager,
        repository_factory: RepositoryFactory,
        event_bus: Optional[EventBus] = None,
        clock: Clock = utc_now,
    ) -> None:
        self.transaction_manager = transaction_manager
        self.repository_factory = repository_factory
        self.event_bus = event_bus
        self.clock = clock

    async def execute(self, command: AbandonShoppingSessionCommand, owner_id: str) -> ShoppingSessionDTO:
        """Raises:
            ShoppingSessionNotFoundError, SessionAccessDeniedError, SessionNotActiveError
        """
        session_id = ShoppingSessionId(command.session_id)
        now = self.clock()

        async def abandon(tx) -> ShoppingSession:
            sessions = self.repository_factory.create_shopping_session_repository(tx)
            session = await load_owned_session(sessions, session_id, owner_id)
            session.abandon(command.reason, now)
            await sessions.update(session)
            return session

        session = await self.transaction_manager.run(abandon)

        logger.info(
            "shopping_session.abandoned",
            extra={"user_id": owner_id, "session_id": str(session_id), "reason": command.reason},
        )

        if self.event_bus is not None:
            await self.event_bus.publish_from(session)
        else:
            session.clear_domain_events()

        return ShoppingSessionDTO.from_entity(session, now)
