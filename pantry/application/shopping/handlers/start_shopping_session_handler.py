"""StartShoppingSession Handler - почати shopping trip."""

import logging
from typing import Optional

from pantry.application.shared import Clock, CommandHandler, utc_now
from pantry.application.shopping.commands import StartShoppingSessionCommand
from pantry.application.shopping.dtos import ShoppingSessionDTO
from pantry.domain.shared import ValidationError
from pantry.domain.shopping.entities import ShoppingSession
from pantry.domain.shopping.exceptions import ActiveSessionExistsError
from pantry.domain.shopping.repositories import ShoppingSessionRepository
from pantry.domain.shopping.value_objects import ShoppingLocation
from pantry.infrastructure.messaging import EventBus

logger = logging.getLogger(__name__)


class StartShoppingSessionHandler(CommandHandler[StartShoppingSessionCommand, ShoppingSessionDTO]):
    """Handler для StartShoppingSession command.

    Flow:
    1. Перевірити що ACTIVE session немає → ActiveSessionExistsError
    2. ShoppingSession.start()
    3. Save (одна write, transaction не потрібна)
    4. Publish ShoppingSessionStarted

    Note:
        Check-then-create без lock: два паралельні старти одного користувача
        можуть обидва пройти. Це відома поведінка, не гарантія.
    """

    def __init__(
        self,
        shopping_session_repository: ShoppingSessionRepository,
        event_bus: Optional[EventBus] = None,
        clock: Clock = utc_now,
    ) -> None:
        """Initialize handler."""
        self.shopping_session_repository = shopping_session_repository
        self.event_bus = event_bus
        self.clock = clock

    async def execute(self, command: StartShoppingSessionCommand, owner_id: str) -> ShoppingSessionDTO:
        """Start new session.

        Raises:
            ActiveSessionExistsError: Користувач вже має ACTIVE session.
            ValidationError: Погані координати.
        """
        location = self._build_location(command)

        active = await self.shopping_session_repository.find_active_by_user_id(owner_id)
        if active is not None:
            logger.warning(
                "shopping_session.start_rejected",
                extra={"user_id": owner_id, "active_session_id": str(active.id)},
            )
            raise ActiveSessionExistsError(
                user_id=owner_id,
                active_session_id=str(active.id),
            )

        now = self.clock()
        session = ShoppingSession.start(
            user_id=owner_id,
            device_type=command.device_type,
            location=location,
            now=now,
        )
        await self.shopping_session_repository.save(session)

        logger.info(
            "shopping_session.started",
            extra={
                "user_id": owner_id,
                "session_id": str(session.id),
                "device_type": command.device_type.value if command.device_type else None,
            },
        )

        if self.event_bus is not None:
            await self.event_bus.publish_from(session)
        else:
            session.clear_domain_events()

        return ShoppingSessionDTO.from_entity(session, now)

    @staticmethod
    def _build_location(command: StartShoppingSessionCommand) -> Optional[ShoppingLocation]:
        if command.latitude is None and command.longitude is None:
            return None
        if command.latitude is None or command.longitude is None:
            raise ValidationError(
                "Latitude and longitude must be provided together",
                latitude=command.latitude,
                longitude=command.longitude,
            )
        return ShoppingLocation(command.latitude, command.longitude, command.location_name)
