"""CheckIngredient Handler - check ingredient під час shopping."""

import logging
from typing import Optional

from pantry.application.shared import Clock, CommandHandler, RepositoryFactory, TransactionManager, utc_now
from pantry.application.shopping.commands import CheckIngredientCommand
from pantry.application.shopping.dtos import CheckedItemDTO
from pantry.config import Settings, get_settings
from pantry.domain.ingredients.exceptions import IngredientNotFoundError
from pantry.domain.ingredients.value_objects import IngredientId
from pantry.domain.shopping.entities import ShoppingSession
from pantry.domain.shopping.exceptions import IngredientAccessDeniedError
from pantry.domain.shopping.value_objects import CheckedItem, RecheckPolicy, ShoppingSessionId
from pantry.infrastructure.messaging import EventBus

from .session_access import load_owned_session

logger = logging.getLogger(__name__)


class CheckIngredientHandler(CommandHandler[CheckIngredientCommand, CheckedItemDTO]):
    """Handler для CheckIngredient command.

    Flow:
    1. Load session → NotFound / SessionAccessDeniedError
    2. Session має бути ACTIVE → SessionNotActiveError (до lookup ingredient)
    3. Load ingredient (scoped by owner) → IngredientNotFoundError / IngredientAccessDeniedError
    4. session.check_item() з RecheckPolicy (REPLACE за замовчуванням)
    5. Update session в transaction
    6. Publish ItemChecked після commit

    Example:
        >>> handler = CheckIngredientHandler(transaction_manager, repository_factory, event_bus)
        >>> item = await handler.execute(
        ...     CheckIngredientCommand(session_id="ses_abc", ingredient_id="ing_xyz"),
        ...     owner_id="user-1",
        ... )
        >>> item.stock_status  # "LOW_STOCK"
    """

    def __init__(
        self,
        transaction_manager: TransactionManager,
        repository_factory: RepositoryFactory,
        event_bus: Optional[EventBus] = None,
        settings: Optional[Settings] = None,
        clock: Clock = utc_now,
        recheck_policy: Optional[RecheckPolicy] = None,
    ) -> None:
        """Initialize handler.

        Args:
            recheck_policy: Override; за замовчуванням ``settings.recheck_policy``.
        """
        self.transaction_manager = transaction_manager
        self.repository_factory = repository_factory
        self.event_bus = event_bus
        self.clock = clock
        self.recheck_policy = recheck_policy or RecheckPolicy((settings or get_settings()).recheck_policy)

    async def execute(self, command: CheckIngredientCommand, owner_id: str) -> CheckedItemDTO:
        """Check ingredient.

        Raises:
            ShoppingSessionNotFoundError: Session не існує.
            SessionAccessDeniedError: Session чужа.
            IngredientNotFoundError: Ingredient відсутній або видалений.
            IngredientAccessDeniedError: Ingredient чужий.
            SessionNotActiveError: Session вже COMPLETED / ABANDONED.
            ItemAlreadyCheckedError: Тільки під RecheckPolicy.REJECT.
        """
        session_id = ShoppingSessionId(command.session_id)
        ingredient_id = IngredientId(command.ingredient_id)
        now = self.clock()

        async def check(tx) -> tuple[ShoppingSession, CheckedItem]:
            sessions = self.repository_factory.create_shopping_session_repository(tx)
            ingredients = self.repository_factory.create_ingredient_repository(tx)

            session = await load_owned_session(sessions, session_id, owner_id)
            session.ensure_active("check items in")

            ingredient = await ingredients.find_by_id(owner_id, ingredient_id)
            if ingredient is None:
                raise IngredientNotFoundError(ingredient_id=str(ingredient_id))
            if not ingredient.is_owned_by(owner_id):
                raise IngredientAccessDeniedError(ingredient_id=str(ingredient_id))

            item = session.check_item(ingredient, now=now, policy=self.recheck_policy)
            await sessions.update(session)
            return session, item

        session, item = await self.transaction_manager.run(check)

        logger.info(
            "shopping_session.item_checked",
            extra={
                "user_id": owner_id,
                "session_id": str(session_id),
                "ingredient_id": str(ingredient_id),
                "stock_status": item.stock_status.value,
                "expiry_status": item.expiry_status.value,
            },
        )

        if self.event_bus is not None:
            await self.event_bus.publish_from(session)
        else:
            session.clear_domain_events()

        return CheckedItemDTO.from_value_object(item)
