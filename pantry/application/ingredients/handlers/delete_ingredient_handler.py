"""DeleteIngredient Handler - soft delete ingredient."""

import logging
from typing import Optional

from pantry.application.ingredients.commands import DeleteIngredientCommand
from pantry.application.shared import Clock, CommandHandler, RepositoryFactory, TransactionManager, utc_now
from pantry.domain.ingredients.entities import Ingredient
from pantry.domain.ingredients.exceptions import IngredientNotFoundError
from pantry.domain.ingredients.value_objects import IngredientId
from pantry.infrastructure.messaging import EventBus

logger = logging.getLogger(__name__)


class DeleteIngredientHandler(CommandHandler[DeleteIngredientCommand, None]):
    """Handler для DeleteIngredient command.

    Flow:
    1. Load ingredient по (id, owner) через transaction-scoped repository
    2. ingredient.delete() (stamp deleted_at)
    3. Update в тій самій transaction
    4. Publish IngredientDeleted після commit
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

    async def execute(self, command: DeleteIngredientCommand, owner_id: str) -> None:
        """Soft delete ingredient.

        Raises:
            IngredientNotFoundError: Відсутній, вже видалений або чужий.
        """
        ingredient_id = IngredientId(command.ingredient_id)
        now = self.clock()

        async def delete(tx) -> Ingredient:
            ingredients = self.repository_factory.create_ingredient_repository(tx)

            ingredient = await ingredients.find_by_id(owner_id, ingredient_id)
            if ingredient is None or ingredient.is_deleted:
                raise IngredientNotFoundError(ingredient_id=str(ingredient_id))

            ingredient.delete(now)
            await ingredients.update(ingredient)
            return ingredient

        ingredient = await self.transaction_manager.run(delete)

        logger.info(
            "delete_ingredient.completed",
            extra={"user_id": owner_id, "ingredient_id": str(ingredient_id)},
        )

        if self.event_bus is not None:
            await self.event_bus.publish_from(ingredient)
        else:
            ingredient.clear_domain_events()
