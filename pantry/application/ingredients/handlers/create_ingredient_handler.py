"""CreateIngredient Handler - додати ingredient в pantry."""

import logging
from typing import Optional

from pantry.application.ingredients.commands import CreateIngredientCommand
from pantry.application.ingredients.dtos import IngredientDTO
from pantry.application.shared import Clock, CommandHandler, RepositoryFactory, TransactionManager, utc_now
from pantry.domain.ingredients.entities import Category, Ingredient, Unit
from pantry.domain.ingredients.exceptions import (
    CategoryNotFoundError,
    DuplicateIngredientError,
    UnitNotFoundError,
)
from pantry.domain.ingredients.value_objects import (
    CategoryId,
    ExpiryInfo,
    IngredientName,
    IngredientStock,
    Memo,
    Price,
    StorageLocation,
    UnitId,
)
from pantry.infrastructure.messaging import EventBus

logger = logging.getLogger(__name__)


class CreateIngredientHandler(CommandHandler[CreateIngredientCommand, IngredientDTO]):
    """Handler для CreateIngredient command.

    Flow:
    1. Build value objects (ValidationError на поганий input)
    2. Check category та unit існують
    3. Duplicate detection по (name, expiry info, storage location)
    4. Create + save Ingredient в transaction
    5. Publish IngredientCreated після commit

    Example:
        >>> handler = CreateIngredientHandler(transaction_manager, repository_factory, event_bus)
        >>> dto = await handler.execute(command, owner_id="user-1")
        >>> dto.stock_status  # "IN_STOCK"
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

    async def execute(self, command: CreateIngredientCommand, owner_id: str) -> IngredientDTO:
        """Create ingredient.

        Args:
            command: CreateIngredient command.
            owner_id: Authenticated user ID.

        Returns:
            IngredientDTO нового ingredient.

        Raises:
            ValidationError: Поганий input.
            CategoryNotFoundError: Category не існує.
            UnitNotFoundError: Unit не існує.
            DuplicateIngredientError: Такий ingredient вже є.
        """
        logger.info(
            "create_ingredient.started",
            extra={"user_id": owner_id, "category_id": command.category_id},
        )

        name = IngredientName(command.name)
        category_id = CategoryId(command.category_id)
        unit_id = UnitId(command.unit_id)
        storage_location = StorageLocation(command.storage_type, command.storage_detail)
        stock = IngredientStock(
            quantity=command.quantity,
            unit_id=unit_id,
            storage_location=storage_location,
            threshold=command.threshold,
        )
        expiry_info = ExpiryInfo.from_dates(command.best_before_date, command.use_by_date)
        memo = Memo.parse(command.memo)
        price = Price(command.price) if command.price is not None else None
        now = self.clock()

        async def create(tx) -> tuple[Ingredient, Category, Unit]:
            categories = self.repository_factory.create_category_repository(tx)
            units = self.repository_factory.create_unit_repository(tx)
            ingredients = self.repository_factory.create_ingredient_repository(tx)

            category = await categories.find_by_id(category_id)
            if category is None:
                raise CategoryNotFoundError(category_id=str(category_id))

            unit = await units.find_by_id(unit_id)
            if unit is None:
                raise UnitNotFoundError(unit_id=str(unit_id))

            duplicates = await ingredients.find_duplicates(
                owner_id, name.value, expiry_info, storage_location
            )
            if duplicates:
                raise DuplicateIngredientError(
                    name=name.value,
                    existing_ingredient_id=str(duplicates[0].id),
                )

            ingredient = Ingredient.create(
                user_id=owner_id,
                name=name,
                category_id=category_id,
                stock=stock,
                purchase_date=command.purchase_date,
                memo=memo,
                price=price,
                expiry_info=expiry_info,
                now=now,
            )
            await ingredients.save(ingredient)
            return ingredient, category, unit

        ingredient, category, unit = await self.transaction_manager.run(create)

        logger.info(
            "create_ingredient.completed",
            extra={"user_id": owner_id, "ingredient_id": str(ingredient.id)},
        )

        if self.event_bus is not None:
            await self.event_bus.publish_from(ingredient)
        else:
            ingredient.clear_domain_events()

        return IngredientDTO.from_entity(ingredient, now.date(), category, unit)
