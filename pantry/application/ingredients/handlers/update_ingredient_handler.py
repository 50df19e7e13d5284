"""UpdateIngredient Handler - partial update ingredient."""

import logging
from typing import Any, Optional

from pantry.application.ingredients.commands import UpdateIngredientCommand
from pantry.application.ingredients.dtos import IngredientDTO
from pantry.application.shared import (
    Clock,
    CommandHandler,
    RepositoryFactory,
    TransactionManager,
    is_set,
    utc_now,
)
from pantry.domain.ingredients.entities import Category, Ingredient, Unit
from pantry.domain.ingredients.exceptions import (
    CategoryNotFoundError,
    DuplicateIngredientError,
    IngredientDeletedError,
    IngredientNotFoundError,
    UnitNotFoundError,
)
from pantry.domain.ingredients.value_objects import (
    CategoryId,
    ExpiryInfo,
    IngredientId,
    IngredientName,
    IngredientStock,
    Memo,
    Price,
    StorageLocation,
    UnitId,
)
from pantry.domain.shared import ValidationError
from pantry.infrastructure.messaging import EventBus

logger = logging.getLogger(__name__)


def _required(value: Any, field_name: str) -> Any:
    if value is None:
        raise ValidationError(f"{field_name} cannot be cleared", field=field_name)
    return value


class UpdateIngredientHandler(CommandHandler[UpdateIngredientCommand, IngredientDTO]):
    """Handler для UpdateIngredient command.

    Flow:
    1. Load ingredient по (id, owner) → IngredientNotFoundError
    2. Reject soft-deleted → IngredientDeletedError
    3. Re-validate category / unit тільки якщо змінились
    4. Duplicate detection тільки якщо name / expiry / storage змінились
    5. Partial merge (UNSET = keep, None = clear)
    6. Save в transaction, publish events після commit
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

    async def execute(self, command: UpdateIngredientCommand, owner_id: str) -> IngredientDTO:
        """Apply partial update.

        Raises:
            IngredientNotFoundError: Відсутній, видалений або чужий.
            IngredientDeletedError: Soft-deleted (якщо repository його повернув).
            CategoryNotFoundError / UnitNotFoundError: Нова master data не існує.
            DuplicateIngredientError: Інший ingredient вже має такий tuple.
            ValidationError: Поганий input або None для non-nullable поля.
        """
        ingredient_id = IngredientId(command.ingredient_id)
        now = self.clock()

        logger.info(
            "update_ingredient.started",
            extra={"user_id": owner_id, "ingredient_id": str(ingredient_id)},
        )

        async def update(tx) -> tuple[Ingredient, Optional[Category], Optional[Unit]]:
            ingredients = self.repository_factory.create_ingredient_repository(tx)
            categories = self.repository_factory.create_category_repository(tx)
            units = self.repository_factory.create_unit_repository(tx)

            ingredient = await ingredients.find_by_id(owner_id, ingredient_id)
            if ingredient is None:
                raise IngredientNotFoundError(ingredient_id=str(ingredient_id))
            if ingredient.is_deleted:
                raise IngredientDeletedError(
                    "Cannot update a deleted ingredient",
                    ingredient_id=str(ingredient_id),
                )

            # Master data
            category_id = ingredient.category_id
            if is_set(command.category_id):
                category_id = CategoryId(_required(command.category_id, "category_id"))
                if category_id != ingredient.category_id and await categories.find_by_id(category_id) is None:
                    raise CategoryNotFoundError(category_id=str(category_id))

            unit_id = ingredient.stock.unit_id
            if is_set(command.unit_id):
                unit_id = UnitId(_required(command.unit_id, "unit_id"))
                if unit_id != ingredient.stock.unit_id and await units.find_by_id(unit_id) is None:
                    raise UnitNotFoundError(unit_id=str(unit_id))

            # Merge duplicate-key fields
            name = ingredient.name
            if is_set(command.name):
                name = IngredientName(_required(command.name, "name"))

            expiry_info = self._merge_expiry(ingredient, command)
            storage_location = self._merge_storage(ingredient, command)

            if (name.value, expiry_info, storage_location) != ingredient.duplicate_key:
                duplicates = await ingredients.find_duplicates(
                    owner_id, name.value, expiry_info, storage_location
                )
                if any(d.id != ingredient.id for d in duplicates):
                    raise DuplicateIngredientError(
                        name=name.value,
                        ingredient_id=str(ingredient.id),
                    )

            # Apply
            ingredient.update_name(name, now)
            ingredient.update_category(category_id, now)
            ingredient.update_expiry_info(expiry_info, now)
            if is_set(command.memo):
                ingredient.update_memo(Memo.parse(command.memo), now)
            if is_set(command.price):
                ingredient.update_price(
                    Price(command.price) if command.price is not None else None, now
                )
            if is_set(command.purchase_date):
                ingredient.update_purchase_date(
                    _required(command.purchase_date, "purchase_date"), now
                )

            stock = ingredient.stock
            ingredient.update_stock(
                IngredientStock(
                    quantity=(
                        _required(command.quantity, "quantity")
                        if is_set(command.quantity)
                        else stock.quantity
                    ),
                    unit_id=unit_id,
                    storage_location=storage_location,
                    threshold=command.threshold if is_set(command.threshold) else stock.threshold,
                ),
                now,
            )

            if ingredient.has_domain_events:
                await ingredients.update(ingredient)

            return (
                ingredient,
                await categories.find_by_id(ingredient.category_id),
                await units.find_by_id(ingredient.stock.unit_id),
            )

        ingredient, category, unit = await self.transaction_manager.run(update)

        logger.info(
            "update_ingredient.completed",
            extra={
                "user_id": owner_id,
                "ingredient_id": str(ingredient.id),
                "events_count": len(ingredient.get_domain_events()),
            },
        )

        if self.event_bus is not None:
            await self.event_bus.publish_from(ingredient)
        else:
            ingredient.clear_domain_events()

        return IngredientDTO.from_entity(ingredient, now.date(), category, unit)

    @staticmethod
    def _merge_expiry(
        ingredient: Ingredient, command: UpdateIngredientCommand
    ) -> Optional[ExpiryInfo]:
        current = ingredient.expiry_info
        best_before = current.best_before_date if current else None
        use_by = current.use_by_date if current else None

        if is_set(command.best_before_date):
            best_before = command.best_before_date
        if is_set(command.use_by_date):
            use_by = command.use_by_date

        return ExpiryInfo.from_dates(best_before, use_by)

    @staticmethod
    def _merge_storage(
        ingredient: Ingredient, command: UpdateIngredientCommand
    ) -> StorageLocation:
        current = ingredient.stock.storage_location
        storage_type = current.type
        detail = current.detail

        if is_set(command.storage_type):
            storage_type = _required(command.storage_type, "storage_type")
        if is_set(command.storage_detail):
            detail = command.storage_detail

        return StorageLocation(storage_type, detail)
