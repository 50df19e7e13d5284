"""Mappers - converts between domain aggregates and storage records."""

from pantry.domain.ingredients.entities import Ingredient
from pantry.domain.ingredients.value_objects import (
    CategoryId,
    ExpiryInfo,
    ExpiryStatus,
    IngredientId,
    IngredientName,
    IngredientStock,
    Memo,
    Price,
    StockStatus,
    StorageLocation,
    StorageType,
    UnitId,
)
from pantry.domain.shopping.entities import ShoppingSession
from pantry.domain.shopping.value_objects import (
    CheckedItem,
    DeviceType,
    SessionStatus,
    ShoppingLocation,
    ShoppingSessionId,
)

from .records import CheckedItemRecord, IngredientRecord, ShoppingSessionRecord


class IngredientMapper:
    """Mapper для Ingredient entity ↔ IngredientRecord.

    Example:
        >>> mapper = IngredientMapper()
        >>> record = mapper.to_record(ingredient)  # Domain → storage
        >>> ingredient_back = mapper.to_entity(record)  # storage → Domain
    """

    def to_entity(self, record: IngredientRecord) -> Ingredient:
        ingredient = Ingredient(
            id=IngredientId(record.id),
            user_id=record.user_id,
            name=IngredientName(record.name),
            category_id=CategoryId(record.category_id),
            stock=IngredientStock(
                quantity=record.quantity,
                unit_id=UnitId(record.unit_id),
                storage_location=StorageLocation(
                    StorageType(record.storage_type), record.storage_detail
                ),
                threshold=record.threshold,
            ),
            purchase_date=record.purchase_date,
            memo=Memo.parse(record.memo),
            price=Price(record.price) if record.price is not None else None,
            expiry_info=ExpiryInfo.from_dates(record.best_before_date, record.use_by_date),
            created_at=record.created_at,
            updated_at=record.updated_at,
            deleted_at=record.deleted_at,
        )

        # ВАЖЛИВО: reconstitution не має pending events
        ingredient.clear_domain_events()

        return ingredient

    def to_record(self, entity: Ingredient) -> IngredientRecord:
        stock = entity.stock
        expiry = entity.expiry_info
        return IngredientRecord(
            id=str(entity.id),
            user_id=entity.user_id,
            name=entity.name.value,
            category_id=str(entity.category_id),
            memo=entity.memo.value if entity.memo else None,
            price=entity.price.amount if entity.price else None,
            purchase_date=entity.purchase_date,
            best_before_date=expiry.best_before_date if expiry else None,
            use_by_date=expiry.use_by_date if expiry else None,
            quantity=stock.quantity,
            unit_id=str(stock.unit_id),
            storage_type=stock.storage_location.type.value,  # Enum → string
            storage_detail=stock.storage_location.detail,
            threshold=stock.threshold,
            created_at=entity.created_at,
            updated_at=entity.updated_at,
            deleted_at=entity.deleted_at,
        )


class ShoppingSessionMapper:
    """Mapper для ShoppingSession entity ↔ ShoppingSessionRecord."""

    def to_entity(self, record: ShoppingSessionRecord) -> ShoppingSession:
        location = None
        if record.location_latitude is not None and record.location_longitude is not None:
            location = ShoppingLocation(
                latitude=record.location_latitude,
                longitude=record.location_longitude,
                name=record.location_name,
            )

        session = ShoppingSession(
            id=ShoppingSessionId(record.id),
            user_id=record.user_id,
            started_at=record.started_at,
            status=SessionStatus(record.status),
            checked_items=[self._item_to_value(item) for item in record.checked_items],
            completed_at=record.completed_at,
            device_type=DeviceType(record.device_type) if record.device_type else None,
            location=location,
        )
        session.clear_domain_events()
        return session

    def to_record(self, entity: ShoppingSession) -> ShoppingSessionRecord:
        location = entity.location
        return ShoppingSessionRecord(
            id=str(entity.id),
            user_id=entity.user_id,
            status=entity.status.value,
            started_at=entity.started_at,
            completed_at=entity.completed_at,
            device_type=entity.device_type.value if entity.device_type else None,
            location_latitude=location.latitude if location else None,
            location_longitude=location.longitude if location else None,
            location_name=location.name if location else None,
            checked_items=tuple(
                CheckedItemRecord(
                    ingredient_id=str(item.ingredient_id),
                    ingredient_name=item.ingredient_name.value,
                    stock_status=item.stock_status.value,
                    expiry_status=item.expiry_status.value,
                    checked_at=item.checked_at,
                )
                for item in entity.checked_items
            ),
        )

    @staticmethod
    def _item_to_value(record: CheckedItemRecord) -> CheckedItem:
        return CheckedItem(
            ingredient_id=IngredientId(record.ingredient_id),
            ingredient_name=IngredientName(record.ingredient_name),
            stock_status=StockStatus(record.stock_status),
            expiry_status=ExpiryStatus(record.expiry_status),
            checked_at=record.checked_at,
        )
