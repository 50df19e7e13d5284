"""Ingredient Aggregate Root - один pantry item користувача.

Ingredient відповідає за:
- Stock classification (OUT_OF_STOCK / LOW_STOCK / IN_STOCK)
- Expiry classification (FRESH ... EXPIRED)
- Field-by-field updates з domain events
- Soft delete (tombstone timestamp, row ніколи не видаляється)
"""

from datetime import date, datetime, timezone
from decimal import Decimal
from typing import Optional

from pantry.domain.shared import AggregateRoot, DomainEvent

from ..events import (
    IngredientCreated,
    IngredientDeleted,
    IngredientUpdated,
    StockConsumed,
    StockDepleted,
    StockLevelLow,
    StockReplenished,
)
from ..exceptions import IngredientDeletedError, InsufficientStockError
from ..value_objects import (
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
)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Ingredient(AggregateRoot):
    """Ingredient Aggregate Root.

    Правила:
    - Owner (user_id) ніколи не змінюється після створення
    - Stock/expiry status завжди derived, ніколи не зберігаються
    - Soft-deleted ingredient не можна змінювати
    - Повторне видалення заборонене

    Example:
        >>> ingredient = Ingredient.create(
        ...     user_id="user-1",
        ...     name=IngredientName("Tomato"),
        ...     category_id=CategoryId("cat_vegetables"),
        ...     stock=IngredientStock(
        ...         quantity=Decimal("5"),
        ...         unit_id=UnitId("unt_piece"),
        ...         storage_location=StorageLocation(StorageType.REFRIGERATED),
        ...         threshold=Decimal("2"),
        ...     ),
        ...     purchase_date=date(2026, 1, 1),
        ... )
        >>> ingredient.stock_status  # StockStatus.IN_STOCK
        >>> ingredient.consume(Decimal("3"))
        >>> ingredient.stock_status  # StockStatus.LOW_STOCK
    """

    def __init__(
        self,
        id: IngredientId,
        user_id: str,
        name: IngredientName,
        category_id: CategoryId,
        stock: IngredientStock,
        purchase_date: date,
        memo: Optional[Memo] = None,
        price: Optional[Price] = None,
        expiry_info: Optional[ExpiryInfo] = None,
        created_at: Optional[datetime] = None,
        updated_at: Optional[datetime] = None,
        deleted_at: Optional[datetime] = None,
    ) -> None:
        """Initialize ingredient (reconstitution from storage).

        Для нових ingredients використовуйте ``Ingredient.create``.
        """
        super().__init__(id)

        self._user_id = user_id
        self.name = name
        self.category_id = category_id
        self.stock = stock
        self.purchase_date = purchase_date
        self.memo = memo
        self.price = price
        self.expiry_info = expiry_info

        # Timestamps
        self.created_at = created_at or _utcnow()
        self.updated_at = updated_at or self.created_at
        self.deleted_at = deleted_at

    @classmethod
    def create(
        cls,
        user_id: str,
        name: IngredientName,
        category_id: CategoryId,
        stock: IngredientStock,
        purchase_date: date,
        memo: Optional[Memo] = None,
        price: Optional[Price] = None,
        expiry_info: Optional[ExpiryInfo] = None,
        id: Optional[IngredientId] = None,
        now: Optional[datetime] = None,
    ) -> "Ingredient":
        """Factory method для нового ingredient.

        Returns:
            Ingredient з pending IngredientCreated event.
        """
        now = now or _utcnow()
        ingredient = cls(
            id=id or IngredientId.generate(),
            user_id=user_id,
            name=name,
            category_id=category_id,
            stock=stock,
            purchase_date=purchase_date,
            memo=memo,
            price=price,
            expiry_info=expiry_info,
            created_at=now,
            updated_at=now,
        )
        ingredient.add_domain_event(
            IngredientCreated(
                ingredient_id=str(ingredient.id),
                user_id=user_id,
                name=name.value,
                category_id=str(category_id),
                quantity=stock.quantity,
                unit_id=str(stock.unit_id),
            )
        )
        return ingredient

    # ==================== Queries ====================

    @property
    def user_id(self) -> str:
        """Owner ID (immutable)."""
        return self._user_id

    @property
    def is_deleted(self) -> bool:
        return self.deleted_at is not None

    @property
    def stock_status(self) -> StockStatus:
        """Derived stock classification."""
        return self.stock.status

    @property
    def storage_location(self) -> StorageLocation:
        return self.stock.storage_location

    @property
    def is_in_stock(self) -> bool:
        return not self.stock.is_out_of_stock

    @property
    def duplicate_key(self) -> tuple[str, Optional[ExpiryInfo], StorageLocation]:
        """(name, expiry info, storage location) - tuple що має бути унікальним per owner."""
        return (self.name.value, self.expiry_info, self.stock.storage_location)

    def is_owned_by(self, user_id: str) -> bool:
        return self._user_id == user_id

    def get_expiry_status(self, today: Optional[date] = None) -> ExpiryStatus:
        """Derived expiry classification.

        Args:
            today: Reference date (defaults to today in UTC).

        Returns:
            ExpiryStatus; FRESH якщо дат немає.
        """
        if self.expiry_info is None:
            return ExpiryStatus.FRESH
        return self.expiry_info.status(today or _utcnow().date())

    def days_until_expiry(self, today: Optional[date] = None) -> Optional[int]:
        if self.expiry_info is None:
            return None
        return self.expiry_info.days_until_expiry(today or _utcnow().date())

    def is_expired(self, today: Optional[date] = None) -> bool:
        return self.get_expiry_status(today) is ExpiryStatus.EXPIRED

    # ==================== Field updates ====================

    def update_name(self, name: IngredientName, now: Optional[datetime] = None) -> bool:
        """Rename ingredient.

        Returns:
            True якщо значення реально змінилось.

        Raises:
            IngredientDeletedError: Якщо ingredient soft-deleted.
        """
        return self._set_field("name", name, now)

    def update_category(self, category_id: CategoryId, now: Optional[datetime] = None) -> bool:
        return self._set_field("category_id", category_id, now)

    def update_memo(self, memo: Optional[Memo], now: Optional[datetime] = None) -> bool:
        return self._set_field("memo", memo, now)

    def update_price(self, price: Optional[Price], now: Optional[datetime] = None) -> bool:
        return self._set_field("price", price, now)

    def update_purchase_date(self, purchase_date: date, now: Optional[datetime] = None) -> bool:
        return self._set_field("purchase_date", purchase_date, now)

    def update_expiry_info(
        self, expiry_info: Optional[ExpiryInfo], now: Optional[datetime] = None
    ) -> bool:
        return self._set_field("expiry_info", expiry_info, now)

    def update_stock(self, stock: IngredientStock, now: Optional[datetime] = None) -> bool:
        """Replace stock snapshot.

        Crossing stock boundaries emits StockReplenished / StockLevelLow / StockDepleted
        на додачу до IngredientUpdated.

        Returns:
            True якщо snapshot змінився.
        """
        self._ensure_not_deleted()
        previous = self.stock
        if previous == stock:
            return False

        changed = [
            field_name
            for field_name in ("quantity", "unit_id", "storage_location", "threshold")
            if getattr(previous, field_name) != getattr(stock, field_name)
        ]
        self.stock = stock
        self._touch(now)
        self.add_domain_event(
            IngredientUpdated(
                ingredient_id=str(self.id),
                user_id=self._user_id,
                changed_fields=tuple(f"stock.{name}" for name in changed),
            )
        )
        for event in self._stock_transition_events(previous, stock):
            self.add_domain_event(event)
        return True

    # ==================== Stock operations ====================

    def consume(self, amount: Decimal, now: Optional[datetime] = None) -> None:
        """Use part of the stock.

        Raises:
            InsufficientStockError: Якщо amount більший за поточну кількість.
            IngredientDeletedError: Якщо ingredient soft-deleted.
        """
        self._ensure_not_deleted()
        if amount <= 0:
            raise InsufficientStockError(
                "Consumed amount must be positive",
                ingredient_id=str(self.id),
                amount=str(amount),
            )
        if amount > self.stock.quantity:
            raise InsufficientStockError(
                "Not enough stock",
                ingredient_id=str(self.id),
                requested=str(amount),
                available=str(self.stock.quantity),
            )

        previous = self.stock
        self.stock = previous.with_quantity(previous.quantity - amount)
        self._touch(now)

        self.add_domain_event(
            StockConsumed(
                ingredient_id=str(self.id),
                user_id=self._user_id,
                consumed_amount=amount,
                remaining_quantity=self.stock.quantity,
            )
        )
        for event in self._stock_transition_events(previous, self.stock):
            self.add_domain_event(event)

    def replenish(self, amount: Decimal, now: Optional[datetime] = None) -> None:
        """Add to the stock.

        Raises:
            InsufficientStockError: Якщо amount не додатній.
            IngredientDeletedError: Якщо ingredient soft-deleted.
        """
        self._ensure_not_deleted()
        if amount <= 0:
            raise InsufficientStockError(
                "Replenished amount must be positive",
                ingredient_id=str(self.id),
                amount=str(amount),
            )

        previous = self.stock
        self.stock = previous.with_quantity(previous.quantity + amount)
        self._touch(now)

        for event in self._stock_transition_events(previous, self.stock):
            self.add_domain_event(event)

    # ==================== Lifecycle ====================

    def delete(self, now: Optional[datetime] = None) -> None:
        """Soft delete ingredient (stamp deleted_at).

        Raises:
            IngredientDeletedError: Якщо вже видалений.
        """
        if self.is_deleted:
            raise IngredientDeletedError(
                "Ingredient is already deleted",
                ingredient_id=str(self.id),
            )

        self.deleted_at = now or _utcnow()
        self.updated_at = self.deleted_at
        self.add_domain_event(
            IngredientDeleted(
                ingredient_id=str(self.id),
                user_id=self._user_id,
                name=self.name.value,
            )
        )

    # ==================== Internals ====================

    def _ensure_not_deleted(self) -> None:
        if self.is_deleted:
            raise IngredientDeletedError(
                "Cannot modify a deleted ingredient",
                ingredient_id=str(self.id),
            )

    def _touch(self, now: Optional[datetime]) -> None:
        self.updated_at = now or _utcnow()

    def _set_field(self, field_name: str, value: object, now: Optional[datetime]) -> bool:
        self._ensure_not_deleted()
        if getattr(self, field_name) == value:
            return False

        setattr(self, field_name, value)
        self._touch(now)
        self.add_domain_event(
            IngredientUpdated(
                ingredient_id=str(self.id),
                user_id=self._user_id,
                changed_fields=(field_name,),
            )
        )
        return True

    def _stock_transition_events(
        self, previous: IngredientStock, current: IngredientStock
    ) -> list[DomainEvent]:
        events: list[DomainEvent] = []

        if current.quantity > previous.quantity:
            events.append(
                StockReplenished(
                    ingredient_id=str(self.id),
                    user_id=self._user_id,
                    previous_quantity=previous.quantity,
                    new_quantity=current.quantity,
                )
            )

        if current.status is StockStatus.OUT_OF_STOCK and previous.status is not StockStatus.OUT_OF_STOCK:
            events.append(
                StockDepleted(
                    ingredient_id=str(self.id),
                    user_id=self._user_id,
                    name=self.name.value,
                )
            )
        elif current.status is StockStatus.LOW_STOCK and previous.status is StockStatus.IN_STOCK:
            events.append(
                StockLevelLow(
                    ingredient_id=str(self.id),
                    user_id=self._user_id,
                    name=self.name.value,
                    quantity=current.quantity,
                    threshold=current.threshold,
                )
            )

        return events

    def __repr__(self) -> str:
        return (
            f"Ingredient(id={self.id}, name={self.name.value!r}, "
            f"quantity={self.stock.quantity}, deleted={self.is_deleted})"
        )
