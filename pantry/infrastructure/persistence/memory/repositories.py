"""In-memory implementations of the repository ports."""

from datetime import date, datetime, timezone
from typing import Callable, Optional

from pantry.domain.ingredients.entities import Category, Ingredient, Unit
from pantry.domain.ingredients.repositories import (
    CategoryRepository,
    ExpiryFilter,
    IngredientCriteria,
    IngredientRepository,
    IngredientSortField,
    SortOrder,
    UnitRepository,
)
from pantry.domain.ingredients.value_objects import (
    CategoryId,
    ExpiryInfo,
    IngredientId,
    StorageLocation,
    UnitId,
)
from pantry.domain.shopping.entities import ShoppingSession
from pantry.domain.shopping.repositories import SessionHistoryCriteria, ShoppingSessionRepository
from pantry.domain.shopping.value_objects import SessionStatus, ShoppingSessionId

from .mappers import IngredientMapper, ShoppingSessionMapper
from .store import InMemoryStore, InMemoryTransaction


_FINISHED = (SessionStatus.COMPLETED.value, SessionStatus.ABANDONED.value)


def _today() -> date:
    return datetime.now(timezone.utc).date()


class InMemoryIngredientRepository(IngredientRepository):
    """In-memory implementation of IngredientRepository port.

    Всі finders йдуть через ``_live`` - soft-deleted rows ніколи не повертаються.

    Example:
        >>> repo = InMemoryIngredientRepository(store)
        >>> await repo.save(ingredient)
        >>> await repo.find_by_id("user-1", ingredient.id)
    """

    def __init__(self, store: InMemoryStore, tx: Optional[InMemoryTransaction] = None) -> None:
        self._store = store
        self._tx = tx
        self._mapper = IngredientMapper()

    async def save(self, ingredient: Ingredient) -> Ingredient:
        key = str(ingredient.id)
        if key in self._store.ingredients:
            raise ValueError(f"Ingredient {key} already exists")
        self._write(ingredient)
        return ingredient

    async def update(self, ingredient: Ingredient) -> Ingredient:
        key = str(ingredient.id)
        if key not in self._store.ingredients:
            raise ValueError(f"Ingredient {key} not found for update")
        self._write(ingredient)
        return ingredient

    async def find_by_id(self, user_id: str, ingredient_id: IngredientId) -> Optional[Ingredient]:
        record = self._store.ingredients.get(str(ingredient_id))
        if record is None or record.deleted_at is not None or record.user_id != user_id:
            return None
        return self._mapper.to_entity(record)

    async def find_by_user_id(self, user_id: str) -> list[Ingredient]:
        return self._live(user_id)

    async def find_duplicates(
        self,
        user_id: str,
        name: str,
        expiry_info: Optional[ExpiryInfo],
        storage_location: StorageLocation,
    ) -> list[Ingredient]:
        key = (name, expiry_info, storage_location)
        return [i for i in self._live(user_id) if i.duplicate_key == key]

    async def find_expiring_soon(
        self, user_id: str, days: int, *, as_of: Optional[date] = None
    ) -> list[Ingredient]:
        today = as_of or _today()
        result = [
            i
            for i in self._live(user_id)
            if i.expiry_info is not None and 0 <= i.expiry_info.days_until_expiry(today) <= days
        ]
        return sorted(result, key=lambda i: (i.expiry_info.effective_date, i.name.value))  # type: ignore[union-attr]

    async def find_expired(self, user_id: str, *, as_of: Optional[date] = None) -> list[Ingredient]:
        today = as_of or _today()
        result = [
            i for i in self._live(user_id) if i.expiry_info is not None and i.expiry_info.is_expired(today)
        ]
        return sorted(result, key=lambda i: i.expiry_info.effective_date)  # type: ignore[union-attr]

    async def find_by_category(self, user_id: str, category_id: CategoryId) -> list[Ingredient]:
        return [i for i in self._live(user_id) if i.category_id == category_id]

    async def find_many(self, criteria: IngredientCriteria) -> list[Ingredient]:
        matches = self._filter(criteria)
        matches.sort(
            key=_sort_key(criteria.sort_by),
            reverse=criteria.sort_order is SortOrder.DESC,
        )
        end = None if criteria.limit is None else criteria.offset + criteria.limit
        return matches[criteria.offset:end]

    async def count(self, criteria: IngredientCriteria) -> int:
        return len(self._filter(criteria))

    def _live(self, user_id: str) -> list[Ingredient]:
        return [
            self._mapper.to_entity(record)
            for record in self._store.ingredients.values()
            if record.user_id == user_id and record.deleted_at is None
        ]

    def _filter(self, criteria: IngredientCriteria) -> list[Ingredient]:
        today = criteria.as_of or _today()
        search = criteria.search.strip().casefold() if criteria.search else None
        result = []
        for ingredient in self._live(criteria.user_id):
            if search and search not in ingredient.name.value.casefold():
                continue
            if criteria.category_id is not None and ingredient.category_id != criteria.category_id:
                continue
            if criteria.stock_status is not None and ingredient.stock_status is not criteria.stock_status:
                continue
            if not _matches_expiry(ingredient, criteria.expiry_filter, criteria.expiring_within_days, today):
                continue
            result.append(ingredient)
        return result

    def _write(self, ingredient: Ingredient) -> None:
        self._store.ingredients[str(ingredient.id)] = self._mapper.to_record(ingredient)
        if self._tx is not None:
            self._tx.writes.append(str(ingredient.id))


def _matches_expiry(ingredient: Ingredient, expiry_filter: ExpiryFilter, within_days: int, today: date) -> bool:
    if expiry_filter is ExpiryFilter.ALL:
        return True
    days = ingredient.days_until_expiry(today)
    if expiry_filter is ExpiryFilter.EXPIRED:
        return days is not None and days < 0
    if expiry_filter is ExpiryFilter.EXPIRING:
        return days is not None and 0 <= days <= within_days
    return days is None or days > within_days


def _sort_key(field: IngredientSortField) -> Callable[[Ingredient], tuple]:
    if field is IngredientSortField.NAME:
        return lambda i: (i.name.value.casefold(),)
    if field is IngredientSortField.PURCHASE_DATE:
        return lambda i: (i.purchase_date, i.created_at)
    if field is IngredientSortField.EXPIRY_DATE:
        # Ingredients без дати - в кінці при ASC
        return lambda i: (
            (0, i.expiry_info.effective_date) if i.expiry_info else (1, date.max),
        )
    return lambda i: (i.created_at,)


class InMemoryShoppingSessionRepository(ShoppingSessionRepository):
    """In-memory implementation of ShoppingSessionRepository port."""

    def __init__(self, store: InMemoryStore, tx: Optional[InMemoryTransaction] = None) -> None:
        self._store = store
        self._tx = tx
        self._mapper = ShoppingSessionMapper()

    async def save(self, session: ShoppingSession) -> ShoppingSession:
        key = str(session.id)
        if key in self._store.shopping_sessions:
            raise ValueError(f"Shopping session {key} already exists")
        self._write(session)
        return session

    async def update(self, session: ShoppingSession) -> ShoppingSession:
        key = str(session.id)
        if key not in self._store.shopping_sessions:
            raise ValueError(f"Shopping session {key} not found for update")
        self._write(session)
        return session

    async def find_by_id(self, session_id: ShoppingSessionId) -> Optional[ShoppingSession]:
        record = self._store.shopping_sessions.get(str(session_id))
        return self._mapper.to_entity(record) if record is not None else None

    async def find_active_by_user_id(self, user_id: str) -> Optional[ShoppingSession]:
        active = [
            r
            for r in self._store.shopping_sessions.values()
            if r.user_id == user_id and r.status == SessionStatus.ACTIVE.value
        ]
        if not active:
            return None
        return self._mapper.to_entity(max(active, key=lambda r: r.started_at))

    async def find_by_user_id(self, user_id: str) -> list[ShoppingSession]:
        records = [r for r in self._store.shopping_sessions.values() if r.user_id == user_id]
        records.sort(key=lambda r: r.started_at, reverse=True)
        return [self._mapper.to_entity(r) for r in records]

    async def find_recent(self, user_id: str, limit: int) -> list[ShoppingSession]:
        return (await self.find_by_user_id(user_id))[:limit]

    async def find_history(self, criteria: SessionHistoryCriteria) -> list[ShoppingSession]:
        records = self._history_records(criteria)
        records.sort(key=lambda r: r.started_at, reverse=True)
        end = None if criteria.limit is None else criteria.offset + criteria.limit
        return [self._mapper.to_entity(r) for r in records[criteria.offset:end]]

    async def count_history(self, criteria: SessionHistoryCriteria) -> int:
        return len(self._history_records(criteria))

    async def find_started_since(self, user_id: str, since: datetime) -> list[ShoppingSession]:
        records = [
            r
            for r in self._store.shopping_sessions.values()
            if r.user_id == user_id and r.started_at >= since
        ]
        records.sort(key=lambda r: r.started_at)
        return [self._mapper.to_entity(r) for r in records]

    def _history_records(self, criteria: SessionHistoryCriteria) -> list:
        result = []
        for record in self._store.shopping_sessions.values():
            if record.user_id != criteria.user_id or record.status not in _FINISHED:
                continue
            if criteria.status is not None and record.status != criteria.status.value:
                continue
            if criteria.started_from is not None and record.started_at < criteria.started_from:
                continue
            if criteria.started_to is not None and record.started_at > criteria.started_to:
                continue
            result.append(record)
        return result

    def _write(self, session: ShoppingSession) -> None:
        self._store.shopping_sessions[str(session.id)] = self._mapper.to_record(session)
        if self._tx is not None:
            self._tx.writes.append(str(session.id))


class InMemoryCategoryRepository(CategoryRepository):
    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    async def find_by_id(self, category_id: CategoryId) -> Optional[Category]:
        return self._store.categories.get(str(category_id))

    async def find_all(self) -> list[Category]:
        return sorted(self._store.categories.values(), key=lambda c: (c.display_order, c.name))


class InMemoryUnitRepository(UnitRepository):
    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    async def find_by_id(self, unit_id: UnitId) -> Optional[Unit]:
        return self._store.units.get(str(unit_id))

    async def find_all(self) -> list[Unit]:
        return sorted(self._store.units.values(), key=lambda u: (u.display_order, u.name))
