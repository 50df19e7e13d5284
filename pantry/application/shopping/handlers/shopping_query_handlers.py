"""Shopping query handlers (read-only)."""

import logging
from collections import Counter, defaultdict
from datetime import datetime, time, timedelta, timezone
from typing import Optional

from pantry.application.shared import Clock, PaginationDTO, QueryHandler, resolve_page, utc_now
from pantry.application.shopping.dtos import (
    IngredientCheckStatisticsDTO,
    MonthlyCountDTO,
    QuickAccessIngredientDTO,
    SessionHistoryDTO,
    ShoppingSessionDTO,
    ShoppingStatisticsDTO,
    StockStatusBreakdownDTO,
    TopCheckedIngredientDTO,
)
from pantry.application.shopping.queries import (
    GetActiveShoppingSessionQuery,
    GetIngredientCheckStatisticsQuery,
    GetQuickAccessIngredientsQuery,
    GetRecentSessionsQuery,
    GetSessionHistoryQuery,
    GetShoppingStatisticsQuery,
)
from pantry.config import Settings, get_settings
from pantry.domain.ingredients.repositories import IngredientRepository
from pantry.domain.ingredients.value_objects import IngredientId, StockStatus
from pantry.domain.shared import ValidationError
from pantry.domain.shopping.entities import ShoppingSession
from pantry.domain.shopping.repositories import SessionHistoryCriteria, ShoppingSessionRepository
from pantry.domain.shopping.value_objects import CheckedItem, SessionStatus

logger = logging.getLogger(__name__)


def _year_month(moment: datetime) -> str:
    return moment.strftime("%Y-%m")


def _monthly_counts(moments: list[datetime]) -> list[MonthlyCountDTO]:
    counts = Counter(_year_month(m) for m in moments)
    return [MonthlyCountDTO(year_month=k, count=counts[k]) for k in sorted(counts)]


def _items_by_ingredient(sessions: list[ShoppingSession]) -> dict[str, list[CheckedItem]]:
    grouped: dict[str, list[CheckedItem]] = defaultdict(list)
    for session in sessions:
        for item in session.checked_items:
            grouped[str(item.ingredient_id)].append(item)
    return grouped


class GetActiveShoppingSessionHandler(
    QueryHandler[GetActiveShoppingSessionQuery, Optional[ShoppingSessionDTO]]
):
    """ACTIVE session користувача з duration та last activity."""

    def __init__(self, shopping_session_repository: ShoppingSessionRepository, clock: Clock = utc_now) -> None:
        self.shopping_session_repository = shopping_session_repository
        self.clock = clock

    async def execute(
        self, query: GetActiveShoppingSessionQuery, owner_id: str
    ) -> Optional[ShoppingSessionDTO]:
        session = await self.shopping_session_repository.find_active_by_user_id(owner_id)
        if session is None:
            return None
        return ShoppingSessionDTO.from_entity(session, self.clock())


class GetRecentSessionsHandler(QueryHandler[GetRecentSessionsQuery, list[ShoppingSessionDTO]]):
    """Останні N sessions (будь-який status), newest first."""

    def __init__(
        self,
        shopping_session_repository: ShoppingSessionRepository,
        settings: Optional[Settings] = None,
        clock: Clock = utc_now,
    ) -> None:
        self.shopping_session_repository = shopping_session_repository
        self.settings = settings or get_settings()
        self.clock = clock

    async def execute(self, query: GetRecentSessionsQuery, owner_id: str) -> list[ShoppingSessionDTO]:
        limit = query.limit or self.settings.recent_sessions_limit
        limit = min(max(limit, 1), self.settings.max_page_size)

        sessions = await self.shopping_session_repository.find_recent(owner_id, limit)
        now = self.clock()
        return [ShoppingSessionDTO.from_entity(s, now) for s in sessions]


class GetSessionHistoryHandler(QueryHandler[GetSessionHistoryQuery, SessionHistoryDTO]):
    """Paged history завершених sessions.

    Flow:
    1. Normalize page / limit (settings defaults, max_page_size cap)
    2. date_from / date_to → inclusive datetime bounds (UTC)
    3. find_history + count_history
    4. Pagination meta (total, total_pages, has_next, has_prev)
    """

    def __init__(
        self,
        shopping_session_repository: ShoppingSessionRepository,
        settings: Optional[Settings] = None,
        clock: Clock = utc_now,
    ) -> None:
        self.shopping_session_repository = shopping_session_repository
        self.settings = settings or get_settings()
        self.clock = clock

    async def execute(self, query: GetSessionHistoryQuery, owner_id: str) -> SessionHistoryDTO:
        """Raises:
            ValidationError: status=ACTIVE або date_from > date_to.
        """
        if query.status is SessionStatus.ACTIVE:
            raise ValidationError(
                "History status filter must be COMPLETED or ABANDONED",
                status=query.status.value,
            )
        if query.date_from and query.date_to and query.date_from > query.date_to:
            raise ValidationError(
                "date_from must not be after date_to",
                date_from=query.date_from.isoformat(),
                date_to=query.date_to.isoformat(),
            )

        page, limit = resolve_page(
            query.page,
            query.limit,
            self.settings.history_page_size,
            self.settings.max_page_size,
        )
        criteria = SessionHistoryCriteria(
            user_id=owner_id,
            status=query.status,
            started_from=(
                datetime.combine(query.date_from, time.min, tzinfo=timezone.utc)
                if query.date_from
                else None
            ),
            started_to=(
                datetime.combine(query.date_to, time.max, tzinfo=timezone.utc)
                if query.date_to
                else None
            ),
            offset=(page - 1) * limit,
            limit=limit,
        )

        sessions = await self.shopping_session_repository.find_history(criteria)
        total = await self.shopping_session_repository.count_history(criteria)
        now = self.clock()

        logger.debug(
            "session_history.completed",
            extra={"user_id": owner_id, "total": total, "page": page},
        )

        return SessionHistoryDTO(
            sessions=[ShoppingSessionDTO.from_entity(s, now) for s in sessions],
            pagination=PaginationDTO.build(page, limit, total),
        )


class GetShoppingStatisticsHandler(QueryHandler[GetShoppingStatisticsQuery, ShoppingStatisticsDTO]):
    """Shopping statistics за останні ``period_days``.

    - total_sessions: sessions started в period
    - total_checked_ingredients: сума checked items цих sessions
    - average_session_duration_minutes: тільки по finished sessions
    - top_checked_ingredients: top N з check rate = round(count / total_sessions * 100)
    - monthly_session_counts: ``YYYY-MM`` ascending
    """

    def __init__(
        self,
        shopping_session_repository: ShoppingSessionRepository,
        settings: Optional[Settings] = None,
        clock: Clock = utc_now,
    ) -> None:
        self.shopping_session_repository = shopping_session_repository
        self.settings = settings or get_settings()
        self.clock = clock

    async def execute(self, query: GetShoppingStatisticsQuery, owner_id: str) -> ShoppingStatisticsDTO:
        period_days = query.period_days or self.settings.statistics_period_days
        since = self.clock() - timedelta(days=period_days)

        sessions = await self.shopping_session_repository.find_started_since(owner_id, since)
        total_sessions = len(sessions)

        finished = [s for s in sessions if s.completed_at is not None]
        average_minutes = (
            sum(s.get_duration().total_seconds() for s in finished) / 60 / len(finished) if finished else 0.0
        )

        grouped = _items_by_ingredient(sessions)
        ranked = sorted(
            grouped.items(),
            key=lambda entry: (-len(entry[1]), entry[1][-1].ingredient_name.value),
        )
        top = [
            TopCheckedIngredientDTO(
                ingredient_id=ingredient_id,
                ingredient_name=items[-1].ingredient_name.value,
                check_count=len(items),
                check_rate_percentage=(
                    round(len(items) / total_sessions * 100) if total_sessions else 0
                ),
            )
            for ingredient_id, items in ranked[: self.settings.top_checked_limit]
        ]

        return ShoppingStatisticsDTO(
            period_days=period_days,
            total_sessions=total_sessions,
            total_checked_ingredients=sum(s.checked_items_count for s in sessions),
            average_session_duration_minutes=average_minutes,
            top_checked_ingredients=top,
            monthly_session_counts=_monthly_counts([s.started_at for s in sessions]),
        )


class GetQuickAccessIngredientsHandler(
    QueryHandler[GetQuickAccessIngredientsQuery, list[QuickAccessIngredientDTO]]
):
    """Найчастіше перевірені ingredients що ще існують.

    Order: check_count DESC, last_checked_at DESC. Status - поточний, не з snapshot.
    """

    def __init__(
        self,
        shopping_session_repository: ShoppingSessionRepository,
        ingredient_repository: IngredientRepository,
        settings: Optional[Settings] = None,
        clock: Clock = utc_now,
    ) -> None:
        self.shopping_session_repository = shopping_session_repository
        self.ingredient_repository = ingredient_repository
        self.settings = settings or get_settings()
        self.clock = clock

    async def execute(
        self, query: GetQuickAccessIngredientsQuery, owner_id: str
    ) -> list[QuickAccessIngredientDTO]:
        limit = query.limit or self.settings.quick_access_limit
        today = self.clock().date()

        sessions = await self.shopping_session_repository.find_by_user_id(owner_id)
        grouped = _items_by_ingredient(sessions)
        ranked = sorted(
            grouped.items(),
            key=lambda entry: (len(entry[1]), max(i.checked_at for i in entry[1])),
            reverse=True,
        )

        result: list[QuickAccessIngredientDTO] = []
        for ingredient_id, items in ranked:
            if len(result) >= limit:
                break
            ingredient = await self.ingredient_repository.find_by_id(owner_id, IngredientId(ingredient_id))
            if ingredient is None:
                continue
            result.append(
                QuickAccessIngredientDTO(
                    ingredient_id=ingredient_id,
                    ingredient_name=ingredient.name.value,
                    check_count=len(items),
                    last_checked_at=max(i.checked_at for i in items),
                    current_stock_status=ingredient.stock_status.value,
                    current_expiry_status=ingredient.get_expiry_status(today).value,
                )
            )
        return result


class GetIngredientCheckStatisticsHandler(
    QueryHandler[GetIngredientCheckStatisticsQuery, list[IngredientCheckStatisticsDTO]]
):
    """Check history per ingredient (тільки ще існуючі ingredients).

    Example:
        >>> stats = await handler.execute(
        ...     GetIngredientCheckStatisticsQuery(ingredient_id="ing_abc"), owner_id="user-1"
        ... )
        >>> stats[0].stock_status_breakdown.low_stock_checks
    """

    def __init__(
        self,
        shopping_session_repository: ShoppingSessionRepository,
        ingredient_repository: IngredientRepository,
    ) -> None:
        self.shopping_session_repository = shopping_session_repository
        self.ingredient_repository = ingredient_repository

    async def execute(
        self, query: GetIngredientCheckStatisticsQuery, owner_id: str
    ) -> list[IngredientCheckStatisticsDTO]:
        target = str(IngredientId(query.ingredient_id)) if query.ingredient_id else None

        sessions = await self.shopping_session_repository.find_by_user_id(owner_id)
        grouped = _items_by_ingredient(sessions)

        result: list[IngredientCheckStatisticsDTO] = []
        for ingredient_id, items in grouped.items():
            if target is not None and ingredient_id != target:
                continue
            ingredient = await self.ingredient_repository.find_by_id(owner_id, IngredientId(ingredient_id))
            if ingredient is None:
                continue

            moments = [i.checked_at for i in items]
            statuses = Counter(i.stock_status for i in items)
            result.append(
                IngredientCheckStatisticsDTO(
                    ingredient_id=ingredient_id,
                    ingredient_name=ingredient.name.value,
                    total_check_count=len(items),
                    first_checked_at=min(moments),
                    last_checked_at=max(moments),
                    monthly_check_counts=_monthly_counts(moments),
                    stock_status_breakdown=StockStatusBreakdownDTO(
                        in_stock_checks=statuses[StockStatus.IN_STOCK],
                        low_stock_checks=statuses[StockStatus.LOW_STOCK],
                        out_of_stock_checks=statuses[StockStatus.OUT_OF_STOCK],
                    ),
                )
            )

        result.sort(key=lambda s: s.total_check_count, reverse=True)
        return result
