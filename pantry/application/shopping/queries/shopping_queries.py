"""Shopping queries (read-only)."""

from dataclasses import dataclass
from datetime import date
from typing import Optional

from pantry.application.shared import Query
from pantry.domain.shopping.value_objects import SessionStatus


@dataclass(frozen=True)
class GetActiveShoppingSessionQuery(Query):
    """Поточна ACTIVE session користувача (None якщо немає)."""


@dataclass(frozen=True)
class GetRecentSessionsQuery(Query):
    """Останні sessions, newest first."""

    limit: Optional[int] = None
    """None → settings.recent_sessions_limit."""


@dataclass(frozen=True)
class GetSessionHistoryQuery(Query):
    """Paged history завершених sessions.

    Example:
        >>> query = GetSessionHistoryQuery(
        ...     page=2,
        ...     limit=10,
        ...     date_from=date(2025, 1, 1),
        ...     status=SessionStatus.COMPLETED,
        ... )
    """

    page: int = 1
    limit: Optional[int] = None
    """None → settings.history_page_size."""

    date_from: Optional[date] = None
    """Inclusive, по started_at."""

    date_to: Optional[date] = None
    """Inclusive (весь день), по started_at."""

    status: Optional[SessionStatus] = None
    """COMPLETED або ABANDONED; ACTIVE в history не буває."""


@dataclass(frozen=True)
class GetShoppingStatisticsQuery(Query):
    """Aggregated shopping statistics за останні N днів."""

    period_days: Optional[int] = None
    """None → settings.statistics_period_days."""


@dataclass(frozen=True)
class GetQuickAccessIngredientsQuery(Query):
    """Найчастіше перевірені ingredients (ще існуючі)."""

    limit: Optional[int] = None
    """None → settings.quick_access_limit."""


@dataclass(frozen=True)
class GetIngredientCheckStatisticsQuery(Query):
    """Check history статистика per ingredient.

    Без ``ingredient_id`` - для всіх перевірених ingredients.
    """

    ingredient_id: Optional[str] = None
