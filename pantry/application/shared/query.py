"""Base Query class для CQRS pattern.

Query - запит на отримання даних (read operation).
Queries НЕ мають side effects (не змінюють дані).
"""

from abc import ABC
from dataclasses import dataclass


@dataclass(frozen=True)
class Query(ABC):
    """Base class для всіх queries.

    Query характеристики:
    - **Read-only**: Не змінює дані, тільки читає
    - **Noun-based naming**: GetSessionHistory, GetExpiringIngredients
    - **No business-rule errors**: malformed filters відхиляються до handler

    Example:
        >>> @dataclass(frozen=True)
        ... class GetRecentSessionsQuery(Query):
        ...     limit: int | None = None

        >>> sessions = await handler.execute(GetRecentSessionsQuery(limit=5), owner_id="user-1")
    """

    pass
