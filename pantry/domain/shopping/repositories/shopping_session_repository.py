"""ShoppingSessionRepository Port - interface для persistence shopping sessions."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..entities import ShoppingSession
from ..value_objects import SessionStatus, ShoppingSessionId


@dataclass(frozen=True)
class SessionHistoryCriteria:
    """Filter + window для session history.

    History містить тільки finished sessions (COMPLETED / ABANDONED).
    ``started_from`` / ``started_to`` - inclusive bounds на started_at.
    """

    user_id: str
    status: Optional[SessionStatus] = None
    started_from: Optional[datetime] = None
    started_to: Optional[datetime] = None
    offset: int = 0
    limit: Optional[int] = None


class ShoppingSessionRepository(ABC):
    """Abstract interface для shopping session persistence.

    Example (Domain uses):
        >>> active = await session_repo.find_active_by_user_id(user_id)
        >>> if active is not None:
        ...     raise ActiveSessionExistsError(user_id=user_id)
        >>> session = ShoppingSession.start(user_id=user_id)
        >>> await session_repo.save(session)
    """

    @abstractmethod
    async def save(self, session: ShoppingSession) -> ShoppingSession:
        """Persist new session."""
        pass

    @abstractmethod
    async def update(self, session: ShoppingSession) -> ShoppingSession:
        """Persist status / checked items of an existing session."""
        pass

    @abstractmethod
    async def find_by_id(self, session_id: ShoppingSessionId) -> Optional[ShoppingSession]:
        """Get session by ID.

        Note:
            Lookup не scoped по owner: handlers самі порівнюють owner, щоб
            відрізнити "чужа session" від "session не існує".
        """
        pass

    @abstractmethod
    async def find_active_by_user_id(self, user_id: str) -> Optional[ShoppingSession]:
        """Get ACTIVE session користувача (newest якщо їх кілька)."""
        pass

    @abstractmethod
    async def find_by_user_id(self, user_id: str) -> list[ShoppingSession]:
        """All sessions of the user, newest first."""
        pass

    @abstractmethod
    async def find_recent(self, user_id: str, limit: int) -> list[ShoppingSession]:
        """Latest ``limit`` sessions of the user (any status), newest first."""
        pass

    @abstractmethod
    async def find_history(self, criteria: SessionHistoryCriteria) -> list[ShoppingSession]:
        """Finished sessions matching criteria, newest first."""
        pass

    @abstractmethod
    async def count_history(self, criteria: SessionHistoryCriteria) -> int:
        """Number of finished sessions matching criteria (window ignored)."""
        pass

    @abstractmethod
    async def find_started_since(self, user_id: str, since: datetime) -> list[ShoppingSession]:
        """Sessions started at or after ``since`` (any status), oldest first.

        Note:
            Використовується для statistics.
        """
        pass
