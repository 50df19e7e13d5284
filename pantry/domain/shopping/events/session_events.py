"""Domain Events для ShoppingSession lifecycle."""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from pantry.domain.shared import DomainEvent


@dataclass(frozen=True)
class ShoppingSessionStarted(DomainEvent):
    """Event: Користувач почав shopping session."""

    session_id: str
    user_id: str
    started_at: datetime
    device_type: Optional[str] = None
    location_name: Optional[str] = None


@dataclass(frozen=True)
class ItemChecked(DomainEvent):
    """Event: Ingredient перевірений під час session.

    ``replaced`` = True коли snapshot замінив попередній check того ж ingredient.
    """

    session_id: str
    user_id: str
    ingredient_id: str
    ingredient_name: str
    stock_status: str
    expiry_status: str
    checked_at: datetime
    replaced: bool = False


@dataclass(frozen=True)
class ShoppingSessionCompleted(DomainEvent):
    """Event: Session завершена.

    Subscribers можуть:
    - Оновити shopping statistics
    - Запропонувати quick-access list на наступний раз
    """

    session_id: str
    user_id: str
    duration_seconds: int
    checked_items_count: int


@dataclass(frozen=True)
class ShoppingSessionAbandoned(DomainEvent):
    """Event: Session перервана."""

    session_id: str
    user_id: str
    duration_seconds: int
    reason: str
