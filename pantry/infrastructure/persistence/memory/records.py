"""Storage records - flat rows що зберігаються в InMemoryStore.

Records immutable і містять тільки primitives, тому snapshot store -
це просто копія dicts.
"""

from dataclasses import dataclass, field
from datetime import date, datetime
from decimal import Decimal
from typing import Optional


@dataclass(frozen=True)
class IngredientRecord:
    """Row для ingredients table."""

    id: str
    user_id: str
    name: str
    category_id: str
    memo: Optional[str]
    price: Optional[Decimal]
    purchase_date: date
    best_before_date: Optional[date]
    use_by_date: Optional[date]
    quantity: Decimal
    unit_id: str
    storage_type: str
    storage_detail: Optional[str]
    threshold: Optional[Decimal]
    created_at: datetime
    updated_at: datetime
    deleted_at: Optional[datetime] = None


@dataclass(frozen=True)
class CheckedItemRecord:
    """Row для shopping_session_items table."""

    ingredient_id: str
    ingredient_name: str
    stock_status: str
    expiry_status: str
    checked_at: datetime


@dataclass(frozen=True)
class ShoppingSessionRecord:
    """Row для shopping_sessions table (items inline)."""

    id: str
    user_id: str
    status: str
    started_at: datetime
    completed_at: Optional[datetime] = None
    device_type: Optional[str] = None
    location_latitude: Optional[float] = None
    location_longitude: Optional[float] = None
    location_name: Optional[str] = None
    checked_items: tuple[CheckedItemRecord, ...] = field(default_factory=tuple)
