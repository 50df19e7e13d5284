"""Shopping session DTOs - data transfer objects for API responses."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from pantry.application.shared import PaginationDTO
from pantry.domain.shopping.entities import ShoppingSession
from pantry.domain.shopping.value_objects import CheckedItem


@dataclass
class CheckedItemDTO:
    """Checked item snapshot."""

    ingredient_id: str
    ingredient_name: str
    stock_status: str
    expiry_status: str
    checked_at: datetime

    @classmethod
    def from_value_object(cls, item: CheckedItem) -> "CheckedItemDTO":
        return cls(
            ingredient_id=str(item.ingredient_id),
            ingredient_name=item.ingredient_name.value,
            stock_status=item.stock_status.value,
            expiry_status=item.expiry_status.value,
            checked_at=item.checked_at,
        )


@dataclass
class ShoppingLocationDTO:
    latitude: float
    longitude: float
    name: Optional[str]


@dataclass
class ShoppingSessionDTO:
    """Shopping session data transfer object."""

    id: str
    user_id: str
    status: str
    started_at: datetime
    completed_at: Optional[datetime]
    device_type: Optional[str]
    location: Optional[ShoppingLocationDTO]
    duration_seconds: int
    last_activity_at: datetime
    checked_items_count: int
    checked_items: list[CheckedItemDTO] = field(default_factory=list)

    @classmethod
    def from_entity(cls, session: ShoppingSession, now: datetime) -> "ShoppingSessionDTO":
        """Build DTO.

        Args:
            session: Session aggregate.
            now: Reference time для duration ACTIVE session.
        """
        location = session.location
        return cls(
            id=str(session.id),
            user_id=session.user_id,
            status=session.status.value,
            started_at=session.started_at,
            completed_at=session.completed_at,
            device_type=session.device_type.value if session.device_type else None,
            location=(
                ShoppingLocationDTO(location.latitude, location.longitude, location.name)
                if location
                else None
            ),
            duration_seconds=session.get_duration_seconds(now),
            last_activity_at=session.get_last_activity_at(),
            checked_items_count=session.checked_items_count,
            checked_items=[CheckedItemDTO.from_value_object(i) for i in session.checked_items],
        )


@dataclass
class SessionHistoryDTO:
    """Paged history of finished sessions."""

    sessions: list[ShoppingSessionDTO]
    pagination: PaginationDTO
