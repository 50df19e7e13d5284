"""ShoppingSession Aggregate Root - один shopping trip користувача.

ShoppingSession відповідає за:
- Session lifecycle (ACTIVE → COMPLETED/ABANDONED)
- Checked items (snapshot per ingredient, ordered by recency)
- Duration calculation
"""

from datetime import datetime, timedelta, timezone
from typing import Iterable, Optional

from pantry.domain.ingredients.entities import Ingredient
from pantry.domain.ingredients.value_objects import IngredientId
from pantry.domain.shared import AggregateRoot

from ..events import (
    ItemChecked,
    ShoppingSessionAbandoned,
    ShoppingSessionCompleted,
    ShoppingSessionStarted,
)
from ..exceptions import ItemAlreadyCheckedError, SessionAlreadyCompletedError, SessionNotActiveError
from ..value_objects import (
    CheckedItem,
    DeviceType,
    RecheckPolicy,
    SessionStatus,
    ShoppingLocation,
    ShoppingSessionId,
)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class ShoppingSession(AggregateRoot):
    """ShoppingSession Aggregate Root.

    Правила:
    - Нова session завжди ACTIVE
    - Check items тільки в ACTIVE
    - COMPLETED та ABANDONED - terminal, переходів немає
    - Один snapshot на ingredient (REPLACE) або відмова (REJECT), залежно від RecheckPolicy
    - Duration = completed_at - started_at (або now - started_at поки ACTIVE)

    Example:
        >>> session = ShoppingSession.start(user_id="user-1", device_type=DeviceType.MOBILE)
        >>> session.check_item(tomato)
        >>> session.complete()
        >>> session.checked_items_count  # 1
    """

    def __init__(
        self,
        id: ShoppingSessionId,
        user_id: str,
        started_at: datetime,
        status: SessionStatus = SessionStatus.ACTIVE,
        checked_items: Optional[Iterable[CheckedItem]] = None,
        completed_at: Optional[datetime] = None,
        device_type: Optional[DeviceType] = None,
        location: Optional[ShoppingLocation] = None,
    ) -> None:
        """Initialize session (reconstitution from storage).

        Для нової session використовуйте ``ShoppingSession.start``.
        """
        super().__init__(id)

        self._user_id = user_id
        self.started_at = started_at
        self.status = status
        self.completed_at = completed_at
        self.device_type = device_type
        self.location = location
        self._checked_items: list[CheckedItem] = sorted(
            checked_items or [], key=lambda item: item.checked_at
        )

    @classmethod
    def start(
        cls,
        user_id: str,
        device_type: Optional[DeviceType] = None,
        location: Optional[ShoppingLocation] = None,
        id: Optional[ShoppingSessionId] = None,
        now: Optional[datetime] = None,
    ) -> "ShoppingSession":
        """Factory method для нової ACTIVE session.

        Note:
            "One ACTIVE session per user" перевіряє start handler, не entity.

        Returns:
            ShoppingSession з pending ShoppingSessionStarted event.
        """
        started_at = now or _utcnow()
        session = cls(
            id=id or ShoppingSessionId.generate(),
            user_id=user_id,
            started_at=started_at,
            device_type=device_type,
            location=location,
        )
        session.add_domain_event(
            ShoppingSessionStarted(
                session_id=str(session.id),
                user_id=user_id,
                started_at=started_at,
                device_type=device_type.value if device_type else None,
                location_name=location.name if location else None,
            )
        )
        return session

    # ==================== Queries ====================

    @property
    def user_id(self) -> str:
        return self._user_id

    @property
    def is_active(self) -> bool:
        return self.status is SessionStatus.ACTIVE

    @property
    def checked_items(self) -> list[CheckedItem]:
        """Checked items, oldest check first."""
        return list(self._checked_items)

    @property
    def checked_items_count(self) -> int:
        return len(self._checked_items)

    @property
    def is_using_mobile_device(self) -> bool:
        return self.device_type is not None and self.device_type.is_mobile

    @property
    def has_location(self) -> bool:
        return self.location is not None

    def is_owned_by(self, user_id: str) -> bool:
        return self._user_id == user_id

    def get_checked_item(self, ingredient_id: IngredientId) -> Optional[CheckedItem]:
        for item in self._checked_items:
            if item.ingredient_id == ingredient_id:
                return item
        return None

    def get_needs_attention_items(self) -> list[CheckedItem]:
        return [item for item in self._checked_items if item.needs_attention]

    def get_duration(self, now: Optional[datetime] = None) -> timedelta:
        """Exact duration (з microseconds).

        Args:
            now: Reference time для ACTIVE session (defaults to UTC now).
        """
        end = self.completed_at or now or _utcnow()
        return end - self.started_at

    def get_duration_seconds(self, now: Optional[datetime] = None) -> int:
        """Duration in whole seconds (для DTO та events)."""
        return int(self.get_duration(now).total_seconds())

    def get_last_activity_at(self) -> datetime:
        """Час останнього check, або started_at якщо checks не було."""
        if not self._checked_items:
            return self.started_at
        return max(item.checked_at for item in self._checked_items)

    # ==================== Commands ====================

    def check_item(
        self,
        ingredient: Ingredient,
        *,
        now: Optional[datetime] = None,
        policy: RecheckPolicy = RecheckPolicy.REPLACE,
    ) -> CheckedItem:
        """Record ingredient's current classification.

        Args:
            ingredient: Ingredient що перевіряється (owner перевіряє handler).
            now: Check time (defaults to UTC now).
            policy: REPLACE - новий snapshot замінює старий; REJECT - помилка.

        Returns:
            Новий CheckedItem.

        Raises:
            SessionNotActiveError: Якщо session не ACTIVE.
            ItemAlreadyCheckedError: REJECT policy і ingredient вже перевірений.
        """
        self.ensure_active("check items in")

        checked_at = now or _utcnow()
        existing = self.get_checked_item(ingredient.id)
        if existing is not None and policy is RecheckPolicy.REJECT:
            raise ItemAlreadyCheckedError(
                session_id=str(self.id),
                ingredient_id=str(ingredient.id),
            )

        item = CheckedItem.create(
            ingredient_id=ingredient.id,
            ingredient_name=ingredient.name,
            stock_status=ingredient.stock_status,
            expiry_status=ingredient.get_expiry_status(checked_at.date()),
            checked_at=checked_at,
        )

        if existing is not None:
            self._checked_items.remove(existing)
        self._checked_items.append(item)

        self.add_domain_event(
            ItemChecked(
                session_id=str(self.id),
                user_id=self._user_id,
                ingredient_id=str(item.ingredient_id),
                ingredient_name=item.ingredient_name.value,
                stock_status=item.stock_status.value,
                expiry_status=item.expiry_status.value,
                checked_at=checked_at,
                replaced=existing is not None,
            )
        )
        return item

    def complete(self, now: Optional[datetime] = None) -> None:
        """Transition ACTIVE → COMPLETED.

        Raises:
            SessionAlreadyCompletedError: Якщо вже COMPLETED.
            SessionNotActiveError: Якщо ABANDONED.
        """
        if self.status is SessionStatus.COMPLETED:
            raise SessionAlreadyCompletedError(session_id=str(self.id))
        self.ensure_active("complete")

        self.status = SessionStatus.COMPLETED
        self.completed_at = now or _utcnow()

        self.add_domain_event(
            ShoppingSessionCompleted(
                session_id=str(self.id),
                user_id=self._user_id,
                duration_seconds=self.get_duration_seconds(),
                checked_items_count=self.checked_items_count,
            )
        )

    def abandon(self, reason: str = "user-action", now: Optional[datetime] = None) -> None:
        """Transition ACTIVE → ABANDONED.

        Raises:
            SessionNotActiveError: Якщо session вже terminal.
        """
        self.ensure_active("abandon")

        self.status = SessionStatus.ABANDONED
        self.completed_at = now or _utcnow()

        self.add_domain_event(
            ShoppingSessionAbandoned(
                session_id=str(self.id),
                user_id=self._user_id,
                duration_seconds=self.get_duration_seconds(),
                reason=reason,
            )
        )

    def ensure_active(self, action: str = "modify") -> None:
        """Raise SessionNotActiveError якщо session вже COMPLETED / ABANDONED."""
        if not self.is_active:
            raise SessionNotActiveError(
                f"Cannot {action} a session that is not active",
                session_id=str(self.id),
                current_status=self.status.value,
            )

    def __repr__(self) -> str:
        return (
            f"ShoppingSession(id={self.id}, status={self.status.value}, "
            f"checked_items={self.checked_items_count})"
        )
