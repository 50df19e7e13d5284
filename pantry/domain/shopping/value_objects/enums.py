"""Enums для Shopping bounded context."""

from enum import Enum


class SessionStatus(str, Enum):
    """Shopping session lifecycle status.

    State machine:
        ACTIVE → COMPLETED
        ACTIVE → ABANDONED
        (COMPLETED та ABANDONED - terminal, переходів з них немає)
    """

    ACTIVE = "ACTIVE"
    """Session іде, можна check items."""

    COMPLETED = "COMPLETED"
    """Користувач завершив покупки."""

    ABANDONED = "ABANDONED"
    """Session перервана без завершення."""

    @property
    def is_terminal(self) -> bool:
        return self is not SessionStatus.ACTIVE


class DeviceType(str, Enum):
    """Device the session was started from."""

    MOBILE = "MOBILE"
    """Телефон."""

    TABLET = "TABLET"
    """Планшет."""

    DESKTOP = "DESKTOP"
    """Desktop browser."""

    @property
    def is_mobile(self) -> bool:
        """MOBILE або TABLET."""
        return self in (DeviceType.MOBILE, DeviceType.TABLET)


class RecheckPolicy(str, Enum):
    """What happens when an ingredient is checked twice in one session."""

    REPLACE = "replace"
    """Новий snapshot замінює попередній (latest wins)."""

    REJECT = "reject"
    """Повторний check - business rule violation."""
