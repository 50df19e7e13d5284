"""Enums для Ingredients bounded context."""

from decimal import Decimal
from enum import Enum
from typing import Optional

NEAR_EXPIRY_DAYS = 7
EXPIRING_SOON_DAYS = 3
CRITICAL_DAYS = 1


class StockStatus(str, Enum):
    """Stock classification (derived, never persisted).

    Rules:
        quantity == 0                         → OUT_OF_STOCK
        threshold set and quantity <= threshold → LOW_STOCK
        otherwise                             → IN_STOCK
    """

    IN_STOCK = "IN_STOCK"
    """Достатньо в наявності."""

    LOW_STOCK = "LOW_STOCK"
    """Кількість на або нижче threshold - варто купити."""

    OUT_OF_STOCK = "OUT_OF_STOCK"
    """Закінчилось."""

    @classmethod
    def classify(cls, quantity: Decimal, threshold: Optional[Decimal] = None) -> "StockStatus":
        """Classify quantity against optional low-stock threshold."""
        if quantity == 0:
            return cls.OUT_OF_STOCK
        if threshold is not None and quantity <= threshold:
            return cls.LOW_STOCK
        return cls.IN_STOCK

    @property
    def needs_replenishment(self) -> bool:
        """LOW_STOCK або OUT_OF_STOCK."""
        return self is not StockStatus.IN_STOCK

    @property
    def priority(self) -> int:
        """Priority (більше = важливіше): OUT_OF_STOCK 3, LOW_STOCK 2, IN_STOCK 1."""
        return _STOCK_PRIORITY[self]

    def has_higher_priority_than(self, other: "StockStatus") -> bool:
        return self.priority > other.priority


_STOCK_PRIORITY = {
    StockStatus.OUT_OF_STOCK: 3,
    StockStatus.LOW_STOCK: 2,
    StockStatus.IN_STOCK: 1,
}


class ExpiryStatus(str, Enum):
    """Expiry classification (derived from effective expiry date).

    Thresholds (calendar days until effective date):
        < 0      → EXPIRED
        <= 1     → CRITICAL
        <= 3     → EXPIRING_SOON
        <= 7     → NEAR_EXPIRY
        otherwise / no date → FRESH
    """

    FRESH = "FRESH"
    """Свіжий або без дати (unknown treated as fresh)."""

    NEAR_EXPIRY = "NEAR_EXPIRY"
    """Спливає протягом тижня."""

    EXPIRING_SOON = "EXPIRING_SOON"
    """Спливає протягом 3 днів."""

    CRITICAL = "CRITICAL"
    """Сьогодні або завтра."""

    EXPIRED = "EXPIRED"
    """Дата вже в минулому."""

    @classmethod
    def from_days_until_expiry(cls, days: Optional[int]) -> "ExpiryStatus":
        """Map days-until-expiry to status.

        Args:
            days: Calendar days until effective expiry date, або None якщо дати немає.

        Returns:
            ExpiryStatus.

        Example:
            >>> ExpiryStatus.from_days_until_expiry(-1)  # EXPIRED
            >>> ExpiryStatus.from_days_until_expiry(0)   # CRITICAL (expires today)
            >>> ExpiryStatus.from_days_until_expiry(None)  # FRESH
        """
        if days is None:
            return cls.FRESH
        if days < 0:
            return cls.EXPIRED
        if days <= CRITICAL_DAYS:
            return cls.CRITICAL
        if days <= EXPIRING_SOON_DAYS:
            return cls.EXPIRING_SOON
        if days <= NEAR_EXPIRY_DAYS:
            return cls.NEAR_EXPIRY
        return cls.FRESH

    @property
    def needs_attention(self) -> bool:
        """Все крім FRESH."""
        return self is not ExpiryStatus.FRESH

    @property
    def is_expired(self) -> bool:
        return self is ExpiryStatus.EXPIRED

    @property
    def priority(self) -> int:
        """Priority: EXPIRED 5, CRITICAL 4, EXPIRING_SOON 3, NEAR_EXPIRY 2, FRESH 1."""
        return _EXPIRY_PRIORITY[self]

    def has_higher_priority_than(self, other: "ExpiryStatus") -> bool:
        return self.priority > other.priority


_EXPIRY_PRIORITY = {
    ExpiryStatus.EXPIRED: 5,
    ExpiryStatus.CRITICAL: 4,
    ExpiryStatus.EXPIRING_SOON: 3,
    ExpiryStatus.NEAR_EXPIRY: 2,
    ExpiryStatus.FRESH: 1,
}


class StorageType(str, Enum):
    """Where an ingredient is kept."""

    REFRIGERATED = "REFRIGERATED"
    """Холодильник."""

    FROZEN = "FROZEN"
    """Морозилка."""

    ROOM_TEMPERATURE = "ROOM_TEMPERATURE"
    """Кімнатна температура (pantry shelf)."""


class UnitType(str, Enum):
    """Measurement kind of a Unit."""

    COUNT = "COUNT"
    """Штуки (pcs, pack)."""

    WEIGHT = "WEIGHT"
    """Вага (g, kg)."""

    VOLUME = "VOLUME"
    """Об'єм (ml, L)."""
