"""ExpiryInfo value object - best-before / use-by pair."""

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from pantry.domain.shared import ValueObject, validate_value_object

from .enums import ExpiryStatus


@dataclass(frozen=True)
class ExpiryInfo(ValueObject):
    """Best-before and use-by dates.

    Правила:
    - Хоча б одна дата обов'язкова (ingredient без дат просто не має ExpiryInfo)
    - Якщо обидві задані, use-by не може бути пізніше best-before
    - Use-by має пріоритет при класифікації (effective_date)

    Example:
        >>> info = ExpiryInfo(best_before_date=date(2026, 1, 10), use_by_date=date(2026, 1, 5))
        >>> info.effective_date  # date(2026, 1, 5)
        >>> info.days_until_expiry(date(2026, 1, 3))  # 2
    """

    best_before_date: Optional[date] = None
    """Best-before (якість), може бути None."""

    use_by_date: Optional[date] = None
    """Use-by (безпека), може бути None."""

    def __post_init__(self) -> None:
        for name in ("best_before_date", "use_by_date"):
            value = getattr(self, name)
            if isinstance(value, datetime):
                object.__setattr__(self, name, value.date())
            else:
                validate_value_object(
                    value is None or isinstance(value, date),
                    f"{name} must be a date",
                    value=repr(value),
                )

        validate_value_object(
            self.best_before_date is not None or self.use_by_date is not None,
            "At least one of best-before or use-by date is required",
        )
        if self.best_before_date is not None and self.use_by_date is not None:
            validate_value_object(
                self.use_by_date <= self.best_before_date,
                "Use-by date cannot be later than best-before date",
                best_before_date=self.best_before_date.isoformat(),
                use_by_date=self.use_by_date.isoformat(),
            )

    @classmethod
    def from_dates(
        cls, best_before_date: Optional[date], use_by_date: Optional[date]
    ) -> Optional["ExpiryInfo"]:
        """Build ExpiryInfo, або None коли обидві дати відсутні."""
        if best_before_date is None and use_by_date is None:
            return None
        return cls(best_before_date=best_before_date, use_by_date=use_by_date)

    @property
    def effective_date(self) -> date:
        """Use-by якщо задано, інакше best-before."""
        return self.use_by_date if self.use_by_date is not None else self.best_before_date  # type: ignore[return-value]

    def days_until_expiry(self, today: date) -> int:
        """Calendar days from ``today`` to effective date (negative = expired)."""
        return (self.effective_date - today).days

    def status(self, today: date) -> ExpiryStatus:
        return ExpiryStatus.from_days_until_expiry(self.days_until_expiry(today))

    def is_expired(self, today: date) -> bool:
        return self.days_until_expiry(today) < 0
