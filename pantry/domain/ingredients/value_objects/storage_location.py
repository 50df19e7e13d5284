"""StorageLocation value object."""

from dataclasses import dataclass
from typing import Optional

from pantry.domain.shared import ValueObject, validate_value_object

from .enums import StorageType

STORAGE_DETAIL_MAX_LENGTH = 50


@dataclass(frozen=True)
class StorageLocation(ValueObject):
    """Storage type + optional free-text detail.

    Example:
        >>> StorageLocation(StorageType.REFRIGERATED, "vegetable drawer")
        >>> StorageLocation(StorageType.FROZEN, "  ").detail  # None
    """

    type: StorageType
    """Холодильник, морозилка або кімнатна температура."""

    detail: Optional[str] = None
    """Уточнення (полиця, ящик), <= 50 chars."""

    def __post_init__(self) -> None:
        validate_value_object(
            isinstance(self.type, StorageType),
            "Storage type must be a StorageType",
            type=repr(self.type),
        )
        if self.detail is not None:
            detail = self.detail.strip()
            validate_value_object(
                len(detail) <= STORAGE_DETAIL_MAX_LENGTH,
                f"Storage detail must be at most {STORAGE_DETAIL_MAX_LENGTH} characters",
                length=len(detail),
            )
            object.__setattr__(self, "detail", detail or None)

    def __str__(self) -> str:
        if self.detail:
            return f"{self.type.value} ({self.detail})"
        return self.type.value
