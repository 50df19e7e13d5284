"""ShoppingLocation value object - де відбувається session."""

import math
from dataclasses import dataclass
from typing import Optional

from pantry.domain.shared import ValueObject, validate_value_object

EARTH_RADIUS_KM = 6371.0
LOCATION_NAME_MAX_LENGTH = 100


@dataclass(frozen=True)
class ShoppingLocation(ValueObject):
    """Geolocation + optional place name.

    Example:
        >>> shop = ShoppingLocation(35.6812, 139.7671, "Tokyo Station Market")
        >>> home = ShoppingLocation(35.6895, 139.6917)
        >>> round(shop.distance_to(home), 1)  # ~6.9 km
    """

    latitude: float
    """Широта, [-90, 90]."""

    longitude: float
    """Довгота, [-180, 180]."""

    name: Optional[str] = None
    """Назва магазину, <= 100 chars."""

    def __post_init__(self) -> None:
        for field_name in ("latitude", "longitude"):
            value = getattr(self, field_name)
            validate_value_object(
                isinstance(value, (int, float)) and not isinstance(value, bool) and math.isfinite(value),
                f"{field_name.capitalize()} must be a finite number",
                value=repr(value),
            )
        validate_value_object(
            -90 <= self.latitude <= 90,
            "Latitude must be between -90 and 90",
            latitude=self.latitude,
        )
        validate_value_object(
            -180 <= self.longitude <= 180,
            "Longitude must be between -180 and 180",
            longitude=self.longitude,
        )
        if self.name is not None:
            name = self.name.strip()
            validate_value_object(
                len(name) <= LOCATION_NAME_MAX_LENGTH,
                f"Location name must be at most {LOCATION_NAME_MAX_LENGTH} characters",
                length=len(name),
            )
            object.__setattr__(self, "name", name or None)

    def distance_to(self, other: "ShoppingLocation") -> float:
        """Great-circle distance in km (haversine)."""
        lat1, lat2 = math.radians(self.latitude), math.radians(other.latitude)
        d_lat = lat2 - lat1
        d_lon = math.radians(other.longitude - self.longitude)

        a = math.sin(d_lat / 2) ** 2 + math.cos(lat1) * math.cos(lat2) * math.sin(d_lon / 2) ** 2
        return EARTH_RADIUS_KM * 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
