"""StartShoppingSession Command - почати shopping trip."""

from dataclasses import dataclass
from typing import Optional

from pantry.application.shared import Command
from pantry.domain.shopping.value_objects import DeviceType


@dataclass(frozen=True)
class StartShoppingSessionCommand(Command):
    """Command для старту нової ACTIVE session.

    Location задається парою latitude/longitude; ``location_name`` без
    координат ігнорується.

    Example:
        >>> command = StartShoppingSessionCommand(
        ...     device_type=DeviceType.MOBILE,
        ...     latitude=35.6812,
        ...     longitude=139.7671,
        ...     location_name="Tokyo Station Market",
        ... )
        >>> dto = await handler.execute(command, owner_id="user-1")
    """

    device_type: Optional[DeviceType] = None
    """Пристрій з якого користувач шопиться."""

    latitude: Optional[float] = None
    longitude: Optional[float] = None

    location_name: Optional[str] = None
    """Назва магазину (<= 100 chars)."""
