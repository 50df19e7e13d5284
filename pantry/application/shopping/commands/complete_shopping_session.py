"""CompleteShoppingSession Command."""

from dataclasses import dataclass

from pantry.application.shared import Command


@dataclass(frozen=True)
class CompleteShoppingSessionCommand(Command):
    """Command для ACTIVE → COMPLETED."""

    session_id: str
