"""AbandonShoppingSession Command."""

from dataclasses import dataclass

from pantry.application.shared import Command


@dataclass(frozen=True)
class AbandonShoppingSessionCommand(Command):
    """Command для ACTIVE → ABANDONED."""

    session_id: str

    reason: str = "user-action"
    """Причина (для ShoppingSessionAbandoned event)."""
