"""DeleteIngredient Command - soft delete ingredient."""

from dataclasses import dataclass

from pantry.application.shared import Command


@dataclass(frozen=True)
class DeleteIngredientCommand(Command):
    """Command для soft delete.

    Повторне видалення дає IngredientNotFoundError (deleted ingredient невидимий).
    """

    ingredient_id: str
    """ID ingredient для видалення."""
