"""CheckIngredient Command - перевірити ingredient під час shopping."""

from dataclasses import dataclass

from pantry.application.shared import Command


@dataclass(frozen=True)
class CheckIngredientCommand(Command):
    """Command для check ingredient в ACTIVE session.

    Orchestrates:
    1. Load session, перевірити owner (SessionAccessDeniedError)
    2. Load ingredient, перевірити owner (IngredientAccessDeniedError)
    3. session.check_item() з configured RecheckPolicy
    4. Update session в transaction
    5. Publish ItemChecked
    """

    session_id: str
    """ID ACTIVE session."""

    ingredient_id: str
    """ID ingredient що перевіряється."""
