"""Base Command class для CQRS pattern.

Command - запит на зміну стану системи (write operation).
Commands мають side effects (змінюють дані).
"""

from abc import ABC
from dataclasses import dataclass
from enum import Enum
from typing import Final, TypeVar, Union

T = TypeVar("T")


class _Unset(Enum):
    UNSET = "UNSET"

    def __repr__(self) -> str:
        return "UNSET"

    def __bool__(self) -> bool:
        return False


UNSET: Final = _Unset.UNSET
"""Sentinel "поле не передано" для partial updates.

Три стани поля в update command:
- ``UNSET`` - keep (залишити як є)
- ``None`` - clear (тільки для nullable полів)
- value - replace
"""

Maybe = Union[T, _Unset]
"""Type alias: значення або UNSET."""


def is_set(value: object) -> bool:
    """True якщо поле передано (включно з явним None)."""
    return value is not UNSET


@dataclass(frozen=True)
class Command(ABC):
    """Base class для всіх commands.

    Command характеристики:
    - **Immutable**: frozen=True запобігає змінам
    - **Intent**: Чітко виражає намір (CreateIngredientCommand, CheckIngredientCommand)
    - **No owner inside**: owner_id передається окремо в ``execute``
    - **No business logic**: Тільки data, logic в Handler

    Example:
        >>> @dataclass(frozen=True)
        ... class DeleteIngredientCommand(Command):
        ...     ingredient_id: str

        >>> command = DeleteIngredientCommand(ingredient_id="ing_abc")
        >>> await handler.execute(command, owner_id="user-1")
    """

    pass
