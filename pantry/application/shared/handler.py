"""Base Handler classes для Commands та Queries.

Handler - orchestrates domain logic для виконання одного use case.
"""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from .command import Command
from .query import Query

TCommand = TypeVar("TCommand", bound=Command)
TQuery = TypeVar("TQuery", bound=Query)
TResult = TypeVar("TResult")


class CommandHandler(ABC, Generic[TCommand, TResult]):
    """Base class для command handlers.

    Command Handler відповідає за:
    - Load aggregates з repository (scoped by owner)
    - Execute domain logic (aggregate methods)
    - Save changes (в transaction коли пише більше одного запису)
    - Publish domain events після commit

    Example:
        >>> class DeleteIngredientHandler(CommandHandler[DeleteIngredientCommand, None]):
        ...     def __init__(self, transaction_manager, repository_factory):
        ...         self.transaction_manager = transaction_manager
        ...         self.repository_factory = repository_factory
        ...
        ...     async def execute(self, command, owner_id):
        ...         async def work(tx):
        ...             repo = self.repository_factory.create_ingredient_repository(tx)
        ...             ingredient = await repo.find_by_id(owner_id, IngredientId(command.ingredient_id))
        ...             ingredient.delete()
        ...             await repo.update(ingredient)
        ...         await self.transaction_manager.run(work)

    Why Handlers?
        - **Single Responsibility**: One handler = one use case
        - **Testable**: Easy to test (inject mock repositories)
        - **Reusable**: Can be called from API, workers, tests
    """

    @abstractmethod
    async def execute(self, command: TCommand, owner_id: str) -> TResult:
        """Handle command on behalf of ``owner_id``.

        Args:
            command: Command to handle.
            owner_id: Already-authenticated user ID.

        Returns:
            Result projection (DTO).

        Raises:
            DomainException: If business rule violated.
        """
        pass


class QueryHandler(ABC, Generic[TQuery, TResult]):
    """Base class для query handlers.

    Query Handler відповідає за:
    - Fetch data з repository
    - Transform to DTOs
    - Apply filters, sorting, pagination
    - NO side effects (read-only)
    """

    @abstractmethod
    async def execute(self, query: TQuery, owner_id: str) -> TResult:
        """Handle query on behalf of ``owner_id``.

        Note:
            Queries MUST NOT have side effects.
        """
        pass
