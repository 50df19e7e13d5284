"""Transaction boundary ports.

TransactionManager + RepositoryFactory замінюють Unit of Work для flows,
що пишуть більше одного запису: handler отримує transaction-scoped
repositories і всі writes в scope або commit'яться разом, або rollback'яться.
"""

from abc import ABC, abstractmethod
from typing import Any, Awaitable, Callable, TypeVar

from pantry.domain.ingredients.repositories import (
    CategoryRepository,
    IngredientRepository,
    UnitRepository,
)
from pantry.domain.shopping.repositories import ShoppingSessionRepository

T = TypeVar("T")

TransactionCallback = Callable[[Any], Awaitable[T]]
"""Async callback що отримує opaque transaction context."""


class TransactionManager(ABC):
    """Abstract transaction manager.

    Example (Use case uses):
        >>> async def work(tx):
        ...     sessions = repository_factory.create_shopping_session_repository(tx)
        ...     session = await sessions.find_by_id(session_id)
        ...     session.complete()
        ...     return await sessions.update(session)
        >>> session = await transaction_manager.run(work)

    Contract:
        - Callback result повертається як є
        - Exception в callback → rollback всіх writes в scope, exception re-raised
        - Exceptions не wrap'аються
    """

    @abstractmethod
    async def run(self, callback: TransactionCallback[T]) -> T:
        """Run ``callback`` inside one transaction."""
        pass


class RepositoryFactory(ABC):
    """Builds repositories bound to a transaction context."""

    @abstractmethod
    def create_ingredient_repository(self, tx: Any) -> IngredientRepository:
        pass

    @abstractmethod
    def create_shopping_session_repository(self, tx: Any) -> ShoppingSessionRepository:
        pass

    @abstractmethod
    def create_category_repository(self, tx: Any) -> CategoryRepository:
        pass

    @abstractmethod
    def create_unit_repository(self, tx: Any) -> UnitRepository:
        pass
