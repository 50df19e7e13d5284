"""In-memory TransactionManager - snapshot / restore store."""

import asyncio
import logging
from typing import TypeVar

from pantry.application.shared import TransactionCallback, TransactionManager

from .store import InMemoryStore, InMemoryTransaction

logger = logging.getLogger(__name__)

T = TypeVar("T")


class InMemoryTransactionManager(TransactionManager):
    """In-memory implementation of TransactionManager port.

    Відповідальності:
    - Snapshot store перед callback
    - Restore snapshot якщо callback raise'ить (rollback), exception re-raised як є
    - Serialize transactions (asyncio.Lock), щоб rollback однієї не стер writes іншої

    Example:
        >>> manager = InMemoryTransactionManager(store)
        >>> async def work(tx):
        ...     repo = factory.create_ingredient_repository(tx)
        ...     ...
        >>> await manager.run(work)
    """

    def __init__(self, store: InMemoryStore) -> None:
        self._store = store
        self._lock = asyncio.Lock()

    async def run(self, callback: TransactionCallback[T]) -> T:
        async with self._lock:
            snapshot = self._store.snapshot()
            tx = InMemoryTransaction(store=self._store)
            logger.debug("transaction.started")

            try:
                result = await callback(tx)
            except BaseException as exc:
                self._store.restore(snapshot)
                logger.warning(
                    "transaction.rolled_back",
                    extra={
                        "exception_type": type(exc).__name__,
                        "discarded_writes": len(tx.writes),
                    },
                )
                raise

            logger.debug("transaction.committed", extra={"writes": len(tx.writes)})
            return result
