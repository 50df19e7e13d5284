"""In-memory RepositoryFactory - transaction-scoped repositories."""

from pantry.application.shared import RepositoryFactory

from .repositories import (
    InMemoryCategoryRepository,
    InMemoryIngredientRepository,
    InMemoryShoppingSessionRepository,
    InMemoryUnitRepository,
)
from .store import InMemoryStore, InMemoryTransaction


class InMemoryRepositoryFactory(RepositoryFactory):
    """Builds repositories over the store.

    ``tx`` = None дає repositories поза transaction (для read-only handlers).
    """

    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    def create_ingredient_repository(self, tx: InMemoryTransaction | None = None) -> InMemoryIngredientRepository:
        return InMemoryIngredientRepository(self._store_for(tx), tx)

    def create_shopping_session_repository(
        self, tx: InMemoryTransaction | None = None
    ) -> InMemoryShoppingSessionRepository:
        return InMemoryShoppingSessionRepository(self._store_for(tx), tx)

    def create_category_repository(self, tx: InMemoryTransaction | None = None) -> InMemoryCategoryRepository:
        return InMemoryCategoryRepository(self._store_for(tx))

    def create_unit_repository(self, tx: InMemoryTransaction | None = None) -> InMemoryUnitRepository:
        return InMemoryUnitRepository(self._store_for(tx))

    def _store_for(self, tx: InMemoryTransaction | None) -> InMemoryStore:
        return tx.store if tx is not None else self._store
