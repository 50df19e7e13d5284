"""Ingredient query handlers (read-only)."""

import logging
from typing import Optional

from pantry.application.ingredients.dtos import (
    CategoryDTO,
    CategorySummaryDTO,
    IngredientDTO,
    IngredientListDTO,
    IngredientsByCategoryDTO,
    UnitDTO,
)
from pantry.application.ingredients.queries import (
    GetCategoriesQuery,
    GetExpiringIngredientsQuery,
    GetIngredientByIdQuery,
    GetIngredientsByCategoryQuery,
    GetIngredientsQuery,
    GetUnitsQuery,
)
from pantry.application.shared import Clock, PaginationDTO, QueryHandler, resolve_page, utc_now
from pantry.config import Settings, get_settings
from pantry.domain.ingredients.exceptions import CategoryNotFoundError, IngredientNotFoundError
from pantry.domain.ingredients.repositories import (
    CategoryRepository,
    IngredientCriteria,
    IngredientRepository,
    UnitRepository,
)
from pantry.domain.ingredients.value_objects import CategoryId, ExpiryStatus, IngredientId

from .reference_data import load_reference_data

logger = logging.getLogger(__name__)


class _IngredientQueryHandler:
    """Shared wiring: repositories + settings + clock."""

    def __init__(
        self,
        ingredient_repository: IngredientRepository,
        category_repository: CategoryRepository,
        unit_repository: UnitRepository,
        settings: Optional[Settings] = None,
        clock: Clock = utc_now,
    ) -> None:
        self.ingredient_repository = ingredient_repository
        self.category_repository = category_repository
        self.unit_repository = unit_repository
        self.settings = settings or get_settings()
        self.clock = clock

    async def _to_dtos(self, ingredients, today) -> list[IngredientDTO]:
        categories, units = await load_reference_data(
            self.category_repository, self.unit_repository, ingredients
        )
        return [
            IngredientDTO.from_entity(
                ingredient,
                today,
                categories.get(str(ingredient.category_id)),
                units.get(str(ingredient.stock.unit_id)),
            )
            for ingredient in ingredients
        ]


class GetIngredientsHandler(_IngredientQueryHandler, QueryHandler[GetIngredientsQuery, IngredientListDTO]):
    """Filtered, sorted, paged ingredient listing.

    Example:
        >>> handler = GetIngredientsHandler(ingredient_repo, category_repo, unit_repo)
        >>> result = await handler.execute(GetIngredientsQuery(search="milk"), owner_id="user-1")
        >>> result.pagination.total
    """

    async def execute(self, query: GetIngredientsQuery, owner_id: str) -> IngredientListDTO:
        page, limit = resolve_page(
            query.page,
            query.limit,
            self.settings.history_page_size,
            self.settings.max_page_size,
        )
        today = self.clock().date()

        criteria = IngredientCriteria(
            user_id=owner_id,
            search=query.search,
            category_id=CategoryId(query.category_id) if query.category_id else None,
            stock_status=query.stock_status,
            expiry_filter=query.expiry_filter,
            expiring_within_days=self.settings.expiring_within_days,
            as_of=today,
            sort_by=query.sort_by,
            sort_order=query.sort_order,
            offset=(page - 1) * limit,
            limit=limit,
        )

        ingredients = await self.ingredient_repository.find_many(criteria)
        total = await self.ingredient_repository.count(criteria)

        logger.debug(
            "get_ingredients.completed",
            extra={"user_id": owner_id, "total": total, "page": page},
        )

        return IngredientListDTO(
            items=await self._to_dtos(ingredients, today),
            pagination=PaginationDTO.build(page, limit, total),
        )


class GetIngredientByIdHandler(_IngredientQueryHandler, QueryHandler[GetIngredientByIdQuery, IngredientDTO]):
    """Single ingredient by ID."""

    async def execute(self, query: GetIngredientByIdQuery, owner_id: str) -> IngredientDTO:
        """Raises:
            IngredientNotFoundError: Відсутній, видалений або чужий.
        """
        ingredient_id = IngredientId(query.ingredient_id)
        ingredient = await self.ingredient_repository.find_by_id(owner_id, ingredient_id)
        if ingredient is None:
            raise IngredientNotFoundError(ingredient_id=str(ingredient_id))

        category = await self.category_repository.find_by_id(ingredient.category_id)
        unit = await self.unit_repository.find_by_id(ingredient.stock.unit_id)
        return IngredientDTO.from_entity(ingredient, self.clock().date(), category, unit)


class GetIngredientsByCategoryHandler(
    _IngredientQueryHandler,
    QueryHandler[GetIngredientsByCategoryQuery, IngredientsByCategoryDTO],
):
    """Ingredients of one category + summary counts (shopping view).

    Sort ``stock_status``: OUT_OF_STOCK першими, потім LOW_STOCK, IN_STOCK; далі по name.
    """

    async def execute(
        self, query: GetIngredientsByCategoryQuery, owner_id: str
    ) -> IngredientsByCategoryDTO:
        category_id = CategoryId(query.category_id)
        category = await self.category_repository.find_by_id(category_id)
        if category is None:
            raise CategoryNotFoundError(category_id=str(category_id))

        today = self.clock().date()
        ingredients = await self.ingredient_repository.find_by_category(owner_id, category_id)

        if query.sort_by == "name":
            ingredients.sort(key=lambda i: i.name.value.casefold())
        else:
            ingredients.sort(key=lambda i: (-i.stock_status.priority, i.name.value.casefold()))

        summary = CategorySummaryDTO(total_items=len(ingredients))
        for ingredient in ingredients:
            if ingredient.stock.is_out_of_stock:
                summary.out_of_stock_count += 1
            elif ingredient.stock.is_low:
                summary.low_stock_count += 1
            if ingredient.get_expiry_status(today) in (ExpiryStatus.CRITICAL, ExpiryStatus.EXPIRING_SOON):
                summary.expiring_soon_count += 1

        return IngredientsByCategoryDTO(
            category=CategoryDTO.from_entity(category),
            ingredients=await self._to_dtos(ingredients, today),
            summary=summary,
        )


class GetExpiringIngredientsHandler(
    _IngredientQueryHandler,
    QueryHandler[GetExpiringIngredientsQuery, list[IngredientDTO]],
):
    """Ingredients expiring within N days, ordered by effective expiry date."""

    async def execute(self, query: GetExpiringIngredientsQuery, owner_id: str) -> list[IngredientDTO]:
        within_days = (
            query.within_days if query.within_days is not None else self.settings.expiring_within_days
        )
        today = self.clock().date()
        ingredients = await self.ingredient_repository.find_expiring_soon(
            owner_id, within_days, as_of=today
        )
        return await self._to_dtos(ingredients, today)


class GetCategoriesHandler(QueryHandler[GetCategoriesQuery, list[CategoryDTO]]):
    def __init__(self, category_repository: CategoryRepository) -> None:
        self.category_repository = category_repository

    async def execute(self, query: GetCategoriesQuery, owner_id: str) -> list[CategoryDTO]:
        return [CategoryDTO.from_entity(c) for c in await self.category_repository.find_all()]


class GetUnitsHandler(QueryHandler[GetUnitsQuery, list[UnitDTO]]):
    def __init__(self, unit_repository: UnitRepository) -> None:
        self.unit_repository = unit_repository

    async def execute(self, query: GetUnitsQuery, owner_id: str) -> list[UnitDTO]:
        return [UnitDTO.from_entity(u) for u in await self.unit_repository.find_all()]
