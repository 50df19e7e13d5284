"""Unit tests для ingredient query handlers."""

from datetime import timedelta

import pytest

from conftest import DAIRY, FIXED_NOW, GRAM, OTHER_USER_ID, OWNER_ID, TODAY, build_ingredient
from pantry.application.ingredients.handlers import (
    GetCategoriesHandler,
    GetExpiringIngredientsHandler,
    GetIngredientByIdHandler,
    GetIngredientsByCategoryHandler,
    GetIngredientsHandler,
    GetUnitsHandler,
)
from pantry.application.ingredients.queries import (
    GetCategoriesQuery,
    GetExpiringIngredientsQuery,
    GetIngredientByIdQuery,
    GetIngredientsByCategoryQuery,
    GetIngredientsQuery,
    GetUnitsQuery,
)
from pantry.domain.ingredients.exceptions import CategoryNotFoundError, IngredientNotFoundError
from pantry.domain.ingredients.repositories import ExpiryFilter, IngredientSortField, SortOrder
from pantry.domain.ingredients.value_objects import StockStatus


@pytest.fixture
def handler_args(ingredient_repository, category_repository, unit_repository, settings, clock):
    return dict(
        ingredient_repository=ingredient_repository,
        category_repository=category_repository,
        unit_repository=unit_repository,
        settings=settings,
        clock=clock,
    )


@pytest.fixture
async def pantry_items(ingredient_repository):
    """Tomato (fresh), Milk (expiring, dairy), Egg (expired, out of stock), Rice (no dates)."""
    items = {
        "Tomato": build_ingredient(
            name="Tomato", use_by_date=TODAY + timedelta(days=20), created_at=FIXED_NOW
        ),
        "Milk": build_ingredient(
            name="Milk",
            category_id=DAIRY,
            quantity="1",
            use_by_date=TODAY + timedelta(days=2),
            created_at=FIXED_NOW + timedelta(minutes=1),
        ),
        "Egg": build_ingredient(
            name="Egg",
            quantity="0",
            best_before_date=TODAY - timedelta(days=1),
            created_at=FIXED_NOW + timedelta(minutes=2),
        ),
        "Rice": build_ingredient(
            name="Rice", quantity="500", unit_id=GRAM, threshold=None,
            created_at=FIXED_NOW + timedelta(minutes=3),
        ),
    }
    for ingredient in items.values():
        await ingredient_repository.save(ingredient)
    await ingredient_repository.save(build_ingredient(name="Foreign", user_id=OTHER_USER_ID))
    return items


def _names(dtos) -> list[str]:
    return [dto.name for dto in dtos]


class TestGetIngredientsHandler:
    """Tests для listing з filters / sort / pagination."""

    @pytest.mark.asyncio
    async def test_default_listing_newest_first(self, handler_args, pantry_items):
        handler = GetIngredientsHandler(**handler_args)

        result = await handler.execute(GetIngredientsQuery(), OWNER_ID)

        assert _names(result.items) == ["Rice", "Egg", "Milk", "Tomato"]
        assert result.pagination.total == 4
        assert result.items[0].unit_symbol == "g"
        assert result.items[2].category_name == "Dairy"

    @pytest.mark.asyncio
    async def test_search_is_case_insensitive_substring(self, handler_args, pantry_items):
        handler = GetIngredientsHandler(**handler_args)

        result = await handler.execute(GetIngredientsQuery(search="MAT"), OWNER_ID)

        assert _names(result.items) == ["Tomato"]

    @pytest.mark.asyncio
    async def test_category_and_stock_filters(self, handler_args, pantry_items):
        handler = GetIngredientsHandler(**handler_args)

        dairy = await handler.execute(GetIngredientsQuery(category_id=str(DAIRY)), OWNER_ID)
        out = await handler.execute(
            GetIngredientsQuery(stock_status=StockStatus.OUT_OF_STOCK), OWNER_ID
        )

        assert _names(dairy.items) == ["Milk"]
        assert _names(out.items) == ["Egg"]

    @pytest.mark.parametrize(
        "expiry_filter,expected",
        [
            (ExpiryFilter.EXPIRED, ["Egg"]),
            (ExpiryFilter.EXPIRING, ["Milk"]),
            (ExpiryFilter.FRESH, ["Rice", "Tomato"]),
        ],
    )
    @pytest.mark.asyncio
    async def test_expiry_filter(self, handler_args, pantry_items, expiry_filter, expected):
        handler = GetIngredientsHandler(**handler_args)

        result = await handler.execute(
            GetIngredientsQuery(
                expiry_filter=expiry_filter,
                sort_by=IngredientSortField.NAME,
                sort_order=SortOrder.ASC,
            ),
            OWNER_ID,
        )

        assert _names(result.items) == expected

    @pytest.mark.asyncio
    async def test_sort_by_expiry_puts_undated_last(self, handler_args, pantry_items):
        handler = GetIngredientsHandler(**handler_args)

        result = await handler.execute(
            GetIngredientsQuery(sort_by=IngredientSortField.EXPIRY_DATE, sort_order=SortOrder.ASC),
            OWNER_ID,
        )

        assert _names(result.items) == ["Egg", "Milk", "Tomato", "Rice"]

    @pytest.mark.asyncio
    async def test_pagination(self, handler_args, pantry_items):
        """Test: limit=3 → 2 сторінки; page 2 містить залишок."""
        handler = GetIngredientsHandler(**handler_args)

        result = await handler.execute(
            GetIngredientsQuery(
                page=2, limit=3, sort_by=IngredientSortField.NAME, sort_order=SortOrder.ASC
            ),
            OWNER_ID,
        )

        assert _names(result.items) == ["Tomato"]
        assert result.pagination.total == 4
        assert result.pagination.total_pages == 2
        assert result.pagination.has_next is False
        assert result.pagination.has_prev is True

    @pytest.mark.asyncio
    async def test_limit_is_clamped(self, handler_args, settings):
        handler = GetIngredientsHandler(**handler_args)

        result = await handler.execute(GetIngredientsQuery(limit=10_000), OWNER_ID)

        assert result.pagination.limit == settings.max_page_size
        assert result.pagination.total == 0


class TestGetIngredientByIdHandler:
    @pytest.mark.asyncio
    async def test_found(self, handler_args, pantry_items):
        handler = GetIngredientByIdHandler(**handler_args)
        milk = pantry_items["Milk"]

        dto = await handler.execute(GetIngredientByIdQuery(str(milk.id)), OWNER_ID)

        assert dto.id == str(milk.id)
        assert dto.stock_status == "LOW_STOCK"
        assert dto.expiry_status == "EXPIRING_SOON"
        assert dto.days_until_expiry == 2

    @pytest.mark.asyncio
    async def test_other_owner_not_found(self, handler_args, pantry_items):
        handler = GetIngredientByIdHandler(**handler_args)

        with pytest.raises(IngredientNotFoundError):
            await handler.execute(GetIngredientByIdQuery(str(pantry_items["Milk"].id)), OTHER_USER_ID)


class TestGetIngredientsByCategoryHandler:
    """Tests для shopping view по category."""

    @pytest.mark.asyncio
    async def test_sorted_by_stock_status_then_name(self, handler_args, pantry_items):
        """Test: OUT_OF_STOCK першими, потім LOW_STOCK, IN_STOCK; далі по name."""
        handler = GetIngredientsByCategoryHandler(**handler_args)

        result = await handler.execute(
            GetIngredientsByCategoryQuery(category_id="cat_vegetables"), OWNER_ID
        )

        assert result.category.name == "Vegetables"
        assert _names(result.ingredients) == ["Egg", "Rice", "Tomato"]
        assert result.summary.total_items == 3
        assert result.summary.out_of_stock_count == 1
        assert result.summary.low_stock_count == 0

    @pytest.mark.asyncio
    async def test_sorted_by_name(self, handler_args, pantry_items):
        handler = GetIngredientsByCategoryHandler(**handler_args)

        result = await handler.execute(
            GetIngredientsByCategoryQuery(category_id="cat_vegetables", sort_by="name"), OWNER_ID
        )

        assert _names(result.ingredients) == ["Egg", "Rice", "Tomato"]

    @pytest.mark.asyncio
    async def test_summary_counts_expiring(self, handler_args, pantry_items):
        handler = GetIngredientsByCategoryHandler(**handler_args)

        result = await handler.execute(GetIngredientsByCategoryQuery(category_id=str(DAIRY)), OWNER_ID)

        assert result.summary.low_stock_count == 1
        assert result.summary.expiring_soon_count == 1

    @pytest.mark.asyncio
    async def test_unknown_category(self, handler_args):
        handler = GetIngredientsByCategoryHandler(**handler_args)

        with pytest.raises(CategoryNotFoundError):
            await handler.execute(GetIngredientsByCategoryQuery(category_id="cat_unknown"), OWNER_ID)


class TestGetExpiringIngredientsHandler:
    @pytest.mark.asyncio
    async def test_excludes_expired_and_far_dates(self, handler_args, pantry_items):
        handler = GetExpiringIngredientsHandler(**handler_args)

        result = await handler.execute(GetExpiringIngredientsQuery(), OWNER_ID)

        assert _names(result) == ["Milk"]

    @pytest.mark.asyncio
    async def test_custom_window(self, handler_args, pantry_items):
        handler = GetExpiringIngredientsHandler(**handler_args)

        result = await handler.execute(GetExpiringIngredientsQuery(within_days=30), OWNER_ID)

        assert _names(result) == ["Milk", "Tomato"]


class TestMasterDataHandlers:
    @pytest.mark.asyncio
    async def test_categories_in_display_order(self, category_repository):
        result = await GetCategoriesHandler(category_repository).execute(GetCategoriesQuery(), OWNER_ID)

        assert [c.name for c in result] == ["Vegetables", "Dairy"]

    @pytest.mark.asyncio
    async def test_units(self, unit_repository):
        result = await GetUnitsHandler(unit_repository).execute(GetUnitsQuery(), OWNER_ID)

        assert [(u.symbol, u.type) for u in result] == [("pcs", "COUNT"), ("g", "WEIGHT")]
