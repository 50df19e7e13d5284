"""Unit tests для Ingredient Aggregate.

Pure unit tests - тільки business logic, zero dependencies.
"""

from datetime import date, timedelta
from decimal import Decimal

import pytest

from conftest import FIXED_NOW, OWNER_ID, OTHER_USER_ID, TODAY, build_ingredient
from pantry.domain.ingredients.events import (
    IngredientCreated,
    IngredientDeleted,
    IngredientUpdated,
    StockConsumed,
    StockDepleted,
    StockLevelLow,
    StockReplenished,
)
from pantry.domain.ingredients.exceptions import IngredientDeletedError, InsufficientStockError
from pantry.domain.ingredients.value_objects import (
    CategoryId,
    ExpiryInfo,
    ExpiryStatus,
    IngredientName,
    Memo,
    StockStatus,
    StorageLocation,
    StorageType,
)
from pantry.domain.shared import ErrorKind


class TestIngredientCreation:
    """Tests для створення Ingredient."""

    def test_create_emits_created_event(self):
        """Test: create() генерує ID та IngredientCreated."""
        # Arrange & Act
        ingredient = build_ingredient()
        fresh = type(ingredient).create(
            user_id=OWNER_ID,
            name=ingredient.name,
            category_id=ingredient.category_id,
            stock=ingredient.stock,
            purchase_date=ingredient.purchase_date,
            now=FIXED_NOW,
        )

        # Assert
        events = fresh.get_domain_events()
        assert len(events) == 1
        assert isinstance(events[0], IngredientCreated)
        assert events[0].ingredient_id == str(fresh.id)
        assert events[0].quantity == Decimal("5")
        assert str(fresh.id).startswith("ing_")
        assert fresh.created_at == fresh.updated_at == FIXED_NOW
        assert fresh.is_deleted is False

    def test_owner_is_read_only(self):
        """Test: user_id не можна змінити після створення."""
        ingredient = build_ingredient()

        with pytest.raises(AttributeError):
            ingredient.user_id = OTHER_USER_ID

        assert ingredient.is_owned_by(OWNER_ID)
        assert not ingredient.is_owned_by(OTHER_USER_ID)


class TestIngredientClassification:
    """Tests для derived stock / expiry status."""

    def test_stock_scenario_in_low_out(self):
        """Test: quantity 5 → IN_STOCK; 2 → LOW_STOCK; 0 → OUT_OF_STOCK (threshold 2)."""
        ingredient = build_ingredient(quantity="5", threshold="2")
        assert ingredient.stock_status is StockStatus.IN_STOCK

        ingredient.update_stock(ingredient.stock.with_quantity(Decimal("2")), FIXED_NOW)
        assert ingredient.stock_status is StockStatus.LOW_STOCK

        ingredient.update_stock(ingredient.stock.with_quantity(Decimal("0")), FIXED_NOW)
        assert ingredient.stock_status is StockStatus.OUT_OF_STOCK
        assert ingredient.is_in_stock is False

    def test_no_dates_is_fresh(self):
        """Test: Без дат - FRESH (unknown treated as fresh)."""
        ingredient = build_ingredient()

        assert ingredient.get_expiry_status(TODAY) is ExpiryStatus.FRESH
        assert ingredient.days_until_expiry(TODAY) is None
        assert ingredient.is_expired(TODAY) is False

    @pytest.mark.parametrize(
        "offset,expected",
        [
            (-1, ExpiryStatus.EXPIRED),
            (0, ExpiryStatus.CRITICAL),
            (1, ExpiryStatus.CRITICAL),
            (3, ExpiryStatus.EXPIRING_SOON),
            (7, ExpiryStatus.NEAR_EXPIRY),
            (8, ExpiryStatus.FRESH),
        ],
    )
    def test_use_by_classification(self, offset, expected):
        ingredient = build_ingredient(use_by_date=TODAY + timedelta(days=offset))
        assert ingredient.get_expiry_status(TODAY) is expected

    def test_use_by_wins_over_best_before(self):
        ingredient = build_ingredient(
            best_before_date=TODAY + timedelta(days=10),
            use_by_date=TODAY + timedelta(days=2),
        )
        assert ingredient.get_expiry_status(TODAY) is ExpiryStatus.EXPIRING_SOON


class TestIngredientUpdates:
    """Tests для field-by-field updates."""

    def test_update_name_emits_event(self):
        ingredient = build_ingredient()

        changed = ingredient.update_name(IngredientName("Cherry tomato"), FIXED_NOW + timedelta(hours=1))

        assert changed is True
        assert ingredient.name.value == "Cherry tomato"
        assert ingredient.updated_at == FIXED_NOW + timedelta(hours=1)
        event = ingredient.get_domain_events()[0]
        assert isinstance(event, IngredientUpdated)
        assert event.changed_fields == ("name",)

    def test_same_value_is_noop(self):
        """Test: Update тим самим значенням - без event і без touch."""
        ingredient = build_ingredient()

        changed = ingredient.update_category(CategoryId("cat_vegetables"), FIXED_NOW + timedelta(hours=1))

        assert changed is False
        assert ingredient.has_domain_events is False
        assert ingredient.updated_at == FIXED_NOW

    def test_clear_nullable_fields(self):
        ingredient = build_ingredient(best_before_date=TODAY + timedelta(days=3))
        ingredient.update_memo(Memo("note"))

        ingredient.update_memo(None)
        ingredient.update_expiry_info(None)

        assert ingredient.memo is None
        assert ingredient.expiry_info is None

    def test_update_stock_lists_changed_fields(self):
        ingredient = build_ingredient()
        new_stock = ingredient.stock.with_storage_location(StorageLocation(StorageType.FROZEN))

        ingredient.update_stock(new_stock, FIXED_NOW)

        event = ingredient.get_domain_events()[0]
        assert event.changed_fields == ("stock.storage_location",)

    def test_deleted_ingredient_cannot_be_modified(self):
        """Test: Soft-deleted ingredient - IngredientDeletedError (business rule)."""
        ingredient = build_ingredient()
        ingredient.delete(FIXED_NOW)

        with pytest.raises(IngredientDeletedError) as exc_info:
            ingredient.update_name(IngredientName("Other"))

        assert exc_info.value.kind is ErrorKind.BUSINESS_RULE


class TestIngredientStockEvents:
    """Tests для stock transition events."""

    def test_crossing_threshold_emits_stock_level_low(self):
        ingredient = build_ingredient(quantity="5", threshold="2")

        ingredient.consume(Decimal("3"), FIXED_NOW)

        events = ingredient.get_domain_events()
        assert [type(e) for e in events] == [StockConsumed, StockLevelLow]
        assert events[0].remaining_quantity == Decimal("2")

    def test_consume_everything_emits_depleted(self):
        ingredient = build_ingredient(quantity="5", threshold="2")

        ingredient.consume(Decimal("5"), FIXED_NOW)

        assert ingredient.stock_status is StockStatus.OUT_OF_STOCK
        assert isinstance(ingredient.get_domain_events()[-1], StockDepleted)

    def test_consume_more_than_available_raises(self):
        ingredient = build_ingredient(quantity="1")

        with pytest.raises(InsufficientStockError):
            ingredient.consume(Decimal("2"))

        assert ingredient.stock.quantity == Decimal("1")

    def test_consume_non_positive_raises(self):
        with pytest.raises(InsufficientStockError):
            build_ingredient().consume(Decimal("0"))

    def test_replenish_emits_replenished(self):
        ingredient = build_ingredient(quantity="0")

        ingredient.replenish(Decimal("4"), FIXED_NOW)

        event = ingredient.get_domain_events()[0]
        assert isinstance(event, StockReplenished)
        assert event.previous_quantity == Decimal("0")
        assert event.new_quantity == Decimal("4")


class TestIngredientDeletion:
    """Tests для soft delete."""

    def test_delete_stamps_timestamp(self):
        ingredient = build_ingredient()

        ingredient.delete(FIXED_NOW + timedelta(days=1))

        assert ingredient.is_deleted is True
        assert ingredient.deleted_at == FIXED_NOW + timedelta(days=1)
        assert isinstance(ingredient.get_domain_events()[0], IngredientDeleted)

    def test_delete_twice_raises(self):
        ingredient = build_ingredient()
        ingredient.delete()

        with pytest.raises(IngredientDeletedError):
            ingredient.delete()


class TestDuplicateKey:
    def test_duplicate_key_components(self):
        ingredient = build_ingredient(use_by_date=date(2026, 3, 20))

        assert ingredient.duplicate_key == (
            "Tomato",
            ExpiryInfo(use_by_date=date(2026, 3, 20)),
            StorageLocation(StorageType.REFRIGERATED),
        )
