"""Unit tests для Ingredient value objects.

Pure unit tests - тільки validation та classification rules.
"""

from datetime import date, datetime, timezone
from decimal import Decimal

import pytest

from pantry.domain.ingredients.value_objects import (
    CategoryId,
    ExpiryInfo,
    ExpiryStatus,
    IngredientId,
    IngredientName,
    IngredientStock,
    Memo,
    Price,
    StockStatus,
    StorageLocation,
    StorageType,
    UnitId,
)
from pantry.domain.shared import ErrorKind, ValidationError


def _stock(quantity: str, threshold=None) -> IngredientStock:
    return IngredientStock(
        quantity=Decimal(quantity),
        unit_id=UnitId("unt_piece"),
        storage_location=StorageLocation(StorageType.REFRIGERATED),
        threshold=Decimal(threshold) if threshold is not None else None,
    )


class TestIdentifiers:
    """Tests для prefixed IDs."""

    def test_valid_id(self):
        """Test: ID з правильним prefix приймається."""
        assert IngredientId("ing_abc123").value == "ing_abc123"
        assert str(CategoryId("cat_vegetables")) == "cat_vegetables"

    def test_generate_uses_prefix(self):
        """Test: generate() = prefix + 32 hex chars."""
        generated = IngredientId.generate()

        assert generated.value.startswith("ing_")
        assert len(generated.value) == len("ing_") + 32
        assert generated != IngredientId.generate()

    @pytest.mark.parametrize("raw", ["", "ing_", "ses_abc", "ing_abc-def", "abc"])
    def test_invalid_id_raises_validation(self, raw):
        """Test: Порожній / wrong prefix / bad chars → ValidationError."""
        with pytest.raises(ValidationError) as exc_info:
            IngredientId(raw)

        assert exc_info.value.kind is ErrorKind.VALIDATION

    def test_ids_equal_by_value(self):
        assert UnitId("unt_gram") == UnitId("unt_gram")
        assert hash(UnitId("unt_gram")) == hash(UnitId("unt_gram"))


class TestTextValueObjects:
    """Tests для IngredientName та Memo."""

    def test_name_is_stripped(self):
        assert IngredientName("  Tomato ").value == "Tomato"

    def test_name_max_length(self):
        """Test: 50 chars OK, 51 - ValidationError."""
        assert IngredientName("a" * 50).value == "a" * 50

        with pytest.raises(ValidationError):
            IngredientName("a" * 51)

    def test_blank_name_rejected(self):
        with pytest.raises(ValidationError):
            IngredientName("   ")

    def test_memo_parse_blank_is_none(self):
        """Test: None або blank memo → no memo."""
        assert Memo.parse(None) is None
        assert Memo.parse("  ") is None
        assert Memo.parse("for pasta") == Memo("for pasta")

    def test_memo_max_length(self):
        Memo("x" * 200)
        with pytest.raises(ValidationError):
            Memo("x" * 201)


class TestPrice:
    """Tests для Price."""

    def test_accepts_two_decimal_places(self):
        assert Price(Decimal("2.50")).amount == Decimal("2.50")
        assert Price(3).amount == Decimal("3")
        assert Price("0").amount == Decimal("0")

    @pytest.mark.parametrize(
        "amount",
        [Decimal("1.999"), Decimal("-0.01"), "abc", 1.5, True, Decimal("NaN")],
    )
    def test_invalid_price_raises(self, amount):
        """Test: >2 decimals, negative, non-numeric, float, bool → ValidationError."""
        with pytest.raises(ValidationError):
            Price(amount)

    def test_large_amount_beyond_context_precision(self):
        """Test: 30+ digit price - валідний, без decimal.InvalidOperation."""
        assert Price(10**30).amount == Decimal(10**30)
        assert Price(Decimal("1E+30")).amount == Decimal("1E+30")

        with pytest.raises(ValidationError):
            Price(Decimal("1" * 30 + ".001"))


class TestStorageLocation:
    """Tests для StorageLocation."""

    def test_blank_detail_becomes_none(self):
        location = StorageLocation(StorageType.FROZEN, "   ")

        assert location.detail is None
        assert location == StorageLocation(StorageType.FROZEN)

    def test_detail_is_stripped(self):
        location = StorageLocation(StorageType.REFRIGERATED, " vegetable drawer ")
        assert location.detail == "vegetable drawer"
        assert str(location) == "REFRIGERATED (vegetable drawer)"

    def test_detail_max_length(self):
        with pytest.raises(ValidationError):
            StorageLocation(StorageType.ROOM_TEMPERATURE, "x" * 51)

    def test_type_must_be_storage_type(self):
        with pytest.raises(ValidationError):
            StorageLocation("FRIDGE")


class TestIngredientStock:
    """Tests для stock classification."""

    @pytest.mark.parametrize(
        "quantity,threshold,expected",
        [
            ("0", "2", StockStatus.OUT_OF_STOCK),
            ("0", None, StockStatus.OUT_OF_STOCK),
            ("1", "2", StockStatus.LOW_STOCK),
            ("2", "2", StockStatus.LOW_STOCK),
            ("2.5", "2", StockStatus.IN_STOCK),
            ("1", None, StockStatus.IN_STOCK),
        ],
    )
    def test_status_classification(self, quantity, threshold, expected):
        """Test: quantity=0 → OUT; 0 < quantity <= threshold → LOW; else IN."""
        assert _stock(quantity, threshold).status is expected

    def test_negative_quantity_rejected(self):
        with pytest.raises(ValidationError):
            _stock("-1")

    def test_negative_threshold_rejected(self):
        with pytest.raises(ValidationError):
            _stock("1", "-1")

    def test_with_quantity_returns_new_snapshot(self):
        """Test: Stock immutable - with_quantity створює новий VO."""
        stock = _stock("5", "2")

        lowered = stock.with_quantity(Decimal("2"))

        assert stock.status is StockStatus.IN_STOCK
        assert lowered.status is StockStatus.LOW_STOCK
        assert lowered.is_low is True
        assert lowered.is_out_of_stock is False


class TestStockStatus:
    def test_priority_order(self):
        assert StockStatus.OUT_OF_STOCK.has_higher_priority_than(StockStatus.LOW_STOCK)
        assert StockStatus.LOW_STOCK.has_higher_priority_than(StockStatus.IN_STOCK)

    def test_needs_replenishment(self):
        assert StockStatus.IN_STOCK.needs_replenishment is False
        assert StockStatus.LOW_STOCK.needs_replenishment is True
        assert StockStatus.OUT_OF_STOCK.needs_replenishment is True


class TestExpiryStatus:
    """Tests для expiry thresholds."""

    @pytest.mark.parametrize(
        "days,expected",
        [
            (None, ExpiryStatus.FRESH),
            (-1, ExpiryStatus.EXPIRED),
            (-30, ExpiryStatus.EXPIRED),
            (0, ExpiryStatus.CRITICAL),
            (1, ExpiryStatus.CRITICAL),
            (2, ExpiryStatus.EXPIRING_SOON),
            (3, ExpiryStatus.EXPIRING_SOON),
            (4, ExpiryStatus.NEAR_EXPIRY),
            (7, ExpiryStatus.NEAR_EXPIRY),
            (8, ExpiryStatus.FRESH),
        ],
    )
    def test_from_days_until_expiry(self, days, expected):
        assert ExpiryStatus.from_days_until_expiry(days) is expected

    def test_needs_attention(self):
        assert ExpiryStatus.FRESH.needs_attention is False
        assert all(
            status.needs_attention for status in ExpiryStatus if status is not ExpiryStatus.FRESH
        )

    def test_priority(self):
        assert ExpiryStatus.EXPIRED.priority == 5
        assert ExpiryStatus.FRESH.priority == 1
        assert ExpiryStatus.CRITICAL.has_higher_priority_than(ExpiryStatus.EXPIRING_SOON)


class TestExpiryInfo:
    """Tests для ExpiryInfo."""

    def test_requires_at_least_one_date(self):
        with pytest.raises(ValidationError):
            ExpiryInfo()

    def test_from_dates_none_when_both_missing(self):
        assert ExpiryInfo.from_dates(None, None) is None

    def test_use_by_cannot_be_later_than_best_before(self):
        with pytest.raises(ValidationError):
            ExpiryInfo(best_before_date=date(2026, 3, 10), use_by_date=date(2026, 3, 12))

    def test_use_by_takes_precedence(self):
        """Test: effective_date = use-by коли обидві дати задані."""
        info = ExpiryInfo(best_before_date=date(2026, 3, 25), use_by_date=date(2026, 3, 16))
        today = date(2026, 3, 15)

        assert info.effective_date == date(2026, 3, 16)
        assert info.days_until_expiry(today) == 1
        assert info.status(today) is ExpiryStatus.CRITICAL

    def test_best_before_only(self):
        info = ExpiryInfo(best_before_date=date(2026, 3, 20))
        assert info.status(date(2026, 3, 15)) is ExpiryStatus.NEAR_EXPIRY

    def test_strictly_past_is_expired(self):
        """Test: EXPIRED тільки коли дата строго в минулому."""
        info = ExpiryInfo(use_by_date=date(2026, 3, 15))

        assert info.is_expired(date(2026, 3, 15)) is False
        assert info.status(date(2026, 3, 15)) is ExpiryStatus.CRITICAL
        assert info.is_expired(date(2026, 3, 16)) is True

    def test_datetime_is_truncated_to_date(self):
        info = ExpiryInfo(use_by_date=datetime(2026, 3, 20, 23, 59, tzinfo=timezone.utc))
        assert info.use_by_date == date(2026, 3, 20)
