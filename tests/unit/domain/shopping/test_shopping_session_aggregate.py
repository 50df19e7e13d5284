"""Unit tests для ShoppingSession Aggregate.

State machine: ACTIVE → COMPLETED | ABANDONED (terminal).
"""

from datetime import timedelta
from decimal import Decimal

import pytest

from conftest import FIXED_NOW, OWNER_ID, OTHER_USER_ID, TODAY, build_ingredient
from pantry.domain.ingredients.value_objects import ExpiryStatus, StockStatus
from pantry.domain.shared import ErrorKind
from pantry.domain.shopping.entities import ShoppingSession
from pantry.domain.shopping.events import (
    ItemChecked,
    ShoppingSessionAbandoned,
    ShoppingSessionCompleted,
    ShoppingSessionStarted,
)
from pantry.domain.shopping.exceptions import (
    ItemAlreadyCheckedError,
    SessionAlreadyCompletedError,
    SessionNotActiveError,
)
from pantry.domain.shopping.value_objects import (
    DeviceType,
    RecheckPolicy,
    SessionStatus,
    ShoppingLocation,
)


def _start(**kwargs) -> ShoppingSession:
    session = ShoppingSession.start(user_id=OWNER_ID, now=FIXED_NOW, **kwargs)
    session.clear_domain_events()
    return session


class TestSessionStart:
    """Tests для старту session."""

    def test_start_is_active(self):
        session = ShoppingSession.start(
            user_id=OWNER_ID,
            device_type=DeviceType.MOBILE,
            location=ShoppingLocation(35.68, 139.76, "Market"),
            now=FIXED_NOW,
        )

        assert session.status is SessionStatus.ACTIVE
        assert session.is_active is True
        assert session.started_at == FIXED_NOW
        assert session.completed_at is None
        assert session.is_using_mobile_device is True
        assert session.has_location is True
        assert str(session.id).startswith("ses_")

        event = session.get_domain_events()[0]
        assert isinstance(event, ShoppingSessionStarted)
        assert event.device_type == "MOBILE"
        assert event.location_name == "Market"

    def test_ownership(self):
        session = _start()

        assert session.is_owned_by(OWNER_ID)
        assert not session.is_owned_by(OTHER_USER_ID)


class TestCheckItem:
    """Tests для check_item."""

    def test_check_records_snapshot(self):
        # Arrange
        session = _start()
        ingredient = build_ingredient(quantity="1", threshold="2", use_by_date=TODAY + timedelta(days=1))
        checked_at = FIXED_NOW + timedelta(minutes=5)

        # Act
        item = session.check_item(ingredient, now=checked_at)

        # Assert
        assert item.ingredient_id == ingredient.id
        assert item.ingredient_name == ingredient.name
        assert item.stock_status is StockStatus.LOW_STOCK
        assert item.expiry_status is ExpiryStatus.CRITICAL
        assert item.checked_at == checked_at
        assert session.checked_items_count == 1

        event = session.get_domain_events()[0]
        assert isinstance(event, ItemChecked)
        assert event.replaced is False

    def test_recheck_replaces_snapshot(self):
        """Test: Повторний check того ж ingredient замінює snapshot (latest wins)."""
        session = _start()
        ingredient = build_ingredient(quantity="5", threshold="2")
        session.check_item(ingredient, now=FIXED_NOW + timedelta(minutes=1))

        ingredient.update_stock(ingredient.stock.with_quantity(Decimal("0")))
        item = session.check_item(ingredient, now=FIXED_NOW + timedelta(minutes=2))

        assert session.checked_items_count == 1
        assert session.get_checked_item(ingredient.id) == item
        assert item.stock_status is StockStatus.OUT_OF_STOCK
        assert session.get_domain_events()[-1].replaced is True

    def test_recheck_moves_item_to_end(self):
        """Test: Items ordered by recency - re-checked item стає останнім."""
        session = _start()
        tomato = build_ingredient(name="Tomato")
        milk = build_ingredient(name="Milk")

        session.check_item(tomato, now=FIXED_NOW + timedelta(minutes=1))
        session.check_item(milk, now=FIXED_NOW + timedelta(minutes=2))
        session.check_item(tomato, now=FIXED_NOW + timedelta(minutes=3))

        assert [i.ingredient_name.value for i in session.checked_items] == ["Milk", "Tomato"]
        assert session.get_last_activity_at() == FIXED_NOW + timedelta(minutes=3)

    def test_reject_policy_raises_on_recheck(self):
        session = _start()
        ingredient = build_ingredient()
        session.check_item(ingredient, policy=RecheckPolicy.REJECT)

        with pytest.raises(ItemAlreadyCheckedError) as exc_info:
            session.check_item(ingredient, policy=RecheckPolicy.REJECT)

        assert exc_info.value.kind is ErrorKind.BUSINESS_RULE
        assert session.checked_items_count == 1

    @pytest.mark.parametrize("finish", ["complete", "abandon"])
    def test_check_in_finished_session_raises(self, finish):
        """Test: Check в COMPLETED / ABANDONED session → business rule."""
        session = _start()
        getattr(session, finish)(now=FIXED_NOW + timedelta(minutes=1))

        with pytest.raises(SessionNotActiveError) as exc_info:
            session.check_item(build_ingredient())

        assert exc_info.value.kind is ErrorKind.BUSINESS_RULE
        assert session.checked_items_count == 0

    def test_snapshot_not_affected_by_later_changes(self):
        """Test: CheckedItem - point-in-time copy."""
        session = _start()
        ingredient = build_ingredient(quantity="5")
        session.check_item(ingredient, now=FIXED_NOW)

        ingredient.consume(Decimal("5"))

        assert session.checked_items[0].stock_status is StockStatus.IN_STOCK

    def test_needs_attention_items(self):
        session = _start()
        session.check_item(build_ingredient(name="Milk", quantity="0"), now=FIXED_NOW)
        session.check_item(build_ingredient(name="Rice", quantity="10"), now=FIXED_NOW)

        names = [i.ingredient_name.value for i in session.get_needs_attention_items()]
        assert names == ["Milk"]


class TestSessionCompletion:
    """Tests для complete / abandon."""

    def test_duration_scenario(self):
        """Test: start T, check T+5min, complete T+20min → 1200 s, 1 item."""
        session = _start()
        session.check_item(build_ingredient(), now=FIXED_NOW + timedelta(minutes=5))

        session.complete(now=FIXED_NOW + timedelta(minutes=20))

        assert session.status is SessionStatus.COMPLETED
        assert session.get_duration_seconds() == 1200
        assert session.checked_items_count == 1

        event = session.get_domain_events()[-1]
        assert isinstance(event, ShoppingSessionCompleted)
        assert event.duration_seconds == 1200
        assert event.checked_items_count == 1

    def test_active_duration_uses_now(self):
        session = _start()
        assert session.get_duration_seconds(FIXED_NOW + timedelta(seconds=90)) == 90

    def test_exact_duration_keeps_fraction(self):
        session = _start()
        session.complete(now=FIXED_NOW + timedelta(seconds=90, milliseconds=750))

        assert session.get_duration() == timedelta(seconds=90, milliseconds=750)
        assert session.get_duration_seconds() == 90

    def test_ensure_active(self):
        session = _start()
        session.ensure_active()

        session.abandon(now=FIXED_NOW)

        with pytest.raises(SessionNotActiveError) as exc_info:
            session.ensure_active("check items in")
        assert exc_info.value.context["current_status"] == "ABANDONED"

    def test_complete_twice_raises(self):
        session = _start()
        session.complete(now=FIXED_NOW)

        with pytest.raises(SessionAlreadyCompletedError) as exc_info:
            session.complete(now=FIXED_NOW)

        assert exc_info.value.code == "SESSION_ALREADY_COMPLETED"
        assert exc_info.value.kind is ErrorKind.BUSINESS_RULE

    def test_complete_abandoned_raises(self):
        session = _start()
        session.abandon(now=FIXED_NOW)

        with pytest.raises(SessionNotActiveError):
            session.complete(now=FIXED_NOW)

        assert session.status is SessionStatus.ABANDONED

    def test_abandon_emits_event_with_reason(self):
        session = _start()

        session.abandon(reason="store closed", now=FIXED_NOW + timedelta(minutes=3))

        event = session.get_domain_events()[0]
        assert isinstance(event, ShoppingSessionAbandoned)
        assert event.reason == "store closed"
        assert event.duration_seconds == 180
        assert session.completed_at == FIXED_NOW + timedelta(minutes=3)

    @pytest.mark.parametrize("first", ["complete", "abandon"])
    def test_abandon_terminal_raises(self, first):
        session = _start()
        getattr(session, first)(now=FIXED_NOW)

        with pytest.raises(SessionNotActiveError):
            session.abandon(now=FIXED_NOW)
