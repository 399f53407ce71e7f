"""
Unit tests for the order state holder.

Covers pricing consistency, reset behavior, pickup date generation and the
observer interface.
"""

import logging
from datetime import date

import pytest
from pydantic import ValidationError

from cupcake_shop.catalog import (
    PICKUP_OPTION_COUNT,
    PRICE_FOR_SAME_DAY_PICKUP,
    PRICE_PER_CUPCAKE,
)
from cupcake_shop.order_state import (
    InvalidQuantityError,
    OrderStateHolder,
    generate_pickup_options,
)
from cupcake_shop.schemas import OrderState


class TestGeneratePickupOptions:
    """Tests for pickup date generation."""

    def test_consecutive_days_from_today(self):
        options = generate_pickup_options(date(2026, 10, 19))
        assert options == ("Mon Oct 19", "Tue Oct 20", "Wed Oct 21", "Thu Oct 22")

    def test_fixed_length_and_no_duplicates(self):
        options = generate_pickup_options(date(2026, 10, 19))
        assert len(options) == PICKUP_OPTION_COUNT
        assert len(set(options)) == len(options)

    def test_crosses_month_and_year(self):
        options = generate_pickup_options(date(2026, 12, 30))
        assert options == ("Wed Dec 30", "Thu Dec 31", "Fri Jan 1", "Sat Jan 2")

    def test_day_of_month_is_not_padded(self):
        options = generate_pickup_options(date(2026, 11, 1), count=1)
        assert options == ("Sun Nov 1",)


class TestInitialState:
    """Tests for the state a new holder starts with."""

    def test_defaults(self, holder):
        state = holder.state
        assert state.quantity == 0
        assert state.flavor == ""
        assert state.pickup_date == ""
        assert state.price == 0.0
        assert state.pickup_options == ("Mon Oct 19", "Tue Oct 20", "Wed Oct 21", "Thu Oct 22")

    def test_state_is_read_only(self, holder):
        with pytest.raises(ValidationError):
            holder.state.quantity = 6


class TestSetQuantity:
    """Tests for set_quantity."""

    def test_updates_quantity_and_price(self, holder):
        state = holder.set_quantity(12)
        assert state.quantity == 12
        assert state.price == pytest.approx(12 * PRICE_PER_CUPCAKE)
        assert holder.state is state

    def test_keeps_same_day_surcharge(self, holder):
        holder.set_date(holder.state.pickup_options[0])
        holder.set_quantity(6)
        assert holder.state.price == pytest.approx(6 * PRICE_PER_CUPCAKE + PRICE_FOR_SAME_DAY_PICKUP)

    @pytest.mark.parametrize("quantity", [0, -6, 5, 24, 100])
    def test_rejects_quantity_outside_allowed_set(self, holder, quantity):
        holder.set_quantity(6)
        before = holder.state
        with pytest.raises(InvalidQuantityError) as exc_info:
            holder.set_quantity(quantity)
        assert exc_info.value.quantity == quantity
        assert holder.state is before

    def test_invalid_quantity_is_a_value_error(self, holder):
        with pytest.raises(ValueError):
            holder.set_quantity(7)


class TestSetFlavor:
    def test_sets_flavor_without_changing_price(self, holder):
        holder.set_quantity(6)
        price = holder.state.price
        holder.set_flavor("Chocolate")
        assert holder.state.flavor == "Chocolate"
        assert holder.state.price == price

    def test_flavor_is_not_checked_against_catalog(self, holder):
        holder.set_flavor("Pistachio")
        assert holder.state.flavor == "Pistachio"


class TestSetDate:
    """Tests for set_date and the same-day surcharge."""

    def test_same_day_scenario(self, holder):
        holder.set_quantity(12)
        holder.set_flavor("Vanilla")
        holder.set_date(holder.state.pickup_options[0])
        assert holder.state.price == pytest.approx(12 * PRICE_PER_CUPCAKE + PRICE_FOR_SAME_DAY_PICKUP)
        assert holder.state.is_same_day_pickup() is True

    def test_later_day_scenario(self, holder):
        holder.set_quantity(6)
        holder.set_date(holder.state.pickup_options[2])
        assert holder.state.price == pytest.approx(6 * PRICE_PER_CUPCAKE)
        assert holder.state.is_same_day_pickup() is False

    def test_changing_date_removes_surcharge(self, holder):
        holder.set_quantity(1)
        holder.set_date(holder.state.pickup_options[0])
        holder.set_date(holder.state.pickup_options[1])
        assert holder.state.price == pytest.approx(PRICE_PER_CUPCAKE)

    def test_pickup_options_unchanged_by_mutations(self, holder):
        options = holder.state.pickup_options
        holder.set_quantity(12)
        holder.set_flavor("Coffee")
        holder.set_date(options[3])
        assert holder.state.pickup_options == options


class TestResetOrder:
    """Tests for reset_order."""

    def test_reset_clears_selection(self, holder):
        holder.set_quantity(12)
        holder.set_flavor("Red Velvet")
        holder.set_date(holder.state.pickup_options[0])

        state = holder.reset_order()

        assert state == OrderState(pickup_options=state.pickup_options)
        assert state.quantity == 0
        assert state.flavor == ""
        assert state.pickup_date == ""
        assert state.price == 0.0
        assert len(state.pickup_options) == PICKUP_OPTION_COUNT

    def test_reset_replaces_instance(self, holder):
        before = holder.state
        holder.reset_order()
        assert holder.state is not before

    def test_reset_regenerates_dates_from_now(self, holder, clock):
        clock.advance(days=2)
        holder.reset_order()
        assert holder.state.pickup_options[0] == "Wed Oct 21"


class TestObservers:
    """Tests for subscribe/unsubscribe."""

    def test_receives_current_state_on_subscribe(self, holder):
        seen = []
        holder.subscribe(seen.append)
        assert seen == [holder.state]

    def test_emits_once_per_mutation(self, holder):
        seen = []
        holder.subscribe(seen.append)
        holder.set_quantity(6)
        holder.set_flavor("Vanilla")
        holder.set_date(holder.state.pickup_options[1])
        holder.reset_order()
        assert len(seen) == 5
        assert seen[1].quantity == 6
        assert seen[2].flavor == "Vanilla"
        assert seen[3].pickup_date == "Tue Oct 20"
        assert seen[4].quantity == 0

    def test_rejected_quantity_emits_nothing(self, holder):
        seen = []
        holder.subscribe(seen.append)
        with pytest.raises(InvalidQuantityError):
            holder.set_quantity(3)
        assert len(seen) == 1

    def test_unsubscribe_stops_emissions(self, holder):
        seen = []
        unsubscribe = holder.subscribe(seen.append)
        unsubscribe()
        holder.set_quantity(6)
        assert len(seen) == 1
        # Unsubscribing twice is harmless
        unsubscribe()

    def test_failing_observer_does_not_block_others(self, holder, caplog):
        def broken(state):
            if state.quantity:
                raise RuntimeError("render failed")

        seen = []
        holder.subscribe(broken)
        holder.subscribe(seen.append)

        with caplog.at_level(logging.ERROR, logger="cupcake_shop.order_state"):
            state = holder.set_quantity(6)

        assert state.quantity == 6
        assert holder.state.quantity == 6
        assert seen[-1].quantity == 6
        assert any("observer" in r.getMessage() for r in caplog.records)

    def test_failing_observer_does_not_interrupt_session_action(self, session):
        def broken(state):
            if state.quantity:
                raise RuntimeError("render failed")

        session.subscribe(broken)
        view = session.start_order(12)

        assert view.step.value == "flavor"
        assert session.order.quantity == 12

    def test_default_clock_is_today(self):
        holder = OrderStateHolder()
        assert len(holder.state.pickup_options) == PICKUP_OPTION_COUNT
