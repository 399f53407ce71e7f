"""
Order State Holder.

Owns the order being built and publishes a new OrderState snapshot to its
observers whenever the order changes. All changes go through the holder's
operations; snapshots handed out are frozen.

Usage:
    holder = OrderStateHolder()
    unsubscribe = holder.subscribe(render)  # render() is called right away
    holder.set_quantity(12)
    holder.set_date(holder.state.pickup_options[0])
    holder.state.price  # 27.0
"""

import logging
from datetime import date, timedelta
from typing import Callable, List

from .catalog import ALLOWED_QUANTITIES, PICKUP_OPTION_COUNT, format_pickup_date
from .pricing import calculate_price
from .schemas.order import OrderState

logger = logging.getLogger(__name__)

OrderObserver = Callable[[OrderState], None]


class InvalidQuantityError(ValueError):
    """Raised when a quantity outside the allowed set is requested."""

    def __init__(self, quantity: int):
        self.quantity = quantity
        allowed = ", ".join(str(q) for q in sorted(ALLOWED_QUANTITIES))
        super().__init__(f"Quantity {quantity} is not offered (allowed: {allowed})")


def generate_pickup_options(
    today: date,
    count: int = PICKUP_OPTION_COUNT,
) -> tuple[str, ...]:
    """Return ``count`` consecutive days starting at ``today``, soonest first."""
    return tuple(format_pickup_date(today + timedelta(days=offset)) for offset in range(count))


class OrderStateHolder:
    """
    Holds the single live OrderState.

    Args:
        today: Callable returning the current date. Pickup options are
               generated from it on every reset.
    """

    def __init__(self, today: Callable[[], date] = date.today):
        self._today = today
        self._observers: List[OrderObserver] = []
        self._state = self._fresh_state()

    @property
    def state(self) -> OrderState:
        """The current order snapshot."""
        return self._state

    def subscribe(self, observer: OrderObserver) -> Callable[[], None]:
        """
        Register an observer.

        The observer receives the current state immediately and every new
        state after that. Errors raised by an observer on later changes are
        logged and do not undo the change or stop other observers. Returns
        a function that removes the observer.
        """
        self._observers.append(observer)
        observer(self._state)

        def unsubscribe() -> None:
            if observer in self._observers:
                self._observers.remove(observer)

        return unsubscribe

    def set_quantity(self, quantity: int) -> OrderState:
        """Set the number of cupcakes and recompute the price."""
        if quantity not in ALLOWED_QUANTITIES:
            logger.warning("Rejected quantity %s", quantity)
            raise InvalidQuantityError(quantity)
        return self._update(
            quantity=quantity,
            price=calculate_price(quantity, self._state.pickup_date, self._state.pickup_options),
        )

    def set_flavor(self, flavor: str) -> OrderState:
        """Set the flavor. Price is unaffected."""
        return self._update(flavor=flavor)

    def set_date(self, pickup_date: str) -> OrderState:
        """Set the pickup date and recompute the price."""
        return self._update(
            pickup_date=pickup_date,
            price=calculate_price(self._state.quantity, pickup_date, self._state.pickup_options),
        )

    def reset_order(self) -> OrderState:
        """Replace the order with a fresh one and regenerate pickup options."""
        self._state = self._fresh_state()
        logger.info("Order reset, pickup options start %s", self._state.pickup_options[0])
        self._notify()
        return self._state

    def _fresh_state(self) -> OrderState:
        return OrderState(pickup_options=generate_pickup_options(self._today()))

    def _update(self, **changes) -> OrderState:
        self._state = self._state.model_copy(update=changes)
        logger.debug("Order updated: %s", changes)
        self._notify()
        return self._state

    def _notify(self) -> None:
        # Copy so observers may unsubscribe while being notified
        for observer in list(self._observers):
            try:
                observer(self._state)
            except Exception:
                # The state change already happened; remaining observers still get it
                logger.exception("Order observer %r failed", observer)
