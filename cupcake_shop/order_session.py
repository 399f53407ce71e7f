"""
Order Session for Cupcake Shop
==============================

Wires the order state holder, the step flow controller and the share target
together and implements what each step's actions do. A user action first
mutates the order, then requests a step transition:

- Start:   start_order(quantity)      set quantity, advance to Flavor
- Flavor:  select_flavor(flavor)      next_step() -> Pickup
- Pickup:  select_pickup_date(date)   next_step() -> Summary
- Summary: send_order()               share, reset, back to Start

cancel_order() resets from any step and navigate_back() pops one step.

Thread Safety:
--------------
FastAPI runs sync routes in a threadpool, so each action runs under a
threading.Lock; one action's mutate-then-transition pair never interleaves
with another's.
"""

import logging
import threading
from typing import Callable, Optional

from .order_state import OrderStateHolder
from .order_summary import build_order_summary
from .schemas.order import OrderState
from .schemas.steps import OrderStep
from .schemas.views import StepView
from .screens import build_step_view
from .share_service import EmailShareTarget, ShareTarget
from .step_flow import InvalidTransitionError, StepFlowController

logger = logging.getLogger(__name__)


class OrderSession:
    """The single in-progress order and its position in the flow."""

    def __init__(
        self,
        order_holder: Optional[OrderStateHolder] = None,
        share_target: Optional[ShareTarget] = None,
    ):
        self.order_holder = order_holder or OrderStateHolder()
        self.flow = StepFlowController(self.order_holder)
        self.share_target = share_target or EmailShareTarget()
        self._lock = threading.Lock()

    @property
    def order(self) -> OrderState:
        return self.order_holder.state

    @property
    def current_step(self) -> OrderStep:
        return self.flow.current_step

    def subscribe(self, observer: Callable[[OrderState], None]) -> Callable[[], None]:
        """Observe order changes. See OrderStateHolder.subscribe."""
        return self.order_holder.subscribe(observer)

    def view(self) -> StepView:
        """The view for the current step."""
        with self._lock:
            return self._view()

    # -------------------------------------------------------------------------
    # Step actions
    # -------------------------------------------------------------------------

    def start_order(self, quantity: int) -> StepView:
        """Choose how many cupcakes and move on to flavors."""
        with self._lock:
            self._require_step(OrderStep.START, "start an order")
            self.order_holder.set_quantity(quantity)
            self.flow.advance()
            return self._view()

    def select_flavor(self, flavor: str) -> StepView:
        with self._lock:
            self._require_step(OrderStep.FLAVOR, "choose a flavor")
            self.order_holder.set_flavor(flavor)
            return self._view()

    def select_pickup_date(self, pickup_date: str) -> StepView:
        with self._lock:
            self._require_step(OrderStep.PICKUP, "choose a pickup date")
            self.order_holder.set_date(pickup_date)
            return self._view()

    def next_step(self) -> StepView:
        """
        Continue from Flavor or Pickup once that step's choice is made.

        Start moves on through start_order() and Summary has no next step.
        """
        with self._lock:
            step = self.flow.current_step
            if step == OrderStep.FLAVOR:
                selection = self.order.flavor
            elif step == OrderStep.PICKUP:
                selection = self.order.pickup_date
            else:
                raise InvalidTransitionError(step, f"No next step from {step.value}")
            if not selection:
                raise InvalidTransitionError(step, f"Make a selection on {step.value} before continuing")
            self.flow.advance()
            return self._view()

    def navigate_back(self) -> StepView:
        with self._lock:
            self.flow.go_back()
            return self._view()

    def cancel_order(self) -> StepView:
        with self._lock:
            self.flow.cancel()
            return self._view()

    def restore_step(self, identifier: Optional[str]) -> StepView:
        """
        Resume at a step by identifier.

        Unknown identifiers land on Start, and a step the order has not
        reached yet lands on the furthest step its selections allow.
        """
        with self._lock:
            self.flow.restore(identifier, furthest=self._furthest_step())
            return self._view()

    def send_order(self) -> tuple[dict, StepView]:
        """
        Share the order summary, then start over with a fresh order.

        Returns:
            (share result, view of the Start step)
        """
        with self._lock:
            self._require_step(OrderStep.SUMMARY, "send the order")
            if self._furthest_step() != OrderStep.SUMMARY:
                raise InvalidTransitionError(OrderStep.SUMMARY, "Cannot send an incomplete order")
            summary = build_order_summary(self.order)
            result = self.share_target.share(summary.subject, summary.body)
            logger.info("Order shared with status %s", result.get("status"))
            self.flow.cancel()
            return result, self._view()

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------

    def _require_step(self, step: OrderStep, action: str) -> None:
        current = self.flow.current_step
        if current != step:
            raise InvalidTransitionError(
                current,
                f"Cannot {action} at the {current.value} step",
            )

    def _furthest_step(self) -> OrderStep:
        """The last step the order's selections allow reaching."""
        order = self.order_holder.state
        if not order.quantity:
            return OrderStep.START
        if not order.flavor:
            return OrderStep.FLAVOR
        if not order.pickup_date:
            return OrderStep.PICKUP
        return OrderStep.SUMMARY

    def _view(self) -> StepView:
        return build_step_view(
            self.flow.current_step,
            self.order_holder.state,
            self.flow.can_navigate_back,
        )
