"""
Step Flow Controller.

Tracks which step of the order flow is active. The flow is strictly linear
(Start -> Flavor -> Pickup -> Summary); the controller keeps an explicit
back stack of visited steps so back-navigation never depends on a host
navigation component.

Transitions:
- advance(): next step per ADVANCE_TRANSITIONS
- go_back(): previous step; a no-op at Start
- cancel(): reset the order and jump to Start (the only non-adjacent move)
- restore(): resume at a step given by identifier; unknown -> Start
"""

import logging
from typing import List, Optional

from .order_state import OrderStateHolder
from .schemas.steps import OrderStep, STEP_SEQUENCE

logger = logging.getLogger(__name__)


ADVANCE_TRANSITIONS = {
    OrderStep.START: OrderStep.FLAVOR,
    OrderStep.FLAVOR: OrderStep.PICKUP,
    OrderStep.PICKUP: OrderStep.SUMMARY,
}


class InvalidTransitionError(Exception):
    """Raised when an action is not available at the current step."""

    def __init__(self, step: OrderStep, message: str):
        self.step = step
        super().__init__(message)


class StepFlowController:
    """Linear step state machine over an OrderStateHolder."""

    def __init__(self, order_holder: OrderStateHolder):
        self._order_holder = order_holder
        self._back_stack: List[OrderStep] = [OrderStep.START]

    @property
    def current_step(self) -> OrderStep:
        return self._back_stack[-1]

    @property
    def can_navigate_back(self) -> bool:
        """False only at Start."""
        return len(self._back_stack) > 1

    @property
    def back_stack(self) -> tuple[OrderStep, ...]:
        return tuple(self._back_stack)

    def advance(self) -> OrderStep:
        """Move to the next step. Summary has no next step."""
        next_step = ADVANCE_TRANSITIONS.get(self.current_step)
        if next_step is None:
            raise InvalidTransitionError(
                self.current_step,
                f"Cannot advance past {self.current_step.value}; send or cancel the order",
            )
        self._back_stack.append(next_step)
        logger.debug("Advanced to %s", next_step.value)
        return next_step

    def go_back(self) -> OrderStep:
        """Return to the previous step. Does nothing at Start."""
        if self.can_navigate_back:
            left = self._back_stack.pop()
            logger.debug("Back from %s to %s", left.value, self.current_step.value)
        return self.current_step

    def cancel(self) -> OrderStep:
        """Reset the order and return to Start."""
        logger.info("Order cancelled at %s step", self.current_step.value)
        self._order_holder.reset_order()
        self._back_stack = [OrderStep.START]
        return self.current_step

    def restore(self, identifier: Optional[str], furthest: OrderStep = OrderStep.SUMMARY) -> OrderStep:
        """
        Resume the flow at the step named by ``identifier``.

        Unknown identifiers fall back to Start. Steps beyond ``furthest`` are
        clamped to it. The back stack is rebuilt as the linear path leading
        to the restored step.
        """
        step = OrderStep.parse(identifier)
        if step is None:
            logger.warning("Unknown step identifier %r, falling back to start", identifier)
            step = OrderStep.START
        index = STEP_SEQUENCE.index(step)
        if index > STEP_SEQUENCE.index(furthest):
            logger.info("Cannot restore %s yet, resuming at %s", step.value, furthest.value)
            step = furthest
            index = STEP_SEQUENCE.index(step)
        self._back_stack = list(STEP_SEQUENCE[: index + 1])
        logger.info("Restored flow at %s step", step.value)
        return step
