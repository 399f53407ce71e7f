"""
Step views.

Maps the active step and the latest order snapshot to the StepView a client
presents: quantity buttons on Start, flavors on Flavor, pickup dates on
Pickup, and the order summary on Summary.
"""

from .catalog import FLAVORS, QUANTITY_OPTIONS
from .order_summary import build_order_summary
from .pricing import format_price
from .schemas.order import OrderState
from .schemas.steps import OrderStep
from .schemas.views import StepOption, StepView


def _options_for(step: OrderStep, order: OrderState) -> list[StepOption]:
    if step == OrderStep.START:
        return [StepOption(label=label, value=qty) for label, qty in QUANTITY_OPTIONS]
    if step == OrderStep.FLAVOR:
        return [StepOption(label=flavor, value=flavor) for flavor in FLAVORS]
    if step == OrderStep.PICKUP:
        return [StepOption(label=day, value=day) for day in order.pickup_options]
    return []


def _selected_for(step: OrderStep, order: OrderState) -> str | int | None:
    if step == OrderStep.START:
        return order.quantity or None
    if step == OrderStep.FLAVOR:
        return order.flavor or None
    if step == OrderStep.PICKUP:
        return order.pickup_date or None
    return None


def build_step_view(step: OrderStep, order: OrderState, can_navigate_back: bool) -> StepView:
    """Build the view for ``step`` from the current order."""
    return StepView(
        step=step,
        title=step.title,
        can_navigate_back=can_navigate_back,
        order=order,
        subtotal=format_price(order.price),
        options=_options_for(step, order),
        selected=_selected_for(step, order),
        summary=build_order_summary(order) if step == OrderStep.SUMMARY else None,
    )
