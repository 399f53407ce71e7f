"""
Order summary text.

Builds the human-readable review of an order: the lines shown on the
summary step and the subject/body handed to the share service.
"""

from .pricing import format_price
from .schemas.order import OrderState
from .schemas.views import OrderSummary

NEW_ORDER_SUBJECT = "New Cupcake Order"


def describe_quantity(quantity: int) -> str:
    """``1 cupcake``, ``12 cupcakes``."""
    noun = "cupcake" if quantity == 1 else "cupcakes"
    return f"{quantity} {noun}"


def build_order_summary(order: OrderState) -> OrderSummary:
    """Build the summary for an order."""
    lines = [
        f"Quantity: {describe_quantity(order.quantity)}",
        f"Flavor: {order.flavor}",
        f"Pickup date: {order.pickup_date}",
    ]
    total = format_price(order.price)
    body = "\n".join(lines + [f"Total: {total}"])
    return OrderSummary(
        lines=lines,
        subtotal=f"Subtotal {total}",
        subject=NEW_ORDER_SUBJECT,
        body=body,
    )
