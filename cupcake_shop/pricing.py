"""
Pricing for Cupcake Orders.

Price is quantity times the per-cupcake price, plus a flat surcharge when
the order is picked up on the soonest available day. No discounts or tax.
"""

from typing import Sequence

from .catalog import PRICE_PER_CUPCAKE, PRICE_FOR_SAME_DAY_PICKUP


def calculate_price(
    quantity: int,
    pickup_date: str,
    pickup_options: Sequence[str],
    price_per_cupcake: float = PRICE_PER_CUPCAKE,
    same_day_surcharge: float = PRICE_FOR_SAME_DAY_PICKUP,
) -> float:
    """
    Calculate the order price.

    Args:
        quantity: Number of cupcakes (0 before the customer chooses)
        pickup_date: Selected pickup date display string ("" if unset)
        pickup_options: Candidate pickup dates, soonest first
        price_per_cupcake: Unit price
        same_day_surcharge: Flat fee for picking up on pickup_options[0]

    Returns:
        Price rounded to cents
    """
    price = quantity * price_per_cupcake
    if pickup_options and pickup_date == pickup_options[0]:
        price += same_day_surcharge
    return round(price, 2)


def format_price(price: float) -> str:
    """Format a price for display, e.g. ``$24.00``."""
    return f"${price:.2f}"
