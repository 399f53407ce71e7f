"""
Cupcake Catalog
===============

Static catalog data consumed by the order flow: the flavors on offer, the
quantities a customer can pick on the start step, and the price constants.

These values are configuration inputs, not computed by the order logic.
They are plain module-level constants so tests and callers can import them
directly:

    from cupcake_shop.catalog import FLAVORS, PRICE_PER_CUPCAKE
"""

from typing import List, Tuple


# =============================================================================
# Flavors
# =============================================================================

FLAVORS: List[str] = [
    "Vanilla",
    "Chocolate",
    "Red Velvet",
    "Salted Caramel",
    "Coffee",
]


# =============================================================================
# Quantities
# =============================================================================
# (button label, quantity) pairs offered on the start step.

QUANTITY_OPTIONS: List[Tuple[str, int]] = [
    ("One Cupcake", 1),
    ("Six Cupcakes", 6),
    ("Twelve Cupcakes", 12),
]

ALLOWED_QUANTITIES: frozenset = frozenset(qty for _, qty in QUANTITY_OPTIONS)


# =============================================================================
# Pricing
# =============================================================================

PRICE_PER_CUPCAKE: float = 2.00

# Flat fee added when the order is picked up on the soonest available day
PRICE_FOR_SAME_DAY_PICKUP: float = 3.00


# =============================================================================
# Pickup Dates
# =============================================================================

# Number of consecutive days offered, starting today
PICKUP_OPTION_COUNT: int = 4


def format_pickup_date(day) -> str:
    """Format a date for display, e.g. ``Mon Oct 19``."""
    return f"{day:%a %b} {day.day}"
