"""
Order Step Definitions.

This module defines the OrderStep enum representing the steps of the
cupcake order flow, in the order the customer walks through them.
"""

from enum import Enum
from typing import Optional


class OrderStep(str, Enum):
    """Steps of the order flow."""
    START = "start"  # Choose quantity
    FLAVOR = "flavor"
    PICKUP = "pickup"  # Choose pickup date
    SUMMARY = "summary"  # Review and send

    @property
    def title(self) -> str:
        """Display title for the step."""
        return STEP_TITLES[self]

    @classmethod
    def parse(cls, identifier: Optional[str]) -> Optional["OrderStep"]:
        """
        Resolve a step from its value or name, case-insensitively.

        Returns None when the identifier does not name a step.
        """
        if not identifier:
            return None
        normalized = identifier.strip().lower()
        for step in cls:
            if normalized in (step.value, step.name.lower()):
                return step
        return None


STEP_TITLES = {
    OrderStep.START: "Cupcake",
    OrderStep.FLAVOR: "Choose Flavor",
    OrderStep.PICKUP: "Choose Pickup Date",
    OrderStep.SUMMARY: "Order Summary",
}

# Fixed order of the flow
STEP_SEQUENCE = (
    OrderStep.START,
    OrderStep.FLAVOR,
    OrderStep.PICKUP,
    OrderStep.SUMMARY,
)
