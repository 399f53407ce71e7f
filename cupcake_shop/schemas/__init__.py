"""
Cupcake Shop Schemas.

Pydantic models and enums for the order flow: order state, steps, step
views and API request bodies.
"""

from .steps import OrderStep, STEP_SEQUENCE
from .order import OrderState
from .views import StepOption, OrderSummary, StepView, SendOrderResponse
from .api import (
    StartOrderRequest,
    FlavorRequest,
    PickupDateRequest,
    RestoreStepRequest,
    CatalogResponse,
)

__all__ = [
    # Steps
    "OrderStep",
    "STEP_SEQUENCE",
    # Order
    "OrderState",
    # Views
    "StepOption",
    "OrderSummary",
    "StepView",
    "SendOrderResponse",
    # Requests
    "StartOrderRequest",
    "FlavorRequest",
    "PickupDateRequest",
    "RestoreStepRequest",
    "CatalogResponse",
]
