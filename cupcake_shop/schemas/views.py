"""
Step View Schemas for Cupcake Shop
==================================

Pydantic models describing what a client needs to present the active step:
its title, whether a back affordance should be shown, the options to pick
from, the running subtotal and, on the summary step, the order summary.

Every /order endpoint responds with a StepView, so a client renders purely
from the latest response.
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from .order import OrderState
from .steps import OrderStep


class StepOption(BaseModel):
    """A selectable option on a step."""

    label: str
    value: str | int


class OrderSummary(BaseModel):
    """The review shown on the summary step and handed to the share target."""

    lines: List[str] = Field(default_factory=list)
    subtotal: str
    subject: str
    body: str


class StepView(BaseModel):
    """Everything needed to present one step of the order flow."""

    step: OrderStep
    title: str
    can_navigate_back: bool
    order: OrderState
    subtotal: str
    options: List[StepOption] = Field(default_factory=list)
    selected: Optional[str | int] = None
    summary: Optional[OrderSummary] = None


class SendOrderResponse(BaseModel):
    """Result of sending the order: share outcome plus the fresh start view."""

    share: Dict[str, Any]
    view: StepView
