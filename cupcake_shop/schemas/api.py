"""
Request schemas for the /order endpoints.
"""

from typing import List, Tuple

from pydantic import BaseModel, Field


class StartOrderRequest(BaseModel):
    """Quantity chosen on the start step."""
    quantity: int = Field(..., description="One of the offered quantities")


class FlavorRequest(BaseModel):
    flavor: str = Field(..., min_length=1)


class PickupDateRequest(BaseModel):
    pickup_date: str = Field(..., min_length=1, description="One of the order's pickup options")


class RestoreStepRequest(BaseModel):
    """Step identifier to resume at; unknown identifiers resume at start."""
    step: str | None = None


class CatalogResponse(BaseModel):
    flavors: List[str]
    quantity_options: List[Tuple[str, int]]
    price_per_cupcake: float
    same_day_pickup_surcharge: float
    pickup_option_count: int
