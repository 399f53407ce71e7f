"""
Pydantic model for the in-progress order.

OrderState is frozen: holders publish a new snapshot on every change, and
readers cannot patch fields behind the holder's back.
"""

from pydantic import BaseModel, ConfigDict, Field


class OrderState(BaseModel):
    """Snapshot of the order being built."""

    model_config = ConfigDict(frozen=True)

    quantity: int = 0  # 0 = not chosen yet
    flavor: str = ""
    pickup_date: str = ""
    price: float = 0.0  # derived from quantity and pickup_date
    pickup_options: tuple[str, ...] = Field(default_factory=tuple)

    def is_same_day_pickup(self) -> bool:
        """True when the soonest pickup option is selected."""
        return bool(self.pickup_options) and self.pickup_date == self.pickup_options[0]
