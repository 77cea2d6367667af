"""Drinking plan and profile models supplied by the host application."""

from __future__ import annotations

from datetime import datetime
from typing import Literal, Optional

from pydantic import Field

from feedplan.models.base import ValueModel

Pace = Literal["ONE_HOUR", "TWO_HOURS", "THREE_HOURS"]
Goal = Literal["MIN_FREEZER", "MAX_RELAX"]
PlanDrinkType = Literal["WINE", "BEER", "COCKTAIL", "OTHER"]

PACE_HOURS: dict[str, int] = {
    "ONE_HOUR": 1,
    "TWO_HOURS": 2,
    "THREE_HOURS": 3,
}

DEFAULT_SAFETY_BUFFER_MIN = 30


class Profile(ValueModel):
    """Physiological profile of the nursing parent."""

    weight_kg: Optional[float] = Field(default=None, gt=0)
    conservative_factor: float = Field(default=1.0, ge=1.0)
    std_drink_grams: float = Field(default=10.0, gt=0)


class DrinkPlan(ValueModel):
    """A planned drinking session."""

    start_at: datetime
    drinks: int = Field(ge=1)
    pace: Pace
    drink_type: PlanDrinkType = "OTHER"
    safety_buffer_min: float = Field(default=DEFAULT_SAFETY_BUFFER_MIN, ge=0)
    goal: Goal = "MIN_FREEZER"
    can_pre_feed: bool = False
    can_micro_pump: bool = False
    micro_pump_target_ml: Optional[float] = Field(default=None, ge=0)
    # Host-side fields carried through untouched.
    pre_pump: Optional[bool] = None
    target_volume_ml: Optional[float] = Field(default=None, ge=0)
    freezer_stock_ml: Optional[float] = Field(default=None, ge=0)

    @property
    def pace_hours(self) -> int:
        return PACE_HOURS[self.pace]
