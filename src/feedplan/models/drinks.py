"""Logged drink entries and the drink type catalog."""

from __future__ import annotations

from datetime import datetime
from typing import Literal, Optional

from pydantic import Field

from feedplan.models.base import ValueModel

DrinkKind = Literal["wine", "beer", "spirits", "cocktail", "other"]


class DrinkTypeInfo(ValueModel):
    """Reference values for a drink category."""

    id: DrinkKind
    label: str
    abv: float = Field(ge=0)
    units_per_glass: float = Field(ge=0)
    grams_per_unit: float = Field(default=10.0, gt=0)
    standard_volume_ml: float = Field(ge=0)
    volume_info: str
    is_custom: bool = False


class DrinkEntry(ValueModel):
    """A drink logged during a session."""

    id: str
    type_id: DrinkKind
    glasses: int = Field(ge=1)
    ts: datetime
    units_per_glass: float = Field(ge=0)
    grams_per_unit: Optional[float] = Field(default=None, gt=0)


class DrinkSession(ValueModel):
    """A drinking session with its logged entries."""

    id: str
    started_at: datetime
    ended_at: Optional[datetime] = None
    entries: list[DrinkEntry] = Field(default_factory=list)


DRINK_TYPES: dict[str, DrinkTypeInfo] = {
    # 125 ml at 12% is roughly 11.8 g of alcohol.
    "wine": DrinkTypeInfo(
        id="wine",
        label="Wine",
        abv=12,
        units_per_glass=1.18,
        standard_volume_ml=125,
        volume_info="Standard 125 ml wine glass (not a large 150 ml+ glass)",
    ),
    "beer": DrinkTypeInfo(
        id="beer",
        label="Beer",
        abv=5,
        units_per_glass=1.0,
        standard_volume_ml=250,
        volume_info="Standard glass (not a 330 ml can or 500 ml pint)",
    ),
    "spirits": DrinkTypeInfo(
        id="spirits",
        label="Spirits",
        abv=40,
        units_per_glass=1.0,
        standard_volume_ml=32,
        volume_info="Standard shot",
    ),
    "cocktail": DrinkTypeInfo(
        id="cocktail",
        label="Cocktail",
        abv=15,
        units_per_glass=1.5,
        standard_volume_ml=127,
        volume_info="Small cocktail glass (strength varies)",
    ),
    "other": DrinkTypeInfo(
        id="other",
        label="Other",
        abv=0,
        units_per_glass=0,
        standard_volume_ml=0,
        volume_info="Enter your own",
        is_custom=True,
    ),
}
