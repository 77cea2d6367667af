"""Assessment output models and the host-side stored plan record."""

from __future__ import annotations

from datetime import datetime
from typing import Literal, Optional

from pydantic import Field

from feedplan.models.base import ValueModel
from feedplan.models.history import FeedHistoryPoint, PatternContext
from feedplan.models.plan import DrinkPlan, Profile

Feasibility = Literal["GREEN", "YELLOW", "RED"]
FEASIBILITY_VALUES: tuple[str, ...] = ("GREEN", "YELLOW", "RED")

PlanStatus = Literal["SCHEDULED", "COMPLETED", "CANCELLED"]


class TippingPoint(ValueModel):
    """Whether a plan variant can be made to fit, and under which condition."""

    possible: bool
    condition: Optional[str] = None


class TippingPoints(ValueModel):
    """Tipping points for the "+1 drink" and "no stored milk" questions."""

    plus_one: TippingPoint = Field(default_factory=lambda: TippingPoint(possible=False))
    no_freezer: TippingPoint = Field(default_factory=lambda: TippingPoint(possible=False))


class PlanAssessment(ValueModel):
    """Feasibility verdict for a drinking plan, recomputed on every call."""

    feasibility: Feasibility
    safe_feed_at: Optional[datetime] = None
    next_feeds: list[datetime] = Field(default_factory=list)
    freezer_needed_ml: float = Field(default=0.0, ge=0)
    tips: list[str] = Field(default_factory=list)
    tipping_points: TippingPoints = Field(default_factory=TippingPoints)
    insufficient_history: bool = False
    degraded: bool = False

    @classmethod
    def degraded_default(cls) -> "PlanAssessment":
        """Neutral assessment returned when the computation fails unexpectedly."""

        return cls(feasibility="GREEN", degraded=True)


class ScenarioOutcome(ValueModel):
    """Result of re-running the engine for a plan variant."""

    drinks: int = Field(ge=1)
    feasibility: Feasibility
    safe_feed_at: datetime
    next_feeds: list[datetime] = Field(default_factory=list)
    freezer_needed_ml: float = Field(default=0.0, ge=0)
    tips: list[str] = Field(default_factory=list)


class StoredPlan(ValueModel):
    """Plan and assessment pair persisted by the host application."""

    id: str
    plan: DrinkPlan
    assessment: PlanAssessment
    created_at: datetime
    status: PlanStatus = "SCHEDULED"


class AssessmentRequest(ValueModel):
    """Input document accepted by the command-line interface."""

    plan: DrinkPlan
    history: list[FeedHistoryPoint] = Field(default_factory=list)
    context: PatternContext
    profile: Profile = Field(default_factory=Profile)
