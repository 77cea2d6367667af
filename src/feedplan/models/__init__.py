"""Pydantic models defining the engine's data contracts."""

from feedplan.models.assessment import (
    FEASIBILITY_VALUES,
    AssessmentRequest,
    Feasibility,
    PlanAssessment,
    PlanStatus,
    ScenarioOutcome,
    StoredPlan,
    TippingPoint,
    TippingPoints,
)
from feedplan.models.drinks import (
    DRINK_TYPES,
    DrinkEntry,
    DrinkKind,
    DrinkSession,
    DrinkTypeInfo,
)
from feedplan.models.history import FeedHistoryPoint, PatternContext
from feedplan.models.options import EngineOptions
from feedplan.models.plan import PACE_HOURS, DrinkPlan, Goal, Pace, PlanDrinkType, Profile

__all__ = [
    "FEASIBILITY_VALUES",
    "AssessmentRequest",
    "Feasibility",
    "PlanAssessment",
    "PlanStatus",
    "ScenarioOutcome",
    "StoredPlan",
    "TippingPoint",
    "TippingPoints",
    "DRINK_TYPES",
    "DrinkEntry",
    "DrinkKind",
    "DrinkSession",
    "DrinkTypeInfo",
    "FeedHistoryPoint",
    "PatternContext",
    "EngineOptions",
    "PACE_HOURS",
    "DrinkPlan",
    "Goal",
    "Pace",
    "PlanDrinkType",
    "Profile",
]
