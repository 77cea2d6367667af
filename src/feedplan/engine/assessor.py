"""Plan assessment entry point."""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence

from feedplan.errors import InvalidInputError
from feedplan.models.assessment import AssessmentRequest, PlanAssessment
from feedplan.models.history import FeedHistoryPoint, PatternContext
from feedplan.models.options import EngineOptions
from feedplan.models.plan import DrinkPlan, Profile

from .advice import generate_tips
from .classifier import classify_plan
from .scenarios import find_tipping_points
from .utils import ensure_chronological, ensure_consistent_timezones

logger = logging.getLogger(__name__)


def validate_inputs(plan: DrinkPlan, history: Sequence[FeedHistoryPoint]) -> None:
    """Reject input the engine cannot assess meaningfully."""

    if plan.drinks < 1:
        raise InvalidInputError(f"a plan needs at least one drink, got {plan.drinks}")
    ensure_consistent_timezones([plan.start_at, *(point.at for point in history)])
    ensure_chronological(history)


def _build_assessment(
    plan: DrinkPlan,
    history: List[FeedHistoryPoint],
    context: PatternContext,
    profile: Profile,
    options: EngineOptions,
) -> PlanAssessment:
    evaluation = classify_plan(plan, history, context, profile, options)
    insufficient_history = not history
    advice = generate_tips(
        evaluation.feasibility,
        plan,
        context,
        options,
        insufficient_history=insufficient_history,
    )
    tipping_points = find_tipping_points(plan, history, context, profile, options)
    return PlanAssessment(
        feasibility=evaluation.feasibility,
        safe_feed_at=evaluation.safe_feed_at,
        next_feeds=list(evaluation.next_feeds),
        freezer_needed_ml=advice.freezer_needed_ml,
        tips=list(advice.tips),
        tipping_points=tipping_points,
        insufficient_history=insufficient_history,
    )


def assess_plan(
    plan: DrinkPlan,
    history: Sequence[FeedHistoryPoint],
    context: PatternContext,
    profile: Optional[Profile] = None,
    options: Optional[EngineOptions] = None,
) -> PlanAssessment:
    """Assess a drinking plan against the predicted feeding schedule.

    Invalid input raises :class:`InvalidInputError`. Any other failure while computing is
    logged and mapped to :meth:`PlanAssessment.degraded_default`.
    """

    profile = profile or Profile()
    options = options or EngineOptions()
    history = list(history)
    validate_inputs(plan, history)

    try:
        assessment = _build_assessment(plan, history, context, profile, options)
    except InvalidInputError:
        raise
    except Exception:
        logger.exception(
            "Plan assessment failed; returning neutral default",
            extra={"drinks": plan.drinks, "pace": plan.pace, "history_points": len(history)},
        )
        return PlanAssessment.degraded_default()

    logger.debug(
        "Assessed plan: feasibility=%s freezer_needed_ml=%.0f tips=%s",
        assessment.feasibility,
        assessment.freezer_needed_ml,
        len(assessment.tips),
        extra={"feasibility": assessment.feasibility},
    )
    return assessment


def assess_request(request: AssessmentRequest, options: Optional[EngineOptions] = None) -> PlanAssessment:
    """Assess a host request document."""

    return assess_plan(request.plan, request.history, request.context, request.profile, options)
