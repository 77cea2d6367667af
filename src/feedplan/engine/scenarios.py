"""What-if scenarios and tipping-point search."""

from __future__ import annotations

import logging
import math
from datetime import datetime, timedelta
from typing import Callable, Optional, Sequence

from feedplan.models.assessment import (
    Feasibility,
    ScenarioOutcome,
    TippingPoint,
    TippingPoints,
)
from feedplan.models.history import FeedHistoryPoint, PatternContext
from feedplan.models.options import EngineOptions
from feedplan.models.plan import DrinkPlan, Profile

from .advice import generate_tips
from .classifier import classify, classify_plan
from .clearance import compute_safe_feed_at
from .intervals import predict_next_feeds
from .utils import format_clock, minutes_between

logger = logging.getLogger(__name__)

SCENARIO_TIPS: dict[str, str] = {
    "GREEN": "Fits comfortably.",
    "YELLOW": "Tight, but possible.",
    "RED": "Does not fit.",
}

PLUS_ONE_ACCEPTED: frozenset[str] = frozenset({"GREEN", "YELLOW"})


def plus_one_scenario(
    plan: DrinkPlan,
    history: Sequence[FeedHistoryPoint],
    context: PatternContext,
    profile: Optional[Profile] = None,
    options: Optional[EngineOptions] = None,
) -> ScenarioOutcome:
    """Evaluate the plan with one extra drink, without nesting further scenarios."""

    options = options or EngineOptions()
    variant = plan.model_copy(update={"drinks": plan.drinks + 1})
    evaluation = classify_plan(variant, history, context, profile or Profile(), options)
    freezer_needed_ml = 0.0 if evaluation.feasibility == "GREEN" else options.scenario_freezer_fallback_ml
    return ScenarioOutcome(
        drinks=variant.drinks,
        feasibility=evaluation.feasibility,
        safe_feed_at=evaluation.safe_feed_at,
        next_feeds=list(evaluation.next_feeds),
        freezer_needed_ml=freezer_needed_ml,
        tips=[SCENARIO_TIPS[evaluation.feasibility]],
    )


def _max_shift_minutes(
    plan: DrinkPlan,
    history: Sequence[FeedHistoryPoint],
    options: EngineOptions,
) -> int:
    """Largest start shift searched, never moving the start before the last feed."""
    limit = options.search_max_shift_min
    if history:
        gap = minutes_between(history[-1].at, plan.start_at)
        limit = min(limit, max(0, int(math.floor(gap))))
    return limit - limit % options.search_step_min


def earliest_fitting_shift(
    fits: Callable[[int], bool],
    max_shift_min: int,
    step_min: int,
    max_iterations: int,
) -> Optional[int]:
    """Smallest start shift (minutes earlier) for which ``fits`` holds.

    ``fits`` must be monotonic: once a shift fits, every larger shift fits too. The search
    probes both bounds and then bisects on ``step_min`` granularity for at most
    ``max_iterations`` probes. When the cap is reached the smallest verified shift is
    returned, so the answer is always a shift that was actually checked.
    """

    if fits(0):
        return 0
    steps = max_shift_min // step_min
    if steps == 0 or not fits(steps * step_min):
        return None

    low, high = 0, steps
    iterations = 0
    while high - low > 1 and iterations < max_iterations:
        middle = (low + high) // 2
        if fits(middle * step_min):
            high = middle
        else:
            low = middle
        iterations += 1
    return high * step_min


def _start_shift_probe(
    plan: DrinkPlan,
    profile: Profile,
    next_feed: Optional[datetime],
    options: EngineOptions,
    accepts: Callable[[Feasibility], bool],
) -> Callable[[int], bool]:
    def fits(shift_min: int) -> bool:
        candidate = plan.model_copy(update={"start_at": plan.start_at - timedelta(minutes=shift_min)})
        verdict: Feasibility = classify(
            compute_safe_feed_at(candidate, profile),
            next_feed,
            empty_history_feasibility=options.empty_history_feasibility,
        )
        return accepts(verdict)

    return fits


def _tipping_point(
    plan: DrinkPlan,
    history: Sequence[FeedHistoryPoint],
    profile: Profile,
    next_feed: Optional[datetime],
    options: EngineOptions,
    accepts: Callable[[Feasibility], bool],
    as_planned: str,
    shifted: str,
) -> TippingPoint:
    shift = earliest_fitting_shift(
        _start_shift_probe(plan, profile, next_feed, options, accepts),
        _max_shift_minutes(plan, history, options),
        options.search_step_min,
        options.search_max_iterations,
    )
    if shift is None:
        return TippingPoint(possible=False)
    if shift == 0:
        return TippingPoint(possible=True, condition=as_planned)
    start_by = plan.start_at - timedelta(minutes=shift)
    return TippingPoint(possible=True, condition=shifted.format(time=format_clock(start_by)))


def _needs_no_stored_milk(
    plan: DrinkPlan,
    context: PatternContext,
    options: EngineOptions,
) -> Callable[[Feasibility], bool]:
    """Accept verdicts that fit and whose advice asks for no stored milk.

    Advice depends only on the verdict and the plan's goal and pump settings, so this
    agrees with the ``freezerNeededMl`` of the assessment itself. Among non-RED verdicts
    GREEN always needs none, which keeps acceptance monotonic in the start shift.
    """

    def accepts(verdict: Feasibility) -> bool:
        if verdict == "RED":
            return False
        return generate_tips(verdict, plan, context, options).freezer_needed_ml == 0

    return accepts


def find_tipping_points(
    plan: DrinkPlan,
    history: Sequence[FeedHistoryPoint],
    context: PatternContext,
    profile: Optional[Profile] = None,
    options: Optional[EngineOptions] = None,
) -> TippingPoints:
    """Search for the latest start times at which plan variants still fit."""

    profile = profile or Profile()
    options = options or EngineOptions()
    next_feeds = predict_next_feeds(history, 1, context.evening_cluster, options.default_interval_min)
    next_feed = next_feeds[0] if next_feeds else None

    plus_one = _tipping_point(
        plan.model_copy(update={"drinks": plan.drinks + 1}),
        history,
        profile,
        next_feed,
        options,
        PLUS_ONE_ACCEPTED.__contains__,
        as_planned="+1 drink fits as planned",
        shifted="+1 drink fits if you start by {time}",
    )
    no_freezer = _tipping_point(
        plan,
        history,
        profile,
        next_feed,
        options,
        _needs_no_stored_milk(plan, context, options),
        as_planned="Fits without stored milk as planned",
        shifted="Fits without stored milk if you start by {time}",
    )
    logger.debug(
        "Tipping points: plus_one=%s no_freezer=%s",
        plus_one.possible,
        no_freezer.possible,
    )
    return TippingPoints(plus_one=plus_one, no_freezer=no_freezer)
