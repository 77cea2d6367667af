"""Tri-state feasibility classification."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Sequence, Tuple

from feedplan.errors import InvalidInputError
from feedplan.models.assessment import FEASIBILITY_VALUES, Feasibility
from feedplan.models.history import FeedHistoryPoint, PatternContext
from feedplan.models.options import EngineOptions
from feedplan.models.plan import DrinkPlan, Profile

from .clearance import compute_safe_feed_at
from .intervals import predict_next_feeds
from .utils import add_minutes, ensure_consistent_timezones

logger = logging.getLogger(__name__)

GREEN_MARGIN_MIN = 10
YELLOW_TOLERANCE_MIN = 30

FEASIBILITY_LABELS: dict[str, str] = {
    "GREEN": "Comfortable margin, no stored milk needed",
    "YELLOW": "Tight, a small shift or a micro-pump makes it work",
    "RED": "Does not fit, adjust timing or amount",
}

FEASIBILITY_COLORS: dict[str, str] = {
    "GREEN": "#4CAF50",
    "YELLOW": "#FF9800",
    "RED": "#F44336",
}


@dataclass(frozen=True)
class PlanEvaluation:
    """Safe time, predicted feeds and verdict for one plan variant."""

    safe_feed_at: datetime
    next_feeds: Tuple[datetime, ...]
    feasibility: Feasibility

    @property
    def next_feed(self) -> Optional[datetime]:
        return self.next_feeds[0] if self.next_feeds else None


def classify(
    safe_feed_at: datetime,
    next_feed: Optional[datetime],
    *,
    empty_history_feasibility: Feasibility = "GREEN",
) -> Feasibility:
    """Compare the safe-to-feed time against the next predicted feed.

    Without a predicted feed the verdict is ``empty_history_feasibility``; callers decide
    that policy explicitly.
    """

    if empty_history_feasibility not in FEASIBILITY_VALUES:
        raise InvalidInputError(f"unknown feasibility {empty_history_feasibility!r}")
    if next_feed is None:
        return empty_history_feasibility
    ensure_consistent_timezones((safe_feed_at, next_feed))

    if safe_feed_at <= add_minutes(next_feed, -GREEN_MARGIN_MIN):
        return "GREEN"
    if safe_feed_at <= add_minutes(next_feed, YELLOW_TOLERANCE_MIN):
        return "YELLOW"
    return "RED"


def classify_plan(
    plan: DrinkPlan,
    history: Sequence[FeedHistoryPoint],
    context: PatternContext,
    profile: Profile,
    options: EngineOptions,
) -> PlanEvaluation:
    """Run clearance, prediction and classification for a single plan."""

    safe_feed_at = compute_safe_feed_at(plan, profile)
    next_feeds = predict_next_feeds(
        history,
        options.prediction_count,
        context.evening_cluster,
        options.default_interval_min,
    )
    feasibility = classify(
        safe_feed_at,
        next_feeds[0] if next_feeds else None,
        empty_history_feasibility=options.empty_history_feasibility,
    )
    logger.debug(
        "Classified plan: drinks=%s pace=%s safe_feed_at=%s next_feed=%s feasibility=%s",
        plan.drinks,
        plan.pace,
        safe_feed_at.isoformat(),
        next_feeds[0].isoformat() if next_feeds else None,
        feasibility,
    )
    return PlanEvaluation(safe_feed_at=safe_feed_at, next_feeds=next_feeds, feasibility=feasibility)


def feasibility_label(feasibility: Feasibility) -> str:
    return FEASIBILITY_LABELS[feasibility]


def feasibility_color(feasibility: Feasibility) -> str:
    return FEASIBILITY_COLORS[feasibility]
