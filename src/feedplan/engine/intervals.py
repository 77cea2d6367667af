"""Median-interval feed prediction."""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional, Sequence, Tuple

from feedplan.errors import InvalidInputError
from feedplan.models.history import FeedHistoryPoint

from .utils import (
    add_minutes,
    ensure_chronological,
    ensure_consistent_timezones,
    minutes_between,
    round_half_up,
)

MAX_HISTORY_POINTS = 6
EVENING_CLUSTER_FACTOR = 0.85
EVENING_CLUSTER_FLOOR_MIN = 90.0
# Used when a single feed is known and no interval can be measured.
DEFAULT_INTERVAL_MIN = 180.0


def median(values: Sequence[float]) -> float:
    """Statistical median; the mean of the two middle values on even counts."""
    if not values:
        raise InvalidInputError("median of an empty sequence is undefined")
    ordered = sorted(values)
    middle = len(ordered) // 2
    if len(ordered) % 2:
        return float(ordered[middle])
    return (ordered[middle - 1] + ordered[middle]) / 2.0


def interval_minutes(history: Sequence[FeedHistoryPoint]) -> List[float]:
    """Minutes between consecutive feeds among the most recent points."""
    recent = list(history)[-MAX_HISTORY_POINTS:]
    return [
        minutes_between(previous.at, current.at)
        for previous, current in zip(recent, recent[1:])
    ]


def predicted_interval_minutes(
    history: Sequence[FeedHistoryPoint],
    evening_cluster: bool = False,
    default_interval_min: float = DEFAULT_INTERVAL_MIN,
) -> Optional[float]:
    """Interval used to project future feeds, or ``None`` without history."""
    if not history:
        return None
    intervals = interval_minutes(history)
    base = float(round_half_up(median(intervals))) if intervals else float(default_interval_min)
    if evening_cluster:
        return max(EVENING_CLUSTER_FLOOR_MIN, base * EVENING_CLUSTER_FACTOR)
    return base


def predict_next_feeds(
    history: Sequence[FeedHistoryPoint],
    count: int = 3,
    evening_cluster: bool = False,
    default_interval_min: float = DEFAULT_INTERVAL_MIN,
) -> Tuple[datetime, ...]:
    """Project ``count`` future feed times from the feeding history."""
    if count < 0:
        raise InvalidInputError(f"prediction count must be non-negative, got {count}")
    ensure_consistent_timezones(point.at for point in history)
    ensure_chronological(history)

    interval = predicted_interval_minutes(history, evening_cluster, default_interval_min)
    if interval is None:
        return ()
    last = history[-1].at
    return tuple(add_minutes(last, interval * step) for step in range(1, count + 1))
