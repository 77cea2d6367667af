"""Shared time helpers for engine modules."""

from __future__ import annotations

import math
from datetime import datetime, timedelta
from typing import Iterable, Sequence

from feedplan.errors import InvalidInputError
from feedplan.models.history import FeedHistoryPoint


def add_minutes(moment: datetime, minutes: float) -> datetime:
    return moment + timedelta(minutes=minutes)


def minutes_between(start: datetime, end: datetime) -> float:
    """Signed number of minutes from ``start`` to ``end``."""
    return (end - start).total_seconds() / 60.0


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def format_clock(moment: datetime) -> str:
    """Render a timestamp as ``HH:MM`` in its own timezone.

    Timezone-aware values carry their UTC offset, e.g. ``17:30 UTC`` or
    ``19:30 UTC+02:00``, so a clock time is never shown without the zone it was read in.
    Naive values are shown as-is.
    """
    clock = moment.strftime("%H:%M")
    offset = moment.utcoffset()
    if offset is None:
        return clock
    if not offset:
        return f"{clock} UTC"
    sign = "-" if offset < timedelta(0) else "+"
    hours, remainder = divmod(int(abs(offset).total_seconds()) // 60, 60)
    return f"{clock} UTC{sign}{hours:02d}:{remainder:02d}"


def ensure_consistent_timezones(moments: Iterable[datetime]) -> None:
    """Reject a mix of timezone-aware and naive timestamps."""
    awareness = {moment.utcoffset() is not None for moment in moments}
    if len(awareness) > 1:
        raise InvalidInputError("timestamps mix timezone-aware and naive values")


def ensure_chronological(history: Sequence[FeedHistoryPoint]) -> None:
    """Reject feed history that is not ordered oldest first."""
    for index in range(1, len(history)):
        if history[index].at < history[index - 1].at:
            raise InvalidInputError(
                f"feed history is not chronological at position {index}: "
                f"{history[index].at.isoformat()} precedes {history[index - 1].at.isoformat()}"
            )
