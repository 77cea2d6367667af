"""Live clearance countdown for drinks logged during a session.

Uses the same per-drink hours as plan assessment, summed across entries (zero-order
clearance). ``now`` is always passed in by the caller and must match the entries in timezone
awareness; epoch-millisecond entries parse as UTC, so pair them with an aware ``now``.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import date, datetime
from typing import Iterable, List, Optional, Sequence

from feedplan.models.drinks import DrinkEntry, DrinkSession
from feedplan.models.plan import Profile

from .clearance import per_drink_hours
from .utils import ensure_consistent_timezones

MS_PER_HOUR = 3_600_000


@dataclass(frozen=True)
class LastDrinkInfo:
    last: DrinkEntry
    total_glasses: int


def standard_drinks(entry: DrinkEntry, profile: Profile) -> float:
    """Standard drinks contained in an entry."""
    grams_per_unit = entry.grams_per_unit if entry.grams_per_unit is not None else profile.std_drink_grams
    grams = entry.glasses * entry.units_per_glass * grams_per_unit
    return grams / profile.std_drink_grams


def total_standard_drinks(entries: Iterable[DrinkEntry], profile: Profile) -> float:
    return sum(standard_drinks(entry, profile) for entry in entries)


def elapsed_hours(now: datetime, since: datetime) -> float:
    return max(0.0, (now - since).total_seconds() / 3600.0)


def remaining_hours_for_entry(entry: DrinkEntry, profile: Profile, now: datetime) -> float:
    ensure_consistent_timezones((now, entry.ts))
    total_hours = standard_drinks(entry, profile) * per_drink_hours(profile)
    return max(0.0, total_hours - elapsed_hours(now, entry.ts))


def countdown_ms(entries: Iterable[DrinkEntry], profile: Profile, now: datetime) -> int:
    """Milliseconds until every logged drink is cleared."""
    entries = list(entries)
    ensure_consistent_timezones([now, *(entry.ts for entry in entries)])
    hours = sum(remaining_hours_for_entry(entry, profile, now) for entry in entries)
    return round(hours * MS_PER_HOUR)


def drink_progress(entry: DrinkEntry, profile: Profile, now: datetime) -> float:
    """Fraction of an entry already cleared, between 0 and 1."""
    ensure_consistent_timezones((now, entry.ts))
    total_hours = standard_drinks(entry, profile) * per_drink_hours(profile)
    if total_hours <= 0:
        return 1.0
    return min(1.0, elapsed_hours(now, entry.ts) / total_hours)


def last_drink_info(session: Optional[DrinkSession]) -> Optional[LastDrinkInfo]:
    if session is None or not session.entries:
        return None
    ensure_consistent_timezones(entry.ts for entry in session.entries)
    last = max(session.entries, key=lambda entry: entry.ts)
    return LastDrinkInfo(last=last, total_glasses=sum(entry.glasses for entry in session.entries))


def entries_on_day(entries: Sequence[DrinkEntry], day: date) -> List[DrinkEntry]:
    """Entries logged on ``day``, judged in each entry's own timezone."""
    return [entry for entry in entries if entry.ts.date() == day]


def format_hms(ms: float) -> str:
    """Format a duration as ``HH:MM:SS``, rounding seconds up."""
    seconds = max(0, math.ceil(ms / 1000))
    hours, remainder = divmod(seconds, 3600)
    minutes, secs = divmod(remainder, 60)
    return f"{hours:02d}:{minutes:02d}:{secs:02d}"
