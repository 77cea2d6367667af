"""Alcohol clearance model for breastmilk.

A single weight-adjusted estimate is used everywhere a "safe to feed" time is needed:
plan assessment, tipping-point search and the live session countdown. Hours per standard
drink (10 g alcohol) follow the LactMed nomogram anchors, interpolated linearly:

* 54 kg -> 2.5 h
* 68 kg -> 2.25 h
* 82 kg -> 2.0 h

Weights at or below 54 kg use 2.8 h, weights from 82 kg use 2.0 h, and an unknown weight
falls back to the 54 kg population default of 2.5 h. Clearance starts at the end of the
drinking window and accrues linearly per drink, then an explicit buffer is added. This is a
conservative simplification of first-order elimination, not a pharmacokinetic simulation.
"""

from __future__ import annotations

from datetime import datetime, timedelta
from typing import Optional

from feedplan.errors import InvalidInputError
from feedplan.models.plan import PACE_HOURS, DrinkPlan, Profile

HOURS_AT_54KG = 2.5
HOURS_AT_68KG = 2.25
HOURS_AT_82KG = 2.0
HOURS_AT_OR_BELOW_54KG = 2.8
DEFAULT_HOURS_PER_DRINK = HOURS_AT_54KG


def _interpolate(weight_kg: float, low_kg: float, high_kg: float, low_h: float, high_h: float) -> float:
    fraction = (weight_kg - low_kg) / (high_kg - low_kg)
    return low_h + fraction * (high_h - low_h)


def hours_per_standard_drink(weight_kg: Optional[float] = None) -> float:
    """Return the hours needed to clear one standard drink from breastmilk."""

    if weight_kg is None:
        return DEFAULT_HOURS_PER_DRINK
    if weight_kg <= 0:
        raise InvalidInputError(f"weight must be positive, got {weight_kg}")
    if weight_kg <= 54:
        return HOURS_AT_OR_BELOW_54KG
    if weight_kg >= 82:
        return HOURS_AT_82KG
    if weight_kg <= 68:
        return _interpolate(weight_kg, 54, 68, HOURS_AT_54KG, HOURS_AT_68KG)
    return _interpolate(weight_kg, 68, 82, HOURS_AT_68KG, HOURS_AT_82KG)


def apply_conservative_factor(hours: float, factor: float) -> float:
    if factor < 1.0:
        raise InvalidInputError(f"conservative factor must be >= 1.0, got {factor}")
    return hours * factor


def per_drink_hours(profile: Profile) -> float:
    """Hours per standard drink for a profile, including its conservative factor."""

    return apply_conservative_factor(
        hours_per_standard_drink(profile.weight_kg),
        profile.conservative_factor,
    )


def drink_window_end(plan: DrinkPlan) -> datetime:
    if plan.pace not in PACE_HOURS:
        raise InvalidInputError(f"unknown pace {plan.pace!r}")
    return plan.start_at + timedelta(hours=PACE_HOURS[plan.pace])


def compute_safe_feed_at(plan: DrinkPlan, profile: Profile) -> datetime:
    """Earliest time breastmilk is presumed alcohol-free for the plan."""

    if plan.drinks < 1:
        raise InvalidInputError(f"a plan needs at least one drink, got {plan.drinks}")
    clearance_hours = plan.drinks * per_drink_hours(profile)
    return drink_window_end(plan) + timedelta(
        hours=clearance_hours,
        minutes=plan.safety_buffer_min,
    )
