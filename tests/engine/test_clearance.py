"""Clearance model tests."""

from __future__ import annotations

from datetime import datetime

import pytest

from feedplan.engine.clearance import (
    DEFAULT_HOURS_PER_DRINK,
    apply_conservative_factor,
    compute_safe_feed_at,
    drink_window_end,
    hours_per_standard_drink,
    per_drink_hours,
)
from feedplan.errors import InvalidInputError
from feedplan.models.plan import Profile
from tests.conftest import at


@pytest.mark.parametrize(
    ("weight", "expected"),
    [
        (None, 2.5),
        (45, 2.8),
        (54, 2.8),
        (61, 2.375),
        (68, 2.25),
        (75, 2.125),
        (82, 2.0),
        (150, 2.0),
    ],
)
def test_hours_per_standard_drink_follows_nomogram(weight, expected):
    assert hours_per_standard_drink(weight) == pytest.approx(expected)


def test_hours_per_standard_drink_is_positive_and_non_increasing():
    previous = None
    for weight in range(40, 151):
        hours = hours_per_standard_drink(weight)
        assert hours > 0
        if previous is not None:
            assert hours <= previous
        previous = hours


def test_unknown_weight_uses_population_default():
    assert hours_per_standard_drink() == DEFAULT_HOURS_PER_DRINK


@pytest.mark.parametrize("weight", [0, -70])
def test_non_positive_weight_is_rejected(weight):
    with pytest.raises(InvalidInputError):
        hours_per_standard_drink(weight)


def test_conservative_factor_scales_hours():
    assert apply_conservative_factor(2.0, 1.15) == pytest.approx(2.3)
    assert per_drink_hours(Profile(weight_kg=82, conservative_factor=1.5)) == pytest.approx(3.0)


def test_conservative_factor_below_one_is_rejected():
    with pytest.raises(InvalidInputError):
        apply_conservative_factor(2.0, 0.9)


def test_drink_window_end_adds_pace(make_plan):
    assert drink_window_end(make_plan(pace="ONE_HOUR")) == at(21)
    assert drink_window_end(make_plan(pace="THREE_HOURS")) == at(23)


def test_reference_evening_plan(make_plan, heavy_profile):
    plan = make_plan(start_at=at(20), drinks=2, pace="TWO_HOURS", safety_buffer_min=30)

    assert compute_safe_feed_at(plan, heavy_profile) == datetime(2024, 6, 2, 2, 30)


def test_default_profile_is_more_cautious(make_plan):
    plan = make_plan(drinks=2, pace="TWO_HOURS", safety_buffer_min=30)

    # 22:00 window end + 2 x 2.5 h + 30 min
    assert compute_safe_feed_at(plan, Profile()) == datetime(2024, 6, 2, 3, 30)


def test_safe_feed_at_is_monotonic_in_drinks_and_pace(make_plan):
    profile = Profile(weight_kg=63, conservative_factor=1.15)
    for pace in ("ONE_HOUR", "TWO_HOURS", "THREE_HOURS"):
        times = [compute_safe_feed_at(make_plan(drinks=count, pace=pace), profile) for count in range(1, 8)]
        assert times == sorted(times)

    for count in range(1, 5):
        by_pace = [
            compute_safe_feed_at(make_plan(drinks=count, pace=pace), profile)
            for pace in ("ONE_HOUR", "TWO_HOURS", "THREE_HOURS")
        ]
        assert by_pace == sorted(by_pace)


def test_zero_buffer_is_allowed(make_plan, heavy_profile):
    plan = make_plan(drinks=1, pace="ONE_HOUR", safety_buffer_min=0)

    assert compute_safe_feed_at(plan, heavy_profile) == at(23)
