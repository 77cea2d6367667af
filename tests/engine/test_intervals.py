"""Feed interval prediction tests."""

from __future__ import annotations

import pytest

from feedplan.engine.intervals import (
    interval_minutes,
    median,
    predict_next_feeds,
    predicted_interval_minutes,
)
from feedplan.errors import InvalidInputError
from tests.conftest import at, feeds


def test_empty_history_predicts_nothing():
    assert predict_next_feeds([], 3, False) == ()
    assert predict_next_feeds([], 3, True) == ()


def test_regular_history_uses_median_interval(history):
    assert interval_minutes(history) == [120, 120]
    assert predict_next_feeds(history, 2, False) == (at(15), at(17))


def test_evening_cluster_shortens_interval(history):
    assert predict_next_feeds(history, 1, True) == (at(14, 42),)


def test_evening_cluster_is_floored_at_ninety_minutes():
    history = feeds(at(9), at(10, 40))

    assert predicted_interval_minutes(history, evening_cluster=True) == 90
    assert predict_next_feeds(history, 1, True) == (at(12, 10),)


def test_single_point_uses_default_interval():
    history = feeds(at(9))

    assert predict_next_feeds(history, 2, False) == (at(12), at(15))
    assert predict_next_feeds(history, 1, False, default_interval_min=150) == (at(11, 30),)
    # 180 x 0.85 = 153 minutes
    assert predict_next_feeds(history, 1, True) == (at(11, 33),)


def test_only_last_six_points_are_used():
    history = feeds(at(0), at(5), at(10), at(12), at(13), at(14), at(15))

    assert interval_minutes(history) == [300, 120, 60, 60, 60]
    assert predict_next_feeds(history, 1, False) == (at(16),)


def test_even_interval_count_averages_middle_values():
    history = feeds(at(9), at(10), at(12))

    assert predict_next_feeds(history, 1, False) == (at(13, 30),)


def test_median_is_rounded_half_up_to_whole_minutes():
    history = feeds(at(9), at(10, 1), at(11, 3))

    assert predicted_interval_minutes(history) == 62
    assert predict_next_feeds(history, 1, False) == (at(12, 5),)


def test_prediction_is_restartable_and_does_not_touch_input(history):
    snapshot = list(history)

    first = predict_next_feeds(history, 3, False)
    second = predict_next_feeds(history, 3, False)

    assert first == second
    assert list(first) == sorted(first)
    assert history == snapshot


def test_zero_count_returns_empty(history):
    assert predict_next_feeds(history, 0, False) == ()


def test_negative_count_is_rejected(history):
    with pytest.raises(InvalidInputError):
        predict_next_feeds(history, -1, False)


def test_out_of_order_history_is_rejected():
    with pytest.raises(InvalidInputError):
        predict_next_feeds(feeds(at(11), at(9)), 1, False)


def test_median_helper():
    assert median([3, 1, 2]) == 2
    assert median([4, 1, 3, 2]) == 2.5
    with pytest.raises(InvalidInputError):
        median([])
