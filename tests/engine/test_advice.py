"""Advice rule tests."""

from __future__ import annotations

from feedplan.engine.advice import (
    AFFIRMATIVE_TIP,
    INSUFFICIENT_HISTORY_TIP,
    MIN_FREEZER_TIP,
    generate_tips,
)
from feedplan.models.history import PatternContext
from feedplan.models.options import EngineOptions


def test_green_yields_single_affirmative_tip(make_plan, context):
    advice = generate_tips("GREEN", make_plan(goal="MAX_RELAX", can_micro_pump=True), context)

    assert advice.tips == (AFFIRMATIVE_TIP,)
    assert advice.freezer_needed_ml == 0


def test_yellow_without_pump_suggests_timing_only(make_plan, context):
    advice = generate_tips("YELLOW", make_plan(goal="MIN_FREEZER"), context)

    assert len(advice.tips) == 3
    assert "before you start" in advice.tips[0]
    assert "later" in advice.tips[1]
    assert "one hour" in advice.tips[2]
    assert advice.freezer_needed_ml == 0


def test_yellow_relax_goal_needs_full_feed_of_stored_milk(make_plan, context):
    advice = generate_tips("YELLOW", make_plan(goal="MAX_RELAX"), context)

    assert advice.freezer_needed_ml == 120
    assert len(advice.tips) == 4
    assert "80 ml" in advice.tips[-1]
    assert "120 ml" in advice.tips[-1]


def test_yellow_micro_pump_with_minimal_freezer_goal_prepends_goal_tip(make_plan, context):
    plan = make_plan(goal="MIN_FREEZER", can_micro_pump=True, micro_pump_target_ml=80)

    advice = generate_tips("YELLOW", plan, context)

    assert advice.freezer_needed_ml == 40
    assert advice.tips[0] == MIN_FREEZER_TIP
    assert len(advice.tips) == 5
    assert "40 ml" in advice.tips[-1]
    assert [result.name for result in advice.rule_results] == [
        "tight_timing",
        "tight_micro_pump",
        "minimal_freezer_goal",
    ]


def test_red_without_pump(make_plan, context):
    advice = generate_tips("RED", make_plan(goal="MAX_RELAX"), context)

    assert advice.tips[0] == "This plan does not fit comfortably:"
    assert "reduce the number of drinks" in advice.tips[-1]
    assert len(advice.tips) == 3
    assert advice.freezer_needed_ml == 0


def test_red_with_pump_reports_small_margin(make_plan, context):
    plan = make_plan(goal="MAX_RELAX", can_micro_pump=True, micro_pump_target_ml=50)

    advice = generate_tips("RED", plan, context)

    assert advice.freezer_needed_ml == 70
    assert "small margin" in advice.tips[-1]
    assert len(advice.tips) == 4


def test_freezer_volume_never_negative(make_plan):
    plan = make_plan(goal="MIN_FREEZER", can_micro_pump=True, micro_pump_target_ml=150)
    context = PatternContext(typical_ml_per_feed=120)

    advice = generate_tips("RED", plan, context)

    assert advice.freezer_needed_ml == 0
    assert MIN_FREEZER_TIP not in advice.tips


def test_default_micro_pump_volume_is_configurable(make_plan, context):
    advice = generate_tips(
        "YELLOW",
        make_plan(goal="MAX_RELAX"),
        context,
        EngineOptions(micro_pump_default_ml=60),
    )

    assert "60 ml" in advice.tips[-1]


def test_insufficient_history_note_follows_affirmative_tip(make_plan, context):
    advice = generate_tips("GREEN", make_plan(), context, insufficient_history=True)

    assert advice.tips == (AFFIRMATIVE_TIP, INSUFFICIENT_HISTORY_TIP)
