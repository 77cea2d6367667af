"""Alcohol-clearance and feeding-schedule feasibility engine."""

from .advice import Advice, AdviceEngine, AdviceRule, generate_tips, stored_milk_needed_ml
from .assessor import assess_plan, assess_request, validate_inputs
from .classifier import (
    PlanEvaluation,
    classify,
    classify_plan,
    feasibility_color,
    feasibility_label,
)
from .clearance import (
    apply_conservative_factor,
    compute_safe_feed_at,
    drink_window_end,
    hours_per_standard_drink,
    per_drink_hours,
)
from .countdown import (
    countdown_ms,
    drink_progress,
    entries_on_day,
    format_hms,
    last_drink_info,
    remaining_hours_for_entry,
    standard_drinks,
    total_standard_drinks,
)
from .intervals import interval_minutes, median, predict_next_feeds
from .scenarios import find_tipping_points, plus_one_scenario

__all__ = [
    "Advice",
    "AdviceEngine",
    "AdviceRule",
    "generate_tips",
    "stored_milk_needed_ml",
    "assess_plan",
    "assess_request",
    "validate_inputs",
    "PlanEvaluation",
    "classify",
    "classify_plan",
    "feasibility_color",
    "feasibility_label",
    "apply_conservative_factor",
    "compute_safe_feed_at",
    "drink_window_end",
    "hours_per_standard_drink",
    "per_drink_hours",
    "countdown_ms",
    "drink_progress",
    "entries_on_day",
    "format_hms",
    "last_drink_info",
    "remaining_hours_for_entry",
    "standard_drinks",
    "total_standard_drinks",
    "interval_minutes",
    "median",
    "predict_next_feeds",
    "find_tipping_points",
    "plus_one_scenario",
]
