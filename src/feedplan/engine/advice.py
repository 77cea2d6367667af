"""Rule-based mitigation advice for a classified plan."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple

from feedplan.models.assessment import Feasibility
from feedplan.models.history import PatternContext
from feedplan.models.options import EngineOptions
from feedplan.models.plan import DrinkPlan

AFFIRMATIVE_TIP = "Fits between feeds without stored milk."
MIN_FREEZER_TIP = "Your goal is minimal stored milk: try feeding, shifting or bundling first."
INSUFFICIENT_HISTORY_TIP = (
    "No feeds logged yet, so the next feed could not be predicted. "
    "Log a few feeds for a reliable verdict."
)


@dataclass(frozen=True)
class AdviceSnapshot:
    """Inputs shared across rule evaluations."""

    feasibility: Feasibility
    plan: DrinkPlan
    context: PatternContext
    options: EngineOptions
    insufficient_history: bool = False


@dataclass(frozen=True)
class RuleResult:
    """Tips and stored-milk volume contributed by one rule."""

    name: str
    tips: Tuple[str, ...] = field(default_factory=tuple)
    freezer_needed_ml: Optional[float] = None
    prepend: bool = False


@dataclass(frozen=True)
class Advice:
    """Ordered tips and the recommended stored-milk volume."""

    tips: Tuple[str, ...]
    freezer_needed_ml: float
    rule_results: Tuple[RuleResult, ...] = field(default_factory=tuple)


def stored_milk_needed_ml(plan: DrinkPlan, context: PatternContext) -> float:
    """Volume to keep ready after counting what a micro-pump session yields."""
    return max(context.typical_ml_per_feed - (plan.micro_pump_target_ml or 0.0), 0.0)


def _format_ml(value: float) -> str:
    return f"{value:.0f} ml"


class AdviceRule:
    """Base class contract for all advice rules."""

    name: str
    feasibilities: Tuple[Feasibility, ...] = ("GREEN", "YELLOW", "RED")

    def applies(self, snapshot: AdviceSnapshot, freezer_needed_ml: float) -> bool:
        return snapshot.feasibility in self.feasibilities

    def evaluate(self, snapshot: AdviceSnapshot, freezer_needed_ml: float) -> RuleResult:
        raise NotImplementedError


class ComfortableFitRule(AdviceRule):
    name = "comfortable_fit"
    feasibilities = ("GREEN",)

    def evaluate(self, snapshot: AdviceSnapshot, freezer_needed_ml: float) -> RuleResult:
        return RuleResult(self.name, (AFFIRMATIVE_TIP,), freezer_needed_ml=0.0)


class TightTimingRule(AdviceRule):
    name = "tight_timing"
    feasibilities = ("YELLOW",)

    def evaluate(self, snapshot: AdviceSnapshot, freezer_needed_ml: float) -> RuleResult:
        return RuleResult(
            self.name,
            (
                "Option: feed 30-45 min before you start.",
                "Option: have the first drink 20-30 min later.",
                "Option: bundle the drinks into one hour.",
            ),
        )


class TightMicroPumpRule(AdviceRule):
    name = "tight_micro_pump"
    feasibilities = ("YELLOW",)

    def applies(self, snapshot: AdviceSnapshot, freezer_needed_ml: float) -> bool:
        if not super().applies(snapshot, freezer_needed_ml):
            return False
        return snapshot.plan.goal == "MAX_RELAX" or snapshot.plan.can_micro_pump

    def evaluate(self, snapshot: AdviceSnapshot, freezer_needed_ml: float) -> RuleResult:
        volume = stored_milk_needed_ml(snapshot.plan, snapshot.context)
        pump_ml = snapshot.plan.micro_pump_target_ml
        if pump_ml is None:
            pump_ml = snapshot.options.micro_pump_default_ml
        tip = (
            f"Micro-pump {_format_ml(pump_ml)} to bridge the tight overlap "
            f"and keep {_format_ml(volume)} of stored milk ready."
        )
        return RuleResult(self.name, (tip,), freezer_needed_ml=volume)


class NoComfortableFitRule(AdviceRule):
    name = "no_comfortable_fit"
    feasibilities = ("RED",)

    def evaluate(self, snapshot: AdviceSnapshot, freezer_needed_ml: float) -> RuleResult:
        return RuleResult(
            self.name,
            (
                "This plan does not fit comfortably:",
                "Feed before you start and shift the first drink.",
                "Or reduce the number of drinks by one.",
            ),
        )


class SmallMarginMicroPumpRule(AdviceRule):
    name = "small_margin_micro_pump"
    feasibilities = ("RED",)

    def applies(self, snapshot: AdviceSnapshot, freezer_needed_ml: float) -> bool:
        return super().applies(snapshot, freezer_needed_ml) and snapshot.plan.can_micro_pump

    def evaluate(self, snapshot: AdviceSnapshot, freezer_needed_ml: float) -> RuleResult:
        volume = stored_milk_needed_ml(snapshot.plan, snapshot.context)
        pump_ml = snapshot.plan.micro_pump_target_ml
        if pump_ml is None:
            pump_ml = snapshot.options.micro_pump_default_ml
        tip = (
            f"With a {_format_ml(pump_ml)} micro-pump and {_format_ml(volume)} of stored milk "
            "it becomes possible, with a small margin."
        )
        return RuleResult(self.name, (tip,), freezer_needed_ml=volume)


class MinimalFreezerGoalRule(AdviceRule):
    name = "minimal_freezer_goal"

    def applies(self, snapshot: AdviceSnapshot, freezer_needed_ml: float) -> bool:
        return snapshot.plan.goal == "MIN_FREEZER" and freezer_needed_ml > 0

    def evaluate(self, snapshot: AdviceSnapshot, freezer_needed_ml: float) -> RuleResult:
        return RuleResult(self.name, (MIN_FREEZER_TIP,), prepend=True)


class InsufficientHistoryRule(AdviceRule):
    name = "insufficient_history"

    def applies(self, snapshot: AdviceSnapshot, freezer_needed_ml: float) -> bool:
        return snapshot.insufficient_history

    def evaluate(self, snapshot: AdviceSnapshot, freezer_needed_ml: float) -> RuleResult:
        return RuleResult(self.name, (INSUFFICIENT_HISTORY_TIP,))


class AdviceEngine:
    """Apply advice rules additively in a fixed order."""

    def __init__(self, rules: Sequence[AdviceRule]) -> None:
        self._rules = tuple(rules)

    def generate(self, snapshot: AdviceSnapshot) -> Advice:
        tips: List[str] = []
        freezer_needed_ml = 0.0
        results: List[RuleResult] = []

        for rule in self._rules:
            if not rule.applies(snapshot, freezer_needed_ml):
                continue
            result = rule.evaluate(snapshot, freezer_needed_ml)
            results.append(result)
            if result.prepend:
                tips[0:0] = result.tips
            else:
                tips.extend(result.tips)
            if result.freezer_needed_ml is not None:
                freezer_needed_ml = result.freezer_needed_ml

        return Advice(tips=tuple(tips), freezer_needed_ml=freezer_needed_ml, rule_results=tuple(results))


DEFAULT_RULES: Tuple[AdviceRule, ...] = (
    ComfortableFitRule(),
    TightTimingRule(),
    TightMicroPumpRule(),
    NoComfortableFitRule(),
    SmallMarginMicroPumpRule(),
    MinimalFreezerGoalRule(),
    InsufficientHistoryRule(),
)

_DEFAULT_ENGINE = AdviceEngine(DEFAULT_RULES)


def generate_tips(
    feasibility: Feasibility,
    plan: DrinkPlan,
    context: PatternContext,
    options: Optional[EngineOptions] = None,
    insufficient_history: bool = False,
) -> Advice:
    """Produce ordered tips and the stored-milk volume for a verdict."""

    snapshot = AdviceSnapshot(
        feasibility=feasibility,
        plan=plan,
        context=context,
        options=options or EngineOptions(),
        insufficient_history=insufficient_history,
    )
    return _DEFAULT_ENGINE.generate(snapshot)
