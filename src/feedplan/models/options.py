"""Tunable engine parameters."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class EngineOptions(BaseModel):
    """Parameters passed explicitly into every engine call."""

    prediction_count: int = Field(default=2, ge=1)
    default_interval_min: float = Field(default=180.0, gt=0)
    empty_history_feasibility: Literal["GREEN", "YELLOW", "RED"] = "GREEN"
    micro_pump_default_ml: float = Field(default=80.0, ge=0)
    scenario_freezer_fallback_ml: float = Field(default=120.0, ge=0)
    search_max_shift_min: int = Field(default=180, ge=0)
    search_step_min: int = Field(default=5, ge=1)
    search_max_iterations: int = Field(default=8, ge=1)

    model_config = ConfigDict(frozen=True)
