"""Application configuration helpers."""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import Callable, Literal

from pydantic import BaseModel, ConfigDict, Field

from feedplan.models.options import EngineOptions

ENV_PREFIX = "FEEDPLAN_"
ENV_FILE_CANDIDATES = (Path(".env"), Path(".env.local"))


class Settings(BaseModel):
    """Global settings loaded from environment variables or .env files."""

    log_level: str = Field(default="INFO", description="Logging level (DEBUG/INFO/WARNING/ERROR)")
    log_format: str = Field(
        default="plain",
        description="Logging format (plain/json).",
    )
    log_level_overrides: dict[str, str] = Field(
        default_factory=dict,
        description="Minimum severity per logger name, e.g. {'feedplan.engine': 'WARNING'}.",
    )
    prediction_count: int = Field(
        default=2,
        ge=1,
        description="Number of future feeds predicted per assessment.",
    )
    default_interval_min: float = Field(
        default=180.0,
        gt=0,
        description="Feed interval assumed when only one feed is logged.",
    )
    empty_history_feasibility: Literal["GREEN", "YELLOW", "RED"] = Field(
        default="GREEN",
        description="Verdict used when no feed history is available.",
    )
    micro_pump_default_ml: float = Field(
        default=80.0,
        ge=0,
        description="Micro-pump volume named in tips when the plan sets none.",
    )
    scenario_freezer_fallback_ml: float = Field(
        default=120.0,
        ge=0,
        description="Coarse stored-milk estimate for non-green +1 drink scenarios.",
    )
    search_max_shift_min: int = Field(
        default=180,
        ge=0,
        description="How far earlier the tipping-point search may move the start.",
    )
    search_step_min: int = Field(
        default=5,
        ge=1,
        description="Granularity of the tipping-point search in minutes.",
    )
    search_max_iterations: int = Field(
        default=8,
        ge=1,
        description="Maximum bisection probes per tipping point.",
    )

    model_config = ConfigDict(frozen=True)

    def engine_options(self) -> EngineOptions:
        """Engine parameters derived from these settings."""

        return EngineOptions(
            prediction_count=self.prediction_count,
            default_interval_min=self.default_interval_min,
            empty_history_feasibility=self.empty_history_feasibility,
            micro_pump_default_ml=self.micro_pump_default_ml,
            scenario_freezer_fallback_ml=self.scenario_freezer_fallback_ml,
            search_max_shift_min=self.search_max_shift_min,
            search_step_min=self.search_step_min,
            search_max_iterations=self.search_max_iterations,
        )


def _strip_quotes(value: str) -> str:
    if len(value) >= 2 and value[0] == value[-1] and value[0] in "\"'":
        return value[1:-1]
    return value


def _parse_env_file(path: Path) -> dict[str, str]:
    """Read ``KEY=value`` lines, allowing ``export`` prefixes and quoted values."""

    if not path.is_file():
        return {}
    values: dict[str, str] = {}
    for line in path.read_text(encoding="utf-8").splitlines():
        line = line.strip()
        if line.startswith("export "):
            line = line[len("export "):].lstrip()
        if not line or line.startswith("#") or "=" not in line:
            continue
        key, _, raw_value = line.partition("=")
        values[key.strip()] = _strip_quotes(raw_value.strip())
    return values


def parse_level_overrides(raw: str) -> dict[str, str]:
    """Parse ``logger=LEVEL`` pairs separated by commas."""

    overrides: dict[str, str] = {}
    for chunk in raw.split(","):
        if "=" not in chunk:
            continue
        name, level = chunk.split("=", 1)
        name = name.strip()
        level = level.strip().upper()
        if name and level:
            overrides[name] = level
    return overrides


def _feasibility(raw: str) -> str:
    value = raw.strip().upper()
    if value not in {"GREEN", "YELLOW", "RED"}:
        raise ValueError(value)
    return value


# Settings field -> coercion for its FEEDPLAN_<FIELD> variable.
_ENV_FIELDS: dict[str, Callable[[str], object]] = {
    "log_level": str,
    "log_format": str,
    "log_level_overrides": parse_level_overrides,
    "prediction_count": int,
    "default_interval_min": float,
    "empty_history_feasibility": _feasibility,
    "micro_pump_default_ml": float,
    "scenario_freezer_fallback_ml": float,
    "search_max_shift_min": int,
    "search_step_min": int,
    "search_max_iterations": int,
}


def _load_from_env() -> dict[str, object]:
    """Collect FEEDPLAN_* overrides; the process environment wins over .env files.

    Values that cannot be coerced are skipped so the field keeps its default.
    """

    file_values: dict[str, str] = {}
    for candidate in ENV_FILE_CANDIDATES:
        file_values.update(_parse_env_file(candidate))

    payload: dict[str, object] = {}
    for field_name, coerce in _ENV_FIELDS.items():
        key = f"{ENV_PREFIX}{field_name.upper()}"
        raw = os.environ.get(key) or file_values.get(key)
        if not raw:
            continue
        try:
            payload[field_name] = coerce(raw)
        except ValueError:
            continue
    return payload


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings."""

    return Settings(**_load_from_env())
