"""Shared pytest fixtures for the feedplan test suite."""

from __future__ import annotations

import os
from datetime import datetime
from typing import Callable, Dict, List

import pytest

from feedplan.config import get_settings
from feedplan.models.history import FeedHistoryPoint, PatternContext
from feedplan.models.plan import DrinkPlan, Profile


def at(hour: int, minute: int = 0, day: int = 1) -> datetime:
    """Naive timestamp on a fixed reference day."""
    return datetime(2024, 6, day, hour, minute)


def feeds(*times: datetime) -> List[FeedHistoryPoint]:
    return [FeedHistoryPoint(at=moment) for moment in times]


@pytest.fixture()
def history() -> List[FeedHistoryPoint]:
    """Feeds at 09:00, 11:00 and 13:00."""

    return feeds(at(9), at(11), at(13))


@pytest.fixture()
def context() -> PatternContext:
    return PatternContext(typical_ml_per_feed=120, evening_cluster=False)


@pytest.fixture()
def heavy_profile() -> Profile:
    """Profile whose clearance is exactly two hours per drink."""

    return Profile(weight_kg=82, conservative_factor=1.0)


@pytest.fixture()
def make_plan() -> Callable[..., DrinkPlan]:
    def _factory(**kwargs) -> DrinkPlan:
        defaults: Dict[str, object] = {
            "start_at": at(20),
            "drinks": 2,
            "pace": "TWO_HOURS",
            "safety_buffer_min": 30,
            "goal": "MIN_FREEZER",
        }
        defaults.update(kwargs)
        return DrinkPlan(**defaults)

    return _factory


@pytest.fixture()
def sample_request_payload() -> Dict[str, object]:
    """Host-style camelCase request document for the reference evening plan."""

    return {
        "plan": {
            "startAt": "2024-06-01T20:00:00",
            "drinks": 2,
            "pace": "TWO_HOURS",
            "drinkType": "WINE",
            "safetyBufferMin": 30,
            "goal": "MAX_RELAX",
            "canPreFeed": True,
            "canMicroPump": False,
        },
        "history": [
            {"at": "2024-06-01T17:30:00"},
            {"at": "2024-06-01T19:30:00", "amountMl": 110},
            {"at": "2024-06-01T21:30:00"},
        ],
        "context": {"typicalMlPerFeed": 120, "eveningCluster": False},
        "profile": {"weightKg": 82, "conservativeFactor": 1.0},
    }


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path, monkeypatch):
    """Ensure each test reads settings from a clean environment without .env files."""

    for key in list(os.environ):
        if key.startswith("FEEDPLAN_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
