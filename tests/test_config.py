"""Settings loading tests."""

from __future__ import annotations

from feedplan.config import get_settings, parse_level_overrides
from feedplan.models.options import EngineOptions


def test_defaults_match_engine_defaults():
    settings = get_settings()

    assert settings.log_level == "INFO"
    assert settings.log_format == "plain"
    assert settings.engine_options() == EngineOptions()


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("FEEDPLAN_LOG_FORMAT", "json")
    monkeypatch.setenv("FEEDPLAN_PREDICTION_COUNT", "4")
    monkeypatch.setenv("FEEDPLAN_EMPTY_HISTORY_FEASIBILITY", "yellow")
    monkeypatch.setenv("FEEDPLAN_SEARCH_STEP_MIN", "10")
    monkeypatch.setenv("FEEDPLAN_LOG_LEVEL_OVERRIDES", "feedplan.engine=warning")

    settings = get_settings()
    options = settings.engine_options()

    assert settings.log_format == "json"
    assert settings.log_level_overrides == {"feedplan.engine": "WARNING"}
    assert options.prediction_count == 4
    assert options.empty_history_feasibility == "YELLOW"
    assert options.search_step_min == 10


def test_unparseable_values_are_ignored(monkeypatch):
    monkeypatch.setenv("FEEDPLAN_PREDICTION_COUNT", "many")
    monkeypatch.setenv("FEEDPLAN_EMPTY_HISTORY_FEASIBILITY", "purple")

    settings = get_settings()

    assert settings.prediction_count == 2
    assert settings.empty_history_feasibility == "GREEN"


def test_env_file_fallback(tmp_path):
    (tmp_path / ".env").write_text("# local overrides\nFEEDPLAN_DEFAULT_INTERVAL_MIN=150\n")

    assert get_settings().default_interval_min == 150


def test_parse_level_overrides_skips_malformed_chunks():
    assert parse_level_overrides("a=debug, broken ,b.c = error,=info") == {
        "a": "DEBUG",
        "b.c": "ERROR",
    }


def test_env_file_accepts_export_and_quotes(tmp_path, monkeypatch):
    (tmp_path / ".env").write_text('export FEEDPLAN_LOG_FORMAT="json"\n')
    (tmp_path / ".env.local").write_text("FEEDPLAN_SEARCH_MAX_SHIFT_MIN='90'\n")
    monkeypatch.setenv("FEEDPLAN_SEARCH_MAX_SHIFT_MIN", "120")

    settings = get_settings()

    assert settings.log_format == "json"
    assert settings.search_max_shift_min == 120
