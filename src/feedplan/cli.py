"""Command-line interface for feedplan."""

from __future__ import annotations

import json
from datetime import datetime
from pathlib import Path
from typing import Any, Optional

import typer
from pydantic import TypeAdapter, ValidationError

from feedplan.config import get_settings
from feedplan.engine import (
    assess_request,
    countdown_ms,
    format_hms,
    hours_per_standard_drink,
    per_drink_hours,
    plus_one_scenario,
    predict_next_feeds,
    total_standard_drinks,
)
from feedplan.errors import InvalidInputError
from feedplan.logging_utils import configure_logging
from feedplan.models.assessment import AssessmentRequest
from feedplan.models.drinks import DrinkSession
from feedplan.models.plan import Profile

app = typer.Typer(help="Alcohol clearance and feeding schedule planning commands.")

_DATETIME = TypeAdapter(datetime)
_REQUEST_FILE = typer.Argument(
    ..., exists=True, dir_okay=False, help="Request JSON file (plan, history, context, profile)."
)


@app.callback()
def _configure() -> None:
    settings = get_settings()
    configure_logging(settings.log_level, settings.log_format, settings.log_level_overrides)


def _load_json(path: Path) -> Any:
    with path.open("r", encoding="utf-8") as fh:
        return json.load(fh)


def _load_request(path: Path) -> AssessmentRequest:
    return AssessmentRequest.model_validate(_load_json(path))


def _emit(payload: Any, pretty: bool) -> None:
    if pretty:
        typer.echo(json.dumps(payload, indent=2, sort_keys=True))
    else:
        typer.echo(json.dumps(payload))


def _reject(exc: Exception) -> typer.Exit:
    typer.secho(f"Invalid input: {exc}", err=True, fg=typer.colors.RED)
    return typer.Exit(code=2)


@app.command()
def assess(
    request_path: Path = _REQUEST_FILE,
    pretty: bool = typer.Option(False, "--pretty", help="Pretty-print output JSON."),
) -> None:
    """
    Assess the plan in the provided request JSON file (plan, history, context, profile).
    """
    try:
        request = _load_request(request_path)
        assessment = assess_request(request, get_settings().engine_options())
    except (ValidationError, InvalidInputError, json.JSONDecodeError) as exc:
        raise _reject(exc) from exc
    _emit(assessment.to_payload(), pretty)


@app.command("plus-one")
def plus_one(
    request_path: Path = _REQUEST_FILE,
    pretty: bool = typer.Option(False, "--pretty", help="Pretty-print output JSON."),
) -> None:
    """Evaluate the request's plan with one extra drink."""
    try:
        request = _load_request(request_path)
        outcome = plus_one_scenario(
            request.plan,
            request.history,
            request.context,
            request.profile,
            get_settings().engine_options(),
        )
    except (ValidationError, InvalidInputError, json.JSONDecodeError) as exc:
        raise _reject(exc) from exc
    _emit(outcome.to_payload(), pretty)


@app.command()
def predict(
    request_path: Path = _REQUEST_FILE,
    count: int = typer.Option(3, "--count", min=0, help="Number of feeds to predict."),
) -> None:
    """Predict the next feeds from the request's feed history."""
    try:
        request = _load_request(request_path)
        feeds = predict_next_feeds(
            request.history,
            count,
            request.context.evening_cluster,
            get_settings().default_interval_min,
        )
    except (ValidationError, InvalidInputError, json.JSONDecodeError) as exc:
        raise _reject(exc) from exc
    _emit({"nextFeeds": [feed.isoformat() for feed in feeds]}, pretty=False)


@app.command()
def countdown(
    session_path: Path = typer.Argument(
        ..., exists=True, dir_okay=False, help="Drink session JSON file."
    ),
    now: str = typer.Option(..., "--now", help="Reference time (ISO-8601)."),
    weight: Optional[float] = typer.Option(None, "--weight", help="Body weight in kg."),
    factor: float = typer.Option(1.0, "--factor", help="Conservative factor (>= 1.0)."),
) -> None:
    """Show the remaining clearance time for a logged drink session JSON file."""
    try:
        session = DrinkSession.model_validate(_load_json(session_path))
        reference = _DATETIME.validate_python(now)
        profile = Profile(weight_kg=weight, conservative_factor=factor)
        remaining = countdown_ms(session.entries, profile, reference)
        total = total_standard_drinks(session.entries, profile)
    except (ValidationError, InvalidInputError, json.JSONDecodeError) as exc:
        raise _reject(exc) from exc
    _emit(
        {
            "remainingMs": remaining,
            "remaining": format_hms(remaining),
            "standardDrinks": round(total, 2),
        },
        pretty=False,
    )


@app.command()
def clearance(
    weight: Optional[float] = typer.Option(None, "--weight", help="Body weight in kg."),
    factor: float = typer.Option(1.0, "--factor", help="Conservative factor (>= 1.0)."),
) -> None:
    """Print the hours needed to clear one standard drink."""
    try:
        profile = Profile(weight_kg=weight, conservative_factor=factor)
        base = hours_per_standard_drink(profile.weight_kg)
        adjusted = per_drink_hours(profile)
    except (ValidationError, InvalidInputError) as exc:
        raise _reject(exc) from exc
    typer.echo(f"Hours per standard drink: {adjusted:.2f} (base {base:.2f}, factor {factor:.2f})")


def main(argv: Optional[list[str]] = None) -> None:
    """Entry point for the ``feedplan`` console script."""
    app(prog_name="feedplan", args=argv)


if __name__ == "__main__":
    main()
