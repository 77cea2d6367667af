"""Feeding history and pattern context models."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import Field

from feedplan.models.base import ValueModel


class FeedHistoryPoint(ValueModel):
    """A recorded feed."""

    at: datetime
    amount_ml: Optional[float] = Field(default=None, ge=0)


class PatternContext(ValueModel):
    """Observed feeding pattern used for prediction and advice."""

    typical_ml_per_feed: float = Field(gt=0)
    evening_cluster: bool = False
