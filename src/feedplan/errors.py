"""Exception types raised by the feedplan engine."""

from __future__ import annotations


class FeedPlanError(Exception):
    """Base class for feedplan errors."""


class InvalidInputError(FeedPlanError, ValueError):
    """Raised when engine input is outside its documented domain."""
