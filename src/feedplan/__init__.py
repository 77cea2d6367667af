"""
Feedplan alcohol-clearance and feeding-schedule feasibility engine.

The package exposes the pure assessment engine, its pydantic value objects, and a small
command-line wrapper for evaluating plan documents.
"""

__all__ = ["__version__"]

__version__ = "0.1.0"
