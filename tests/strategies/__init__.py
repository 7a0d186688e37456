"""Hypothesis strategies for strictdate property-based testing.

Usage:
    from tests.strategies import calendar_dates, date_layouts, render
"""

from .dates import (
    DateLayout,
    calendar_dates,
    date_layouts,
    date_like_text,
    delimiters,
    pattern_text,
    render,
)

__all__ = [
    "DateLayout",
    "calendar_dates",
    "date_layouts",
    "date_like_text",
    "delimiters",
    "pattern_text",
    "render",
]
