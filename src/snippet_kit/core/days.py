"""Weekday / weekend classification."""

from __future__ import annotations

from snippet_kit.core.models import Day

WEEKDAY: str = "Weekday"
WEEKEND: str = "Weekend"

# Saturday is deliberately not here: it classifies as a weekday.
WEEKEND_DAYS: frozenset[Day] = frozenset({Day.SUNDAY})


def get_day_type(day: Day) -> str:
    """Return ``"Weekend"`` for days in :data:`WEEKEND_DAYS`, else ``"Weekday"``."""
    if day in WEEKEND_DAYS:
        return WEEKEND
    return WEEKDAY
