"""
Picker Time — Calendar Helpers
================================
Pure functions for month lengths and range validation.
All functions take explicit arguments — no hidden clock access.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, timedelta


# ══════════════════════════════════════════════════════════════
# DATE RANGE — Closed interval [min_date, max_date]
# ══════════════════════════════════════════════════════════════

@dataclass(frozen=True)
class DateRange:
    """
    A closed calendar-date interval [min_date, max_date].

    Datetimes are accepted and truncated to their date, so the
    time-of-day of either bound never affects a comparison.

    min_date <= max_date is the caller's responsibility; an inverted
    range simply contains nothing.
    """

    min_date: date
    max_date: date

    def __post_init__(self) -> None:
        object.__setattr__(self, "min_date", _as_date(self.min_date, "min_date"))
        object.__setattr__(self, "max_date", _as_date(self.max_date, "max_date"))

    def contains(self, value: date) -> bool:
        """Check if a date falls within the range (inclusive)."""
        return self.min_date <= _as_date(value, "value") <= self.max_date

    def years(self) -> range:
        """Selectable years, oldest first."""
        return range(self.min_date.year, self.max_date.year + 1)


def _as_date(value, field_name: str) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    raise ValueError(f"{field_name} must be a date or datetime.")


# ══════════════════════════════════════════════════════════════
# PURE CALENDAR FUNCTIONS
# ══════════════════════════════════════════════════════════════

def days_in_month(month: int, year: int) -> int:
    """
    Return the last valid day of the given month.

    Computed as the day before the first of the following month.
    December never needs the roll-over (and year 9999 has no
    following January), so it is answered directly.
    """
    if not 1 <= month <= 12:
        raise ValueError(f"month must be between 1 and 12, got {month}.")
    if month == 12:
        return 31
    first_of_next = date(year, month + 1, 1)
    return (first_of_next - timedelta(days=1)).day


def is_date_valid(day: int, month: int, year: int, date_range: DateRange) -> bool:
    """
    Check that (year, month, day) exists and lies within the range.

    Impossible dates (31 April, 29 February of a common year) return
    False instead of raising.
    """
    try:
        candidate = date(year, month, day)
    except ValueError:
        return False
    return date_range.contains(candidate)
