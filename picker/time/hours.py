"""
Picker Time — 12/24-Hour Conversion
=====================================
12 AM → 0, 12 PM → 12, 1 AM → 1, 1 PM → 13, 11 PM → 23.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional, Tuple


class Period(Enum):
    """Half of the day in 12-hour format."""
    AM = "AM"
    PM = "PM"


def to_hour24(hour: int, period: Optional[Period], use_24_hour_format: bool) -> int:
    """
    Convert a picker hour to 0..23.

    In 24-hour format the hour passes through unchanged and the
    period is ignored; the caller guarantees 0..23.
    """
    if use_24_hour_format:
        return hour
    if period == Period.PM and hour != 12:
        return hour + 12
    if period == Period.AM and hour == 12:
        return 0
    return hour


def to_hour12(hour24: int) -> Tuple[int, Period]:
    """Split a 0..23 hour into (1..12, period)."""
    if not 0 <= hour24 <= 23:
        raise ValueError(f"hour must be between 0 and 23, got {hour24}.")
    hour_of_period = hour24 % 12
    hour = 12 if hour_of_period == 0 else hour_of_period
    period = Period.AM if hour24 < 12 else Period.PM
    return hour, period


def parse_period(value) -> Optional[Period]:
    """Accept a Period, its name ('AM'/'pm'), or None."""
    if value is None or isinstance(value, Period):
        return value
    if isinstance(value, str):
        try:
            return Period(value.strip().upper())
        except ValueError:
            pass
    raise ValueError(f"period must be 'AM' or 'PM', got {value!r}.")
