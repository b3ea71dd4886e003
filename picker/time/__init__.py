"""
Picker Time — Public API
==========================
Clock protocol, calendar helpers and hour conversion.
Doctrine: NO datetime.now() in selection logic.
"""

from picker.time.calendar import (
    DateRange,
    days_in_month,
    is_date_valid,
)
from picker.time.clock import (
    Clock,
    FixedClock,
    SystemClock,
    get_default_clock,
    set_default_clock,
)
from picker.time.hours import (
    Period,
    parse_period,
    to_hour12,
    to_hour24,
)

__all__ = [
    "Clock",
    "FixedClock",
    "SystemClock",
    "get_default_clock",
    "set_default_clock",
    "DateRange",
    "days_in_month",
    "is_date_valid",
    "Period",
    "parse_period",
    "to_hour12",
    "to_hour24",
]
