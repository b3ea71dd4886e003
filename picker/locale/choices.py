"""
Picker Locale — Dropdown Choices
==================================
(value, label) pairs in Django's choices convention.
Values are what the draft stores; labels are display text.
"""

from __future__ import annotations

from picker.locale.months import month_names
from picker.time.calendar import DateRange
from picker.time.hours import Period

Choices = list[tuple[object, str]]


def day_choices() -> Choices:
    # Always 31 entries; an impossible day is clamped at submit.
    return [(day, str(day)) for day in range(1, 32)]


def month_choices(locale: str) -> Choices:
    return list(enumerate(month_names(locale), start=1))


def year_choices(date_range: DateRange) -> Choices:
    return [(year, str(year)) for year in date_range.years()]


def hour_choices(use_24_hour_format: bool) -> Choices:
    if use_24_hour_format:
        return [(hour, f"{hour:02d}") for hour in range(24)]
    return [(hour, str(hour)) for hour in range(1, 13)]


def minute_choices() -> Choices:
    return [(minute, f"{minute:02d}") for minute in range(60)]


def period_choices() -> Choices:
    return [(period.value, period.value) for period in Period]
