"""
Picker Locale — Public API
============================
Localized month names and dropdown choice lists.
"""

from picker.locale.choices import (
    Choices,
    day_choices,
    hour_choices,
    minute_choices,
    month_choices,
    period_choices,
    year_choices,
)
from picker.locale.months import month_name, month_names

__all__ = [
    "month_name",
    "month_names",
    "Choices",
    "day_choices",
    "month_choices",
    "year_choices",
    "hour_choices",
    "minute_choices",
    "period_choices",
]
