"""
Picker — Public API
=====================
Selection core for dropdown date/time pickers.

Import submodules (picker.selection, picker.session, ...) for the
full surface; the names below cover a typical host.
"""

from picker.exceptions import PickerError, ReadOnlyPickerError, SessionClosedError
from picker.selection import (
    DraftSelection,
    RangeValidationError,
    SelectionOutcome,
    SelectionStatus,
    clamp_day,
    seed,
    submit,
    submit_date,
    submit_time,
    submit_time_of,
)
from picker.session import PickerMode, PickerOptions, PickerSession, SessionState
from picker.time import DateRange, Period, days_in_month, is_date_valid, to_hour24
from picker.timezones import (
    FORCE_SYSTEM_TIME_ZONE,
    KEEP_UNCHANGED,
    ForceSpecific,
    ForceSystemTimeZone,
    KeepUnchanged,
    apply_time_zone,
    policy_from_option,
)

__all__ = [
    "PickerError",
    "ReadOnlyPickerError",
    "SessionClosedError",
    "DraftSelection",
    "RangeValidationError",
    "SelectionOutcome",
    "SelectionStatus",
    "clamp_day",
    "seed",
    "submit",
    "submit_date",
    "submit_time",
    "submit_time_of",
    "PickerMode",
    "PickerOptions",
    "PickerSession",
    "SessionState",
    "DateRange",
    "Period",
    "days_in_month",
    "is_date_valid",
    "to_hour24",
    "KeepUnchanged",
    "ForceSystemTimeZone",
    "ForceSpecific",
    "KEEP_UNCHANGED",
    "FORCE_SYSTEM_TIME_ZONE",
    "apply_time_zone",
    "policy_from_option",
]
