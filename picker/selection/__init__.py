"""
Picker Selection — Public API
===============================
Draft model, transitions, and submission.
"""

from picker.selection.draft import (
    DRAFT_FIELDS,
    DraftSelection,
    clamp_day,
    seed,
)
from picker.selection.outcome import (
    DATE_OUT_OF_RANGE,
    RangeValidationError,
    SelectionOutcome,
    SelectionStatus,
)
from picker.selection.submit import (
    submit,
    submit_date,
    submit_time,
    submit_time_of,
)

__all__ = [
    "DRAFT_FIELDS",
    "DraftSelection",
    "seed",
    "clamp_day",
    "DATE_OUT_OF_RANGE",
    "RangeValidationError",
    "SelectionOutcome",
    "SelectionStatus",
    "submit",
    "submit_date",
    "submit_time",
    "submit_time_of",
]
