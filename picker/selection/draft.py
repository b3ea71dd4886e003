"""
Picker Selection — Draft Model
================================
The in-progress, not-yet-committed selection of one picker.

Every edit produces a NEW DraftSelection; the host re-renders from
whatever draft it currently holds. Field bounds are checked at
construction, but day-of-month against the actual month is not:
day 31 with month 2 is a legal draft and is clamped at submit.
"""

from __future__ import annotations

import dataclasses
import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from picker.time.calendar import days_in_month
from picker.time.clock import Clock, get_default_clock
from picker.time.hours import Period, parse_period, to_hour12, to_hour24

logger = logging.getLogger("picker.selection")

DRAFT_FIELDS = frozenset({"day", "month", "year", "hour", "minute", "period"})


# ══════════════════════════════════════════════════════════════
# DRAFT SELECTION
# ══════════════════════════════════════════════════════════════

@dataclass(frozen=True)
class DraftSelection:
    """
    Working state of a picker before submission.

    Fields:
        day, month, year:   Calendar fields (day 1..31, month 1..12).
        hour:               0..23 in 24-hour format, else 1..12.
        minute:             0..59.
        period:             AM/PM in 12-hour format, None in 24-hour.
        use_24_hour_format: Selects how `hour` is read.

    Invariant: (hour, period, use_24_hour_format) maps to exactly one
    hour in 0..23 via to_hour24.
    """

    day: int
    month: int
    year: int
    hour: int = 0
    minute: int = 0
    period: Optional[Period] = None
    use_24_hour_format: bool = True

    def __post_init__(self):
        object.__setattr__(self, "period", parse_period(self.period))

        for name in ("day", "month", "year", "hour", "minute"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"{name} must be an int.")

        if not 1 <= self.day <= 31:
            raise ValueError(f"day must be between 1 and 31, got {self.day}.")
        if not 1 <= self.month <= 12:
            raise ValueError(f"month must be between 1 and 12, got {self.month}.")
        if not 1 <= self.year <= 9999:
            raise ValueError(f"year must be between 1 and 9999, got {self.year}.")
        if not 0 <= self.minute <= 59:
            raise ValueError(f"minute must be between 0 and 59, got {self.minute}.")

        if self.use_24_hour_format:
            if not 0 <= self.hour <= 23:
                raise ValueError(
                    f"hour must be between 0 and 23 in 24-hour format, got {self.hour}."
                )
            if self.period is not None:
                raise ValueError("period must be None in 24-hour format.")
        else:
            if not 1 <= self.hour <= 12:
                raise ValueError(
                    f"hour must be between 1 and 12 in 12-hour format, got {self.hour}."
                )
            if self.period is None:
                raise ValueError("period is required in 12-hour format.")

    @property
    def hour24(self) -> int:
        return to_hour24(self.hour, self.period, self.use_24_hour_format)

    def update(self, **changes) -> DraftSelection:
        """Return a new draft with the given fields replaced."""
        unknown = set(changes) - DRAFT_FIELDS
        if unknown:
            raise ValueError(
                f"Unknown draft field(s): {sorted(unknown)}. "
                f"Must be among: {sorted(DRAFT_FIELDS)}"
            )
        updated = dataclasses.replace(self, **changes)
        logger.debug(f"Draft updated: {changes}")
        return updated

    def to_dict(self) -> dict:
        """Serialize for transport."""
        return {
            "day": self.day,
            "month": self.month,
            "year": self.year,
            "hour": self.hour,
            "minute": self.minute,
            "period": None if self.period is None else self.period.value,
            "use_24_hour_format": self.use_24_hour_format,
        }


# ══════════════════════════════════════════════════════════════
# TRANSITIONS
# ══════════════════════════════════════════════════════════════

def seed(
    initial: Optional[datetime],
    use_24_hour_format: bool,
    clock: Optional[Clock] = None,
) -> DraftSelection:
    """
    Create the draft for one picker invocation.

    With no initial value the draft starts at the clock's "now".
    """
    if initial is None:
        initial = (clock or get_default_clock()).now()

    if use_24_hour_format:
        hour, period = initial.hour, None
    else:
        hour, period = to_hour12(initial.hour)

    return DraftSelection(
        day=initial.day,
        month=initial.month,
        year=initial.year,
        hour=hour,
        minute=initial.minute,
        period=period,
        use_24_hour_format=use_24_hour_format,
    )


def clamp_day(draft: DraftSelection) -> DraftSelection:
    """
    Lower the day to the month's last valid day when it overshoots.

    Day 31 followed by a switch to February becomes 28 or 29; the
    user may pick day and month in either order.
    """
    last_day = days_in_month(draft.month, draft.year)
    if draft.day <= last_day:
        return draft
    logger.debug(
        f"Clamping day {draft.day} to {last_day} for {draft.year}-{draft.month:02d}"
    )
    return dataclasses.replace(draft, day=last_day)
