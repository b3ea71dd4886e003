"""
Picker Selection — Submit
===========================
Turns a draft into a final value, one function per picker flavour:

    submit          date + time, range-checked
    submit_date     date only (midnight), range-checked
    submit_time     bare time of day
    submit_time_of  new time on an existing datetime's date

Pure and synchronous. The only external lookup is the time zone
database consulted by apply_time_zone.
"""

from __future__ import annotations

import logging
from datetime import datetime, time

from picker.selection.draft import DraftSelection, clamp_day
from picker.selection.outcome import RangeValidationError, SelectionOutcome
from picker.time.calendar import DateRange, is_date_valid
from picker.timezones.convert import apply_time_zone
from picker.timezones.policy import KEEP_UNCHANGED, TimeZonePolicy

logger = logging.getLogger("picker.selection")


def _validate(draft: DraftSelection, date_range: DateRange) -> SelectionOutcome | None:
    """Return a REJECTED outcome if the clamped draft is out of range."""
    if is_date_valid(draft.day, draft.month, draft.year, date_range):
        return None
    logger.info(
        f"Selection {draft.year}-{draft.month:02d}-{draft.day:02d} REJECTED: "
        f"outside {date_range.min_date.isoformat()}..{date_range.max_date.isoformat()}"
    )
    return SelectionOutcome.rejected(
        draft,
        RangeValidationError(
            min_date=date_range.min_date,
            max_date=date_range.max_date,
        ),
    )


def submit(
    draft: DraftSelection,
    date_range: DateRange,
    policy: TimeZonePolicy = KEEP_UNCHANGED,
) -> SelectionOutcome:
    """
    Submit a date + time draft.

    Order: clamp day → hour24 → range check → build → time zone.
    A rejected outcome carries the clamped draft; the date is never
    moved into range on the user's behalf.
    """
    clamped = clamp_day(draft)
    hour24 = clamped.hour24

    rejection = _validate(clamped, date_range)
    if rejection is not None:
        return rejection

    selected = datetime(
        clamped.year, clamped.month, clamped.day, hour24, clamped.minute
    )
    selected = apply_time_zone(selected, policy)
    logger.debug(f"Selection ACCEPTED: {selected.isoformat()}")
    return SelectionOutcome.accepted(clamped, selected)


def submit_date(
    draft: DraftSelection,
    date_range: DateRange,
    policy: TimeZonePolicy = KEEP_UNCHANGED,
) -> SelectionOutcome:
    """Submit a date-only draft; the value is midnight of that date."""
    clamped = clamp_day(draft)

    rejection = _validate(clamped, date_range)
    if rejection is not None:
        return rejection

    selected = apply_time_zone(
        datetime(clamped.year, clamped.month, clamped.day), policy
    )
    logger.debug(f"Date selection ACCEPTED: {selected.isoformat()}")
    return SelectionOutcome.accepted(clamped, selected)


def submit_time(draft: DraftSelection) -> SelectionOutcome:
    """Submit a time-only draft. Calendar fields are ignored."""
    selected = time(draft.hour24, draft.minute)
    return SelectionOutcome.accepted(draft, selected)


def submit_time_of(
    draft: DraftSelection,
    base: datetime,
    policy: TimeZonePolicy = KEEP_UNCHANGED,
) -> SelectionOutcome:
    """
    Replace hour and minute of `base`, keeping its date and seconds.

    The draft's calendar fields are ignored; `base` owns the date.
    """
    selected = base.replace(hour=draft.hour24, minute=draft.minute)
    selected = apply_time_zone(selected, policy)
    return SelectionOutcome.accepted(draft, selected)
