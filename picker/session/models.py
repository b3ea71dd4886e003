"""
Picker Session — Immutable Models
===================================
What kind of picker is open, and how it is configured.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Optional

from picker.config.defaults import load_defaults
from picker.time.calendar import DateRange
from picker.timezones.policy import (
    KEEP_UNCHANGED,
    ForceSpecific,
    ForceSystemTimeZone,
    KeepUnchanged,
    TimeZonePolicy,
)


class PickerMode(Enum):
    """The picker flavours."""
    DATE = "DATE"
    TIME = "TIME"
    DATETIME = "DATETIME"
    TIME_OF_DATETIME = "TIME_OF_DATETIME"


# Modes that select a calendar date and therefore need a DateRange.
DATED_MODES = frozenset({PickerMode.DATE, PickerMode.DATETIME})


class SessionState(Enum):
    EDITING = "EDITING"
    SUBMITTED = "SUBMITTED"
    CANCELLED = "CANCELLED"


@dataclass(frozen=True)
class PickerOptions:
    """
    Configuration of one picker invocation.

    date_range is required for DATE and DATETIME pickers and
    ignored by the time-only flavours.
    """

    mode: PickerMode
    locale: str
    date_range: Optional[DateRange] = None
    use_24_hour_format: bool = False
    time_zone_policy: TimeZonePolicy = KEEP_UNCHANGED
    read_only: bool = False

    def __post_init__(self):
        if not isinstance(self.mode, PickerMode):
            raise ValueError(
                f"mode must be PickerMode, got {type(self.mode).__name__}."
            )

        if not self.locale or not isinstance(self.locale, str):
            raise ValueError("locale must be a non-empty string.")

        if self.mode in DATED_MODES and not isinstance(self.date_range, DateRange):
            raise ValueError(f"{self.mode.value} picker requires a DateRange.")

        if not isinstance(
            self.time_zone_policy, (KeepUnchanged, ForceSystemTimeZone, ForceSpecific)
        ):
            raise ValueError("time_zone_policy must be a TimeZonePolicy.")

        if not isinstance(self.use_24_hour_format, bool):
            raise ValueError("use_24_hour_format must be a bool.")

        if not isinstance(self.read_only, bool):
            raise ValueError("read_only must be a bool.")

    @classmethod
    def from_settings(
        cls,
        mode: PickerMode,
        min_date: Optional[date] = None,
        max_date: Optional[date] = None,
        read_only: bool = False,
    ) -> PickerOptions:
        """Options for `mode` using the project's configured defaults."""
        defaults = load_defaults()
        date_range = None
        if min_date is not None and max_date is not None:
            date_range = DateRange(min_date=min_date, max_date=max_date)
        return cls(
            mode=mode,
            locale=defaults.locale,
            date_range=date_range,
            use_24_hour_format=defaults.use_24_hour_format,
            time_zone_policy=defaults.time_zone_policy(),
            read_only=read_only,
        )
