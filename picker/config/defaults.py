"""
Picker Config — Settings-Driven Defaults
==========================================
Doctrine: No hardcoded locale or zone in picker logic.
Defaults come from Django settings; each picker may override them.

Recognized settings:
    PICKER_LOCALE               falls back to LANGUAGE_CODE
    PICKER_USE_24_HOUR_FORMAT   default False
    PICKER_TIME_ZONE_OPTION     default KEEP_UNCHANGED
    PICKER_SPECIFIC_TIME_ZONE   default None
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from django.conf import settings

from picker.timezones.policy import (
    TZ_KEEP_UNCHANGED,
    VALID_TIME_ZONE_OPTIONS,
    TimeZonePolicy,
    policy_from_option,
)


@dataclass(frozen=True)
class PickerDefaults:
    locale: str
    use_24_hour_format: bool = False
    time_zone_option: str = TZ_KEEP_UNCHANGED
    specific_time_zone: Optional[str] = None

    def __post_init__(self):
        if not self.locale or not isinstance(self.locale, str):
            raise ValueError("locale must be a non-empty string.")

        if not isinstance(self.use_24_hour_format, bool):
            raise ValueError("use_24_hour_format must be a bool.")

        if self.time_zone_option not in VALID_TIME_ZONE_OPTIONS:
            raise ValueError(
                f"time_zone_option '{self.time_zone_option}' not valid. "
                f"Must be one of: {sorted(VALID_TIME_ZONE_OPTIONS)}"
            )

        if self.specific_time_zone is not None and not isinstance(
            self.specific_time_zone, str
        ):
            raise ValueError("specific_time_zone must be a string or None.")

    def time_zone_policy(self) -> TimeZonePolicy:
        return policy_from_option(self.time_zone_option, self.specific_time_zone)


def load_defaults() -> PickerDefaults:
    """Read picker defaults from the active Django settings."""
    return PickerDefaults(
        locale=getattr(settings, "PICKER_LOCALE", None) or settings.LANGUAGE_CODE,
        use_24_hour_format=getattr(settings, "PICKER_USE_24_HOUR_FORMAT", False),
        time_zone_option=getattr(
            settings, "PICKER_TIME_ZONE_OPTION", TZ_KEEP_UNCHANGED
        ),
        specific_time_zone=getattr(settings, "PICKER_SPECIFIC_TIME_ZONE", None),
    )
