"""
Picker Timezones — Public API
===============================
Tagged time zone policies and their application.
"""

from picker.timezones.convert import (
    apply_time_zone,
    lookup_zone,
    reinterpret,
)
from picker.timezones.policy import (
    FORCE_SYSTEM_TIME_ZONE,
    KEEP_UNCHANGED,
    TZ_FORCE_SPECIFIC,
    TZ_FORCE_SYSTEM_TIME_ZONE,
    TZ_KEEP_UNCHANGED,
    VALID_TIME_ZONE_OPTIONS,
    ForceSpecific,
    ForceSystemTimeZone,
    KeepUnchanged,
    TimeZonePolicy,
    policy_from_option,
)

__all__ = [
    "KeepUnchanged",
    "ForceSystemTimeZone",
    "ForceSpecific",
    "TimeZonePolicy",
    "KEEP_UNCHANGED",
    "FORCE_SYSTEM_TIME_ZONE",
    "TZ_KEEP_UNCHANGED",
    "TZ_FORCE_SYSTEM_TIME_ZONE",
    "TZ_FORCE_SPECIFIC",
    "VALID_TIME_ZONE_OPTIONS",
    "policy_from_option",
    "apply_time_zone",
    "lookup_zone",
    "reinterpret",
]
