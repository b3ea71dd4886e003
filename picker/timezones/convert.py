"""
Picker Timezones — Applying a Policy
======================================
The picker builds a wall-clock datetime from the selected fields.
A policy decides which zone those wall-clock fields belong to.

Reinterpretation keeps year/month/day/hour/minute intact and
attaches the zone, so the result carries that zone's offset.
"""

from __future__ import annotations

import logging
from datetime import datetime, tzinfo
from typing import Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from django.utils import timezone

from picker.timezones.policy import (
    ForceSpecific,
    ForceSystemTimeZone,
    KeepUnchanged,
    TimeZonePolicy,
)

logger = logging.getLogger("picker.timezones")


def lookup_zone(zone_id: Optional[str]) -> Optional[tzinfo]:
    """
    Resolve an IANA zone name, or None when absent or unknown.

    A miss is not an error here; callers that need strict validation
    should check the result themselves.
    """
    if not zone_id:
        return None
    try:
        return ZoneInfo(zone_id)
    except (ZoneInfoNotFoundError, ValueError, OSError):
        # Region directories such as "America" raise IsADirectoryError.
        return None


def reinterpret(value: datetime, zone: tzinfo) -> datetime:
    """Attach `zone` to the wall-clock fields of `value`."""
    return timezone.make_aware(value.replace(tzinfo=None), zone)


def apply_time_zone(value: datetime, policy: TimeZonePolicy) -> datetime:
    """Apply a time zone policy to a picker-built datetime."""
    if isinstance(policy, KeepUnchanged):
        return value

    if isinstance(policy, ForceSystemTimeZone):
        return reinterpret(value, timezone.get_current_timezone())

    if isinstance(policy, ForceSpecific):
        zone = lookup_zone(policy.zone_id)
        if zone is None:
            if policy.zone_id:
                logger.warning(
                    f"Unknown time zone '{policy.zone_id}'; "
                    "keeping datetime unchanged."
                )
            return value
        return reinterpret(value, zone)

    raise ValueError(
        f"policy must be a TimeZonePolicy, got {type(policy).__name__}."
    )
