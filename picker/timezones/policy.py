"""
Picker Timezones — Policy Variants
====================================
KeepUnchanged | ForceSystemTimeZone | ForceSpecific(zone_id)

The policy is a closed tagged variant, not a flag plus a nullable
zone name. ForceSpecific without a usable zone_id falls back to
KeepUnchanged behavior when applied.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union


# ══════════════════════════════════════════════════════════════
# OPTION NAMES (transport / settings representation)
# ══════════════════════════════════════════════════════════════

TZ_KEEP_UNCHANGED = "KEEP_UNCHANGED"
TZ_FORCE_SYSTEM_TIME_ZONE = "FORCE_SYSTEM_TIME_ZONE"
TZ_FORCE_SPECIFIC = "FORCE_SPECIFIC"

VALID_TIME_ZONE_OPTIONS = frozenset(
    {TZ_KEEP_UNCHANGED, TZ_FORCE_SYSTEM_TIME_ZONE, TZ_FORCE_SPECIFIC}
)


# ══════════════════════════════════════════════════════════════
# VARIANTS
# ══════════════════════════════════════════════════════════════

@dataclass(frozen=True)
class KeepUnchanged:
    """Return the timestamp exactly as built."""


@dataclass(frozen=True)
class ForceSystemTimeZone:
    """Reinterpret wall-clock fields in the active local time zone."""


@dataclass(frozen=True)
class ForceSpecific:
    """
    Reinterpret wall-clock fields in a named zone (e.g. 'Asia/Jakarta').

    An empty or unknown zone_id is not an error; applying the policy
    then leaves the timestamp unchanged.
    """

    zone_id: Optional[str] = None

    def __post_init__(self):
        if self.zone_id is not None and not isinstance(self.zone_id, str):
            raise ValueError("zone_id must be a string or None.")


TimeZonePolicy = Union[KeepUnchanged, ForceSystemTimeZone, ForceSpecific]

KEEP_UNCHANGED = KeepUnchanged()
FORCE_SYSTEM_TIME_ZONE = ForceSystemTimeZone()


def policy_from_option(
    option: str, specific_time_zone: Optional[str] = None
) -> TimeZonePolicy:
    """
    Build a policy from its option name plus optional zone name.

    specific_time_zone is only consulted for FORCE_SPECIFIC.
    """
    normalized = option.strip().upper() if isinstance(option, str) else option
    if normalized not in VALID_TIME_ZONE_OPTIONS:
        raise ValueError(
            f"time zone option '{option}' not valid. "
            f"Must be one of: {sorted(VALID_TIME_ZONE_OPTIONS)}"
        )
    if normalized == TZ_FORCE_SYSTEM_TIME_ZONE:
        return FORCE_SYSTEM_TIME_ZONE
    if normalized == TZ_FORCE_SPECIFIC:
        return ForceSpecific(zone_id=specific_time_zone)
    return KEEP_UNCHANGED
