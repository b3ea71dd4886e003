"""
Picker Time — Injectable Clock
================================
A picker seeded without an initial value starts at "now".
"Now" is read through the Clock protocol so hosts and tests
can pin it; selection logic never calls datetime.now() itself.
"""

from __future__ import annotations

from datetime import datetime
from typing import Protocol

from django.utils import timezone


# ══════════════════════════════════════════════════════════════
# CLOCK PROTOCOL
# ══════════════════════════════════════════════════════════════

class Clock(Protocol):
    """Injectable time source."""

    def now(self) -> datetime:
        """Return the current wall-clock time."""
        ...  # pragma: no cover


# ══════════════════════════════════════════════════════════════
# IMPLEMENTATIONS
# ══════════════════════════════════════════════════════════════

class SystemClock:
    """Production clock — real time in the active Django time zone."""

    def now(self) -> datetime:
        return datetime.now(timezone.get_current_timezone())


class FixedClock:
    """
    Test clock — returns a fixed timestamp.

    Usage:
        clock = FixedClock(datetime(2025, 1, 1, 9, 30))
        assert clock.now().hour == 9
    """

    def __init__(self, fixed_dt: datetime) -> None:
        if not isinstance(fixed_dt, datetime):
            raise ValueError("FixedClock requires a datetime.")
        self._fixed_dt = fixed_dt

    def now(self) -> datetime:
        return self._fixed_dt


# ══════════════════════════════════════════════════════════════
# DEFAULT CLOCK
# ══════════════════════════════════════════════════════════════

_default_clock: Clock = SystemClock()


def set_default_clock(clock: Clock) -> None:
    """Override the default clock (testing only)."""
    global _default_clock
    _default_clock = clock


def get_default_clock() -> Clock:
    """Get the current default clock."""
    return _default_clock
