"""
Picker — Exceptions
=====================
Structured errors for misuse of a picker session.

These are host-side programming errors, NOT selection rejections.
An out-of-range date flows through SelectionOutcome instead.
"""

from __future__ import annotations


class PickerError(Exception):
    """Base error for picker session operations."""
    pass


class ReadOnlyPickerError(PickerError):
    """A read-only picker was asked to change its draft."""

    def __init__(self, field_names):
        self.field_names = tuple(sorted(field_names))
        super().__init__(
            f"Picker is read-only; cannot change {', '.join(self.field_names)}."
        )


class SessionClosedError(PickerError):
    """The session was already submitted or cancelled."""

    def __init__(self, state: str):
        self.state = state
        super().__init__(f"Picker session is {state}; no further changes allowed.")
