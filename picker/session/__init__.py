"""
Picker Session — Public API
=============================
"""

from picker.session.models import (
    DATED_MODES,
    PickerMode,
    PickerOptions,
    SessionState,
)
from picker.session.session import PickerSession, build_choices, submit_for_mode

__all__ = [
    "build_choices",
    "submit_for_mode",
    "DATED_MODES",
    "PickerMode",
    "PickerOptions",
    "PickerSession",
    "SessionState",
]
