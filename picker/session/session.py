"""
Picker Session — One Picker Invocation
========================================
Host-side holder for the draft of a single open picker.

The host calls update() on every dropdown change, choices() to
render, and submit() or cancel() to close. Rendering stays with
the host; this object only tracks state.

    EDITING ──submit (accepted)──▶ SUBMITTED
       │ ▲
       │ └──submit (rejected)
       └──cancel / read-only submit──▶ CANCELLED
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Callable, Optional

from picker.exceptions import ReadOnlyPickerError, SessionClosedError
from picker.locale.choices import (
    Choices,
    day_choices,
    hour_choices,
    minute_choices,
    month_choices,
    period_choices,
    year_choices,
)
from picker.selection.draft import DraftSelection, seed
from picker.selection.outcome import SelectedValue, SelectionOutcome
from picker.selection.submit import (
    submit,
    submit_date,
    submit_time,
    submit_time_of,
)
from picker.session.models import (
    DATED_MODES,
    PickerMode,
    PickerOptions,
    SessionState,
)
from picker.time.clock import Clock, get_default_clock

logger = logging.getLogger("picker.session")


class PickerSession:
    """
    State of one open picker.

    on_selected is invoked exactly once, with the final value,
    when a submit is accepted.
    """

    def __init__(
        self,
        options: PickerOptions,
        initial: Optional[datetime] = None,
        on_selected: Optional[Callable[[SelectedValue], None]] = None,
        clock: Optional[Clock] = None,
    ) -> None:
        if initial is None:
            initial = (clock or get_default_clock()).now()

        self._options = options
        self._on_selected = on_selected
        # TIME_OF_DATETIME keeps the initial value's date and seconds.
        self._base = initial
        self._draft = seed(initial, options.use_24_hour_format)
        self._state = SessionState.EDITING

    @property
    def options(self) -> PickerOptions:
        return self._options

    @property
    def draft(self) -> DraftSelection:
        return self._draft

    @property
    def state(self) -> SessionState:
        return self._state

    def _ensure_editing(self) -> None:
        if self._state != SessionState.EDITING:
            raise SessionClosedError(self._state.value)

    def update(self, **changes) -> DraftSelection:
        """Apply dropdown changes and return the new draft."""
        self._ensure_editing()
        if self._options.read_only:
            raise ReadOnlyPickerError(changes.keys())
        self._draft = self._draft.update(**changes)
        return self._draft

    def choices(self) -> dict[str, Choices]:
        """Dropdown choices for the fields this picker shows."""
        return build_choices(self._options)

    def submit(self) -> Optional[SelectionOutcome]:
        """
        Submit the current draft.

        Read-only pickers just close and return None. A rejected
        outcome keeps the session open with the clamped draft.
        """
        self._ensure_editing()

        if self._options.read_only:
            self._state = SessionState.CANCELLED
            return None

        outcome = submit_for_mode(self._options, self._draft, self._base)
        self._draft = outcome.draft

        if outcome.is_rejected:
            logger.info(
                f"{self._options.mode.value} picker submit rejected: "
                f"{outcome.error.code}"
            )
            return outcome

        self._state = SessionState.SUBMITTED
        if self._on_selected is not None:
            self._on_selected(outcome.value)
        return outcome

    def cancel(self) -> None:
        """Discard the draft. No callback is invoked."""
        self._ensure_editing()
        self._state = SessionState.CANCELLED


# ══════════════════════════════════════════════════════════════
# MODE ROUTING (shared with the HTTP handlers)
# ══════════════════════════════════════════════════════════════

def build_choices(options: PickerOptions) -> dict[str, Choices]:
    mode = options.mode
    result: dict[str, Choices] = {}

    if mode in DATED_MODES:
        result["day"] = day_choices()
        result["month"] = month_choices(options.locale)
        result["year"] = year_choices(options.date_range)

    if mode != PickerMode.DATE:
        result["hour"] = hour_choices(options.use_24_hour_format)
        result["minute"] = minute_choices()
        if not options.use_24_hour_format:
            result["period"] = period_choices()

    return result


def submit_for_mode(
    options: PickerOptions,
    draft: DraftSelection,
    base: Optional[datetime] = None,
) -> SelectionOutcome:
    """Submit `draft` with the function matching the picker mode."""
    if options.mode == PickerMode.DATETIME:
        return submit(draft, options.date_range, options.time_zone_policy)
    if options.mode == PickerMode.DATE:
        return submit_date(draft, options.date_range, options.time_zone_policy)
    if options.mode == PickerMode.TIME:
        return submit_time(draft)
    if base is None:
        raise ValueError("TIME_OF_DATETIME picker requires a base datetime.")
    return submit_time_of(draft, base, options.time_zone_policy)
