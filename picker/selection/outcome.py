"""
Picker Selection — Submission Outcome Contract
================================================
Every submit produces exactly one outcome. No exceptions.

ACCEPTED → value is the final datetime (or time), error is None.
REJECTED → error explains the violated bounds, value is None.

A rejection is always recoverable: the host keeps the picker open
and the draft carried by the outcome is what the user corrects.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, time
from enum import Enum
from typing import Optional, Union

from django.utils.translation import gettext

from picker.selection.draft import DraftSelection


# ══════════════════════════════════════════════════════════════
# RANGE VALIDATION ERROR (frozen explanation structure)
# ══════════════════════════════════════════════════════════════

DATE_OUT_OF_RANGE = "DATE_OUT_OF_RANGE"


def _short_date(value: date) -> str:
    return f"{value.day}/{value.month}/{value.year}"


@dataclass(frozen=True)
class RangeValidationError:
    """
    The selected calendar date lies outside [min_date, max_date].

    This is NOT an exception. It is returned inside a REJECTED outcome.
    """

    min_date: date
    max_date: date
    code: str = DATE_OUT_OF_RANGE

    def __post_init__(self):
        if not isinstance(self.min_date, date) or not isinstance(self.max_date, date):
            raise ValueError("min_date and max_date must be dates.")
        if not self.code or not isinstance(self.code, str):
            raise ValueError("code must be a non-empty string.")

    @property
    def message(self) -> str:
        return gettext("Date must be between %(min_date)s and %(max_date)s") % {
            "min_date": _short_date(self.min_date),
            "max_date": _short_date(self.max_date),
        }

    def to_dict(self) -> dict:
        """Serialize for transport."""
        return {
            "code": self.code,
            "message": self.message,
            "min_date": self.min_date.isoformat(),
            "max_date": self.max_date.isoformat(),
        }


# ══════════════════════════════════════════════════════════════
# SELECTION STATUS
# ══════════════════════════════════════════════════════════════

class SelectionStatus(Enum):
    """Binary submit decision."""
    ACCEPTED = "ACCEPTED"
    REJECTED = "REJECTED"


# ══════════════════════════════════════════════════════════════
# SELECTION OUTCOME
# ══════════════════════════════════════════════════════════════

SelectedValue = Union[date, time]


@dataclass(frozen=True)
class SelectionOutcome:
    """
    Deterministic result of submitting a draft.

    Fields:
        status: ACCEPTED or REJECTED.
        draft:  The draft after day clamping.
        value:  Final datetime/time (ACCEPTED only).
        error:  RangeValidationError (REJECTED only).
    """

    status: SelectionStatus
    draft: DraftSelection
    value: Optional[SelectedValue] = None
    error: Optional[RangeValidationError] = None

    def __post_init__(self):
        if not isinstance(self.status, SelectionStatus):
            raise ValueError(
                f"status must be SelectionStatus, got {type(self.status).__name__}."
            )

        if not isinstance(self.draft, DraftSelection):
            raise ValueError("draft must be a DraftSelection.")

        if self.status == SelectionStatus.REJECTED:
            if self.error is None:
                raise ValueError(
                    "REJECTED outcome must include a RangeValidationError."
                )
            if self.value is not None:
                raise ValueError("REJECTED outcome must NOT include a value.")

        if self.status == SelectionStatus.ACCEPTED:
            if self.value is None:
                raise ValueError("ACCEPTED outcome must include a value.")
            if self.error is not None:
                raise ValueError(
                    "ACCEPTED outcome must NOT include a RangeValidationError."
                )

    @classmethod
    def accepted(cls, draft: DraftSelection, value: SelectedValue) -> SelectionOutcome:
        return cls(status=SelectionStatus.ACCEPTED, draft=draft, value=value)

    @classmethod
    def rejected(
        cls, draft: DraftSelection, error: RangeValidationError
    ) -> SelectionOutcome:
        return cls(status=SelectionStatus.REJECTED, draft=draft, error=error)

    @property
    def is_accepted(self) -> bool:
        return self.status == SelectionStatus.ACCEPTED

    @property
    def is_rejected(self) -> bool:
        return self.status == SelectionStatus.REJECTED
