"""
Picker HTTP API - Contracts
===========================
Framework-agnostic request/response DTOs for picker endpoints.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any, Optional

from picker.selection.draft import DraftSelection
from picker.session.models import DATED_MODES, PickerMode
from picker.timezones.policy import TZ_KEEP_UNCHANGED, VALID_TIME_ZONE_OPTIONS


def _check_range(mode: PickerMode, min_date, max_date) -> None:
    if mode in DATED_MODES and (min_date is None or max_date is None):
        raise ValueError(f"{mode.value} picker requires min_date and max_date.")
    for name, value in (("min_date", min_date), ("max_date", max_date)):
        if value is not None and not isinstance(value, date):
            raise ValueError(f"{name} must be a date or None.")


@dataclass(frozen=True)
class PickerChoicesRequest:
    mode: PickerMode
    locale: str
    use_24_hour_format: bool = False
    min_date: Optional[date] = None
    max_date: Optional[date] = None

    def __post_init__(self):
        if not isinstance(self.mode, PickerMode):
            raise ValueError("mode must be PickerMode.")
        if not self.locale or not isinstance(self.locale, str):
            raise ValueError("locale must be a non-empty string.")
        if not isinstance(self.use_24_hour_format, bool):
            raise ValueError("use_24_hour_format must be a bool.")
        _check_range(self.mode, self.min_date, self.max_date)


@dataclass(frozen=True)
class PickerSubmitRequest:
    mode: PickerMode
    draft: DraftSelection
    min_date: Optional[date] = None
    max_date: Optional[date] = None
    time_zone_option: str = TZ_KEEP_UNCHANGED
    specific_time_zone: Optional[str] = None
    base: Optional[datetime] = None

    def __post_init__(self):
        if not isinstance(self.mode, PickerMode):
            raise ValueError("mode must be PickerMode.")
        if not isinstance(self.draft, DraftSelection):
            raise ValueError("draft must be DraftSelection.")
        if self.time_zone_option not in VALID_TIME_ZONE_OPTIONS:
            raise ValueError(
                f"time_zone_option '{self.time_zone_option}' not valid. "
                f"Must be one of: {sorted(VALID_TIME_ZONE_OPTIONS)}"
            )
        if self.specific_time_zone is not None and not isinstance(
            self.specific_time_zone, str
        ):
            raise ValueError("specific_time_zone must be a string or None.")
        if self.mode == PickerMode.TIME_OF_DATETIME and not isinstance(
            self.base, datetime
        ):
            raise ValueError("TIME_OF_DATETIME picker requires a base datetime.")
        _check_range(self.mode, self.min_date, self.max_date)


@dataclass(frozen=True)
class HttpApiErrorBody:
    code: str
    message: str
    details: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return {
            "code": self.code,
            "message": self.message,
            "details": dict(self.details),
        }


@dataclass(frozen=True)
class HttpApiResponse:
    ok: bool
    data: Any = None
    error: Optional[HttpApiErrorBody] = None

    def to_dict(self) -> dict[str, Any]:
        if self.ok:
            return {"ok": True, "data": self.data}
        if self.error is None:
            raise ValueError("error must be set when ok is False.")
        return {"ok": False, "error": self.error.to_dict()}
