"""
Picker HTTP API - Framework-Agnostic Handlers
=============================================
Pure handler functions over contracts.
"""

from __future__ import annotations

import logging
from typing import Any

from picker.config.defaults import load_defaults
from picker.http_api.contracts import PickerChoicesRequest, PickerSubmitRequest
from picker.http_api.errors import rejection_response, success_response
from picker.session.models import PickerOptions
from picker.session.session import build_choices, submit_for_mode
from picker.time.calendar import DateRange
from picker.timezones.policy import policy_from_option

logger = logging.getLogger("picker.http")


def _range_or_none(min_date, max_date) -> DateRange | None:
    if min_date is None or max_date is None:
        return None
    return DateRange(min_date=min_date, max_date=max_date)


def _serialize_choices(choices) -> dict[str, list[dict[str, Any]]]:
    return {
        field_name: [{"value": value, "label": label} for value, label in entries]
        for field_name, entries in choices.items()
    }


def get_picker_choices(request: PickerChoicesRequest) -> dict[str, Any]:
    options = PickerOptions(
        mode=request.mode,
        locale=request.locale,
        date_range=_range_or_none(request.min_date, request.max_date),
        use_24_hour_format=request.use_24_hour_format,
    )
    return success_response(
        {
            "mode": request.mode.value,
            "choices": _serialize_choices(build_choices(options)),
        }
    )


def post_picker_submit(request: PickerSubmitRequest) -> dict[str, Any]:
    options = PickerOptions(
        mode=request.mode,
        locale=load_defaults().locale,
        date_range=_range_or_none(request.min_date, request.max_date),
        use_24_hour_format=request.draft.use_24_hour_format,
        time_zone_policy=policy_from_option(
            request.time_zone_option, request.specific_time_zone
        ),
    )
    outcome = submit_for_mode(options, request.draft, request.base)

    if outcome.is_rejected:
        logger.info(f"Picker submit rejected: {outcome.error.code}")
        return rejection_response(
            outcome.error,
            extra_details={"draft": outcome.draft.to_dict()},
        )

    return success_response(
        {
            "mode": request.mode.value,
            "value": outcome.value.isoformat(),
            "draft": outcome.draft.to_dict(),
        }
    )
