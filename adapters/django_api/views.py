"""
Picker Django Adapter Views
===========================
Pass-through HTTP views over picker/http_api handlers.
"""

from __future__ import annotations

import json
from datetime import date, datetime
from typing import Any

from django.http import HttpRequest, JsonResponse
from django.utils.dateparse import parse_date, parse_datetime
from django.views.decorators.csrf import csrf_exempt

from picker.config.defaults import load_defaults
from picker.http_api.contracts import PickerChoicesRequest, PickerSubmitRequest
from picker.http_api.errors import error_response
from picker.http_api.handlers import get_picker_choices, post_picker_submit
from picker.selection.draft import DraftSelection
from picker.session.models import PickerMode
from picker.timezones.policy import TZ_KEEP_UNCHANGED

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})


def _json_error(code: str, message: str, status: int = 400) -> JsonResponse:
    return JsonResponse(
        error_response(code=code, message=message, details={}),
        status=status,
    )


def _method_not_allowed() -> JsonResponse:
    return _json_error(
        "METHOD_NOT_ALLOWED",
        "Method not allowed for this endpoint.",
        status=405,
    )


def _parse_mode(value: Any) -> PickerMode:
    try:
        return PickerMode(str(value).upper())
    except ValueError as exc:
        raise ValueError(
            f"mode must be one of: {sorted(m.value for m in PickerMode)}."
        ) from exc


def _parse_bool(value: Any, default: bool = False) -> bool:
    if value is None or value == "":
        return default
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in _TRUE_VALUES


def _parse_optional_date(value: Any, field_name: str) -> date | None:
    if value is None or value == "":
        return None
    parsed = parse_date(str(value))
    if parsed is None:
        raise ValueError(f"{field_name} must be an ISO date (YYYY-MM-DD).")
    return parsed


def _parse_optional_datetime(value: Any, field_name: str) -> datetime | None:
    if value is None or value == "":
        return None
    parsed = parse_datetime(str(value))
    if parsed is None:
        raise ValueError(f"{field_name} must be an ISO datetime.")
    return parsed


def _parse_json_body(request: HttpRequest) -> dict[str, Any]:
    if not request.body:
        return {}
    try:
        parsed = json.loads(request.body.decode("utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise ValueError("Request body must be valid JSON.") from exc
    if not isinstance(parsed, dict):
        raise ValueError("Request body must be a JSON object.")
    return parsed


def _parse_draft(payload: Any) -> DraftSelection:
    if not isinstance(payload, dict):
        raise ValueError("draft must be an object.")
    return DraftSelection(
        day=payload.get("day", 1),
        month=payload.get("month", 1),
        year=payload.get("year", 1970),
        hour=payload["hour"],
        minute=payload["minute"],
        period=payload.get("period"),
        use_24_hour_format=_parse_bool(payload.get("use_24_hour_format")),
    )


def picker_choices_view(request: HttpRequest) -> JsonResponse:
    if request.method != "GET":
        return _method_not_allowed()
    try:
        contract = PickerChoicesRequest(
            mode=_parse_mode(request.GET.get("mode")),
            locale=request.GET.get("locale") or load_defaults().locale,
            use_24_hour_format=_parse_bool(request.GET.get("use_24_hour_format")),
            min_date=_parse_optional_date(request.GET.get("min_date"), "min_date"),
            max_date=_parse_optional_date(request.GET.get("max_date"), "max_date"),
        )
    except ValueError as exc:
        return _json_error("INVALID_REQUEST", str(exc), status=400)

    return JsonResponse(get_picker_choices(contract))


@csrf_exempt
def picker_submit_view(request: HttpRequest) -> JsonResponse:
    if request.method != "POST":
        return _method_not_allowed()
    try:
        body = _parse_json_body(request)
        contract = PickerSubmitRequest(
            mode=_parse_mode(body.get("mode")),
            draft=_parse_draft(body.get("draft")),
            min_date=_parse_optional_date(body.get("min_date"), "min_date"),
            max_date=_parse_optional_date(body.get("max_date"), "max_date"),
            time_zone_option=str(
                body.get("time_zone_option") or TZ_KEEP_UNCHANGED
            ).upper(),
            specific_time_zone=body.get("specific_time_zone"),
            base=_parse_optional_datetime(body.get("base"), "base"),
        )
    except (ValueError, KeyError) as exc:
        return _json_error("INVALID_REQUEST", str(exc), status=400)

    return JsonResponse(post_picker_submit(contract))
