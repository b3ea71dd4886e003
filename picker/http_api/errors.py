"""
Picker HTTP API - Error Mapping
===============================
Stable transport error mapping for selection rejections.
"""

from __future__ import annotations

from typing import Any, Optional

from picker.http_api.contracts import HttpApiErrorBody, HttpApiResponse
from picker.selection.outcome import RangeValidationError


def error_response(
    *,
    code: str,
    message: str,
    details: Optional[dict[str, Any]] = None,
) -> dict[str, Any]:
    return HttpApiResponse(
        ok=False,
        error=HttpApiErrorBody(
            code=code,
            message=message,
            details=details or {},
        ),
    ).to_dict()


def success_response(data: Any) -> dict[str, Any]:
    return HttpApiResponse(ok=True, data=data).to_dict()


def map_range_error(error: RangeValidationError) -> HttpApiErrorBody:
    return HttpApiErrorBody(
        code=error.code,
        message=error.message,
        details={
            "min_date": error.min_date.isoformat(),
            "max_date": error.max_date.isoformat(),
        },
    )


def rejection_response(
    error: RangeValidationError,
    *,
    extra_details: Optional[dict[str, Any]] = None,
) -> dict[str, Any]:
    mapped = map_range_error(error)
    details = dict(mapped.details)
    if extra_details:
        details.update(extra_details)
    return error_response(
        code=mapped.code,
        message=mapped.message,
        details=details,
    )
