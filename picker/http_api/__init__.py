"""
Picker HTTP API - Public API
============================
"""

from picker.http_api.contracts import (
    HttpApiErrorBody,
    HttpApiResponse,
    PickerChoicesRequest,
    PickerSubmitRequest,
)
from picker.http_api.errors import (
    error_response,
    map_range_error,
    rejection_response,
    success_response,
)
from picker.http_api.handlers import get_picker_choices, post_picker_submit

__all__ = [
    "HttpApiErrorBody",
    "HttpApiResponse",
    "PickerChoicesRequest",
    "PickerSubmitRequest",
    "error_response",
    "map_range_error",
    "rejection_response",
    "success_response",
    "get_picker_choices",
    "post_picker_submit",
]
