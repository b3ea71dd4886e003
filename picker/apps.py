"""
Picker — App Configuration
============================
Date/time picker selection core: drafts, validation, time zones.

This app:
- Seeds and updates picker drafts
- Validates selections against a date range
- Applies time zone policies

This app does NOT:
- Render widgets
- Persist anything
"""

from django.apps import AppConfig


class PickerConfig(AppConfig):
    name = "picker"
    label = "picker"
    verbose_name = "Date/Time Picker"
