"""
Picker Config — Public API
============================
Picker defaults sourced from Django settings.
"""

from picker.config.defaults import PickerDefaults, load_defaults

__all__ = [
    "PickerDefaults",
    "load_defaults",
]
