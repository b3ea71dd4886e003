"""
Tests for picker.config — settings-driven defaults.
"""

import pytest

from picker.config import PickerDefaults, load_defaults
from picker.timezones import FORCE_SYSTEM_TIME_ZONE, KEEP_UNCHANGED, ForceSpecific


class TestLoadDefaults:
    def test_project_defaults(self, settings):
        settings.PICKER_LOCALE = None
        defaults = load_defaults()
        assert defaults.locale == settings.LANGUAGE_CODE
        assert defaults.use_24_hour_format is False
        assert defaults.time_zone_policy() == KEEP_UNCHANGED

    def test_missing_settings_fall_back(self, settings):
        del settings.PICKER_LOCALE
        del settings.PICKER_USE_24_HOUR_FORMAT
        del settings.PICKER_TIME_ZONE_OPTION
        del settings.PICKER_SPECIFIC_TIME_ZONE
        defaults = load_defaults()
        assert defaults == PickerDefaults(locale=settings.LANGUAGE_CODE)

    def test_overrides(self, settings):
        settings.PICKER_LOCALE = "de_DE"
        settings.PICKER_USE_24_HOUR_FORMAT = True
        settings.PICKER_TIME_ZONE_OPTION = "FORCE_SYSTEM_TIME_ZONE"
        defaults = load_defaults()
        assert defaults.locale == "de_DE"
        assert defaults.use_24_hour_format is True
        assert defaults.time_zone_policy() == FORCE_SYSTEM_TIME_ZONE

    def test_specific_zone(self, settings):
        settings.PICKER_TIME_ZONE_OPTION = "FORCE_SPECIFIC"
        settings.PICKER_SPECIFIC_TIME_ZONE = "Europe/Paris"
        assert load_defaults().time_zone_policy() == ForceSpecific("Europe/Paris")

    def test_invalid_option_rejected(self, settings):
        settings.PICKER_TIME_ZONE_OPTION = "SOMETIMES"
        with pytest.raises(ValueError, match="time_zone_option"):
            load_defaults()


class TestPickerDefaults:
    def test_rejects_non_bool_format(self):
        with pytest.raises(ValueError, match="use_24_hour_format"):
            PickerDefaults(locale="en", use_24_hour_format="yes")

    def test_rejects_empty_locale(self):
        with pytest.raises(ValueError, match="locale"):
            PickerDefaults(locale="")
