"""
Tests for picker.timezones — policy variants and application.
"""

import logging
from datetime import datetime, timedelta, timezone

import pytest
from django.utils import timezone as django_timezone

from picker.timezones import (
    FORCE_SYSTEM_TIME_ZONE,
    KEEP_UNCHANGED,
    TZ_FORCE_SPECIFIC,
    ForceSpecific,
    ForceSystemTimeZone,
    KeepUnchanged,
    apply_time_zone,
    lookup_zone,
    policy_from_option,
)


SELECTED = datetime(2024, 7, 1, 9, 30)


def _wall_clock(value: datetime) -> tuple:
    return (value.year, value.month, value.day, value.hour, value.minute)


# ── Policy Construction ──────────────────────────────────────

class TestPolicyFromOption:
    def test_keep_unchanged(self):
        assert policy_from_option("KEEP_UNCHANGED") == KeepUnchanged()

    def test_force_system(self):
        assert policy_from_option("force_system_time_zone") == ForceSystemTimeZone()

    def test_force_specific_carries_zone(self):
        policy = policy_from_option(TZ_FORCE_SPECIFIC, "Asia/Jakarta")
        assert policy == ForceSpecific(zone_id="Asia/Jakarta")

    def test_zone_ignored_for_other_options(self):
        assert policy_from_option("KEEP_UNCHANGED", "Asia/Jakarta") == KEEP_UNCHANGED

    def test_unknown_option_rejected(self):
        with pytest.raises(ValueError, match="not valid"):
            policy_from_option("FORCE_UTC")

    def test_force_specific_rejects_non_string_zone(self):
        with pytest.raises(ValueError, match="zone_id"):
            ForceSpecific(zone_id=7)


# ── Zone Lookup ──────────────────────────────────────────────

class TestLookupZone:
    def test_known_zone(self):
        zone = lookup_zone("America/New_York")
        assert zone is not None
        assert str(zone) == "America/New_York"

    @pytest.mark.parametrize(
        "zone_id",
        [None, "", "Not/AZone", "../etc/passwd", "America", "Asia", "Etc"],
    )
    def test_missing_or_unknown_zone_is_none(self, zone_id):
        assert lookup_zone(zone_id) is None


# ── Application ──────────────────────────────────────────────

class TestApplyTimeZone:
    def test_keep_unchanged_is_identity(self):
        assert apply_time_zone(SELECTED, KEEP_UNCHANGED) is SELECTED

    def test_force_specific_reinterprets_wall_clock(self):
        result = apply_time_zone(SELECTED, ForceSpecific("America/New_York"))
        assert _wall_clock(result) == _wall_clock(SELECTED)
        assert result.utcoffset() == timedelta(hours=-4)

    def test_force_specific_uses_standard_time_in_winter(self):
        winter = datetime(2024, 1, 15, 9, 30)
        result = apply_time_zone(winter, ForceSpecific("America/New_York"))
        assert result.utcoffset() == timedelta(hours=-5)

    def test_force_specific_replaces_existing_zone(self):
        aware = SELECTED.replace(tzinfo=timezone.utc)
        result = apply_time_zone(aware, ForceSpecific("Asia/Jakarta"))
        assert _wall_clock(result) == _wall_clock(SELECTED)
        assert result.utcoffset() == timedelta(hours=7)

    def test_force_specific_empty_zone_behaves_like_keep_unchanged(self):
        assert apply_time_zone(SELECTED, ForceSpecific("")) == apply_time_zone(
            SELECTED, KEEP_UNCHANGED
        )
        assert apply_time_zone(SELECTED, ForceSpecific()) == SELECTED

    def test_force_specific_unknown_zone_falls_back_with_warning(self, caplog):
        with caplog.at_level(logging.WARNING, logger="picker.timezones"):
            result = apply_time_zone(SELECTED, ForceSpecific("Not/AZone"))
        assert result == SELECTED
        assert result.tzinfo is None
        assert "Not/AZone" in caplog.text

    @pytest.mark.parametrize("zone_id", ["America", "Asia", "Etc"])
    def test_force_specific_region_name_falls_back(self, zone_id):
        assert apply_time_zone(SELECTED, ForceSpecific(zone_id)) == SELECTED

    def test_force_system_uses_active_django_zone(self):
        with django_timezone.override("Asia/Jakarta"):
            result = apply_time_zone(SELECTED, FORCE_SYSTEM_TIME_ZONE)
        assert _wall_clock(result) == _wall_clock(SELECTED)
        assert result.utcoffset() == timedelta(hours=7)

    def test_force_system_defaults_to_settings_zone(self, settings):
        settings.TIME_ZONE = "Europe/Berlin"
        result = apply_time_zone(SELECTED, FORCE_SYSTEM_TIME_ZONE)
        assert result.utcoffset() == timedelta(hours=2)

    def test_rejects_non_policy(self):
        with pytest.raises(ValueError, match="TimeZonePolicy"):
            apply_time_zone(SELECTED, "KEEP_UNCHANGED")
