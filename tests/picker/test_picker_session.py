"""
Tests for picker.session — one picker invocation from open to close.
"""

from datetime import date, datetime, time, timedelta

import pytest

from picker.exceptions import ReadOnlyPickerError, SessionClosedError
from picker.session import (
    PickerMode,
    PickerOptions,
    PickerSession,
    SessionState,
    build_choices,
    submit_for_mode,
)
from picker.selection import DATE_OUT_OF_RANGE
from picker.time.calendar import DateRange
from picker.time.clock import FixedClock
from picker.time.hours import Period
from picker.timezones import ForceSpecific, KeepUnchanged


JANUARY_2024 = DateRange(min_date=date(2024, 1, 1), max_date=date(2024, 1, 31))
INITIAL = datetime(2024, 1, 10, 15, 20, 33)


class Recorder:
    def __init__(self):
        self.values = []

    def __call__(self, value):
        self.values.append(value)


def _options(mode=PickerMode.DATETIME, **overrides) -> PickerOptions:
    fields = dict(
        mode=mode,
        locale="en_US",
        date_range=JANUARY_2024,
        use_24_hour_format=False,
    )
    fields.update(overrides)
    return PickerOptions(**fields)


# ── Options ──────────────────────────────────────────────────

class TestPickerOptions:
    def test_dated_modes_require_range(self):
        for mode in (PickerMode.DATE, PickerMode.DATETIME):
            with pytest.raises(ValueError, match="DateRange"):
                _options(mode=mode, date_range=None)

    def test_time_modes_do_not_need_range(self):
        options = _options(mode=PickerMode.TIME, date_range=None)
        assert options.date_range is None

    def test_rejects_non_policy(self):
        with pytest.raises(ValueError, match="time_zone_policy"):
            _options(time_zone_policy="KEEP_UNCHANGED")

    def test_rejects_empty_locale(self):
        with pytest.raises(ValueError, match="locale"):
            _options(locale="")

    def test_from_settings(self, settings):
        settings.PICKER_LOCALE = "id_ID"
        settings.PICKER_USE_24_HOUR_FORMAT = True
        settings.PICKER_TIME_ZONE_OPTION = "FORCE_SPECIFIC"
        settings.PICKER_SPECIFIC_TIME_ZONE = "Asia/Jakarta"

        options = PickerOptions.from_settings(
            PickerMode.DATE, date(2024, 1, 1), date(2024, 12, 31)
        )

        assert options.locale == "id_ID"
        assert options.use_24_hour_format is True
        assert options.time_zone_policy == ForceSpecific("Asia/Jakarta")
        assert options.date_range == DateRange(date(2024, 1, 1), date(2024, 12, 31))


# ── Lifecycle ────────────────────────────────────────────────

class TestPickerSession:
    def test_seeds_from_initial_value(self):
        session = PickerSession(_options(), initial=INITIAL)
        draft = session.draft
        assert (draft.day, draft.month, draft.year) == (10, 1, 2024)
        assert (draft.hour, draft.minute, draft.period) == (3, 20, Period.PM)
        assert session.state == SessionState.EDITING

    def test_seeds_from_clock(self):
        clock = FixedClock(datetime(2024, 1, 2, 8, 0))
        session = PickerSession(_options(), clock=clock)
        assert session.draft.day == 2
        assert session.draft.period is Period.AM

    def test_accepted_submit_invokes_callback_once(self):
        recorder = Recorder()
        session = PickerSession(_options(), initial=INITIAL, on_selected=recorder)
        session.update(day=31, hour=11, period="PM")

        outcome = session.submit()

        assert outcome.is_accepted
        assert recorder.values == [datetime(2024, 1, 31, 23, 20)]
        assert session.state == SessionState.SUBMITTED

    def test_rejected_submit_keeps_session_open(self):
        recorder = Recorder()
        session = PickerSession(_options(), initial=INITIAL, on_selected=recorder)
        session.update(month=2)

        outcome = session.submit()

        assert outcome.is_rejected
        assert outcome.error.code == DATE_OUT_OF_RANGE
        assert recorder.values == []
        assert session.state == SessionState.EDITING
        assert session.draft.month == 2

        session.update(month=1)
        assert session.submit().is_accepted
        assert session.state == SessionState.SUBMITTED

    def test_rejected_submit_keeps_clamped_day(self):
        options = _options(
            date_range=DateRange(date(2023, 3, 1), date(2023, 12, 31))
        )
        session = PickerSession(options, initial=datetime(2023, 3, 31, 9, 0))
        session.update(month=2)

        outcome = session.submit()

        assert outcome.is_rejected
        assert session.draft.day == 28
        assert session.draft.month == 2

    def test_closed_session_refuses_changes(self):
        session = PickerSession(_options(), initial=INITIAL)
        session.submit()
        with pytest.raises(SessionClosedError, match="SUBMITTED"):
            session.update(day=3)
        with pytest.raises(SessionClosedError):
            session.submit()

    def test_cancel_discards_without_callback(self):
        recorder = Recorder()
        session = PickerSession(_options(), initial=INITIAL, on_selected=recorder)
        session.cancel()
        assert session.state == SessionState.CANCELLED
        assert recorder.values == []
        with pytest.raises(SessionClosedError, match="CANCELLED"):
            session.cancel()

    def test_read_only_refuses_edits(self):
        session = PickerSession(_options(read_only=True), initial=INITIAL)
        with pytest.raises(ReadOnlyPickerError, match="day"):
            session.update(day=3)

    def test_read_only_submit_closes_without_callback(self):
        recorder = Recorder()
        session = PickerSession(
            _options(read_only=True), initial=INITIAL, on_selected=recorder
        )
        assert session.submit() is None
        assert session.state == SessionState.CANCELLED
        assert recorder.values == []

    def test_date_mode_returns_midnight(self):
        recorder = Recorder()
        session = PickerSession(
            _options(mode=PickerMode.DATE), initial=INITIAL, on_selected=recorder
        )
        session.submit()
        assert recorder.values == [datetime(2024, 1, 10)]

    def test_time_mode_returns_time(self):
        session = PickerSession(
            _options(mode=PickerMode.TIME, date_range=None), initial=INITIAL
        )
        session.update(hour=12, period=Period.AM)
        assert session.submit().value == time(0, 20)

    def test_time_of_datetime_keeps_initial_date(self):
        session = PickerSession(
            _options(
                mode=PickerMode.TIME_OF_DATETIME,
                date_range=None,
                time_zone_policy=ForceSpecific("Asia/Jakarta"),
            ),
            initial=INITIAL,
        )
        session.update(hour=6, period=Period.AM)
        value = session.submit().value
        assert value.replace(tzinfo=None) == datetime(2024, 1, 10, 6, 20, 33)
        assert value.utcoffset() == timedelta(hours=7)


# ── Choices & Routing ────────────────────────────────────────

class TestChoicesForMode:
    def test_datetime_12_hour(self):
        choices = PickerSession(_options(), initial=INITIAL).choices()
        assert set(choices) == {"day", "month", "year", "hour", "minute", "period"}
        assert choices["year"] == [(2024, "2024")]
        assert choices["month"][0] == (1, "January")

    def test_date_only(self):
        choices = build_choices(_options(mode=PickerMode.DATE))
        assert set(choices) == {"day", "month", "year"}

    def test_time_24_hour(self):
        choices = build_choices(
            _options(mode=PickerMode.TIME, date_range=None, use_24_hour_format=True)
        )
        assert set(choices) == {"hour", "minute"}
        assert choices["hour"][0] == (0, "00")

    def test_month_names_follow_locale(self):
        choices = build_choices(_options(locale="id_ID"))
        assert choices["month"][0] == (1, "Januari")


class TestSubmitForMode:
    def test_time_of_datetime_requires_base(self):
        session = PickerSession(
            _options(mode=PickerMode.TIME, date_range=None), initial=INITIAL
        )
        options = _options(mode=PickerMode.TIME_OF_DATETIME, date_range=None)
        with pytest.raises(ValueError, match="base"):
            submit_for_mode(options, session.draft)

    def test_routes_datetime(self):
        session = PickerSession(_options(), initial=INITIAL)
        outcome = submit_for_mode(
            _options(time_zone_policy=KeepUnchanged()), session.draft
        )
        assert outcome.value == datetime(2024, 1, 10, 15, 20)
