from __future__ import annotations

from datetime import datetime, timedelta

import pytest

from src.qr_attendance.qr_attendance.common.datetime_utils import (
    day_window,
    decimal_hours_to_hhmm,
    duration_between_times,
    end_of_day,
    format_date_for_store,
    format_for_message,
    format_for_store,
    format_hours_minutes,
    parse_store_datetime,
    round_hours,
    to_civil,
)


@pytest.mark.parametrize(
    "instant, expected",
    [
        ("2026-02-25T00:23:01+00:00", "2026-02-24 19:23:01"),
        ("2026-02-25T01:00:00+00:00", "2026-02-24 20:00:00"),
        ("2026-02-25T05:00:00+00:00", "2026-02-25 00:00:00"),
    ],
)
def test_format_for_store_uses_fixed_utc_minus_5(instant, expected):
    assert format_for_store(datetime.fromisoformat(instant)) == expected


def test_format_for_store_accepts_any_aware_offset():
    instant = datetime.fromisoformat("2026-02-25T07:00:00+02:00")

    assert format_for_store(instant) == "2026-02-25 00:00:00"


def test_to_civil_rejects_naive_datetimes():
    with pytest.raises(ValueError):
        to_civil(datetime(2026, 2, 25, 0, 0, 0))


def test_civil_date_for_store():
    assert format_date_for_store(datetime.fromisoformat("2026-02-25T03:00:00+00:00")) == "2026-02-24"


def test_day_window_bounds():
    window = day_window(datetime.fromisoformat("2026-02-25T03:00:00+00:00"))

    assert window.start == "2026-02-24 00:00:00"
    assert window.end == "2026-02-24 23:59:59"


def test_end_of_day_keeps_the_date():
    assert end_of_day(parse_store_datetime("2026-02-22 08:00:00")) == datetime(2026, 2, 22, 23, 59, 59)


@pytest.mark.parametrize(
    "raw, expected",
    [(6.0, 6.0), (6.52, 6.5), (6.25, 6.3), (24.01, 24.0), (0.04, 0.0)],
)
def test_round_hours_half_up(raw, expected):
    assert round_hours(raw) == expected


def test_message_format_is_spanish_short_form():
    assert format_for_message(datetime(2026, 2, 24, 13, 55)) == "mar, 24 feb 2026, 13:55"
    assert format_for_message(datetime(2026, 9, 6, 8, 5)) == "dom, 6 sept 2026, 08:05"


def test_hours_minutes_formats():
    assert format_hours_minutes(8.0833) == "8h 05m"
    assert decimal_hours_to_hhmm(1.5) == "01:30"


def test_duration_between_times_crosses_midnight():
    assert duration_between_times("09:00", "17:30") == timedelta(hours=8, minutes=30)
    assert duration_between_times("22:00", "02:00") == timedelta(hours=4)
