from datetime import date, datetime, time, timezone

import pytest

from src.attendance_reconciliation.attendance_reconciliation.common.datetime_utils import (
    iter_dates,
    month_bounds,
    parse_iso_date,
    parse_month,
    parse_time_of_day,
    parse_utc_instant,
)
from src.attendance_reconciliation.attendance_reconciliation.common.local_calendar import LocalCalendar
from src.attendance_reconciliation.attendance_reconciliation.core.exceptions import ValidationError
from tests.fakes import ist_calendar


def test_instant_maps_to_local_day_and_time():
    cal = ist_calendar()
    moment = cal.to_local(parse_utc_instant("2024-03-04T03:35:00Z"))

    assert moment.day == date(2024, 3, 4)
    assert moment.time_of_day == time(9, 5)


def test_late_evening_utc_belongs_to_next_local_day():
    cal = ist_calendar()
    assert cal.local_date(parse_utc_instant("2024-03-04T19:00:00Z")) == date(2024, 3, 5)


def test_day_bounds_are_half_open_utc_range():
    start, end = ist_calendar().day_bounds_utc(date(2024, 3, 5))

    assert start == datetime(2024, 3, 4, 18, 30, tzinfo=timezone.utc)
    assert end == datetime(2024, 3, 5, 18, 30, tzinfo=timezone.utc)


def test_naive_datetime_is_rejected():
    with pytest.raises(ValidationError):
        ist_calendar().to_local(datetime(2024, 3, 4, 9, 0))


def test_for_zone_uses_iana_name():
    cal = LocalCalendar.for_zone("Asia/Kolkata")
    assert cal.time_of_day(parse_utc_instant("2024-03-04T12:10:00Z")) == time(17, 40)


def test_today_uses_local_date_of_now():
    cal = ist_calendar()
    assert cal.today(parse_utc_instant("2024-03-05T20:00:00Z")) == date(2024, 3, 6)


@pytest.mark.parametrize("value", ["", None, "2024-03-04T09:00:00", "yesterday"])
def test_parse_utc_instant_rejects_non_instants(value):
    with pytest.raises(ValidationError):
        parse_utc_instant(value)


def test_parse_utc_instant_normalizes_offsets():
    assert parse_utc_instant("2024-03-04T09:05:00+05:30") == datetime(2024, 3, 4, 3, 35, tzinfo=timezone.utc)


def test_date_and_month_helpers():
    assert parse_iso_date("2024-02-29") == date(2024, 2, 29)
    assert parse_month("2024-02") == (2024, 2)
    assert month_bounds(2024, 2) == (date(2024, 2, 1), date(2024, 2, 29))
    assert list(iter_dates(date(2024, 3, 30), date(2024, 4, 1))) == [
        date(2024, 3, 30),
        date(2024, 3, 31),
        date(2024, 4, 1),
    ]
    assert parse_time_of_day("09:15") == time(9, 15)

    with pytest.raises(ValidationError):
        parse_iso_date("2024-13-01")
    with pytest.raises(ValidationError):
        parse_month("March")
