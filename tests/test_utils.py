"""Unit tests for vacation_package.utils."""

from datetime import date, datetime

from vacation_package.utils import format_amount, format_date, format_datetime, num_days


def test_num_days_whole_days():
    assert num_days(datetime(2019, 12, 30), datetime(2020, 1, 1)) == 2


def test_num_days_same_instant_is_zero():
    moment = datetime(2020, 1, 1, 15, 45)
    assert num_days(moment, moment) == 0


def test_num_days_is_antisymmetric():
    start = datetime(2019, 12, 30, 8, 0)
    end = datetime(2020, 1, 2, 20, 30)
    assert num_days(start, end) == -num_days(end, start)


def test_num_days_keeps_fractional_part():
    # Sub-day components are billed fractionally, not rounded.
    assert num_days(datetime(2020, 1, 1, 0, 0), datetime(2020, 1, 2, 12, 0)) == 1.5


def test_num_days_accepts_plain_dates():
    assert num_days(date(2020, 2, 27), date(2020, 3, 1)) == 3


def test_format_amount_drops_trailing_zero_only_for_whole_floats():
    assert format_amount(300) == "300"
    assert format_amount(800.0) == "800"
    assert format_amount(2.5) == "2.5"


def test_format_date_is_unpadded_us_short_date():
    assert format_date(datetime(2020, 1, 1, 18, 30)) == "1/1/2020"
    assert format_date(date(2019, 12, 30)) == "12/30/2019"


def test_format_datetime_uses_twelve_hour_clock():
    assert format_datetime(datetime(2019, 12, 30)) == "12/30/2019, 12:00 AM"
    assert format_datetime(datetime(2020, 1, 1, 9, 5)) == "1/1/2020, 9:05 AM"
    assert format_datetime(datetime(2020, 1, 1, 21, 40)) == "1/1/2020, 9:40 PM"
