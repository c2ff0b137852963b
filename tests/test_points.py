from datetime import datetime, timedelta, timezone
from zoneinfo import ZoneInfo

from timegrid.utils.points import (
    dates_equal,
    format_date_time,
    format_iso_date,
    format_iso_time,
    format_time_elapsed,
    format_year_month,
    get_day_in_month,
)

WARSAW = ZoneInfo("Europe/Warsaw")
INSTANT = datetime(2024, 3, 5, 8, 30, tzinfo=timezone.utc)


def test_dates_equal_is_null_safe():
    d = datetime(2024, 3, 5, tzinfo=timezone.utc)
    assert dates_equal(None, None) is True
    assert dates_equal(None, d) is False
    assert dates_equal(d, None) is False
    assert dates_equal(d, d) is True


def test_dates_equal_compares_instants():
    a = datetime(2024, 3, 5, 1, 0, tzinfo=WARSAW)
    b = datetime(2024, 3, 5, 0, 0, tzinfo=timezone.utc)
    assert a is not b
    assert dates_equal(a, b) is True
    assert dates_equal(a, b + timedelta(milliseconds=1)) is False
    # naive is read as UTC
    assert dates_equal(datetime(2024, 3, 5), b) is True


def test_dates_equal_tells_repeated_wall_times_apart():
    # 02:30 happens twice in Warsaw on 2024-10-27; fold picks the CEST or the CET one
    first = datetime(2024, 10, 27, 2, 30, tzinfo=WARSAW, fold=0)
    second = datetime(2024, 10, 27, 2, 30, tzinfo=WARSAW, fold=1)
    assert second.timestamp() - first.timestamp() == 3600
    assert dates_equal(first, second) is False
    assert dates_equal(second, datetime(2024, 10, 27, 1, 30, tzinfo=timezone.utc)) is True


def test_point_formatters():
    assert format_iso_date(INSTANT, WARSAW) == "2024-03-05"
    assert format_iso_time(INSTANT, WARSAW) == "09:30"
    assert format_date_time(INSTANT, WARSAW) == "5 Mar 2024 9:30"
    assert format_year_month(INSTANT, WARSAW) == "March 2024"


def test_get_day_in_month_uses_timezone():
    late = datetime(2024, 3, 5, 23, 30, tzinfo=timezone.utc)
    assert get_day_in_month(late, "UTC") == 5
    assert get_day_in_month(late, WARSAW) == 6


def test_format_time_elapsed_has_no_suffix():
    now = lambda: INSTANT + timedelta(days=2)
    assert format_time_elapsed(INSTANT, WARSAW, now=now) == "2 days"
    assert format_time_elapsed(INSTANT + timedelta(days=4), WARSAW, now=now) == "2 days"
