from __future__ import annotations
from datetime import datetime, timezone as dt_timezone
from typing import Optional

from timegrid.core.dates import Clock
from timegrid.utils.formats import FORMAT_FULL_MONTH_WITH_YEAR, FULL_FORMAT, ISO_FORMAT_DATE, ISO_FORMAT_TIME
from timegrid.utils.moment import Timezone, get_moment


def _as_aware(d: datetime) -> datetime:
    return d if d.tzinfo is not None else d.replace(tzinfo=dt_timezone.utc)


def dates_equal(d1: Optional[datetime], d2: Optional[datetime]) -> bool:
    """Null-safe equality: two missing dates are equal, otherwise compare instants."""
    if (d1 is None) != (d2 is None):
        return False
    if d1 is d2:
        return True
    # same-tzinfo comparison ignores fold, so compare in UTC
    return _as_aware(d1).astimezone(dt_timezone.utc) == _as_aware(d2).astimezone(dt_timezone.utc)


def get_day_in_month(date: datetime, timezone: Timezone) -> int:
    return get_moment(date, timezone).date()


def format_year_month(date: datetime, timezone: Timezone) -> str:
    return get_moment(date, timezone).format(FORMAT_FULL_MONTH_WITH_YEAR)


def format_time_elapsed(date: datetime, timezone: Timezone, *, now: Optional[Clock] = None) -> str:
    """Distance from now without "ago"/"in" ("3 hours")."""
    return get_moment(date, timezone).from_now(without_suffix=True, now=now)


def format_date_time(date: datetime, timezone: Timezone) -> str:
    return get_moment(date, timezone).format(FULL_FORMAT)


def format_iso_date(date: datetime, timezone: Timezone) -> str:
    return get_moment(date, timezone).format(ISO_FORMAT_DATE)


def format_iso_time(date: datetime, timezone: Timezone) -> str:
    return get_moment(date, timezone).format(ISO_FORMAT_TIME)


__all__ = [
    "dates_equal",
    "get_day_in_month",
    "format_year_month",
    "format_time_elapsed",
    "format_date_time",
    "format_iso_date",
    "format_iso_time",
]
