"""
Helpers for date/time strings typed into "YYYY-MM-DD" and "HH:mm" inputs.
"""
from __future__ import annotations
import logging
import re
from typing import Optional

import pendulum

from timegrid.core.errors import InvalidDateTimeError
from timegrid.core.settings import settings
from timegrid.utils.moment import Moment, Timezone, resolve_timezone

log = logging.getLogger("timegrid.iso")

ISO_DATE_DISALLOWED = re.compile(r"[^\d-]")
ISO_DATE_TEST = re.compile(r"^\d\d\d\d-\d\d-\d\d$")

ISO_TIME_DISALLOWED = re.compile(r"[^\d:]")
ISO_TIME_TEST = re.compile(r"^\d\d:\d\d$")


def normalize_iso_date(date: str) -> str:
    """Keep only digits and hyphens ("2o24-01-01" -> "224-01-01")."""
    return ISO_DATE_DISALLOWED.sub("", date)


def validate_iso_date(date: str) -> bool:
    """Shape check only: "2024-13-40" passes."""
    return bool(ISO_DATE_TEST.match(date))


def normalize_iso_time(time: str) -> str:
    return ISO_TIME_DISALLOWED.sub("", time)


def validate_iso_time(time: str) -> bool:
    return bool(ISO_TIME_TEST.match(time))


def combine_date_and_time_into_moment(
    date: str,
    time: str,
    timezone: Timezone,
    *,
    strict: Optional[bool] = None,
) -> Moment:
    """
    Read "<date>T<time>" as wall-clock time in timezone.

    Both parts are expected to have passed validate_iso_date()/validate_iso_time().
    Anything that still fails to parse (e.g. "2024-13-40") gives an invalid Moment,
    or raises InvalidDateTimeError when strict (default: STRICT_DATETIME_PARSING).

    Raises:
        InvalidDateTimeError: In strict mode, when the combined value does not parse.
        zoneinfo.ZoneInfoNotFoundError: For an unknown timezone key.
    """
    tz = resolve_timezone(timezone)
    raw = f"{date}T{time}"
    if strict is None:
        strict = settings.STRICT_DATETIME_PARSING
    try:
        wall = pendulum.parse(raw, tz=tz)
    except ValueError as e:
        if strict:
            raise InvalidDateTimeError(raw, str(e)) from e
        log.debug("iso.combine: unparseable %r: %s", raw, e)
        return Moment.invalid(tz, source=raw)
    if not isinstance(wall, pendulum.DateTime):
        if strict:
            raise InvalidDateTimeError(raw, "not a date and time")
        log.debug("iso.combine: %r is not a date and time", raw)
        return Moment.invalid(tz, source=raw)
    return Moment(wall, tz)


__all__ = [
    "normalize_iso_date",
    "validate_iso_date",
    "normalize_iso_time",
    "validate_iso_time",
    "combine_date_and_time_into_moment",
]
