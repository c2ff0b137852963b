"""
Timezone-localized wall-clock values ("moments") and the day/month shift primitives.

A Moment is an absolute instant interpreted in one timezone, backed by a pendulum
DateTime. It never carries the host's local timezone: naive datetimes are read as UTC.
"""
from __future__ import annotations
import re
from datetime import datetime, timedelta, timezone, tzinfo
from typing import Optional, Union, TYPE_CHECKING
from zoneinfo import ZoneInfo

import pendulum

from timegrid.core.dates import Clock, system_clock

if TYPE_CHECKING:
    from timegrid.utils.calendar import Locale

Timezone = Union[tzinfo, str]

INVALID_DATE = "Invalid date"

_OFFSET_RE = re.compile(r"^([+-])(\d{2}):?(\d{2})$")

# caller-supplied names replace pendulum's own for these tokens; [..] stays escaped
_LOCALE_TOKEN_RE = re.compile(r"\[[^\]]*\]|MMMM|MMM|dddd|ddd")

_UNITS = ("years", "months", "weeks", "days", "hours", "minutes", "seconds")


def resolve_timezone(tz: Timezone) -> tzinfo:
    """
    Return a tzinfo for a timezone value or its string serialization.

    Strings are IANA keys ("Europe/Warsaw") or fixed offsets ("+05:30").
    Unknown keys raise zoneinfo.ZoneInfoNotFoundError.
    """
    if isinstance(tz, tzinfo):
        return tz
    s = str(tz).strip()
    m = _OFFSET_RE.match(s)
    if m:
        sign = -1 if m.group(1) == "-" else 1
        return timezone(sign * timedelta(hours=int(m.group(2)), minutes=int(m.group(3))))
    return ZoneInfo(s)


def timezone_name(tz: Timezone) -> str:
    """Canonical string form of a timezone; resolve_timezone() accepts it back."""
    tz = resolve_timezone(tz)
    key = getattr(tz, "key", None)
    if key:
        return key
    offset = tz.utcoffset(None)
    if offset is None:
        return str(tz)
    if not offset:
        return "UTC"
    sign = "-" if offset < timedelta(0) else "+"
    minutes = abs(offset) // timedelta(minutes=1)
    return f"{sign}{minutes // 60:02d}:{minutes % 60:02d}"


def _aware(instant: datetime) -> datetime:
    if instant.tzinfo is None:
        return instant.replace(tzinfo=timezone.utc)
    return instant


def localize(instant: datetime, tz: Timezone) -> pendulum.DateTime:
    """The instant as a pendulum DateTime in tz."""
    return pendulum.instance(_aware(instant)).in_timezone(resolve_timezone(tz))


def day_floor(instant: datetime, tz: Timezone) -> pendulum.DateTime:
    """Start of the instant's calendar day in tz."""
    return localize(instant, tz).start_of("day")


def day_shift(instant: datetime, tz: Timezone, count: int) -> pendulum.DateTime:
    """Shift by count calendar days in tz (time of day is kept across DST changes)."""
    return localize(instant, tz).add(days=count)


def month_shift(instant: datetime, tz: Timezone, count: int) -> pendulum.DateTime:
    """Shift by count calendar months in tz; the day is clamped to the target month's length."""
    return localize(instant, tz).add(months=count)


def _unit(unit: str) -> str:
    u = unit if unit.endswith("s") else f"{unit}s"
    if u not in _UNITS:
        raise ValueError(f"Invalid unit: {unit}")
    return u


class Moment:
    """
    An instant read through a timezone.

    day() is the weekday with Sunday=0 (the Locale.week_start numbering), date() is
    the day of month and month() is 1-12. Invalid moments (from lenient parsing)
    answer None from every getter and "Invalid date" from format().
    """

    __slots__ = ("_dt", "_tz", "_source")

    def __init__(self, dt: Optional[datetime], tz: Timezone, source: Optional[str] = None):
        self._tz = resolve_timezone(tz)
        self._dt = localize(dt, self._tz) if dt is not None else None
        self._source = source

    @classmethod
    def from_instant(cls, instant: datetime, tz: Timezone) -> "Moment":
        return cls(instant, tz)

    @classmethod
    def invalid(cls, tz: Timezone, source: Optional[str] = None) -> "Moment":
        return cls(None, tz, source=source)

    # ---- identity ----

    def is_valid(self) -> bool:
        return self._dt is not None

    @property
    def timezone(self) -> tzinfo:
        return self._tz

    def to_datetime(self) -> Optional[pendulum.DateTime]:
        return self._dt

    def value_of(self) -> Optional[int]:
        """Epoch milliseconds."""
        if self._dt is None:
            return None
        return self._dt.int_timestamp * 1000 + self._dt.microsecond // 1000

    # ---- calendar fields ----

    def year(self) -> Optional[int]:
        return self._dt.year if self._dt is not None else None

    def month(self) -> Optional[int]:
        return self._dt.month if self._dt is not None else None

    def date(self) -> Optional[int]:
        return self._dt.day if self._dt is not None else None

    def day(self) -> Optional[int]:
        return self._dt.isoweekday() % 7 if self._dt is not None else None

    def hours(self) -> Optional[int]:
        return self._dt.hour if self._dt is not None else None

    def minutes(self) -> Optional[int]:
        return self._dt.minute if self._dt is not None else None

    def seconds(self) -> Optional[int]:
        return self._dt.second if self._dt is not None else None

    def milliseconds(self) -> Optional[int]:
        return self._dt.microsecond // 1000 if self._dt is not None else None

    def is_start_of_day(self) -> bool:
        return self._dt is not None and self._dt == self._dt.start_of("day")

    # ---- arithmetic (always returns a new Moment) ----

    def start_of_day(self) -> "Moment":
        if self._dt is None:
            return self
        return Moment(self._dt.start_of("day"), self._tz)

    def add(self, amount: int, unit: str = "days") -> "Moment":
        if self._dt is None:
            return self
        return Moment(self._dt.add(**{_unit(unit): amount}), self._tz)

    def subtract(self, amount: int, unit: str = "days") -> "Moment":
        if self._dt is None:
            return self
        return Moment(self._dt.subtract(**{_unit(unit): amount}), self._tz)

    def diff(self, other: Union["Moment", datetime], unit: str = "days") -> Optional[int]:
        """
        Whole units from other to self, truncated toward zero.

        Days and longer are calendar units, so a 23-hour DST day still counts as one day.
        """
        other_dt = other.to_datetime() if isinstance(other, Moment) else other
        if self._dt is None or other_dt is None:
            return None
        u = _unit(unit)
        other_local = localize(other_dt, self._tz)
        magnitude = getattr(other_local.diff(self._dt), f"in_{u}")()
        return magnitude if self._dt >= other_local else -magnitude

    # ---- rendering ----

    def format(self, pattern: str, locale: Optional["Locale"] = None) -> str:
        if self._dt is None:
            return INVALID_DATE
        if locale is not None:
            pattern = _LOCALE_TOKEN_RE.sub(lambda m: self._locale_name(m.group(0), locale), pattern)
        return self._dt.format(pattern)

    def _locale_name(self, token: str, locale: "Locale") -> str:
        if token == "MMM":
            return f"[{locale.short_months[self._dt.month - 1]}]"
        if token == "ddd":
            return f"[{locale.short_days[self._dt.isoweekday() % 7]}]"
        return token

    def from_now(self, without_suffix: bool = False, now: Optional[Clock] = None) -> str:
        """Humanized distance to now ("3 hours"); with suffix "3 hours ago" / "in 3 hours"."""
        if self._dt is None:
            return INVALID_DATE
        current = pendulum.instance(_aware((now or system_clock)()))
        text = self._dt.diff_for_humans(current, absolute=True)
        if without_suffix:
            return text
        return f"{text} ago" if current >= self._dt else f"in {text}"

    # ---- dunder ----

    def __eq__(self, other) -> bool:
        if not isinstance(other, Moment):
            return NotImplemented
        return self.value_of() == other.value_of() and timezone_name(self._tz) == timezone_name(other._tz)

    def __hash__(self) -> int:
        return hash((self.value_of(), timezone_name(self._tz)))

    def __repr__(self) -> str:
        if self._dt is None:
            return f"Moment(invalid, source={self._source!r}, tz={timezone_name(self._tz)!r})"
        return f"Moment({self._dt.isoformat()}, tz={timezone_name(self._tz)!r})"


def get_moment(instant: datetime, tz: Timezone) -> Moment:
    """Localize an instant into tz."""
    return Moment.from_instant(instant, tz)


__all__ = [
    "Timezone",
    "Moment",
    "INVALID_DATE",
    "resolve_timezone",
    "timezone_name",
    "localize",
    "day_floor",
    "day_shift",
    "month_shift",
    "get_moment",
]
