"""
Human-readable labels for time ranges and chart-axis ticks.

Three range shapes are recognised:
- one whole day:  [2024-03-05 00:00, 2024-03-06 00:00)  -> "5 Mar"
- day range:      [2024-03-05 00:00, 2024-03-09 00:00)  -> ("5 Mar", "8 Mar")
- hour range:     anything with a sub-day boundary      -> ("5 Mar 9:30", "5 Mar 17:00")

The year is dropped when every rendered date falls in the current year of the
range's timezone. "Now" comes from an injectable clock.
"""
from __future__ import annotations
import logging
from datetime import datetime
from typing import Callable, Mapping, NamedTuple, Optional, Protocol, Sequence, Tuple, Union

from timegrid.core.dates import Clock, system_clock
from timegrid.core.settings import settings
from timegrid.utils.formats import SHORT_FULL_FORMAT, get_long_format, get_short_format
from timegrid.utils.moment import Moment, Timezone, get_moment

log = logging.getLogger("timegrid.ranges")


class TimeRange(NamedTuple):
    start: datetime
    end: datetime


class TickSource(Protocol):
    def ticks(self) -> Sequence[datetime]:
        """Tick instants of a continuous time scale, in axis order."""
        ...


RangeLike = Union[TimeRange, Mapping[str, datetime]]
RangeLabels = Union[Tuple[str], Tuple[str, str]]


def _unpack(time_range: RangeLike) -> Tuple[datetime, datetime]:
    if isinstance(time_range, Mapping):
        return time_range["start"], time_range["end"]
    return time_range.start, time_range.end


def is_current_year(moment: Moment, timezone: Timezone, now: Optional[Clock] = None) -> bool:
    now_wall_time = get_moment((now or system_clock)(), timezone)
    return now_wall_time.year() == moment.year()


def is_one_whole_day(a: Moment, b: Moment) -> bool:
    return a.is_start_of_day() and b.is_start_of_day() and b.diff(a, "days") == 1


def _format_one_whole_day(day: Moment, timezone: Timezone, now: Optional[Clock]) -> str:
    omit_year = is_current_year(day, timezone, now)
    return day.format(get_long_format(omit_year, True))


def _format_days_range(start: Moment, end: Moment, timezone: Timezone, now: Optional[Clock]) -> Tuple[str, str]:
    # end is exclusive; show the last day actually covered
    day_before_end = end.subtract(1, "days")
    omit_year = is_current_year(start, timezone, now) and is_current_year(day_before_end, timezone, now)
    fmt = get_long_format(omit_year, True)
    return start.format(fmt), day_before_end.format(fmt)


def _format_hours_range(start: Moment, end: Moment, timezone: Timezone, now: Optional[Clock]) -> Tuple[str, str]:
    omit_year = is_current_year(start, timezone, now) and is_current_year(end, timezone, now)
    fmt = get_long_format(omit_year, False)
    return start.format(fmt), end.format(fmt)


def format_dates_in_time_range(
    time_range: RangeLike,
    timezone: Timezone,
    *,
    now: Optional[Clock] = None,
) -> RangeLabels:
    """
    Render a range as one label (a whole day) or two labels (start, last shown moment).

    Args:
        time_range: TimeRange or mapping with "start" and "end" instants; end is exclusive.
        timezone: Timezone the labels are rendered in.
        now: Optional clock used for the current-year check.

    Returns:
        ("5 Mar",) for one whole day, otherwise a (start_label, end_label) pair.
    """
    start, end = _unpack(time_range)
    start_moment = get_moment(start, timezone)
    end_moment = get_moment(end, timezone)

    if is_one_whole_day(start_moment, end_moment):
        return (_format_one_whole_day(start_moment, timezone, now),)
    has_day_boundaries = start_moment.is_start_of_day() and end_moment.is_start_of_day()
    if has_day_boundaries:
        return _format_days_range(start_moment, end_moment, timezone, now)
    return _format_hours_range(start_moment, end_moment, timezone, now)


def format_start_of_time_range(time_range: RangeLike, timezone: Timezone, *, now: Optional[Clock] = None) -> str:
    return format_dates_in_time_range(time_range, timezone, now=now)[0]


def format_time_range(time_range: RangeLike, timezone: Timezone, *, now: Optional[Clock] = None) -> str:
    return " - ".join(format_dates_in_time_range(time_range, timezone, now=now))


# ---- chart axis ticks ----

def _has_same_hour(a: Moment, b: Moment) -> bool:
    return a.hours() == b.hours() and a.minutes() == b.minutes()


def ticks_format(ticks: Sequence[datetime], timezone: Optional[Timezone] = None) -> str:
    """
    Pick the short numeric pattern for a set of axis ticks.

    Drops the year when every tick shares the first tick's year, and the time of
    day when every tick shares its hour and minute.
    """
    if len(ticks) < 2:
        return SHORT_FULL_FORMAT
    tz = timezone or settings.DEFAULT_TIMEZONE
    first, *rest = [get_moment(t, tz) for t in ticks]
    same_year = all(m.year() == first.year() for m in rest)
    same_hour = all(_has_same_hour(m, first) for m in rest)
    fmt = get_short_format(same_year, same_hour)
    log.debug("ranges.ticks_format: ticks=%d same_year=%s same_hour=%s fmt=%r", len(ticks), same_year, same_hour, fmt)
    return fmt


def scale_ticks_format(scale: TickSource, timezone: Optional[Timezone] = None) -> str:
    return ticks_format(list(scale.ticks()), timezone)


def scale_ticks_formatter(scale: TickSource, timezone: Optional[Timezone] = None) -> Callable[[Moment], str]:
    """Formatter for tick moments, closing over the pattern chosen for this scale."""
    fmt = scale_ticks_format(scale, timezone)

    def _format(moment: Moment) -> str:
        return moment.format(fmt)

    return _format


__all__ = [
    "TimeRange",
    "TickSource",
    "is_current_year",
    "is_one_whole_day",
    "format_dates_in_time_range",
    "format_start_of_time_range",
    "format_time_range",
    "ticks_format",
    "scale_ticks_format",
    "scale_ticks_formatter",
]
