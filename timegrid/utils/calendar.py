"""
Month-view calendar grids.

A grid is a list of weeks; a week is a list of day anchors (midnight in the grid's
timezone). month_to_weeks() covers exactly the days of one month, so the first and
last week may be short; prepend_days()/append_days() pad them with days from the
neighbouring months.
"""
from __future__ import annotations
import logging
from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from timegrid.utils.moment import Timezone, day_floor, day_shift, get_moment, month_shift

log = logging.getLogger("timegrid.calendar")

WeekRow = List[datetime]
MonthGrid = List[WeekRow]

DAYS_IN_WEEK = 7


class Locale(BaseModel):
    """Caller-supplied day/month names and week start (0=Sunday .. 6=Saturday)."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    short_days: List[str] = Field(alias="shortDays", min_length=7, max_length=7)
    short_months: List[str] = Field(alias="shortMonths", min_length=12, max_length=12)
    week_start: int = Field(0, alias="weekStart", ge=0, le=6)


def month_to_weeks(first_day_of_month: datetime, timezone: Timezone, locale: Locale) -> MonthGrid:
    """
    Split the days of a month into weeks starting on locale.week_start.

    Args:
        first_day_of_month: Any instant on the first day of the month, in timezone.
        timezone: Timezone the calendar days are taken in.
        locale: Supplies the week start.

    Returns:
        Weeks in order; every day of the month appears exactly once.
    """
    weeks: MonthGrid = []
    current = day_floor(first_day_of_month, timezone)
    first_day_next_month = month_shift(current, timezone, 1)

    week: WeekRow = []
    while current < first_day_next_month:
        wall_time = get_moment(current, timezone)
        if wall_time.day() == locale.week_start and week:
            weeks.append(week)
            week = []
        week.append(current)
        current = day_shift(current, timezone, 1)
    # last (possibly short) week
    if week:
        weeks.append(week)

    log.debug("calendar.month_to_weeks: first_day=%s weeks=%d", first_day_of_month, len(weeks))
    return weeks


def prepend_days(timezone: Timezone, week: WeekRow, count: int, *, in_place: bool = False) -> WeekRow:
    """
    Extend a week backwards by count days.

    Returns a new list unless in_place=True, in which case week itself is extended
    and returned. count <= 0 adds nothing.
    """
    target = week if in_place else list(week)
    for _ in range(max(0, count)):
        target.insert(0, day_shift(target[0], timezone, -1))
    return target


def append_days(timezone: Timezone, week: WeekRow, count: int, *, in_place: bool = False) -> WeekRow:
    """Extend a week forwards by count days; same copy/in_place rules as prepend_days()."""
    target = week if in_place else list(week)
    for _ in range(max(0, count)):
        target.append(day_shift(target[-1], timezone, 1))
    return target


def pad_week(timezone: Timezone, week: WeekRow, locale: Locale, size: int = DAYS_IN_WEEK) -> WeekRow:
    """
    Pad a short week to size days.

    Days are added in front until the week starts on locale.week_start, then at
    the back. Returns a new list.
    """
    first_weekday = get_moment(week[0], timezone).day()
    missing_front = min((first_weekday - locale.week_start) % DAYS_IN_WEEK, max(0, size - len(week)))
    padded = prepend_days(timezone, week, missing_front)
    return append_days(timezone, padded, size - len(padded))


def month_grid(
    first_day_of_month: datetime,
    timezone: Timezone,
    locale: Locale,
    rows: Optional[int] = None,
) -> MonthGrid:
    """
    Month view with full 7-day weeks.

    When rows is given, whole weeks from the next month are added until the grid
    has that many rows (a fixed 6-row view never jumps in height).
    """
    grid = [pad_week(timezone, week, locale) for week in month_to_weeks(first_day_of_month, timezone, locale)]
    while rows is not None and len(grid) < rows:
        next_first = day_shift(grid[-1][-1], timezone, 1)
        grid.append(append_days(timezone, [next_first], DAYS_IN_WEEK - 1))
    return grid


def week_day_labels(locale: Locale) -> List[str]:
    """Short day names in grid column order."""
    start = locale.week_start
    return list(locale.short_days[start:]) + list(locale.short_days[:start])


__all__ = [
    "WeekRow",
    "MonthGrid",
    "Locale",
    "month_to_weeks",
    "prepend_days",
    "append_days",
    "pad_week",
    "month_grid",
    "week_day_labels",
]
