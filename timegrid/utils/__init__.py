"""
Date/time helpers for the timegrid package.

Includes the moment adapter, range and tick labels, calendar grids, ISO input
helpers and single-date formatters.
"""

from timegrid.utils.moment import (
    Moment,
    get_moment,
    resolve_timezone,
    timezone_name,
    day_floor,
    day_shift,
    month_shift,
)
from timegrid.utils.ranges import (
    TimeRange,
    TickSource,
    format_dates_in_time_range,
    format_start_of_time_range,
    format_time_range,
    ticks_format,
    scale_ticks_format,
    scale_ticks_formatter,
)
from timegrid.utils.calendar import (
    Locale,
    month_to_weeks,
    prepend_days,
    append_days,
    pad_week,
    month_grid,
    week_day_labels,
)
from timegrid.utils.iso import (
    normalize_iso_date,
    validate_iso_date,
    normalize_iso_time,
    validate_iso_time,
    combine_date_and_time_into_moment,
)
from timegrid.utils.points import (
    dates_equal,
    get_day_in_month,
    format_year_month,
    format_time_elapsed,
    format_date_time,
    format_iso_date,
    format_iso_time,
)

__all__ = [
    "Moment",
    "get_moment",
    "resolve_timezone",
    "timezone_name",
    "day_floor",
    "day_shift",
    "month_shift",
    "TimeRange",
    "TickSource",
    "format_dates_in_time_range",
    "format_start_of_time_range",
    "format_time_range",
    "ticks_format",
    "scale_ticks_format",
    "scale_ticks_formatter",
    "Locale",
    "month_to_weeks",
    "prepend_days",
    "append_days",
    "pad_week",
    "month_grid",
    "week_day_labels",
    "normalize_iso_date",
    "validate_iso_date",
    "normalize_iso_time",
    "validate_iso_time",
    "combine_date_and_time_into_moment",
    "dates_equal",
    "get_day_in_month",
    "format_year_month",
    "format_time_elapsed",
    "format_date_time",
    "format_iso_date",
    "format_iso_time",
]
