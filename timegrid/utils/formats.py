"""
Format patterns shared by the range, tick and point formatters.

Range-style patterns come in families of four, keyed by (omit_year, omit_hour).
"""
from __future__ import annotations
from typing import Dict, Tuple

ISO_FORMAT_DATE = "YYYY-MM-DD"
ISO_FORMAT_TIME = "HH:mm"
FORMAT_FULL_MONTH_WITH_YEAR = "MMMM YYYY"

FULL_FORMAT = "D MMM YYYY H:mm"
WITHOUT_YEAR_FORMAT = "D MMM H:mm"
WITHOUT_HOUR_FORMAT = "D MMM YYYY"
WITHOUT_YEAR_AND_HOUR_FORMAT = "D MMM"

SHORT_FULL_FORMAT = "D.MM.YY HH:mm"
SHORT_WITHOUT_YEAR_FORMAT = "D.MM HH:mm"
SHORT_WITHOUT_HOUR_FORMAT = "D.MM.YY"
SHORT_WITHOUT_YEAR_AND_HOUR_FORMAT = "D.MM"

PatternFamily = Dict[Tuple[bool, bool], str]

LONG_FORMATS: PatternFamily = {
    (False, False): FULL_FORMAT,
    (True, False): WITHOUT_YEAR_FORMAT,
    (False, True): WITHOUT_HOUR_FORMAT,
    (True, True): WITHOUT_YEAR_AND_HOUR_FORMAT,
}

SHORT_FORMATS: PatternFamily = {
    (False, False): SHORT_FULL_FORMAT,
    (True, False): SHORT_WITHOUT_YEAR_FORMAT,
    (False, True): SHORT_WITHOUT_HOUR_FORMAT,
    (True, True): SHORT_WITHOUT_YEAR_AND_HOUR_FORMAT,
}


def pick_format(family: PatternFamily, omit_year: bool, omit_hour: bool) -> str:
    return family[(bool(omit_year), bool(omit_hour))]


def get_long_format(omit_year: bool, omit_hour: bool) -> str:
    return pick_format(LONG_FORMATS, omit_year, omit_hour)


def get_short_format(omit_year: bool, omit_hour: bool) -> str:
    return pick_format(SHORT_FORMATS, omit_year, omit_hour)


__all__ = [
    "ISO_FORMAT_DATE",
    "ISO_FORMAT_TIME",
    "FORMAT_FULL_MONTH_WITH_YEAR",
    "FULL_FORMAT",
    "WITHOUT_YEAR_FORMAT",
    "WITHOUT_HOUR_FORMAT",
    "WITHOUT_YEAR_AND_HOUR_FORMAT",
    "SHORT_FULL_FORMAT",
    "SHORT_WITHOUT_YEAR_FORMAT",
    "SHORT_WITHOUT_HOUR_FORMAT",
    "SHORT_WITHOUT_YEAR_AND_HOUR_FORMAT",
    "LONG_FORMATS",
    "SHORT_FORMATS",
    "pick_format",
    "get_long_format",
    "get_short_format",
]
