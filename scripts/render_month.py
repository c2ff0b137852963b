"""
Print a month-view calendar grid to the terminal.

    python scripts/render_month.py --month 2024-02 --tz Europe/Warsaw --week-start 1 --rows 6

Days from the neighbouring months are shown in parentheses.
"""
from __future__ import annotations
import argparse
import calendar
import logging
import os
import sys
from datetime import datetime
from pathlib import Path
from typing import List, Optional

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from dotenv import load_dotenv, find_dotenv

from timegrid.core.settings import Settings, configure_logging
from timegrid.utils import (
    Locale,
    combine_date_and_time_into_moment,
    get_moment,
    month_grid,
    validate_iso_date,
    week_day_labels,
    format_year_month,
)

log = logging.getLogger("timegrid.scripts.render_month")


def host_locale(week_start: int) -> Locale:
    # calendar.day_abbr is Monday-first; Locale is Sunday-first
    days = list(calendar.day_abbr)
    return Locale(
        short_days=days[-1:] + days[:-1],
        short_months=list(calendar.month_abbr)[1:],
        week_start=week_start,
    )


def render(month: str, tz: str, week_start: int, rows: Optional[int]) -> List[str]:
    date = f"{month}-01"
    if not validate_iso_date(date):
        raise SystemExit(f"--month must look like YYYY-MM, got {month!r}")
    anchor = combine_date_and_time_into_moment(date, "00:00", tz, strict=True).to_datetime()
    locale = host_locale(week_start)
    grid = month_grid(anchor, tz, locale, rows=rows)
    in_month = get_moment(anchor, tz).month()

    lines = [format_year_month(anchor, tz).center(7 * 5), "".join(f"{d:>5}" for d in week_day_labels(locale))]
    for week in grid:
        cells = []
        for day in week:
            m = get_moment(day, tz)
            label = str(m.date()) if m.month() == in_month else f"({m.date()})"
            cells.append(f"{label:>5}")
        lines.append("".join(cells))
    log.info("render_month: month=%s tz=%s rows=%d", month, tz, len(grid))
    return lines


def main(argv: Optional[List[str]] = None) -> int:
    # entry point only: fill os.environ from .env, real environment variables win
    load_dotenv(os.getenv("ENV_FILE") or find_dotenv(usecwd=True) or ".env", override=False)
    cfg = Settings()

    parser = argparse.ArgumentParser(description=__doc__.strip().splitlines()[0])
    parser.add_argument("--month", default=datetime.now().strftime("%Y-%m"), help="YYYY-MM (default: this month)")
    parser.add_argument("--tz", default=cfg.DEFAULT_TIMEZONE, help="IANA timezone or +HH:MM offset")
    parser.add_argument("--week-start", type=int, default=cfg.DEFAULT_WEEK_START, choices=range(7))
    parser.add_argument("--rows", type=int, default=None, help="pad the grid to this many weeks")
    args = parser.parse_args(argv)

    configure_logging(cfg.LOG_LEVEL)
    for line in render(args.month, args.tz, args.week_start, args.rows):
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())
