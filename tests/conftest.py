import sys
import importlib
from datetime import datetime, timezone
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))
importlib.invalidate_caches()

import pytest

from timegrid.utils.calendar import Locale

SHORT_DAYS = ["Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"]
SHORT_MONTHS = ["Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec"]


def fixed_clock(*args):
    now = datetime(*args, tzinfo=timezone.utc)
    return lambda: now


@pytest.fixture
def clock_2024():
    return fixed_clock(2024, 6, 15, 12, 0)


@pytest.fixture
def clock_2025():
    return fixed_clock(2025, 6, 15, 12, 0)


@pytest.fixture
def monday_locale():
    return Locale(short_days=SHORT_DAYS, short_months=SHORT_MONTHS, week_start=1)


@pytest.fixture
def sunday_locale():
    return Locale(short_days=SHORT_DAYS, short_months=SHORT_MONTHS, week_start=0)
