from __future__ import annotations
from datetime import datetime, timezone
from typing import Callable, Optional

# Zero-argument callable returning the current instant
Clock = Callable[[], datetime]


def system_clock() -> datetime:
    """Current instant as an aware UTC datetime."""
    return datetime.now(timezone.utc)


def now_iso(clock: Optional[Clock] = None) -> str:
    """UTC ISO8601 without microseconds, Z-suffix."""
    now = (clock or system_clock)()
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    return now.astimezone(timezone.utc).replace(microsecond=0).isoformat().replace("+00:00", "Z")
