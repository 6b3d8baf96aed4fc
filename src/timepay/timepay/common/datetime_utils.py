from __future__ import annotations

import re
from calendar import monthrange
from datetime import date
from typing import Optional

from ..core.constants import MINUTES_PER_HOUR

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _leading_int(text: str) -> Optional[int]:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else None


def clock_to_minutes(value: Optional[str]) -> Optional[int]:
    """Convert an "HH:MM" clock string into minutes after midnight.

    Each part is read up to its first non-digit, so "21:30pm" is 21:30.
    Returns None for empty input, for strings without at least two
    colon-separated parts, and when either part has no leading digits.
    Seconds ("HH:MM:SS") are ignored. Never raises.
    """
    if not value or not isinstance(value, str):
        return None

    parts = value.strip().split(":")
    if len(parts) < 2:
        return None

    hours = _leading_int(parts[0])
    minutes = _leading_int(parts[1])
    if hours is None or minutes is None:
        return None
    return hours * MINUTES_PER_HOUR + minutes


def month_bounds(year: int, month: int) -> tuple[date, date]:
    first = date(year, month, 1)
    last = date(year, month, monthrange(year, month)[1])
    return first, last


def format_duration(minutes: int) -> str:
    """Render minutes as "Xh Ym" (e.g. 90 -> "1h 30m")."""
    minutes = max(int(minutes), 0)
    return f"{minutes // MINUTES_PER_HOUR}h {minutes % MINUTES_PER_HOUR}m"
