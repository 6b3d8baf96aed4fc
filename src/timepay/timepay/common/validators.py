from __future__ import annotations

import re

from ..core.exceptions import ValidationError

_MONTH_RE = re.compile(r"^(\d{4})-(\d{2})$")


def require_month(value: str) -> tuple[int, int]:
    """Validate a "YYYY-MM" month key and return (year, month)."""
    match = _MONTH_RE.match((value or "").strip())
    if not match:
        raise ValidationError(f"Invalid month {value!r}, expected YYYY-MM")
    year, month = int(match.group(1)), int(match.group(2))
    if not 1 <= month <= 12:
        raise ValidationError(f"Invalid month {value!r}, expected YYYY-MM")
    return year, month
