"""Currency helpers.

Amounts are whole currency units (rupees). Intermediate arithmetic runs on
Decimal so rates like salary / 30 / 11 do not drift before rounding.
"""

from __future__ import annotations

import logging
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

logger = logging.getLogger(__name__)

ZERO = Decimal("0")


def to_decimal(value) -> Decimal:
    """Lenient Decimal conversion; anything unparsable or non-finite is 0."""
    if value is None or isinstance(value, bool):
        return ZERO
    try:
        number = Decimal(str(value))
    except (InvalidOperation, TypeError, ValueError):
        return ZERO
    if not number.is_finite():
        return ZERO
    return number


def non_negative_amount(value, *, field_name: str = "amount") -> Decimal:
    """Clamp a salary-like input to a finite, non-negative Decimal.

    None and "" mean "unknown" and are 0 without a warning. Non-numeric,
    NaN, infinite and negative values are 0 with a warning.
    """
    if value is None or value == "":
        return ZERO

    number = None
    if not isinstance(value, bool):
        try:
            number = Decimal(str(value))
        except (InvalidOperation, TypeError, ValueError):
            number = None

    if number is None or not number.is_finite() or number < 0:
        logger.warning("Invalid %s %r treated as 0", field_name, value)
        return ZERO
    return number


def round_half_up(value) -> int:
    """Round to a whole amount, halves away from zero (2.5 -> 3)."""
    return int(to_decimal(value).quantize(Decimal("1"), rounding=ROUND_HALF_UP))
