from __future__ import annotations

from dataclasses import dataclass
from datetime import time
from decimal import Decimal, InvalidOperation

from ..core.constants import (
    DEFAULT_DAYS_PER_MONTH,
    DEFAULT_OFFICE_END_TIME,
    DEFAULT_OFFICE_START_TIME,
    DEFAULT_WORKING_HOURS_PER_DAY,
    MINUTES_PER_HOUR,
)
from ..core.exceptions import ValidationError


def parse_office_time(value, field_name: str) -> time:
    """Strict "HH:MM" parsing for configured office times."""
    if isinstance(value, time):
        return value
    try:
        hours, minutes = (int(p) for p in str(value).strip().split(":")[:2])
        return time(hour=hours, minute=minutes)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} must be HH:MM, got {value!r}") from None


def _positive_count(value, field_name: str) -> int:
    """Whole number greater than 0; 8.0 is accepted, 10.5 is not."""
    try:
        number = Decimal(str(value))
    except (InvalidOperation, TypeError, ValueError):
        raise ValidationError(f"{field_name} must be a whole number, got {value!r}") from None
    if isinstance(value, bool) or not number.is_finite() or number != number.to_integral_value():
        raise ValidationError(f"{field_name} must be a whole number, got {value!r}")
    if number <= 0:
        raise ValidationError(f"{field_name} must be greater than 0")
    return int(number)


@dataclass(frozen=True)
class Shift:
    """Office-hours policy the time-and-pay calculator runs against.

    Late fines count from ``start_time``, overtime from ``end_time``. The hourly
    rate is ``salary / days_per_month / working_hours_per_day`` for both.
    """

    shift_name: str = "Office"
    start_time: time = time(9, 0)
    end_time: time = time(20, 0)
    working_hours_per_day: int = DEFAULT_WORKING_HOURS_PER_DAY
    days_per_month: int = DEFAULT_DAYS_PER_MONTH

    def __post_init__(self):
        # Counts are stored as ints so the hourly rate stays in Decimal arithmetic.
        for field_name in ("working_hours_per_day", "days_per_month"):
            object.__setattr__(self, field_name, _positive_count(getattr(self, field_name), field_name))

    @property
    def start_minutes(self) -> int:
        return self.start_time.hour * MINUTES_PER_HOUR + self.start_time.minute

    @property
    def end_minutes(self) -> int:
        return self.end_time.hour * MINUTES_PER_HOUR + self.end_time.minute

    @classmethod
    def from_settings(cls, settings) -> "Shift":
        """Build the policy from a settings module (see ``config``)."""
        return cls(
            shift_name=str(getattr(settings, "OFFICE_SHIFT_NAME", "Office")),
            start_time=parse_office_time(
                getattr(settings, "OFFICE_START_TIME", DEFAULT_OFFICE_START_TIME), "OFFICE_START_TIME"
            ),
            end_time=parse_office_time(
                getattr(settings, "OFFICE_END_TIME", DEFAULT_OFFICE_END_TIME), "OFFICE_END_TIME"
            ),
            working_hours_per_day=getattr(settings, "WORKING_HOURS_PER_DAY", DEFAULT_WORKING_HOURS_PER_DAY),
            days_per_month=getattr(settings, "DAYS_PER_MONTH", DEFAULT_DAYS_PER_MONTH),
        )


DEFAULT_SHIFT = Shift()
