"""Late fine and overtime reward arithmetic.

Both amounts use one hourly rate, ``basic_salary / days_per_month /
working_hours_per_day``, so an hour late costs exactly what an hour of
overtime earns.

Every public method is total: missing or malformed clock strings give a
zero-effect result (present, no fine, no overtime) instead of raising.
"""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import Optional

from ..common.datetime_utils import clock_to_minutes, format_duration
from ..common.money import non_negative_amount, round_half_up
from ..core.constants import MINUTES_PER_HOUR
from ..shifts.model import DEFAULT_SHIFT, Shift
from .factory import AttendanceStrategyFactory
from .model import LateFine, Overtime

logger = logging.getLogger(__name__)


class TimeAndPayCalculator:
    def __init__(self, shift: Shift = DEFAULT_SHIFT, *, strategy_factory: Optional[AttendanceStrategyFactory] = None):
        self._shift = shift
        self._factory = strategy_factory or AttendanceStrategyFactory()

    @property
    def shift(self) -> Shift:
        return self._shift

    def per_hour_rate(self, basic_salary) -> Decimal:
        salary = non_negative_amount(basic_salary, field_name="basic_salary")
        return salary / self._shift.days_per_month / self._shift.working_hours_per_day

    def per_day_salary(self, salary) -> int:
        """Daily salary used for absence deductions, rounded half up."""
        amount = non_negative_amount(salary, field_name="salary")
        return round_half_up(amount / self._shift.days_per_month)

    def amount_for_minutes(self, minutes: int, basic_salary) -> int:
        if minutes <= 0:
            return 0
        return round_half_up(self.per_hour_rate(basic_salary) * Decimal(minutes) / MINUTES_PER_HOUR)

    def compute_late_fine(self, check_in: Optional[str], basic_salary) -> LateFine:
        check_in_minutes = clock_to_minutes(check_in)
        if check_in_minutes is None:
            return LateFine()

        late_minutes = max(0, check_in_minutes - self._shift.start_minutes)
        decision = self._factory.for_checkin(late_minutes=late_minutes).decide_checkin(
            late_minutes=late_minutes, shift=self._shift
        )
        if late_minutes <= 0:
            return LateFine(auto_status=decision.status)

        fine = self.amount_for_minutes(late_minutes, basic_salary)
        logger.debug("check-in %s is %d min late, fine %d", check_in, late_minutes, fine)
        return LateFine(
            late_minutes=late_minutes, fine_amount=fine, auto_status=decision.status, note=decision.note
        )

    def compute_overtime(self, check_out: Optional[str], basic_salary) -> Overtime:
        check_out_minutes = clock_to_minutes(check_out)
        if check_out_minutes is None or check_out_minutes <= self._shift.end_minutes:
            return Overtime()

        overtime_minutes = check_out_minutes - self._shift.end_minutes
        reward = self.amount_for_minutes(overtime_minutes, basic_salary)
        logger.debug("check-out %s is %s overtime, reward %d", check_out, format_duration(overtime_minutes), reward)
        return Overtime(overtime_minutes=overtime_minutes, overtime_reward=reward)
