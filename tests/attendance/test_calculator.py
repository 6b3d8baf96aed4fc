from __future__ import annotations

from datetime import time

import pytest

from src.timepay.timepay.attendance.calculator import TimeAndPayCalculator
from src.timepay.timepay.attendance.model import LateFine, Overtime
from src.timepay.timepay.core.enums import AttendanceStatus
from src.timepay.timepay.core.exceptions import ValidationError
from src.timepay.timepay.shifts.model import Shift


@pytest.fixture
def calc():
    return TimeAndPayCalculator()


@pytest.mark.parametrize("check_in", ["", None])
def test_missing_checkin_is_present_without_fine(calc, check_in):
    assert calc.compute_late_fine(check_in, 33000) == LateFine(0, 0, AttendanceStatus.PRESENT)


@pytest.mark.parametrize("salary", [0, 33000, 120000])
def test_checkin_exactly_at_start_is_not_late(calc, salary):
    assert calc.compute_late_fine("09:00", salary) == LateFine(0, 0, AttendanceStatus.PRESENT)


def test_early_checkin_is_present(calc):
    assert calc.compute_late_fine("08:45", 33000) == LateFine(0, 0, AttendanceStatus.PRESENT)


def test_late_checkin_fine_uses_hourly_rate(calc):
    # 33000 / 30 / 11 = 100 per hour, 15 min late -> 25
    result = calc.compute_late_fine("09:15", 33000)

    assert result.late_minutes == 15
    assert result.fine_amount == 25
    assert result.auto_status == AttendanceStatus.LATE


@pytest.mark.parametrize("check_in", ["bad-input", "9", "ab:cd", "09:xx"])
def test_malformed_checkin_fails_to_neutral(calc, check_in):
    assert calc.compute_late_fine(check_in, 33000) == LateFine()


def test_checkin_with_seconds_ignores_seconds(calc):
    assert calc.compute_late_fine("09:15:59", 33000).late_minutes == 15


@pytest.mark.parametrize("check_out", ["20:00", "19:30", "20:00:45"])
def test_checkout_at_or_before_end_is_not_overtime(calc, check_out):
    assert calc.compute_overtime(check_out, 33000) == Overtime(0, 0)


def test_overtime_reward_uses_hourly_rate(calc):
    result = calc.compute_overtime("21:30", 33000)

    assert result.overtime_minutes == 90
    assert result.overtime_reward == 150


@pytest.mark.parametrize("check_out", ["", None, "bad-input", "20", "21:", ":30", "2x:10"])
def test_malformed_checkout_fails_to_neutral(calc, check_out):
    assert calc.compute_overtime(check_out, 33000) == Overtime(0, 0)


@pytest.mark.parametrize("salary", [25000, 33000, 47123])
def test_hour_late_costs_the_same_as_an_hour_of_overtime(calc, salary):
    late = calc.compute_late_fine("10:00", salary)
    overtime = calc.compute_overtime("21:00", salary)

    assert late.late_minutes == overtime.overtime_minutes == 60
    assert late.fine_amount == overtime.overtime_reward


def test_rounding_is_half_up_not_bankers(calc):
    # 9900 / 330 = 30 per hour -> 1 min = 0.5; 49500 -> 150 per hour -> 1 min = 2.5
    assert calc.compute_late_fine("09:01", 9900).fine_amount == 1
    assert calc.compute_late_fine("09:01", 49500).fine_amount == 3
    assert calc.compute_overtime("20:01", 49500).overtime_reward == 3


@pytest.mark.parametrize("salary", [None, -33000, float("nan"), float("inf"), "abc", ""])
def test_invalid_salary_is_treated_as_zero(calc, salary):
    late = calc.compute_late_fine("09:30", salary)
    overtime = calc.compute_overtime("21:00", salary)

    assert late.late_minutes == 30
    assert late.auto_status == AttendanceStatus.LATE
    assert late.fine_amount == 0
    assert overtime.overtime_minutes == 60
    assert overtime.overtime_reward == 0


def test_negative_salary_logs_warning(calc, caplog):
    calc.compute_late_fine("09:30", -1)

    assert "treated as 0" in caplog.text


def test_numeric_string_salary_is_accepted(calc):
    assert calc.compute_late_fine("09:15", "33000").fine_amount == 25


def test_per_day_salary_rounds_half_up(calc):
    assert calc.per_day_salary(33000) == 1100
    assert calc.per_day_salary(1000) == 33
    assert calc.per_day_salary(1005) == 34
    assert calc.per_day_salary(-5) == 0


def test_custom_shift_is_injected():
    shift = Shift(shift_name="Day", start_time=time(8, 0), end_time=time(17, 0), working_hours_per_day=8)
    calc = TimeAndPayCalculator(shift)

    # 24000 / 30 / 8 = 100 per hour
    assert calc.compute_late_fine("08:30", 24000).fine_amount == 50
    assert calc.compute_overtime("18:00", 24000) == Overtime(60, 100)
    # default policy is untouched
    assert TimeAndPayCalculator().compute_late_fine("08:30", 24000).fine_amount == 0


def test_late_fine_carries_strategy_note(calc):
    assert calc.compute_late_fine("09:15", 33000).note == "Late by 15 min (office starts 09:00)"
    assert calc.compute_late_fine("08:59", 33000).note is None


def test_clock_suffix_after_digits_is_ignored(calc):
    assert calc.compute_overtime("21:30pm", 33000) == Overtime(90, 150)
    assert calc.compute_late_fine("09:15 am", 33000).late_minutes == 15


def test_whole_float_counts_are_stored_as_ints():
    shift = Shift(working_hours_per_day=8.0, days_per_month="30")

    assert shift.working_hours_per_day == 8
    assert isinstance(shift.working_hours_per_day, int)
    assert shift.days_per_month == 30
    # 24000 / 30 / 8 = 100 per hour
    assert TimeAndPayCalculator(shift).compute_late_fine("09:30", 24000).fine_amount == 50


@pytest.mark.parametrize(
    "counts",
    [
        {"working_hours_per_day": 10.5},
        {"days_per_month": 29.5},
        {"working_hours_per_day": float("nan")},
        {"days_per_month": float("inf")},
        {"working_hours_per_day": "eleven"},
        {"days_per_month": None},
        {"working_hours_per_day": True},
    ],
)
def test_fractional_or_non_numeric_counts_are_rejected(counts):
    with pytest.raises(ValidationError):
        Shift(**counts)
