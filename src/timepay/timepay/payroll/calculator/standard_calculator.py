from __future__ import annotations

from ...attendance.calculator import TimeAndPayCalculator
from ...attendance.model import MonthlyDeduction
from ..model import SalarySlip, SalaryStructure
from .base import PayrollCalculator


class StandardPayrollCalculator(PayrollCalculator):
    """Standard rule.

    - per-day salary = net salary / days per month, rounded half up
    - each absent day deducts one per-day salary
    - net payable = gross - (advances + late fines + absences + structural deductions)
      + overtime reward + commissions
    """

    def __init__(self, time_and_pay: TimeAndPayCalculator | None = None):
        self._time_and_pay = time_and_pay or TimeAndPayCalculator()

    def build_slip(
        self,
        structure: SalaryStructure,
        deduction: MonthlyDeduction,
        *,
        month: str,
        advances: int = 0,
        commissions: int = 0,
    ) -> SalarySlip:
        days_per_month = self._time_and_pay.shift.days_per_month
        per_day = self._time_and_pay.per_day_salary(structure.net_salary)
        absent_days = int(deduction.absent_days or 0)
        absent_deduction = absent_days * per_day
        late_fines = int(deduction.total_fines or 0)
        overtime_reward = int(deduction.total_overtime_reward or 0)
        advances = int(advances or 0)
        commissions = int(commissions or 0)

        total_deductions = advances + late_fines + absent_deduction + structure.total_deductions
        net_payable = structure.gross_salary - total_deductions + overtime_reward + commissions

        return SalarySlip(
            employee_id=structure.employee_id,
            month=month,
            basic_salary=structure.basic_salary,
            gross_salary=structure.gross_salary,
            per_day_salary=per_day,
            present_days=max(days_per_month - absent_days, 0),
            absent_days=absent_days,
            late_days=int(deduction.late_days or 0),
            absent_deduction=absent_deduction,
            late_fines=late_fines,
            advances=advances,
            structure_deductions=structure.total_deductions,
            overtime_reward=overtime_reward,
            commissions=commissions,
            total_deductions=total_deductions,
            net_payable=net_payable,
        )
