from __future__ import annotations

from typing import Optional

from ..attendance.model import MonthlyDeduction
from ..attendance.service import AttendanceService
from ..common.validators import require_month
from ..core.enums import AdvanceStatus
from ..core.exceptions import NotFoundError
from ..employees.model import Employee
from ..employees.repository import EmployeeRepository
from .calculator.base import PayrollCalculator
from .calculator.standard_calculator import StandardPayrollCalculator
from .model import SalarySlip, SalaryStructure
from .repository import CommissionRepository, SalaryAdvanceRepository, SalaryStructureRepository


class PayrollService:
    def __init__(
        self,
        employees: EmployeeRepository,
        structures: SalaryStructureRepository,
        advances: SalaryAdvanceRepository,
        commissions: CommissionRepository,
        attendance: AttendanceService,
        *,
        calculator: Optional[PayrollCalculator] = None,
    ):
        self._employees = employees
        self._structures = structures
        self._advances = advances
        self._commissions = commissions
        self._attendance = attendance
        self._calculator = calculator or StandardPayrollCalculator(attendance.calculator)

    def build_salary_slip(self, employee_id: int, month: str) -> SalarySlip:
        year, month_num = require_month(month)
        employee = self._employees.get_by_id(employee_id)
        if not employee:
            raise NotFoundError(f"Employee {employee_id} does not exist")

        deduction = self._attendance.deduction_for(employee_id, year, month_num)
        return self._slip_for(employee, month, deduction, self._advance_totals(month), self._commission_totals(month))

    def build_month_slips(self, month: str) -> list[SalarySlip]:
        """Salary slips for every active employee, ordered by employee id."""
        year, month_num = require_month(month)
        deductions = {d.employee_id: d for d in self._attendance.monthly_deductions(year, month_num)}
        advance_totals = self._advance_totals(month)
        commission_totals = self._commission_totals(month)

        slips = []
        for employee in sorted(self._employees.list_all(), key=lambda e: e.employee_id):
            if not employee.is_active:
                continue
            deduction = deductions.get(employee.employee_id) or MonthlyDeduction(employee_id=employee.employee_id)
            slips.append(self._slip_for(employee, month, deduction, advance_totals, commission_totals))
        return slips

    def _slip_for(self, employee: Employee, month: str, deduction, advance_totals, commission_totals) -> SalarySlip:
        structure = self._structures.get_for_employee(employee.employee_id)
        if structure is None:
            structure = SalaryStructure.basic_only(employee.employee_id, employee.basic_salary)
        return self._calculator.build_slip(
            structure,
            deduction,
            month=month,
            advances=advance_totals.get(employee.employee_id, 0),
            commissions=commission_totals.get(employee.employee_id, 0),
        )

    def _advance_totals(self, month: str) -> dict[int, int]:
        totals: dict[int, int] = {}
        for a in self._advances.list_for_month(month):
            if a.status == AdvanceStatus.CANCELLED:
                continue
            totals[a.employee_id] = totals.get(a.employee_id, 0) + int(a.amount or 0)
        return totals

    def _commission_totals(self, month: str) -> dict[int, int]:
        totals: dict[int, int] = {}
        for c in self._commissions.list_for_month(month):
            totals[c.employee_id] = totals.get(c.employee_id, 0) + int(c.amount or 0)
        return totals
