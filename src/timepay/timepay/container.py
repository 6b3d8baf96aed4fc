from __future__ import annotations

from dataclasses import dataclass

from .attendance.calculator import TimeAndPayCalculator
from .attendance.factory import AttendanceStrategyFactory
from .attendance.repository import AttendanceRepository
from .attendance.service import AttendanceService
from .employees.repository import EmployeeRepository
from .ledger.repository import MonthClosingRepository
from .ledger.service import MonthClosingService
from .payroll.calculator.standard_calculator import StandardPayrollCalculator
from .payroll.repository import CommissionRepository, SalaryAdvanceRepository, SalaryStructureRepository
from .payroll.service import PayrollService
from .shifts.model import Shift


@dataclass(frozen=True)
class Repositories:
    """Storage adapters supplied by the host application."""

    employees: EmployeeRepository
    attendance: AttendanceRepository
    salary_structures: SalaryStructureRepository
    salary_advances: SalaryAdvanceRepository
    commissions: CommissionRepository
    month_closings: MonthClosingRepository


@dataclass(frozen=True)
class Container:
    shift: Shift
    repositories: Repositories

    time_and_pay: TimeAndPayCalculator
    payroll_calculator: StandardPayrollCalculator

    attendance_service: AttendanceService
    payroll_service: PayrollService
    month_closing_service: MonthClosingService


def build_container(*, shift: Shift, repositories: Repositories) -> Container:
    time_and_pay = TimeAndPayCalculator(shift, strategy_factory=AttendanceStrategyFactory())
    payroll_calculator = StandardPayrollCalculator(time_and_pay)

    attendance_service = AttendanceService(
        repositories.attendance,
        repositories.employees,
        calculator=time_and_pay,
    )
    payroll_service = PayrollService(
        repositories.employees,
        repositories.salary_structures,
        repositories.salary_advances,
        repositories.commissions,
        attendance_service,
        calculator=payroll_calculator,
    )
    month_closing_service = MonthClosingService(repositories.month_closings)

    return Container(
        shift=shift,
        repositories=repositories,
        time_and_pay=time_and_pay,
        payroll_calculator=payroll_calculator,
        attendance_service=attendance_service,
        payroll_service=payroll_service,
        month_closing_service=month_closing_service,
    )
