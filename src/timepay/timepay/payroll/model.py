from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import AdvanceStatus


@dataclass(frozen=True)
class SalaryStructure:
    """Monthly salary structure of one employee."""

    employee_id: int
    basic_salary: int = 0
    house_allowance: int = 0
    transport_allowance: int = 0
    medical_allowance: int = 0
    other_allowances: int = 0
    tax_deduction: int = 0
    pf_deduction: int = 0
    other_deductions: int = 0

    @property
    def total_allowances(self) -> int:
        return self.house_allowance + self.transport_allowance + self.medical_allowance + self.other_allowances

    @property
    def gross_salary(self) -> int:
        return self.basic_salary + self.total_allowances

    @property
    def total_deductions(self) -> int:
        return self.tax_deduction + self.pf_deduction + self.other_deductions

    @property
    def net_salary(self) -> int:
        return self.gross_salary - self.total_deductions

    @classmethod
    def basic_only(cls, employee_id: int, basic_salary: int) -> "SalaryStructure":
        return cls(employee_id=employee_id, basic_salary=int(basic_salary or 0))


@dataclass(frozen=True)
class SalaryAdvance:
    employee_id: int
    month: str
    amount: int
    status: AdvanceStatus = AdvanceStatus.ACTIVE


@dataclass(frozen=True)
class Commission:
    employee_id: int
    month: str
    commission_name: str
    amount: int


@dataclass(frozen=True)
class SalarySlip:
    employee_id: int
    month: str
    basic_salary: int
    gross_salary: int
    per_day_salary: int
    present_days: int
    absent_days: int
    late_days: int
    absent_deduction: int
    late_fines: int
    advances: int
    structure_deductions: int
    overtime_reward: int
    commissions: int
    total_deductions: int
    net_payable: int
