from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import EmployeeStatus


@dataclass(frozen=True)
class Employee:
    """Domain entity: an employee as far as payroll needs it."""

    employee_id: int
    first_name: str
    last_name: str = ""
    basic_salary: int = 0
    status: EmployeeStatus = EmployeeStatus.ACTIVE

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()

    @property
    def is_active(self) -> bool:
        return self.status == EmployeeStatus.ACTIVE
