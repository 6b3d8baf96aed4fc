from __future__ import annotations

from abc import ABC, abstractmethod

from ...attendance.model import MonthlyDeduction
from ..model import SalarySlip, SalaryStructure


class PayrollCalculator(ABC):
    """Calculator interface (Strategy Pattern for payroll)."""

    @abstractmethod
    def build_slip(
        self,
        structure: SalaryStructure,
        deduction: MonthlyDeduction,
        *,
        month: str,
        advances: int = 0,
        commissions: int = 0,
    ) -> SalarySlip:
        raise NotImplementedError
