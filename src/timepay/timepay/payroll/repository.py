from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Commission, SalaryAdvance, SalaryStructure


class SalaryStructureRepository(Protocol):
    def get_for_employee(self, employee_id: int) -> Optional[SalaryStructure]:
        raise NotImplementedError


class SalaryAdvanceRepository(Protocol):
    def list_for_month(self, month: str) -> Sequence[SalaryAdvance]:
        raise NotImplementedError


class CommissionRepository(Protocol):
    def list_for_month(self, month: str) -> Sequence[Commission]:
        raise NotImplementedError
