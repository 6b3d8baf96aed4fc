from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from ..core.enums import AttendanceStatus
from .model import AttendanceRecord


class AttendanceRepository(Protocol):
    def get_by_id(self, attendance_id: int) -> Optional[AttendanceRecord]:
        raise NotImplementedError

    def get_for_employee_and_date(self, employee_id: int, work_date: date) -> Optional[AttendanceRecord]:
        raise NotImplementedError

    def create(
        self,
        *,
        employee_id: int,
        work_date: date,
        status: AttendanceStatus,
        check_in: Optional[str] = None,
        check_out: Optional[str] = None,
        late_minutes: int = 0,
        fine_amount: int = 0,
        overtime_minutes: int = 0,
        overtime_reward: int = 0,
        notes: Optional[str] = None,
    ) -> AttendanceRecord:
        raise NotImplementedError

    def update(self, record: AttendanceRecord) -> AttendanceRecord:
        """Persist every field of ``record`` (matched by attendance_id)."""

        raise NotImplementedError

    def list_between(self, *, start_date: date, end_date: date) -> Sequence[AttendanceRecord]:
        raise NotImplementedError
