from __future__ import annotations

import logging
from dataclasses import replace
from typing import Iterable, Optional

from ..common.datetime_utils import month_bounds
from ..core.enums import AttendanceStatus
from ..core.exceptions import DomainError, NotFoundError, ValidationError
from ..employees.repository import EmployeeRepository
from .calculator import TimeAndPayCalculator
from .model import (
    AttendanceEntry,
    AttendancePreview,
    AttendanceRecord,
    AttendanceStats,
    BulkMarkResult,
    LateFine,
    MonthlyDeduction,
)
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


def _coerce_status(value) -> Optional[AttendanceStatus]:
    if value is None or value == "":
        return None
    try:
        return AttendanceStatus(value)
    except ValueError:
        raise ValidationError(f"Unknown attendance status {value!r}") from None


class AttendanceService:
    def __init__(
        self,
        attendance: AttendanceRepository,
        employees: EmployeeRepository,
        *,
        calculator: TimeAndPayCalculator | None = None,
    ):
        self._attendance = attendance
        self._employees = employees
        self._calculator = calculator or TimeAndPayCalculator()

    @property
    def calculator(self) -> TimeAndPayCalculator:
        return self._calculator

    def _get_employee(self, employee_id: int):
        employee = self._employees.get_by_id(employee_id)
        if not employee:
            raise NotFoundError(f"Employee {employee_id} does not exist")
        return employee

    def _late_fields(self, status: AttendanceStatus, check_in: Optional[str], basic_salary) -> LateFine:
        # A fine is only charged when the day is actually recorded as late.
        if status != AttendanceStatus.LATE or not check_in:
            return LateFine(auto_status=status)
        return self._calculator.compute_late_fine(check_in, basic_salary)

    def preview(self, entry: AttendanceEntry, basic_salary) -> AttendancePreview:
        """Derived values for a form row that has not been saved yet."""
        late = self._calculator.compute_late_fine(entry.check_in, basic_salary)
        overtime = self._calculator.compute_overtime(entry.check_out, basic_salary)

        suggested = _coerce_status(entry.status) or AttendanceStatus.PRESENT
        if late.auto_status == AttendanceStatus.LATE:
            suggested = AttendanceStatus.LATE

        return AttendancePreview(
            employee_id=entry.employee_id,
            suggested_status=suggested,
            late_minutes=late.late_minutes,
            fine_amount=late.fine_amount,
            overtime_minutes=overtime.overtime_minutes,
            overtime_reward=overtime.overtime_reward,
            note=late.note,
        )

    def mark(self, entry: AttendanceEntry) -> AttendanceRecord:
        employee = self._get_employee(entry.employee_id)

        existing = self._attendance.get_for_employee_and_date(entry.employee_id, entry.work_date)
        if existing:
            raise ValidationError(
                f"Attendance for employee {entry.employee_id} on {entry.work_date.isoformat()} is already marked"
            )

        status = _coerce_status(entry.status)
        if status is None:
            status = self._calculator.compute_late_fine(entry.check_in, employee.basic_salary).auto_status

        late = self._late_fields(status, entry.check_in, employee.basic_salary)
        overtime = self._calculator.compute_overtime(entry.check_out, employee.basic_salary)

        return self._attendance.create(
            employee_id=entry.employee_id,
            work_date=entry.work_date,
            status=status,
            check_in=entry.check_in or None,
            check_out=entry.check_out or None,
            late_minutes=late.late_minutes,
            fine_amount=late.fine_amount,
            overtime_minutes=overtime.overtime_minutes,
            overtime_reward=overtime.overtime_reward,
            notes=entry.notes or None,
        )

    def mark_many(self, entries: Iterable[AttendanceEntry]) -> BulkMarkResult:
        """Mark each entry independently; one bad row does not stop the batch."""
        saved = failed = 0
        for entry in entries:
            try:
                self.mark(entry)
                saved += 1
            except DomainError as e:
                failed += 1
                logger.warning("Attendance for employee %s on %s not saved: %s", entry.employee_id, entry.work_date, e)
        return BulkMarkResult(saved=saved, failed=failed)

    def update(
        self,
        attendance_id: int,
        *,
        check_in: Optional[str] = None,
        check_out: Optional[str] = None,
        status: Optional[AttendanceStatus] = None,
        notes: Optional[str] = None,
    ) -> AttendanceRecord:
        record = self._attendance.get_by_id(attendance_id)
        if not record:
            raise NotFoundError(f"Attendance record {attendance_id} not found")
        employee = self._get_employee(record.employee_id)

        merged_status = _coerce_status(status) or record.status
        merged_check_in = check_in or record.check_in
        merged_check_out = check_out or record.check_out

        late = self._late_fields(merged_status, merged_check_in, employee.basic_salary)
        overtime = self._calculator.compute_overtime(merged_check_out, employee.basic_salary)

        updated = replace(
            record,
            status=merged_status,
            check_in=merged_check_in,
            check_out=merged_check_out,
            late_minutes=late.late_minutes,
            fine_amount=late.fine_amount,
            overtime_minutes=overtime.overtime_minutes,
            overtime_reward=overtime.overtime_reward,
            notes=notes or record.notes,
        )
        return self._attendance.update(updated)

    def _month_rows(self, year: int, month: int):
        start, end = month_bounds(year, month)
        return self._attendance.list_between(start_date=start, end_date=end)

    def monthly_stats(self, year: int, month: int) -> AttendanceStats:
        rows = self._month_rows(year, month)
        counts = {status: 0 for status in AttendanceStatus}
        for r in rows:
            counts[r.status] += 1
        return AttendanceStats(
            total_present=counts[AttendanceStatus.PRESENT],
            total_absent=counts[AttendanceStatus.ABSENT],
            total_late=counts[AttendanceStatus.LATE],
            total_half_day=counts[AttendanceStatus.HALF_DAY],
        )

    def monthly_deductions(self, year: int, month: int) -> list[MonthlyDeduction]:
        summary_map: dict[int, dict] = {}
        for r in self._month_rows(year, month):
            s = summary_map.get(r.employee_id)
            if not s:
                s = {"total_fines": 0, "absent_days": 0, "late_days": 0, "total_overtime_reward": 0}
                summary_map[r.employee_id] = s

            if r.status == AttendanceStatus.ABSENT:
                s["absent_days"] += 1
            if r.status == AttendanceStatus.LATE:
                s["late_days"] += 1
                s["total_fines"] += int(r.fine_amount or 0)
            s["total_overtime_reward"] += int(r.overtime_reward or 0)

        return [MonthlyDeduction(employee_id=emp_id, **summary_map[emp_id]) for emp_id in sorted(summary_map)]

    def deduction_for(self, employee_id: int, year: int, month: int) -> MonthlyDeduction:
        for d in self.monthly_deductions(year, month):
            if d.employee_id == employee_id:
                return d
        return MonthlyDeduction(employee_id=employee_id)
