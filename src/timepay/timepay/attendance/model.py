from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class LateFine:
    late_minutes: int = 0
    fine_amount: int = 0
    auto_status: AttendanceStatus = AttendanceStatus.PRESENT
    note: Optional[str] = None


@dataclass(frozen=True)
class Overtime:
    overtime_minutes: int = 0
    overtime_reward: int = 0


@dataclass(frozen=True)
class AttendanceEntry:
    """What an operator submits for one employee on one day."""

    employee_id: int
    work_date: date
    check_in: Optional[str] = None
    check_out: Optional[str] = None
    status: Optional[AttendanceStatus] = None
    notes: Optional[str] = None


@dataclass(frozen=True)
class AttendanceRecord:
    """Stored daily attendance with the derived money fields."""

    attendance_id: int
    employee_id: int
    work_date: date
    status: AttendanceStatus
    check_in: Optional[str] = None
    check_out: Optional[str] = None
    late_minutes: int = 0
    fine_amount: int = 0
    overtime_minutes: int = 0
    overtime_reward: int = 0
    notes: Optional[str] = None


@dataclass(frozen=True)
class AttendancePreview:
    """Read-model for an unsaved form row."""

    employee_id: int
    suggested_status: AttendanceStatus
    late_minutes: int
    fine_amount: int
    overtime_minutes: int
    overtime_reward: int
    note: Optional[str] = None


@dataclass(frozen=True)
class AttendanceStats:
    total_present: int = 0
    total_absent: int = 0
    total_late: int = 0
    total_half_day: int = 0


@dataclass(frozen=True)
class MonthlyDeduction:
    """Per-employee attendance roll-up for one month, consumed by payroll."""

    employee_id: int
    total_fines: int = 0
    absent_days: int = 0
    late_days: int = 0
    total_overtime_reward: int = 0


@dataclass(frozen=True)
class BulkMarkResult:
    saved: int
    failed: int
