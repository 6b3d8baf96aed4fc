from __future__ import annotations

from ...core.enums import AttendanceStatus
from ...shifts.model import Shift
from .base import AttendanceStrategy, StatusDecision


class LateStrategy(AttendanceStrategy):
    """Late check-in."""

    def decide_checkin(self, *, late_minutes: int, shift: Shift) -> StatusDecision:
        return StatusDecision(
            status=AttendanceStatus.LATE,
            note=f"Late by {late_minutes} min (office starts {shift.start_time.strftime('%H:%M')})",
        )
