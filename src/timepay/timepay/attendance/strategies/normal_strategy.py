from __future__ import annotations

from ...core.enums import AttendanceStatus
from ...shifts.model import Shift
from .base import AttendanceStrategy, StatusDecision


class NormalStrategy(AttendanceStrategy):
    """Check-in at or before office start."""

    def decide_checkin(self, *, late_minutes: int, shift: Shift) -> StatusDecision:
        return StatusDecision(status=AttendanceStatus.PRESENT)
