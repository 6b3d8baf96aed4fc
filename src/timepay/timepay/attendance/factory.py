from __future__ import annotations

from dataclasses import dataclass

from .strategies.base import AttendanceStrategy
from .strategies.late_strategy import LateStrategy
from .strategies.normal_strategy import NormalStrategy


@dataclass
class AttendanceStrategyFactory:
    """Factory Pattern: choose appropriate strategy based on rules."""

    def for_checkin(self, *, late_minutes: int) -> AttendanceStrategy:
        if late_minutes <= 0:
            return NormalStrategy()
        return LateStrategy()
