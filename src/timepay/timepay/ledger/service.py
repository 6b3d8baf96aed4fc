from __future__ import annotations

from ..common.validators import require_month
from .closing import build_closing_sheet
from .model import ClosingSheet
from .repository import MonthClosingRepository


class MonthClosingService:
    def __init__(self, closings: MonthClosingRepository):
        self._closings = closings

    def build_sheet(self, month: str) -> ClosingSheet:
        require_month(month)
        opening = self._closings.get_opening_balance(month) or 0
        rows = sorted(self._closings.get_daily_summary(month), key=lambda r: r.day)
        return build_closing_sheet(
            opening,
            rows,
            side_entries=self._closings.list_side_entries(month),
            pending_receivables=self._closings.list_pending_receivable_amounts(),
        )
