from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import DailySummary, SideEntry


class MonthClosingRepository(Protocol):
    def get_opening_balance(self, month: str) -> Optional[int]:
        raise NotImplementedError

    def get_daily_summary(self, month: str) -> Sequence[DailySummary]:
        """Daily income/expense rows of the month, in any order."""

        raise NotImplementedError

    def list_side_entries(self, month: str) -> Sequence[SideEntry]:
        raise NotImplementedError

    def list_pending_receivable_amounts(self) -> Sequence[int]:
        raise NotImplementedError
