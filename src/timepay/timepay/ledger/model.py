from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..core.enums import InvoiceStatus, SideEntrySection


@dataclass(frozen=True)
class DailySummary:
    """Income and expense booked on one day of the month."""

    day: date
    income: int = 0
    expense: int = 0


@dataclass(frozen=True)
class ClosingRow:
    day: date
    income: int
    expense: int
    daily_balance: int
    closing_balance: int


@dataclass(frozen=True)
class SideEntry:
    section: SideEntrySection
    name: str
    amount: int


@dataclass(frozen=True)
class ClosingSheet:
    opening_balance: int
    rows: list[ClosingRow]
    total_income: int
    total_expense: int
    final_balance: int
    recovery_total: int
    extra_total: int
    pending_receivables_total: int
    cash_in_hand: int


@dataclass(frozen=True)
class Invoice:
    customer_id: int
    total_amount: int
    paid_amount: int
    due_date: date
    status: InvoiceStatus
    customer_name: Optional[str] = None

    @property
    def outstanding(self) -> int:
        return int(self.total_amount or 0) - int(self.paid_amount or 0)


@dataclass(frozen=True)
class AgingRow:
    customer_id: int
    customer_name: str
    current: int = 0
    days_30: int = 0
    days_60: int = 0
    days_90: int = 0
    over_90: int = 0
    total: int = 0
