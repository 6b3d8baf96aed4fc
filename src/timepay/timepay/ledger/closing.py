"""Month closing sheet.

The closing balance of each day carries into the next, so rows must be fed
in chronological order: reordering them changes every later balance.
"""

from __future__ import annotations

from typing import Iterable, Iterator, Sequence

from ..core.enums import SideEntrySection
from .model import ClosingRow, ClosingSheet, DailySummary, SideEntry


def running_balance(opening_balance: int, rows: Iterable[DailySummary]) -> Iterator[ClosingRow]:
    balance = int(opening_balance or 0)
    for row in rows:
        income = int(row.income or 0)
        expense = int(row.expense or 0)
        daily = income - expense
        balance += daily
        yield ClosingRow(day=row.day, income=income, expense=expense, daily_balance=daily, closing_balance=balance)


def build_closing_sheet(
    opening_balance: int,
    rows: Sequence[DailySummary],
    side_entries: Iterable[SideEntry] = (),
    pending_receivables: Iterable[int] = (),
) -> ClosingSheet:
    opening = int(opening_balance or 0)
    closing_rows = list(running_balance(opening, rows))
    final_balance = closing_rows[-1].closing_balance if closing_rows else opening

    recovery_total = extra_total = 0
    for entry in side_entries:
        if entry.section == SideEntrySection.RECOVERY:
            recovery_total += int(entry.amount or 0)
        elif entry.section == SideEntrySection.EXTRA_AMOUNT:
            extra_total += int(entry.amount or 0)

    pending_total = sum(int(amount or 0) for amount in pending_receivables)

    return ClosingSheet(
        opening_balance=opening,
        rows=closing_rows,
        total_income=sum(r.income for r in closing_rows),
        total_expense=sum(r.expense for r in closing_rows),
        final_balance=final_balance,
        recovery_total=recovery_total,
        extra_total=extra_total,
        pending_receivables_total=pending_total,
        cash_in_hand=final_balance - recovery_total - extra_total - pending_total,
    )
