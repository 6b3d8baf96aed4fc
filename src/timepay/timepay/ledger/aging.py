from __future__ import annotations

from datetime import date
from typing import Iterable, Sequence

from ..core.constants import AGING_BUCKET_LIMITS
from ..core.enums import InvoiceStatus
from .model import AgingRow, Invoice

OPEN_STATUSES = frozenset({InvoiceStatus.ISSUED, InvoiceStatus.PARTIAL, InvoiceStatus.OVERDUE})

_BUCKETS = ("days_30", "days_60", "days_90")


def aging_bucket(days_overdue: int) -> str:
    """Name of the AgingRow field an amount this many days overdue lands in."""
    if days_overdue <= 0:
        return "current"
    for limit, name in zip(AGING_BUCKET_LIMITS, _BUCKETS):
        if days_overdue <= limit:
            return name
    return "over_90"


def aging_report(invoices: Iterable[Invoice], *, as_of: date) -> list[AgingRow]:
    """Outstanding receivables per customer, bucketed by days past due.

    Customers appear in the order their first open invoice is seen.
    """
    buckets: dict[int, dict] = {}
    for inv in invoices:
        if inv.status not in OPEN_STATUSES:
            continue
        outstanding = inv.outstanding
        if outstanding <= 0:
            continue

        days_overdue = max(0, (as_of - inv.due_date).days)
        b = buckets.get(inv.customer_id)
        if not b:
            b = {
                "customer_name": inv.customer_name or "Unknown",
                "current": 0,
                "days_30": 0,
                "days_60": 0,
                "days_90": 0,
                "over_90": 0,
                "total": 0,
            }
            buckets[inv.customer_id] = b
        b[aging_bucket(days_overdue)] += outstanding
        b["total"] += outstanding

    return [AgingRow(customer_id=customer_id, **b) for customer_id, b in buckets.items()]


def aging_totals(rows: Sequence[AgingRow]) -> AgingRow:
    return AgingRow(
        customer_id=0,
        customer_name="Total",
        current=sum(r.current for r in rows),
        days_30=sum(r.days_30 for r in rows),
        days_60=sum(r.days_60 for r in rows),
        days_90=sum(r.days_90 for r in rows),
        over_90=sum(r.over_90 for r in rows),
        total=sum(r.total for r in rows),
    )
