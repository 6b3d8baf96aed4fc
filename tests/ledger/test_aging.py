from datetime import date

import pytest

from src.timepay.timepay.core.enums import InvoiceStatus
from src.timepay.timepay.ledger.aging import aging_bucket, aging_report, aging_totals
from src.timepay.timepay.ledger.model import Invoice

AS_OF = date(2026, 3, 31)


@pytest.mark.parametrize(
    "days,bucket",
    [(0, "current"), (1, "days_30"), (30, "days_30"), (31, "days_60"), (60, "days_60"), (61, "days_90"), (90, "days_90"), (91, "over_90")],
)
def test_bucket_boundaries(days, bucket):
    assert aging_bucket(days) == bucket


def _inv(customer_id, total, paid, due, status=InvoiceStatus.ISSUED, name=None):
    return Invoice(customer_id=customer_id, customer_name=name, total_amount=total, paid_amount=paid, due_date=due, status=status)


def test_aging_report_groups_outstanding_by_customer():
    rows = aging_report(
        [
            _inv(7, 1500, 0, date(2026, 4, 10), name="Bilal"),
            _inv(7, 1500, 500, date(2026, 3, 1), InvoiceStatus.PARTIAL, name="Bilal"),
            _inv(5, 2000, 0, date(2025, 12, 1), InvoiceStatus.OVERDUE, name="Hina"),
            _inv(5, 2000, 2000, date(2025, 12, 1), InvoiceStatus.PARTIAL, name="Hina"),
            _inv(5, 900, 0, date(2026, 1, 30), InvoiceStatus.PAID, name="Hina"),
            _inv(9, 400, 0, date(2026, 1, 30), InvoiceStatus.DRAFT),
            _inv(8, 300, 0, date(2026, 1, 30)),
        ],
        as_of=AS_OF,
    )

    assert [r.customer_id for r in rows] == [7, 5, 8]

    bilal, hina, unknown = rows
    assert (bilal.current, bilal.days_30, bilal.total) == (1500, 1000, 2500)
    assert (hina.over_90, hina.total) == (2000, 2000)
    assert (unknown.customer_name, unknown.days_60) == ("Unknown", 300)

    totals = aging_totals(rows)
    assert totals.total == 4800
    assert totals.current == 1500
    assert totals.days_30 == 1000
    assert totals.days_60 == 300
    assert totals.over_90 == 2000
