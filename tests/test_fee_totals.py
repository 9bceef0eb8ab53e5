import datetime

import pytest

from services.academic_calendar import ACADEMIC_MONTHS
from services.fee_records import MonthlyFeeRecord, records_by_month
from services.fee_totals import next_due_reminder, quarter_summary, total_outstanding, total_selected

SESSION = "2024-2025"


@pytest.fixture
def records():
    rows = [
        MonthlyFeeRecord(m, 5000, "paid" if m in ("April", "May", "June") else "pending")
        for m in ACADEMIC_MONTHS
    ]
    return records_by_month(rows)


def test_total_selected(records):
    assert total_selected([], records) == 0
    assert total_selected(["July"], records) == 5000
    assert total_selected(["July", "August", "September"], records) == 15000


def test_total_of_all_unpaid_matches_outstanding(records):
    unpaid = [m for m in ACADEMIC_MONTHS if records[m].payment_state != "paid"]
    assert total_selected(unpaid, records) == total_outstanding(records) == 45000


def test_missing_month_fails_fast(records):
    del records["July"]
    with pytest.raises(KeyError):
        total_selected(["July"], records)


def test_quarter_summary(records):
    cards = quarter_summary(records, SESSION, datetime.date(2024, 7, 28))
    assert [c["title"] for c in cards] == ["Quarter 1", "Quarter 2", "Quarter 3", "Quarter 4"]

    q1, q2 = cards[0], cards[1]
    assert q1["total"] == 15000
    assert not q1["is_payable"]
    assert [m["status"] for m in q2["months"]] == ["due", "pending", "pending"]
    assert q2["is_payable"]


def test_reminder_none_before_window(records):
    assert next_due_reminder(records, SESSION, datetime.date(2024, 7, 10)) is None


def test_reminder_points_at_first_unpaid(records):
    reminder = next_due_reminder(records, SESSION, datetime.date(2024, 8, 30))
    assert reminder == {
        "month": "July",
        "amount": 5000,
        "due_date": datetime.date(2024, 7, 31),
        "status": "overdue",
    }
