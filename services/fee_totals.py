"""
Fee Ledger Aggregation

Totals and summaries over a session's month -> record mapping.
"""
import datetime

from services.academic_calendar import ACADEMIC_MONTHS, QUARTERS, month_end
from services.fee_status import DEFAULT_DUE_WINDOW_DAYS, DUE, OVERDUE, PAID, derive_status


def total_selected(selection, records) -> int:
    """Sum of the amounts of the selected months."""
    return sum(records[month].amount for month in selection)


def total_outstanding(records) -> int:
    return sum(r.amount for r in records.values() if r.payment_state != PAID)


def quarter_summary(records, session: str, today: datetime.date,
                    window_days: int = DEFAULT_DUE_WINDOW_DAYS) -> list:
    """One card per quarter: months with status, total and whether anything is payable."""
    cards = []
    for title, months in QUARTERS.items():
        rows = []
        for month in months:
            record = records.get(month)
            if record is None:
                continue
            rows.append({
                "month": month,
                "amount": record.amount,
                "status": derive_status(month, record.payment_state, session, today, window_days),
            })

        cards.append({
            "title": title,
            "months": rows,
            "total": sum(r["amount"] for r in rows),
            "is_payable": any(r["status"] in (DUE, OVERDUE) for r in rows),
        })
    return cards


def next_due_reminder(records, session: str, today: datetime.date,
                      window_days: int = DEFAULT_DUE_WINDOW_DAYS):
    """
    First unpaid month (academic order) whose due window has opened.

    Returns None when nothing is due or overdue yet.
    """
    for month in ACADEMIC_MONTHS:
        record = records.get(month)
        if record is None or record.payment_state == PAID:
            continue

        status = derive_status(month, record.payment_state, session, today, window_days)
        if status in (DUE, OVERDUE):
            return {
                "month": month,
                "amount": record.amount,
                "due_date": month_end(month, session),
                "status": status,
            }
    return None
