"""
Fee Status Calculator

Maps a stored payment state to the status a student sees for a month:
paid, due, overdue or pending (upcoming).
"""
import datetime

from services.academic_calendar import month_end

PAID = "paid"
PENDING = "pending"
DUE = "due"
OVERDUE = "overdue"

PAYMENT_STATES = (PAID, PENDING)

DEFAULT_DUE_WINDOW_DAYS = 5


def derive_status(month: str, payment_state: str, session: str, today: datetime.date,
                  window_days: int = DEFAULT_DUE_WINDOW_DAYS) -> str:
    """
    Derive the display status of one month's fee.

    - paid records are always "paid"
    - after the last day of the month: "overdue"
    - within `window_days` before month end: "due"
    - otherwise "pending"

    Both date comparisons are strict, so the month-end day itself is "due"
    and the day exactly `window_days` before it is still "pending".
    """
    if payment_state == PAID:
        return PAID

    if isinstance(today, datetime.datetime):
        today = today.date()

    end = month_end(month, session)
    if today > end:
        return OVERDUE
    if today > end - datetime.timedelta(days=window_days):
        return DUE
    return PENDING
