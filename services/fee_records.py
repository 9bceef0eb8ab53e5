from dataclasses import dataclass


@dataclass(frozen=True)
class MonthlyFeeRecord:
    """One month's fee as the core sees it, detached from storage."""
    month: str
    amount: int
    payment_state: str = "pending"


def records_by_month(rows) -> dict:
    """Index fee rows (ORM objects or MonthlyFeeRecord) by month name."""
    return {row.month: row for row in rows}
