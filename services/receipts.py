import datetime

from sqlalchemy.orm import Session

from config import Config
from models.fee_models import ReceiptCounter


def generate_receipt_number(db: Session, today: datetime.date, prefix: str = None) -> str:
    """Generate unique receipt number: REC-2024-0001"""
    prefix = prefix or Config.RECEIPT_PREFIX
    year = today.year

    # Get or create counter for the year
    counter = db.query(ReceiptCounter).filter(ReceiptCounter.year == year).first()
    if not counter:
        counter = ReceiptCounter(year=year, last_number=0)
        db.add(counter)

    counter.last_number = (counter.last_number or 0) + 1
    db.flush()

    return f"{prefix}-{year}-{str(counter.last_number).zfill(4)}"
