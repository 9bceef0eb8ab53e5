import logging

from database import SessionLocal, engine, Base
from models.students import Student
from models.fee_models import MonthlyFee
from services.academic_calendar import ACADEMIC_MONTHS

logger = logging.getLogger(__name__)

DEMO_SESSION = "2024-2025"
DEMO_PAID_MONTHS = ["April", "May", "June"]
DEMO_AMOUNT = 5000

# --- Tables bana deta hai agar missing hain ---
Base.metadata.create_all(bind=engine)


def seed_data(db, session=DEMO_SESSION, paid_months=DEMO_PAID_MONTHS, amount=DEMO_AMOUNT):
    """Demo student with a full ledger for `session`; `paid_months` start out paid."""
    student = db.query(Student).filter_by(srn="HCS0001").first()
    if not student:
        student = Student(
            srn="HCS0001",
            student_name="Test Student",
            class_name="10",
            section="A",
            father_name="Test Father",
            mother_name="Test Mother",
            address="123 Test Street",
        )
        db.add(student)
        db.commit()
        db.refresh(student)
        logger.info("Added student %s", student.srn)

    for month in ACADEMIC_MONTHS:
        exists = db.query(MonthlyFee).filter_by(student_id=student.id, session=session, month=month).first()
        if not exists:
            db.add(MonthlyFee(
                student_id=student.id,
                session=session,
                month=month,
                amount=amount,
                payment_state="paid" if month in paid_months else "pending",
            ))
    db.commit()
    logger.info("Seeded %s ledger for %s", session, student.srn)
    return student


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    db = SessionLocal()
    try:
        seed_data(db)
    finally:
        db.close()
