"""
Fee Ledger Router - Monthly fee status, ordered selection and collection
With due/overdue detection and unique receipt generation
"""
import datetime
import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from config import Config
from database import get_db
from models.fee_models import MonthlyFee, StudentFeeLedger
from models.students import Student
from schemas.fees import (
    HistoryOut, LedgerOut, MonthStatusOut, PaymentRequest, ProvisionRequest,
    ReminderOut, SelectionOut, StatusUpdate, ToggleRequest,
)
from services.academic_calendar import ACADEMIC_MONTHS, current_session, month_number, parse_session
from services.amount_words import number_to_words
from services.errors import InvalidMonthError, InvalidSessionError, SelectionError
from services.fee_records import records_by_month
from services.fee_status import PAID, PAYMENT_STATES, PENDING, derive_status
from services.fee_totals import next_due_reminder, quarter_summary, total_outstanding, total_selected
from services.month_selection import eligible_months, first_unpaid_index, toggle_month, validate_selection
from services.receipts import generate_receipt_number

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/fee-ledger", tags=["Fee Ledger System"])


# =====================
# DEPENDENCIES & HELPERS
# =====================

def get_today() -> datetime.date:
    """Clock used for every status calculation; overridden in tests."""
    return datetime.date.today()


def _check_session(session: str):
    try:
        parse_session(session)
    except InvalidSessionError as e:
        raise HTTPException(status_code=422, detail=str(e))


def _check_month(month: str):
    try:
        month_number(month)
    except InvalidMonthError as e:
        raise HTTPException(status_code=422, detail=str(e))


def _get_student(db: Session, student_id: int) -> Student:
    student = db.query(Student).filter(Student.id == student_id).first()
    if not student:
        raise HTTPException(status_code=404, detail="Student not found")
    return student


def _provision(db: Session, student_id: int, session: str, amount: Optional[int] = None) -> int:
    """Add any missing month rows for the session. Returns how many were created."""
    amount = amount or Config.DEFAULT_MONTHLY_FEE
    existing = {
        row.month for row in db.query(MonthlyFee.month).filter(
            MonthlyFee.student_id == student_id,
            MonthlyFee.session == session
        )
    }

    created = 0
    for month in ACADEMIC_MONTHS:
        if month not in existing:
            db.add(MonthlyFee(
                student_id=student_id,
                session=session,
                month=month,
                amount=amount,
                payment_state=PENDING
            ))
            created += 1
    db.flush()
    return created


def _load_records(db: Session, student_id: int, session: str) -> dict:
    """month -> MonthlyFee for one student and session; 404 if never provisioned."""
    _check_session(session)
    rows = db.query(MonthlyFee).filter(
        MonthlyFee.student_id == student_id,
        MonthlyFee.session == session
    ).all()

    if not rows:
        raise HTTPException(status_code=404, detail=f"No fee ledger for session {session}")
    return records_by_month(rows)


# =====================
# PROVISIONING
# =====================

@router.post("/provision")
def provision_ledger(data: ProvisionRequest, db: Session = Depends(get_db),
                     today: datetime.date = Depends(get_today)):
    """Create the twelve default monthly records for a session (idempotent)."""
    session = data.session or current_session(today)
    _check_session(session)
    _get_student(db, data.student_id)

    created = _provision(db, data.student_id, session, data.amount)
    db.commit()

    if created:
        logger.info("Provisioned %d months for student %s, session %s",
                    created, data.student_id, session)
    return {"message": "Ledger Ready", "session": session, "created": created}


# =====================
# SELECTION API
# =====================

@router.post("/selection/toggle", response_model=SelectionOut)
def toggle_selection(req: ToggleRequest, db: Session = Depends(get_db)):
    """
    Apply one click to the client's current selection.
    - Selecting a month also selects every unpaid month before it
    - Deselecting a month drops it and everything after it
    """
    _check_month(req.month)
    records = _load_records(db, req.student_id, req.session)

    eligible = eligible_months(records)
    if req.month not in eligible:
        raise HTTPException(status_code=409, detail=f"{req.month} cannot be selected")

    unknown = [m for m in req.selection if m not in eligible]
    if unknown:
        raise HTTPException(status_code=422, detail=f"Invalid months in selection: {', '.join(unknown)}")

    anchor = first_unpaid_index(records)
    selection = toggle_month(req.selection, ACADEMIC_MONTHS, anchor, req.month)
    return {"selection": selection, "total": total_selected(selection, records)}


# =====================
# PAYMENT COLLECTION API
# =====================

@router.post("/collect")
def collect_fee(pay: PaymentRequest, db: Session = Depends(get_db),
                today: datetime.date = Depends(get_today)):
    """
    Record payment for the selected months and generate receipt
    """
    student = _get_student(db, pay.student_id)
    records = _load_records(db, pay.student_id, pay.session)

    try:
        validate_selection(pay.selected_months, records)
    except SelectionError as e:
        raise HTTPException(status_code=409, detail=str(e))

    receipt_no = generate_receipt_number(db, today)
    breakdown = {month: records[month].amount for month in pay.selected_months}
    total = total_selected(pay.selected_months, records)

    for month in pay.selected_months:
        records[month].payment_state = PAID
        records[month].receipt_no = receipt_no

    ledger = StudentFeeLedger(
        student_id=student.id,
        receipt_no=receipt_no,
        transaction_date=today,
        session=pay.session,
        months_paid=list(pay.selected_months),
        payment_breakdown=breakdown,
        total_amount=total,
        payment_mode=pay.payment_mode,
        remarks=pay.remarks
    )
    db.add(ledger)
    db.commit()

    logger.info("Collected %s for student %s (%s): %s",
                total, student.srn, pay.session, ", ".join(pay.selected_months))

    return {
        "message": "Payment Successful",
        "receipt_no": receipt_no,
        "total": total,
        "selection": []
    }


# =====================
# ACCOUNTANT APIs
# =====================

@router.put("/status", response_model=MonthStatusOut)
def update_fee_status(data: StatusUpdate, db: Session = Depends(get_db),
                      today: datetime.date = Depends(get_today)):
    """Correct the stored payment state of one month (accountant)."""
    _check_session(data.session)
    _check_month(data.month)
    if data.payment_state not in PAYMENT_STATES:
        raise HTTPException(status_code=422, detail="payment_state must be 'paid' or 'pending'")
    _get_student(db, data.student_id)

    _provision(db, data.student_id, data.session)
    record = db.query(MonthlyFee).filter(
        MonthlyFee.student_id == data.student_id,
        MonthlyFee.session == data.session,
        MonthlyFee.month == data.month
    ).first()

    record.payment_state = data.payment_state
    if data.amount:
        record.amount = data.amount
    if data.payment_state == PENDING:
        record.receipt_no = None
    db.commit()

    logger.info("Status of %s %s for student %s set to %s",
                data.month, data.session, data.student_id, data.payment_state)

    return _month_out(record, data.session, today)


@router.get("/overview/{session}")
def get_fee_overview(session: str, db: Session = Depends(get_db),
                     today: datetime.date = Depends(get_today)):
    """Every active student with a derived status per month."""
    _check_session(session)
    students = db.query(Student).filter(Student.status == True).order_by(Student.student_name).all()

    rows = db.query(MonthlyFee).filter(MonthlyFee.session == session).all()
    by_student = {}
    for row in rows:
        by_student.setdefault(row.student_id, {})[row.month] = row

    result = []
    for s in students:
        records = by_student.get(s.id, {})
        statuses = {}
        for month in ACADEMIC_MONTHS:
            record = records.get(month)
            state = record.payment_state if record else PENDING
            statuses[month] = derive_status(month, state, session, today, Config.DUE_WINDOW_DAYS)

        result.append({
            "student_id": s.id,
            "srn": s.srn,
            "student_name": s.student_name,
            "class_name": s.class_name,
            "section": s.section,
            "months": statuses
        })

    return {"session": session, "months": ACADEMIC_MONTHS, "students": result}


# =====================
# RECEIPT & HISTORY APIs
# =====================

@router.get("/receipt/{receipt_no}")
def get_receipt(receipt_no: str, db: Session = Depends(get_db)):
    """Get receipt details for printing"""
    ledger = db.query(StudentFeeLedger).filter(
        StudentFeeLedger.receipt_no == receipt_no
    ).first()
    if not ledger:
        raise HTTPException(status_code=404, detail="Receipt not found")

    student = ledger.student
    items = [
        {"sno": idx, "month": month, "amount": amount}
        for idx, (month, amount) in enumerate((ledger.payment_breakdown or {}).items(), start=1)
    ]

    return {
        "receipt_no": ledger.receipt_no,
        "date": str(ledger.transaction_date),
        "session": ledger.session,
        "student": {
            "name": student.student_name,
            "srn": student.srn,
            "father_name": student.father_name or "-",
            "class_name": student.class_name or "-",
            "section": student.section or ""
        },
        "months": ledger.months_paid,
        "items": items,
        "total_amount": ledger.total_amount,
        "payment_mode": ledger.payment_mode,
        "amount_in_words": number_to_words(ledger.total_amount)
    }


@router.get("/history/{student_id}", response_model=List[HistoryOut])
def get_student_history(student_id: int, db: Session = Depends(get_db)):
    """Get payment history for a student"""
    _get_student(db, student_id)
    return db.query(StudentFeeLedger).filter(
        StudentFeeLedger.student_id == student_id
    ).order_by(StudentFeeLedger.id.desc()).all()


# =====================
# STUDENT LEDGER VIEW
# =====================

def _month_out(record: MonthlyFee, session: str, today: datetime.date) -> dict:
    return {
        "month": record.month,
        "amount": record.amount,
        "payment_state": record.payment_state,
        "status": derive_status(record.month, record.payment_state, session, today, Config.DUE_WINDOW_DAYS),
        "receipt_no": record.receipt_no
    }


@router.get("/{student_id}/{session}", response_model=LedgerOut)
def get_ledger(student_id: int, session: str, db: Session = Depends(get_db),
               today: datetime.date = Depends(get_today)):
    _get_student(db, student_id)
    records = _load_records(db, student_id, session)

    anchor = first_unpaid_index(records)
    return {
        "student_id": student_id,
        "session": session,
        "months": [_month_out(records[m], session, today) for m in ACADEMIC_MONTHS if m in records],
        "first_unpaid_month": ACADEMIC_MONTHS[anchor] if anchor < len(ACADEMIC_MONTHS) else None,
        "eligible_months": eligible_months(records),
        "total_outstanding": total_outstanding(records)
    }


@router.get("/{student_id}/{session}/quarters")
def get_quarters(student_id: int, session: str, db: Session = Depends(get_db),
                 today: datetime.date = Depends(get_today)):
    _get_student(db, student_id)
    records = _load_records(db, student_id, session)
    return quarter_summary(records, session, today, Config.DUE_WINDOW_DAYS)


@router.get("/{student_id}/{session}/reminder", response_model=Optional[ReminderOut])
def get_reminder(student_id: int, session: str, db: Session = Depends(get_db),
                 today: datetime.date = Depends(get_today)):
    """Next fee whose due window has opened, or null when nothing is due yet."""
    _get_student(db, student_id)
    records = _load_records(db, student_id, session)
    return next_due_reminder(records, session, today, Config.DUE_WINDOW_DAYS)
