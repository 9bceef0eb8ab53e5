"""
Fee Models - Monthly fee records and payment ledger
"""
from sqlalchemy import Column, Integer, String, Date, ForeignKey, JSON, UniqueConstraint
from sqlalchemy.orm import relationship
from database import Base
import datetime


# 1. MONTHLY FEE - One row per student, session and month (source of truth for paid/pending)
class MonthlyFee(Base):
    __tablename__ = "monthly_fees"

    id = Column(Integer, primary_key=True, index=True)
    student_id = Column(Integer, ForeignKey("students.id"), nullable=False, index=True)
    session = Column(String(9), nullable=False, index=True)  # e.g., "2024-2025"
    month = Column(String(10), nullable=False)                # e.g., "April"
    amount = Column(Integer, nullable=False, default=5000)
    payment_state = Column(String(10), nullable=False, default="pending")  # paid | pending

    receipt_no = Column(String(20), nullable=True)  # Set when paid through /collect
    updated_at = Column(Date, default=datetime.date.today, onupdate=datetime.date.today)

    __table_args__ = (
        UniqueConstraint('student_id', 'session', 'month', name='uq_student_session_month'),
    )

    student = relationship("Student", back_populates="fees")


# 2. STUDENT FEE LEDGER - One entry per payment (receipt)
class StudentFeeLedger(Base):
    __tablename__ = "student_fee_ledgers"

    id = Column(Integer, primary_key=True, index=True)
    student_id = Column(Integer, ForeignKey("students.id"), nullable=False, index=True)

    # Unique Receipt Number: REC-2024-0001
    receipt_no = Column(String(20), unique=True, nullable=False, index=True)

    transaction_date = Column(Date, default=datetime.date.today)
    session = Column(String(9), nullable=False)

    # Months Paid (JSON Array: ["July", "August"])
    months_paid = Column(JSON, default=list)

    # Breakdown (JSON: {"July": 5000, "August": 5000})
    payment_breakdown = Column(JSON, default=dict)

    total_amount = Column(Integer, default=0)
    payment_mode = Column(String(50))  # Cash, UPI, Cheque, Bank Transfer
    remarks = Column(String(500), nullable=True)

    student = relationship("Student")


# 3. RECEIPT COUNTER - For generating unique receipt numbers per year
class ReceiptCounter(Base):
    __tablename__ = "receipt_counters"

    id = Column(Integer, primary_key=True, index=True)
    year = Column(Integer, nullable=False, unique=True)  # e.g., 2024
    last_number = Column(Integer, default=0)
