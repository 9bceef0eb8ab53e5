from pydantic import BaseModel, Field
from datetime import date
from typing import List, Optional

# --- REQUESTS ---

class ProvisionRequest(BaseModel):
    student_id: int
    session: Optional[str] = None  # None means the session containing today
    amount: Optional[int] = Field(default=None, gt=0)  # None means configured default

class ToggleRequest(BaseModel):
    student_id: int
    session: str
    selection: List[str] = []
    month: str

class PaymentRequest(BaseModel):
    student_id: int
    session: str
    selected_months: List[str]
    payment_mode: str = "Cash"
    remarks: Optional[str] = None

class StatusUpdate(BaseModel):
    student_id: int
    session: str
    month: str
    payment_state: str  # paid | pending
    amount: Optional[int] = Field(default=None, gt=0)

# --- RESPONSES ---

class MonthStatusOut(BaseModel):
    month: str
    amount: int
    payment_state: str
    status: str
    receipt_no: Optional[str] = None

class LedgerOut(BaseModel):
    student_id: int
    session: str
    months: List[MonthStatusOut]
    first_unpaid_month: Optional[str] = None
    eligible_months: List[str]
    total_outstanding: int

class SelectionOut(BaseModel):
    selection: List[str]
    total: int

class ReminderOut(BaseModel):
    month: str
    amount: int
    due_date: date
    status: str

class HistoryOut(BaseModel):
    id: int
    receipt_no: str
    transaction_date: date
    session: str
    months_paid: List[str]
    total_amount: int
    payment_mode: Optional[str] = None

    class Config:
        from_attributes = True
