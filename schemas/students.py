from pydantic import BaseModel
from datetime import date
from typing import Optional

# 1. Naya student register karne ke liye
class StudentCreate(BaseModel):
    srn: str
    student_name: str
    class_name: str
    section: Optional[str] = None
    father_name: Optional[str] = None
    mother_name: Optional[str] = None
    mobile_number: Optional[str] = None
    address: Optional[str] = None
    admission_date: Optional[date] = None

# 2. Response Model
class StudentOut(BaseModel):
    id: int
    srn: str
    student_name: str
    class_name: str
    section: Optional[str] = None
    father_name: Optional[str] = None
    mobile_number: Optional[str] = None
    admission_date: Optional[date] = None

    class Config:
        from_attributes = True
