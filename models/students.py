from sqlalchemy import Column, Integer, String, Date, Boolean
from sqlalchemy.orm import relationship
from database import Base
import datetime

class Student(Base):
    __tablename__ = "students"

    id = Column(Integer, primary_key=True, index=True)
    srn = Column(String(50), unique=True, index=True, nullable=False)  # Student Registration Number
    student_name = Column(String(100), nullable=False)

    # --- ACADEMIC INFO ---
    class_name = Column(String(20))
    section = Column(String(10), nullable=True)
    admission_date = Column(Date, default=datetime.date.today)

    # --- PARENTS INFO ---
    father_name = Column(String(100), nullable=True)
    mother_name = Column(String(100), nullable=True)
    mobile_number = Column(String(15), nullable=True)
    address = Column(String(255), nullable=True)

    status = Column(Boolean, default=True)

    # --- RELATIONSHIPS ---
    fees = relationship("MonthlyFee", back_populates="student", cascade="all, delete-orphan")
