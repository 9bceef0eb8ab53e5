import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy import or_
from sqlalchemy.orm import Session

from database import get_db
from models.students import Student
from schemas.students import StudentCreate, StudentOut

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/students", tags=["Students"])


@router.post("/", response_model=StudentOut, status_code=201)
def add_student(data: StudentCreate, db: Session = Depends(get_db)):
    exists = db.query(Student).filter(Student.srn == data.srn).first()
    if exists:
        raise HTTPException(status_code=409, detail=f"SRN {data.srn} already registered")

    values = data.model_dump(exclude_none=True)
    student = Student(**values)
    db.add(student)
    db.commit()
    db.refresh(student)

    logger.info("Registered student %s (%s)", student.srn, student.student_name)
    return student


@router.get("/", response_model=List[StudentOut])
def list_students(class_name: Optional[str] = None, search: str = "", db: Session = Depends(get_db)):
    """Active students, optionally filtered by class and a name/SRN search."""
    query = db.query(Student).filter(Student.status == True)

    if class_name:
        query = query.filter(Student.class_name == class_name)

    if search:
        search_fmt = f"%{search}%"
        query = query.filter(
            or_(
                Student.student_name.ilike(search_fmt),
                Student.srn.ilike(search_fmt),
                Student.father_name.ilike(search_fmt)
            )
        )

    return query.order_by(Student.id.desc()).limit(200).all()


@router.get("/{student_id}", response_model=StudentOut)
def get_student(student_id: int, db: Session = Depends(get_db)):
    student = db.query(Student).filter(Student.id == student_id).first()
    if not student:
        raise HTTPException(status_code=404, detail="Student not found")
    return student
