# app/api/routes/students.py
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from app.db import get_db
from app.schemas.students import StudentCreateIn, StudentOut
from app.services import students as student_service
from app.services.students import DuplicateStudentError

router = APIRouter(prefix="/students", tags=["students"])


@router.post("", response_model=StudentOut, status_code=201)
def create_student(
    payload: StudentCreateIn,
    db: Session = Depends(get_db),
):
    try:
        st = student_service.create_student(db, payload)
    except DuplicateStudentError as e:
        raise HTTPException(status.HTTP_409_CONFLICT, str(e)) from e
    return StudentOut.model_validate(st)


@router.get("", response_model=list[StudentOut])
def list_students(db: Session = Depends(get_db)):
    return [StudentOut.model_validate(s) for s in student_service.find(db)]


@router.get("/{student_id}", response_model=StudentOut)
def get_student(student_id: str, db: Session = Depends(get_db)):
    st = student_service.find_by_id(db, student_id)
    if not st:
        raise HTTPException(404, "Student not found")
    return StudentOut.model_validate(st)
