from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Response
from sqlalchemy.orm import Session

from config.settings import settings
from database.db import get_db
from models.students import Student as StudentModel
from schemas.common import ErrorResponse
from schemas.grades import GPAResponse
from schemas.reports import ReportCard
from schemas.students import Student, StudentCreate, StudentUpdate
from services.grade_calculator import calculate_overall_gpa
from services.reports import get_report_card
from services.store import apply_updates, commit, get_or_404, save

router = APIRouter(prefix="/students", tags=["students"])


# ==========================================================
# [1] CRUD
# ==========================================================

# ✅ [READ] every student
@router.get("", response_model=List[Student])
def read_students(db: Session = Depends(get_db)):
    return db.query(StudentModel).order_by(StudentModel.created_at, StudentModel.last_name).all()


# ✅ [CREATE] add a student
@router.post("", response_model=Student, responses={400: {"model": ErrorResponse}})
def create_student(student: StudentCreate, db: Session = Depends(get_db)):
    return save(db, StudentModel(**student.model_dump()))


# ✅ [CREATE] first student, created from settings when the table is empty
@router.post("/ensure-default", response_model=Student)
def ensure_default_student(db: Session = Depends(get_db)):
    student = db.query(StudentModel).order_by(StudentModel.created_at, StudentModel.id).first()
    if student is not None:
        return student
    return save(db, StudentModel(
        first_name=settings.DEFAULT_STUDENT_FIRST_NAME,
        last_name=settings.DEFAULT_STUDENT_LAST_NAME,
    ))


# ==========================================================
# [2] grade roll-ups
# ==========================================================

# ✅ [GPA] 4-point GPA, null when nothing is graded
@router.get("/{student_id}/gpa", response_model=GPAResponse)
def get_student_gpa(
    student_id: str,
    term_id: Optional[str] = Query(None, alias="termId"),
    db: Session = Depends(get_db),
):
    return {"gpa": calculate_overall_gpa(db, student_id, term_id)}


# ✅ [REPORT] GPA + subjects + attendance + service hours
@router.get("/{student_id}/report-card", response_model=ReportCard, responses={404: {"model": ErrorResponse}})
def read_report_card(
    student_id: str,
    term_id: Optional[str] = Query(None, alias="termId"),
    db: Session = Depends(get_db),
):
    return get_report_card(db, student_id, term_id)


# ==========================================================
# [3] single student
# ==========================================================

# ✅ [READ] one student
@router.get("/{student_id}", response_model=Student, responses={404: {"model": ErrorResponse}})
def read_student(student_id: str, db: Session = Depends(get_db)):
    return get_or_404(db, StudentModel, student_id, "Student")


# ✅ [UPDATE] partial update
@router.put("/{student_id}", response_model=Student, responses={404: {"model": ErrorResponse}})
def update_student(student_id: str, updated: StudentUpdate, db: Session = Depends(get_db)):
    student = get_or_404(db, StudentModel, student_id, "Student")
    apply_updates(student, updated)
    commit(db)
    db.refresh(student)
    return student


# ✅ [DELETE] student and everything it owns
@router.delete("/{student_id}", status_code=204, responses={404: {"model": ErrorResponse}})
def delete_student(student_id: str, db: Session = Depends(get_db)):
    student = get_or_404(db, StudentModel, student_id, "Student")
    db.delete(student)
    commit(db)
    return Response(status_code=204)
