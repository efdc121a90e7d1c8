from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Response
from sqlalchemy.orm import Session

from database.db import get_db
from models.assignments import Assignment as AssignmentModel
from models.grades import Grade as GradeModel
from schemas.common import ErrorResponse
from schemas.grades import Grade, GradeCreate, GradeUpdate, SubjectGradeSummary
from services.grade_calculator import get_subject_grade_summary
from services.store import apply_updates, commit, get_or_404, save

router = APIRouter(tags=["grades"])


# ==========================================================
# [1] summary
# ==========================================================

# ✅ [SUMMARY] percentage, letter and assignment counts for one subject
@router.get("/subjects/{subject_id}/grades/summary", response_model=SubjectGradeSummary)
def read_subject_grade_summary(
    subject_id: str,
    term_id: Optional[str] = Query(None, alias="termId"),
    db: Session = Depends(get_db),
):
    return get_subject_grade_summary(db, subject_id, term_id)


# ==========================================================
# [2] CRUD
# ==========================================================

# ✅ [READ] grades recorded for an assignment
@router.get("/assignments/{assignment_id}/grades", response_model=List[Grade])
def read_grades(assignment_id: str, db: Session = Depends(get_db)):
    return (
        db.query(GradeModel)
        .filter(GradeModel.assignment_id == assignment_id)
        .order_by(GradeModel.graded_at)
        .all()
    )


# ✅ [CREATE] grade an assignment
@router.post("/assignments/{assignment_id}/grades", response_model=Grade, responses={404: {"model": ErrorResponse}})
def create_grade(assignment_id: str, grade: GradeCreate, db: Session = Depends(get_db)):
    get_or_404(db, AssignmentModel, assignment_id, "Assignment")
    return save(db, GradeModel(assignment_id=assignment_id, **grade.model_dump()))


# ✅ [READ] one grade
@router.get("/grades/{grade_id}", response_model=Grade, responses={404: {"model": ErrorResponse}})
def read_grade(grade_id: str, db: Session = Depends(get_db)):
    return get_or_404(db, GradeModel, grade_id, "Grade")


# ✅ [UPDATE] change points / comment
@router.put("/grades/{grade_id}", response_model=Grade, responses={404: {"model": ErrorResponse}})
def update_grade(grade_id: str, updated: GradeUpdate, db: Session = Depends(get_db)):
    grade = get_or_404(db, GradeModel, grade_id, "Grade")
    apply_updates(grade, updated)
    commit(db)
    db.refresh(grade)
    return grade


# ✅ [DELETE]
@router.delete("/grades/{grade_id}", status_code=204, responses={404: {"model": ErrorResponse}})
def delete_grade(grade_id: str, db: Session = Depends(get_db)):
    grade = get_or_404(db, GradeModel, grade_id, "Grade")
    db.delete(grade)
    commit(db)
    return Response(status_code=204)
