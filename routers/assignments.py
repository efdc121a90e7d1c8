from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Response
from sqlalchemy.orm import Session

from database.db import get_db
from models.assignments import Assignment as AssignmentModel
from models.subjects import Subject as SubjectModel
from models.terms import Term as TermModel
from schemas.assignments import Assignment, AssignmentCreate, AssignmentUpdate
from schemas.common import ErrorResponse
from services.store import apply_updates, commit, get_or_404, save
from utils.errors import ValidationError

router = APIRouter(tags=["assignments"])


# ✅ [READ] assignments of a subject, optionally one term
@router.get("/subjects/{subject_id}/assignments", response_model=List[Assignment])
def read_assignments(
    subject_id: str,
    term_id: Optional[str] = Query(None, alias="termId"),
    db: Session = Depends(get_db),
):
    query = db.query(AssignmentModel).filter(AssignmentModel.subject_id == subject_id)
    if term_id:
        query = query.filter(AssignmentModel.term_id == term_id)
    return query.order_by(AssignmentModel.date_due, AssignmentModel.created_at).all()


# ✅ [CREATE] subject from the path, term from the body; both must belong to the same student
@router.post("/subjects/{subject_id}/assignments", response_model=Assignment, responses={404: {"model": ErrorResponse}})
def create_assignment(subject_id: str, assignment: AssignmentCreate, db: Session = Depends(get_db)):
    subject = get_or_404(db, SubjectModel, subject_id, "Subject")
    term = get_or_404(db, TermModel, assignment.term_id, "Term")
    if term.student_id != subject.student_id:
        raise ValidationError("Term and subject belong to different students")

    return save(db, AssignmentModel(subject_id=subject_id, **assignment.model_dump()))


# ✅ [READ] one assignment
@router.get("/assignments/{assignment_id}", response_model=Assignment, responses={404: {"model": ErrorResponse}})
def read_assignment(assignment_id: str, db: Session = Depends(get_db)):
    return get_or_404(db, AssignmentModel, assignment_id, "Assignment")


# ✅ [UPDATE] partial update
@router.put("/assignments/{assignment_id}", response_model=Assignment, responses={404: {"model": ErrorResponse}})
def update_assignment(assignment_id: str, updated: AssignmentUpdate, db: Session = Depends(get_db)):
    assignment = get_or_404(db, AssignmentModel, assignment_id, "Assignment")
    apply_updates(assignment, updated)
    commit(db)
    db.refresh(assignment)
    return assignment


# ✅ [DELETE] assignment with its grades
@router.delete("/assignments/{assignment_id}", status_code=204, responses={404: {"model": ErrorResponse}})
def delete_assignment(assignment_id: str, db: Session = Depends(get_db)):
    assignment = get_or_404(db, AssignmentModel, assignment_id, "Assignment")
    db.delete(assignment)
    commit(db)
    return Response(status_code=204)
