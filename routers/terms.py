from typing import List, Optional

from fastapi import APIRouter, Depends, Response
from sqlalchemy.orm import Session

from database.db import get_db
from models.students import Student as StudentModel
from models.terms import Term as TermModel
from schemas.common import ErrorResponse
from schemas.terms import Term, TermCreate, TermUpdate
from services.store import apply_updates, commit, get_or_404, save
from utils.errors import ValidationError

router = APIRouter(tags=["terms"])


# ✅ [READ] terms of one student, newest first
@router.get("/students/{student_id}/terms", response_model=List[Term])
def read_terms(student_id: str, db: Session = Depends(get_db)):
    return (
        db.query(TermModel)
        .filter(TermModel.student_id == student_id)
        .order_by(TermModel.start_date.desc())
        .all()
    )


# ✅ [READ] the active term (first one when several are active), null when none
@router.get("/students/{student_id}/terms/active", response_model=Optional[Term])
def read_active_term(student_id: str, db: Session = Depends(get_db)):
    return (
        db.query(TermModel)
        .filter(TermModel.student_id == student_id)
        .filter(TermModel.is_active.is_(True))
        .order_by(TermModel.start_date.desc())
        .first()
    )


# ✅ [CREATE] add a term
@router.post("/students/{student_id}/terms", response_model=Term, responses={404: {"model": ErrorResponse}})
def create_term(student_id: str, term: TermCreate, db: Session = Depends(get_db)):
    get_or_404(db, StudentModel, student_id, "Student")
    return save(db, TermModel(student_id=student_id, **term.model_dump()))


# ✅ [READ] one term
@router.get("/terms/{term_id}", response_model=Term, responses={404: {"model": ErrorResponse}})
def read_term(term_id: str, db: Session = Depends(get_db)):
    return get_or_404(db, TermModel, term_id, "Term")


# ✅ [UPDATE] partial update, the resulting range must stay ordered
@router.put("/terms/{term_id}", response_model=Term, responses={404: {"model": ErrorResponse}})
def update_term(term_id: str, updated: TermUpdate, db: Session = Depends(get_db)):
    term = get_or_404(db, TermModel, term_id, "Term")
    values = updated.model_dump(exclude_unset=True)
    start = values.get("start_date", term.start_date)
    end = values.get("end_date", term.end_date)
    if start and end and start > end:
        raise ValidationError("Start date must be before end date")

    apply_updates(term, updated)
    commit(db)
    db.refresh(term)
    return term


# ✅ [DELETE] term with its assignments
@router.delete("/terms/{term_id}", status_code=204, responses={404: {"model": ErrorResponse}})
def delete_term(term_id: str, db: Session = Depends(get_db)):
    term = get_or_404(db, TermModel, term_id, "Term")
    db.delete(term)
    commit(db)
    return Response(status_code=204)
