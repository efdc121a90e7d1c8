import json
from typing import List

from fastapi import APIRouter, Depends, Response
from sqlalchemy.orm import Session

from database.db import get_db
from models.grading_schemes import GradingScheme as GradingSchemeModel
from models.students import Student as StudentModel
from models.subjects import Subject as SubjectModel
from schemas.common import ErrorResponse
from schemas.grading_schemes import GradingScheme, GradingSchemeCreate, GradingSchemeUpdate
from services.grading_schemes import serialize_grading_scheme
from services.store import commit, get_or_404, save
from utils.errors import ValidationError

router = APIRouter(tags=["grading schemes"])


def _dump(payload) -> str:
    return json.dumps(payload.model_dump())


# ✅ [READ] schemes of one student (defaults and subject-specific)
@router.get("/students/{student_id}/grading-schemes", response_model=List[GradingScheme])
def read_grading_schemes(student_id: str, db: Session = Depends(get_db)):
    schemes = (
        db.query(GradingSchemeModel)
        .filter(GradingSchemeModel.student_id == student_id)
        .order_by(GradingSchemeModel.created_at)
        .all()
    )
    return [serialize_grading_scheme(s) for s in schemes]


# ✅ [CREATE] subjectId null = the student's default scheme
@router.post(
    "/students/{student_id}/grading-schemes",
    response_model=GradingScheme,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
def create_grading_scheme(student_id: str, scheme: GradingSchemeCreate, db: Session = Depends(get_db)):
    get_or_404(db, StudentModel, student_id, "Student")
    if scheme.subject_id is not None:
        subject = get_or_404(db, SubjectModel, scheme.subject_id, "Subject")
        if subject.student_id != student_id:
            raise ValidationError("Subject belongs to a different student")

    db_scheme = save(db, GradingSchemeModel(
        student_id=student_id,
        subject_id=scheme.subject_id,
        letter_cutoffs=_dump(scheme.letter_cutoffs),
        category_weights=_dump(scheme.category_weights),
    ))
    return serialize_grading_scheme(db_scheme)


# ✅ [READ] one scheme
@router.get("/grading-schemes/{scheme_id}", response_model=GradingScheme, responses={404: {"model": ErrorResponse}})
def read_grading_scheme(scheme_id: str, db: Session = Depends(get_db)):
    return serialize_grading_scheme(get_or_404(db, GradingSchemeModel, scheme_id, "Grading scheme"))


# ✅ [UPDATE] replace cutoffs and/or weights; owner and subject stay fixed
@router.put("/grading-schemes/{scheme_id}", response_model=GradingScheme, responses={404: {"model": ErrorResponse}})
def update_grading_scheme(scheme_id: str, updated: GradingSchemeUpdate, db: Session = Depends(get_db)):
    scheme = get_or_404(db, GradingSchemeModel, scheme_id, "Grading scheme")
    if updated.letter_cutoffs is not None:
        scheme.letter_cutoffs = _dump(updated.letter_cutoffs)
    if updated.category_weights is not None:
        scheme.category_weights = _dump(updated.category_weights)
    commit(db)
    db.refresh(scheme)
    return serialize_grading_scheme(scheme)


# ✅ [DELETE]
@router.delete("/grading-schemes/{scheme_id}", status_code=204, responses={404: {"model": ErrorResponse}})
def delete_grading_scheme(scheme_id: str, db: Session = Depends(get_db)):
    scheme = get_or_404(db, GradingSchemeModel, scheme_id, "Grading scheme")
    db.delete(scheme)
    commit(db)
    return Response(status_code=204)
