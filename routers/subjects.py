from typing import List

from fastapi import APIRouter, Depends, Response
from sqlalchemy.orm import Session

from database.db import get_db
from models.students import Student as StudentModel
from models.subjects import Subject as SubjectModel
from schemas.common import ErrorResponse
from schemas.subjects import Subject, SubjectCreate, SubjectUpdate
from services.store import apply_updates, commit, get_or_404, save

router = APIRouter(tags=["subjects"])


# ✅ [READ] subjects of one student
@router.get("/students/{student_id}/subjects", response_model=List[Subject])
def read_subjects(student_id: str, db: Session = Depends(get_db)):
    return (
        db.query(SubjectModel)
        .filter(SubjectModel.student_id == student_id)
        .order_by(SubjectModel.name)
        .all()
    )


# ✅ [CREATE] add a subject to a student
@router.post("/students/{student_id}/subjects", response_model=Subject, responses={404: {"model": ErrorResponse}})
def create_subject(student_id: str, subject: SubjectCreate, db: Session = Depends(get_db)):
    get_or_404(db, StudentModel, student_id, "Student")
    return save(db, SubjectModel(student_id=student_id, **subject.model_dump()))


# ✅ [READ] one subject
@router.get("/subjects/{subject_id}", response_model=Subject, responses={404: {"model": ErrorResponse}})
def read_subject(subject_id: str, db: Session = Depends(get_db)):
    return get_or_404(db, SubjectModel, subject_id, "Subject")


# ✅ [UPDATE] rename / activate / deactivate
@router.put("/subjects/{subject_id}", response_model=Subject, responses={404: {"model": ErrorResponse}})
def update_subject(subject_id: str, updated: SubjectUpdate, db: Session = Depends(get_db)):
    subject = get_or_404(db, SubjectModel, subject_id, "Subject")
    apply_updates(subject, updated)
    commit(db)
    db.refresh(subject)
    return subject


# ✅ [DELETE] subject with its assignments and grades
@router.delete("/subjects/{subject_id}", status_code=204, responses={404: {"model": ErrorResponse}})
def delete_subject(subject_id: str, db: Session = Depends(get_db)):
    subject = get_or_404(db, SubjectModel, subject_id, "Subject")
    db.delete(subject)
    commit(db)
    return Response(status_code=204)
