from typing import List

from fastapi import APIRouter, Depends, Response
from sqlalchemy.orm import Session

from database.db import get_db
from models.service_hours import ServiceHour as ServiceHourModel
from models.students import Student as StudentModel
from schemas.common import ErrorResponse
from schemas.service_hours import ServiceHour, ServiceHourCreate, ServiceHourUpdate, ServiceHoursSummary
from services.reports import get_service_hours_summary
from services.store import apply_updates, commit, get_or_404, save

router = APIRouter(tags=["service hours"])


# ✅ [READ] entries of one student, newest first
@router.get("/students/{student_id}/service-hours", response_model=List[ServiceHour])
def read_service_hours(student_id: str, db: Session = Depends(get_db)):
    return (
        db.query(ServiceHourModel)
        .filter(ServiceHourModel.student_id == student_id)
        .order_by(ServiceHourModel.date.desc())
        .all()
    )


# ✅ [SUMMARY] totals, per category, this month, progress toward the yearly goal
@router.get("/students/{student_id}/service-hours/summary", response_model=ServiceHoursSummary)
def read_service_hours_summary(student_id: str, db: Session = Depends(get_db)):
    return get_service_hours_summary(db, student_id)


# ✅ [CREATE]
@router.post("/students/{student_id}/service-hours", response_model=ServiceHour, responses={404: {"model": ErrorResponse}})
def create_service_hour(student_id: str, entry: ServiceHourCreate, db: Session = Depends(get_db)):
    get_or_404(db, StudentModel, student_id, "Student")
    return save(db, ServiceHourModel(student_id=student_id, **entry.model_dump()))


# ✅ [READ] one entry
@router.get("/service-hours/{service_hour_id}", response_model=ServiceHour, responses={404: {"model": ErrorResponse}})
def read_service_hour(service_hour_id: str, db: Session = Depends(get_db)):
    return get_or_404(db, ServiceHourModel, service_hour_id, "Service hour entry")


# ✅ [UPDATE]
@router.put("/service-hours/{service_hour_id}", response_model=ServiceHour, responses={404: {"model": ErrorResponse}})
def update_service_hour(service_hour_id: str, updated: ServiceHourUpdate, db: Session = Depends(get_db)):
    entry = get_or_404(db, ServiceHourModel, service_hour_id, "Service hour entry")
    apply_updates(entry, updated)
    commit(db)
    db.refresh(entry)
    return entry


# ✅ [DELETE]
@router.delete("/service-hours/{service_hour_id}", status_code=204, responses={404: {"model": ErrorResponse}})
def delete_service_hour(service_hour_id: str, db: Session = Depends(get_db)):
    entry = get_or_404(db, ServiceHourModel, service_hour_id, "Service hour entry")
    db.delete(entry)
    commit(db)
    return Response(status_code=204)
