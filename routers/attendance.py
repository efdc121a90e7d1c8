from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Response
from sqlalchemy.orm import Session

from database.db import get_db
from models.attendance import Attendance as AttendanceModel
from models.students import Student as StudentModel
from schemas.attendance import (
    Attendance,
    AttendanceCreate,
    AttendanceReport,
    AttendanceStatistics,
    AttendanceUpdate,
    MonthlyAttendanceReport,
)
from schemas.common import ErrorResponse
from services.attendance_statistics import (
    DATE_PATTERN,
    get_attendance_by_student,
    get_attendance_report,
    get_attendance_statistics,
    get_monthly_attendance_report,
    parse_iso_date,
)
from services.store import apply_updates, commit, get_or_404, save
from utils.errors import ValidationError

router = APIRouter(tags=["attendance"])

DUPLICATE_DAY = "Attendance already recorded for this date"


def _check_date(value: str, message: str):
    """YYYY-MM-DD and a real calendar day"""
    if not DATE_PATTERN.match(value) or parse_iso_date(value) is None:
        raise ValidationError(message)
    return parse_iso_date(value)


# ==========================================================
# [1] statistics / reports
# ==========================================================

# ✅ [STATS] counters, rate and streaks, optionally within a date window
@router.get(
    "/students/{student_id}/attendance/statistics",
    response_model=AttendanceStatistics,
    responses={400: {"model": ErrorResponse}},
)
def read_attendance_statistics(
    student_id: str,
    start_date: Optional[str] = Query(None, alias="startDate"),
    end_date: Optional[str] = Query(None, alias="endDate"),
    db: Session = Depends(get_db),
):
    start = _check_date(start_date, "Start date must be in YYYY-MM-DD format") if start_date else None
    end = _check_date(end_date, "End date must be in YYYY-MM-DD format") if end_date else None
    if start and end and start > end:
        raise ValidationError("Start date must be before end date")

    return get_attendance_statistics(db, student_id, start, end)


# ✅ [REPORT] one calendar month
@router.get(
    "/students/{student_id}/attendance/report/monthly",
    response_model=MonthlyAttendanceReport,
    response_model_exclude_none=True,
    responses={400: {"model": ErrorResponse}},
)
def read_monthly_attendance_report(
    student_id: str,
    year: Optional[str] = Query(None),
    month: Optional[str] = Query(None),
    db: Session = Depends(get_db),
):
    try:
        year_num = int(year)
        month_num = int(month)
    except (TypeError, ValueError):
        raise ValidationError("Invalid year or month parameter")
    if not 1 <= month_num <= 12 or not 1900 <= year_num <= 2100:
        raise ValidationError("Invalid year or month parameter")

    return get_monthly_attendance_report(db, student_id, year_num, month_num)


# ✅ [REPORT] arbitrary inclusive date range
@router.get(
    "/students/{student_id}/attendance/report",
    response_model=AttendanceReport,
    response_model_exclude_none=True,
    responses={400: {"model": ErrorResponse}},
)
def read_attendance_report(
    student_id: str,
    start_date: Optional[str] = Query(None, alias="startDate"),
    end_date: Optional[str] = Query(None, alias="endDate"),
    db: Session = Depends(get_db),
):
    if not start_date or not end_date:
        raise ValidationError("Both startDate and endDate are required")
    start = _check_date(start_date, "Dates must be in YYYY-MM-DD format")
    end = _check_date(end_date, "Dates must be in YYYY-MM-DD format")
    if start > end:
        raise ValidationError("Start date must be before end date")

    return get_attendance_report(db, student_id, start, end)


# ==========================================================
# [2] CRUD
# ==========================================================

# ✅ [READ] records of one student, newest first
@router.get("/students/{student_id}/attendance", response_model=List[Attendance])
def read_attendance_list(
    student_id: str,
    start_date: Optional[str] = Query(None, alias="startDate"),
    end_date: Optional[str] = Query(None, alias="endDate"),
    db: Session = Depends(get_db),
):
    return get_attendance_by_student(db, student_id, start_date, end_date)


# ✅ [CREATE] one record per student per day
@router.post(
    "/students/{student_id}/attendance",
    response_model=Attendance,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
def create_attendance(student_id: str, attendance: AttendanceCreate, db: Session = Depends(get_db)):
    get_or_404(db, StudentModel, student_id, "Student")
    return save(db, AttendanceModel(student_id=student_id, **attendance.model_dump()), DUPLICATE_DAY)


# ✅ [READ] one record
@router.get("/attendance/{attendance_id}", response_model=Attendance, responses={404: {"model": ErrorResponse}})
def read_attendance(attendance_id: str, db: Session = Depends(get_db)):
    return get_or_404(db, AttendanceModel, attendance_id, "Attendance record")


# ✅ [UPDATE] partial update, moving to an occupied day is rejected
@router.put("/attendance/{attendance_id}", response_model=Attendance, responses={404: {"model": ErrorResponse}})
def update_attendance(attendance_id: str, updated: AttendanceUpdate, db: Session = Depends(get_db)):
    attendance = get_or_404(db, AttendanceModel, attendance_id, "Attendance record")
    apply_updates(attendance, updated)
    commit(db, DUPLICATE_DAY)
    db.refresh(attendance)
    return attendance


# ✅ [DELETE]
@router.delete("/attendance/{attendance_id}", status_code=204, responses={404: {"model": ErrorResponse}})
def delete_attendance(attendance_id: str, db: Session = Depends(get_db)):
    attendance = get_or_404(db, AttendanceModel, attendance_id, "Attendance record")
    db.delete(attendance)
    commit(db)
    return Response(status_code=204)
