"""
services/reports.py

Read-only report assembly on top of the grade and attendance calculators:
- service hour totals (per category, this month, progress toward the yearly goal)
- report card: GPA, every subject's summary, attendance and service hours in one payload
"""

import logging
from collections import defaultdict
from datetime import date
from typing import Optional

from sqlalchemy.orm import Session

from config.settings import settings
from models.service_hours import DEFAULT_SERVICE_CATEGORY, ServiceHour as ServiceHourModel
from models.students import Student as StudentModel
from models.subjects import Subject as SubjectModel
from models.terms import Term as TermModel
from services.attendance_statistics import get_attendance_statistics
from services.grade_calculator import calculate_overall_gpa, get_subject_grade_summary
from services.store import get_or_404
from utils.errors import NotFoundError

logger = logging.getLogger(__name__)


def get_service_hours_summary(
    db: Session,
    student_id: str,
    today: Optional[date] = None,
    year_goal: Optional[float] = None,
) -> dict:
    today = today or date.today()
    goal = settings.SERVICE_HOURS_YEAR_GOAL if year_goal is None else year_goal

    entries = db.query(ServiceHourModel).filter(ServiceHourModel.student_id == student_id).all()

    total = sum(e.hours for e in entries)
    this_month = sum(e.hours for e in entries if (e.date.year, e.date.month) == (today.year, today.month))

    by_category = defaultdict(float)
    for e in entries:
        by_category[e.category or DEFAULT_SERVICE_CATEGORY] += e.hours

    progress = min(total / goal * 100, 100) if goal > 0 else 100

    return {
        "total_hours": total,
        "entries": len(entries),
        "this_month_hours": this_month,
        "by_category": dict(by_category),
        "year_goal": goal,
        "progress_percentage": round(progress, 2),
    }


def get_report_card(db: Session, student_id: str, term_id: Optional[str] = None) -> dict:
    student = get_or_404(db, StudentModel, student_id, "Student")

    term = None
    if term_id:
        term = db.query(TermModel).filter(TermModel.id == term_id).first()
        if term is None or term.student_id != student_id:
            raise NotFoundError("Term")

    subjects = (
        db.query(SubjectModel)
        .filter(SubjectModel.student_id == student_id)
        .order_by(SubjectModel.name)
        .all()
    )
    subject_reports = []
    for subject in subjects:
        summary = get_subject_grade_summary(db, subject.id, term_id)
        subject_reports.append({"subject_id": subject.id, "name": subject.name, **summary})

    # attendance follows the term window when a term is chosen
    if term is not None:
        attendance = get_attendance_statistics(db, student_id, term.start_date, term.end_date)
    else:
        attendance = get_attendance_statistics(db, student_id)

    logger.info("report card built for student %s (%d subjects)", student_id, len(subject_reports))
    return {
        "student": student,
        "term": term,
        "gpa": calculate_overall_gpa(db, student_id, term_id),
        "subjects": subject_reports,
        "attendance": attendance,
        "service_hours": get_service_hours_summary(db, student_id),
    }
