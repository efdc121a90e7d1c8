"""
services/attendance_statistics.py

Attendance counters, rate, streaks and the monthly / date-range reports.
"""

import calendar
import logging
import re
from datetime import date, datetime
from typing import List, Optional, Sequence, Tuple, Union

from sqlalchemy.orm import Session

from models.attendance import Attendance as AttendanceModel

logger = logging.getLogger(__name__)

DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")

PRESENT = "Present"
ABSENT = "Absent"
EXCUSED = "Excused"

DateLike = Union[str, date, None]


def parse_iso_date(value: DateLike) -> Optional[date]:
    """YYYY-MM-DD string (or date) -> date; None for anything else"""
    if value is None or isinstance(value, date):
        return value
    if not DATE_PATTERN.match(value):
        return None
    try:
        return datetime.strptime(value, "%Y-%m-%d").date()
    except ValueError:
        return None


def get_attendance_by_student(
    db: Session,
    student_id: str,
    start_date: DateLike = None,
    end_date: DateLike = None,
) -> List[AttendanceModel]:
    """
    Newest first. Bounds are inclusive; a malformed bound is ignored here,
    the routers reject it before it gets this far.
    """
    query = db.query(AttendanceModel).filter(AttendanceModel.student_id == student_id)

    start = parse_iso_date(start_date)
    end = parse_iso_date(end_date)
    if start_date is not None and start is None:
        logger.debug("ignoring malformed start date %r", start_date)
    if end_date is not None and end is None:
        logger.debug("ignoring malformed end date %r", end_date)

    if start:
        query = query.filter(AttendanceModel.date >= start)
    if end:
        query = query.filter(AttendanceModel.date <= end)
    return query.order_by(AttendanceModel.date.desc()).all()


def calculate_streaks(statuses: Sequence[str]) -> Tuple[int, int]:
    """
    statuses in chronological order -> (current_streak, longest_streak)

    current: Present run that ends at the most recent record.
    longest: longest Present run anywhere.
    """
    current = 0
    for status in reversed(statuses):
        if status != PRESENT:
            break
        current += 1

    longest = 0
    run = 0
    for status in statuses:
        run = run + 1 if status == PRESENT else 0
        longest = max(longest, run)

    return current, longest


def summarize(records: Sequence[AttendanceModel]) -> dict:
    present = sum(1 for r in records if r.status == PRESENT)
    absent = sum(1 for r in records if r.status == ABSENT)
    excused = sum(1 for r in records if r.status == EXCUSED)
    total = len(records)
    rate = round(present / total * 100, 2) if total else 0

    return {
        "total_days": total,
        "present_days": present,
        "absent_days": absent,
        "excused_days": excused,
        "attendance_rate": rate,
    }


def _statistics_from_records(records: Sequence[AttendanceModel]) -> dict:
    stats = summarize(records)
    chronological = sorted(records, key=lambda r: r.date)
    current, longest = calculate_streaks([r.status for r in chronological])
    stats["current_streak"] = current
    stats["longest_streak"] = longest
    return stats


def get_attendance_statistics(
    db: Session,
    student_id: str,
    start_date: DateLike = None,
    end_date: DateLike = None,
) -> dict:
    records = get_attendance_by_student(db, student_id, start_date, end_date)
    return _statistics_from_records(records)


def daily_records(records: Sequence[AttendanceModel]) -> List[dict]:
    # empty minutes / notes are left out of the report
    return [
        {
            "date": r.date,
            "status": r.status,
            "minutes": r.minutes or None,
            "notes": r.notes or None,
        }
        for r in records
    ]


def get_monthly_attendance_report(db: Session, student_id: str, year: int, month: int) -> dict:
    last_day = calendar.monthrange(year, month)[1]
    records = get_attendance_by_student(db, student_id, date(year, month, 1), date(year, month, last_day))
    stats = summarize(records)

    return {
        "month": calendar.month_name[month],
        "year": year,
        **stats,
        "daily_records": daily_records(records),
    }


def get_attendance_report(db: Session, student_id: str, start_date: date, end_date: date) -> dict:
    records = get_attendance_by_student(db, student_id, start_date, end_date)
    return {
        "period": {"start_date": start_date, "end_date": end_date},
        "summary": summarize(records),
        "daily_records": daily_records(records),
    }
