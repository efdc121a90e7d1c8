import datetime as dt
from typing import List, Optional

from pydantic import Field

from schemas.common import AttendanceStatus, CamelInput, CamelModel, CamelUpdate


class AttendanceCreate(CamelInput):
    date: dt.date
    status: AttendanceStatus                            # Present, Absent, Excused
    time_of_day: Optional[str] = None                   # e.g. "9:00 AM - 2:00 PM"
    minutes: Optional[int] = Field(None, ge=0)
    notes: Optional[str] = None                         # what was worked on


class AttendanceUpdate(CamelUpdate):
    not_null = ("date", "status")

    date: Optional[dt.date] = None
    status: Optional[AttendanceStatus] = None
    time_of_day: Optional[str] = None
    minutes: Optional[int] = Field(None, ge=0)
    notes: Optional[str] = None


class Attendance(CamelModel):
    id: str
    student_id: str
    date: dt.date
    status: str
    time_of_day: Optional[str] = None
    minutes: Optional[int] = None
    notes: Optional[str] = None
    created_at: Optional[dt.datetime] = None


# ==========================================================
# statistics / reports
# ==========================================================

class AttendanceSummary(CamelModel):
    total_days: int
    present_days: int
    absent_days: int
    excused_days: int
    attendance_rate: float


class AttendanceStatistics(AttendanceSummary):
    current_streak: int
    longest_streak: int


class DailyRecord(CamelModel):
    date: dt.date
    status: str
    minutes: Optional[int] = None
    notes: Optional[str] = None


class MonthlyAttendanceReport(AttendanceSummary):
    month: str
    year: int
    daily_records: List[DailyRecord]


class ReportPeriod(CamelModel):
    start_date: dt.date
    end_date: dt.date


class AttendanceReport(CamelModel):
    period: ReportPeriod
    summary: AttendanceSummary
    daily_records: List[DailyRecord]
