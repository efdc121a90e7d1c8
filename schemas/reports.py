from typing import List, Optional

from schemas.attendance import AttendanceStatistics
from schemas.common import CamelModel
from schemas.grades import SubjectGradeSummary
from schemas.service_hours import ServiceHoursSummary
from schemas.students import Student
from schemas.terms import Term


# ==========================================================
# [report card] GET /students/{student_id}/report-card
# ==========================================================

class SubjectReport(SubjectGradeSummary):
    subject_id: str
    name: str


class ReportCard(CamelModel):
    student: Student
    term: Optional[Term] = None                 # null = every active term
    gpa: Optional[float] = None
    subjects: List[SubjectReport]
    attendance: AttendanceStatistics
    service_hours: ServiceHoursSummary
