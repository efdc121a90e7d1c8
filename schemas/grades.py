from datetime import datetime
from typing import Optional

from pydantic import Field

from schemas.common import CamelInput, CamelModel


class GradeCreate(CamelInput):
    points_earned: Optional[float] = Field(None, ge=0)  # null = not graded yet
    comment: Optional[str] = None


class GradeUpdate(CamelInput):
    points_earned: Optional[float] = Field(None, ge=0)
    comment: Optional[str] = None


class Grade(CamelModel):
    id: str
    assignment_id: str
    points_earned: Optional[float] = None
    comment: Optional[str] = None
    graded_at: Optional[datetime] = None


# ✅ GET /subjects/{subject_id}/grades/summary
class SubjectGradeSummary(CamelModel):
    percentage: float
    letter_grade: str
    total_assignments: int
    completed_assignments: int


# ✅ GET /students/{student_id}/gpa
class GPAResponse(CamelModel):
    gpa: Optional[float] = None
