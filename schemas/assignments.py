from datetime import date, datetime
from typing import Annotated, Optional

from pydantic import AfterValidator, Field

from schemas.common import CamelInput, CamelModel, CamelUpdate, LessonType, MasteryStatus, check_category

Category = Annotated[str, AfterValidator(check_category)]


# ✅ input: POST /subjects/{subject_id}/assignments, the term travels in the body
class AssignmentCreate(CamelInput):
    term_id: str
    title: str = Field(..., min_length=1)
    category: Category                                  # Homework, Quiz, Test, Project, Practice, Lesson
    max_points: Optional[float] = Field(None, ge=0)
    date_assigned: Optional[date] = None
    date_due: Optional[date] = None
    # Khan Academy fields
    lesson_type: Optional[LessonType] = None
    status: Optional[MasteryStatus] = None
    is_khan_lesson: bool = False


# ✅ input: PUT, subject and term are fixed once created
class AssignmentUpdate(CamelUpdate):
    not_null = ("title", "category", "is_khan_lesson")

    title: Optional[str] = Field(None, min_length=1)
    category: Optional[Category] = None
    max_points: Optional[float] = Field(None, ge=0)
    date_assigned: Optional[date] = None
    date_due: Optional[date] = None
    lesson_type: Optional[LessonType] = None
    status: Optional[MasteryStatus] = None
    is_khan_lesson: Optional[bool] = None


class Assignment(CamelModel):
    id: str
    subject_id: str
    term_id: str
    title: str
    category: str
    max_points: Optional[float] = None
    date_assigned: Optional[date] = None
    date_due: Optional[date] = None
    lesson_type: Optional[str] = None
    status: Optional[str] = None
    is_khan_lesson: Optional[bool] = None
    created_at: Optional[datetime] = None
