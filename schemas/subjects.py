from datetime import datetime
from typing import Optional

from pydantic import Field

from schemas.common import CamelInput, CamelModel, CamelUpdate


# ✅ input: POST /students/{student_id}/subjects, owner comes from the path
class SubjectCreate(CamelInput):
    name: str = Field(..., min_length=1)                # subject name (Reading, Math, ...)
    is_active: bool = True


# ✅ input: PUT, cannot move a subject to another student
class SubjectUpdate(CamelUpdate):
    not_null = ("name", "is_active")

    name: Optional[str] = Field(None, min_length=1)
    is_active: Optional[bool] = None


# ✅ output
class Subject(CamelModel):
    id: str
    student_id: str
    name: str
    is_active: Optional[bool] = None
    created_at: Optional[datetime] = None
