from datetime import date, datetime
from typing import Optional

from pydantic import Field, model_validator

from schemas.common import CamelInput, CamelModel, CamelUpdate


class TermCreate(CamelInput):
    name: str = Field(..., min_length=1)                # "Term 1", "Fall Semester"
    start_date: date
    end_date: date
    is_active: bool = True

    @model_validator(mode="after")
    def _check_range(self):
        if self.start_date > self.end_date:
            raise ValueError("Start date must be before end date")
        return self


class TermUpdate(CamelUpdate):
    not_null = ("name", "start_date", "end_date", "is_active")

    name: Optional[str] = Field(None, min_length=1)
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    is_active: Optional[bool] = None


class Term(CamelModel):
    id: str
    student_id: str
    name: str
    start_date: date
    end_date: date
    is_active: Optional[bool] = None
    created_at: Optional[datetime] = None
