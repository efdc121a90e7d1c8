from datetime import date, datetime
from typing import Optional

from pydantic import Field

from schemas.common import CamelInput, CamelModel, CamelUpdate


# ✅ input (POST)
class StudentCreate(CamelInput):
    first_name: str = Field(..., min_length=1)          # first name
    last_name: str = Field(..., min_length=1)           # last name
    grade_level: Optional[str] = None                   # K, 1-12
    date_of_birth: Optional[date] = None


# ✅ input (PUT), every field optional
class StudentUpdate(CamelUpdate):
    not_null = ("first_name", "last_name")

    first_name: Optional[str] = Field(None, min_length=1)
    last_name: Optional[str] = Field(None, min_length=1)
    grade_level: Optional[str] = None
    date_of_birth: Optional[date] = None


# ✅ output
class Student(CamelModel):
    id: str
    first_name: str
    last_name: str
    grade_level: Optional[str] = None
    date_of_birth: Optional[date] = None
    created_at: Optional[datetime] = None
