"""
schemas/common.py

- Shared schemas used across the project (Pydantic v2)
- Contents:
  1) CamelModel: camelCase JSON on the wire, snake_case in Python
     CamelInput / CamelUpdate: request bodies (unknown fields, nulls on required columns)
  2) Closed value sets: assignment categories, attendance statuses, Khan fields
  3) Error response: ErrorResponse
"""

from __future__ import annotations

from typing import ClassVar, Literal, Optional, Tuple

from pydantic import BaseModel, ConfigDict, model_validator
from pydantic.alias_generators import to_camel

from utils.errors import UnknownCategoryError


# =========================================================
# 1) Base model
# =========================================================

class CamelModel(BaseModel):
    """
    Base for every request/response schema
    - serializes with camelCase aliases (firstName, pointsEarned, ...)
    - accepts both camelCase and snake_case on input
    - reads straight from ORM objects
    """
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class CamelInput(CamelModel):
    """Request bodies: unknown fields are rejected"""
    model_config = ConfigDict(extra="forbid")


class CamelUpdate(CamelInput):
    """
    PUT bodies: every field optional, but columns listed in `not_null`
    cannot be cleared with an explicit null
    """
    not_null: ClassVar[Tuple[str, ...]] = ()

    @model_validator(mode="after")
    def _reject_nulls(self):
        for name in self.not_null:
            if name in self.model_fields_set and getattr(self, name) is None:
                raise ValueError(f"{to_camel(name)} cannot be null")
        return self


# =========================================================
# 2) Closed value sets
# =========================================================

ASSIGNMENT_CATEGORIES = ("Homework", "Quiz", "Test", "Project", "Practice", "Lesson")

AttendanceStatus = Literal["Present", "Absent", "Excused"]
LessonType = Literal["practice", "quiz", "test", "lesson"]
MasteryStatus = Literal["unfamiliar", "familiar", "proficient", "mastered", "not started", "attempted"]


def check_category(value: Optional[str]) -> Optional[str]:
    """Reject categories outside ASSIGNMENT_CATEGORIES with an explicit message"""
    if value is None:
        return value
    if value not in ASSIGNMENT_CATEGORIES:
        raise ValueError(str(UnknownCategoryError(value)))
    return value


# =========================================================
# 3) Error response
# =========================================================

class ErrorResponse(BaseModel):
    """Body of every non-2xx response"""
    error: str
