import datetime as dt
from typing import Dict, Optional

from pydantic import Field

from models.service_hours import DEFAULT_SERVICE_CATEGORY
from schemas.common import CamelInput, CamelModel, CamelUpdate


class ServiceHourCreate(CamelInput):
    date: dt.date
    hours: float = Field(..., gt=0)
    description: str = Field(..., min_length=1)
    category: Optional[str] = DEFAULT_SERVICE_CATEGORY


class ServiceHourUpdate(CamelUpdate):
    not_null = ("date", "hours", "description")

    date: Optional[dt.date] = None
    hours: Optional[float] = Field(None, gt=0)
    description: Optional[str] = Field(None, min_length=1)
    category: Optional[str] = None


class ServiceHour(CamelModel):
    id: str
    student_id: str
    date: dt.date
    hours: float
    description: str
    category: Optional[str] = None
    created_at: Optional[dt.datetime] = None


# ✅ GET /students/{student_id}/service-hours/summary
class ServiceHoursSummary(CamelModel):
    total_hours: float
    entries: int
    this_month_hours: float
    by_category: Dict[str, float]
    year_goal: float
    progress_percentage: float
