import json
from datetime import datetime
from typing import Annotated, Dict, Optional

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, model_validator

from schemas.common import CamelInput, CamelModel, check_category


# ==========================================================
# JSON payloads stored as text on grading_schemes
# ==========================================================

class LetterCutoffs(BaseModel):
    """Minimum percentage for each letter, e.g. {"A": 90, "B": 80, "C": 70, "D": 60}"""
    model_config = ConfigDict(extra="forbid")

    A: float = Field(..., ge=0, le=100)
    B: float = Field(..., ge=0, le=100)
    C: float = Field(..., ge=0, le=100)
    D: float = Field(..., ge=0, le=100)


class CategoryWeights(BaseModel):
    """Percentage weight per assignment category; need not sum to 100"""
    model_config = ConfigDict(extra="forbid")

    Homework: float = Field(0, ge=0, le=100)
    Quiz: float = Field(0, ge=0, le=100)
    Test: float = Field(0, ge=0, le=100)
    Project: float = Field(0, ge=0, le=100)
    Practice: float = Field(0, ge=0, le=100)
    Lesson: float = Field(0, ge=0, le=100)

    @model_validator(mode="before")
    @classmethod
    def _known_categories(cls, data):
        if isinstance(data, dict):
            for key in data:
                check_category(key)
        return data


def _decode_json_text(value):
    # the API accepts either an object or its JSON string form
    if isinstance(value, str):
        try:
            return json.loads(value)
        except json.JSONDecodeError:
            raise ValueError("must be an object or a JSON string")
    return value


LetterCutoffsIn = Annotated[LetterCutoffs, BeforeValidator(_decode_json_text)]
CategoryWeightsIn = Annotated[CategoryWeights, BeforeValidator(_decode_json_text)]


# ==========================================================
# request / response
# ==========================================================

class GradingSchemeCreate(CamelInput):
    subject_id: Optional[str] = None                    # null = default for the whole student
    letter_cutoffs: LetterCutoffsIn
    category_weights: CategoryWeightsIn


class GradingSchemeUpdate(CamelInput):
    letter_cutoffs: Optional[LetterCutoffsIn] = None
    category_weights: Optional[CategoryWeightsIn] = None


class GradingScheme(CamelModel):
    id: str
    student_id: str
    subject_id: Optional[str] = None
    # null when the stored text can no longer be parsed
    letter_cutoffs: Optional[Dict[str, float]] = None
    category_weights: Optional[Dict[str, float]] = None
    created_at: Optional[datetime] = None

