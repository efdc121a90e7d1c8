"""
services/grading_schemes.py

- Finds the grading scheme that applies to a subject
  (subject-specific first, then the student's default with subject_id NULL).
- Decodes the JSON text columns. Corrupt text is logged and treated as absent,
  so grading falls back to the default scale instead of failing the request.
"""

import json
import logging
from numbers import Real
from typing import Dict, Optional

from sqlalchemy.orm import Session

from models.grading_schemes import GradingScheme as GradingSchemeModel
from models.subjects import Subject as SubjectModel

logger = logging.getLogger(__name__)

LETTERS = ("A", "B", "C", "D")


def resolve_grading_scheme(db: Session, subject_id: str) -> Optional[GradingSchemeModel]:
    """Scheme for one subject, or None when neither level defines one"""
    subject_scheme = (
        db.query(GradingSchemeModel)
        .filter(GradingSchemeModel.subject_id == subject_id)
        .order_by(GradingSchemeModel.created_at)
        .first()
    )
    if subject_scheme:
        return subject_scheme

    subject = db.query(SubjectModel).filter(SubjectModel.id == subject_id).first()
    if subject is None:
        return None

    return (
        db.query(GradingSchemeModel)
        .filter(GradingSchemeModel.student_id == subject.student_id)
        .filter(GradingSchemeModel.subject_id.is_(None))
        .order_by(GradingSchemeModel.created_at)
        .first()
    )


def _is_number(value) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)


def _load(text: Optional[str], what: str, scheme_id: Optional[str]):
    if not text:
        return None
    try:
        return json.loads(text)
    except (TypeError, ValueError):
        logger.warning("grading scheme %s: %s is not valid JSON", scheme_id, what)
        return None


def parse_letter_cutoffs(text: Optional[str], scheme_id: Optional[str] = None) -> Optional[Dict[str, float]]:
    """{"A": 90, "B": 80, "C": 70, "D": 60} or None"""
    data = _load(text, "letter_cutoffs", scheme_id)
    if data is None:
        return None
    if not isinstance(data, dict) or not all(_is_number(data.get(letter)) for letter in LETTERS):
        logger.warning("grading scheme %s: letter_cutoffs has an unexpected shape", scheme_id)
        return None
    return {letter: float(data[letter]) for letter in LETTERS}


def parse_category_weights(text: Optional[str], scheme_id: Optional[str] = None) -> Optional[Dict[str, float]]:
    """{"Homework": 30, "Test": 70} or None"""
    data = _load(text, "category_weights", scheme_id)
    if data is None:
        return None
    if not isinstance(data, dict) or not all(_is_number(v) for v in data.values()):
        logger.warning("grading scheme %s: category_weights has an unexpected shape", scheme_id)
        return None
    return {str(category): float(weight) for category, weight in data.items()}


def serialize_grading_scheme(scheme: GradingSchemeModel) -> dict:
    """ORM row -> response dict with the JSON columns decoded"""
    return {
        "id": scheme.id,
        "student_id": scheme.student_id,
        "subject_id": scheme.subject_id,
        "letter_cutoffs": parse_letter_cutoffs(scheme.letter_cutoffs, scheme.id),
        "category_weights": parse_category_weights(scheme.category_weights, scheme.id),
        "created_at": scheme.created_at,
    }
