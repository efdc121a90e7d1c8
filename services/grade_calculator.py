"""
services/grade_calculator.py

Subject averages, letter grades and GPA.

- A grade row is usable when points_earned is set and max_points > 0.
- With category weights, each category's percentage is weighted and the sum is
  divided by the weights of the categories that actually have usable rows.
- Without weights, earned points are summed over max points.
"""

import logging
from collections import defaultdict
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from sqlalchemy import distinct, func
from sqlalchemy.orm import Session

from models.assignments import Assignment as AssignmentModel
from models.grades import Grade as GradeModel
from models.grading_schemes import GradingScheme as GradingSchemeModel
from models.subjects import Subject as SubjectModel
from models.terms import Term as TermModel
from services.grading_schemes import parse_category_weights, parse_letter_cutoffs, resolve_grading_scheme

logger = logging.getLogger(__name__)

# (points_earned, max_points, category)
GradeRow = Tuple[Optional[float], Optional[float], str]

DEFAULT_LETTER_CUTOFFS = (("A", 90.0), ("B", 80.0), ("C", 70.0), ("D", 60.0))
GPA_BANDS = ((90.0, 4.0), (80.0, 3.0), (70.0, 2.0), (60.0, 1.0))


def _is_graded(points_earned, max_points) -> bool:
    return points_earned is not None and max_points is not None and max_points > 0


def fetch_grade_rows(db: Session, subject_id: str, term_id: Optional[str] = None) -> List[GradeRow]:
    query = (
        db.query(GradeModel.points_earned, AssignmentModel.max_points, AssignmentModel.category)
        .join(AssignmentModel, GradeModel.assignment_id == AssignmentModel.id)
        .filter(AssignmentModel.subject_id == subject_id)
    )
    if term_id:
        query = query.filter(AssignmentModel.term_id == term_id)
    return [tuple(row) for row in query.all()]


def simple_average(rows: Iterable[GradeRow]) -> Optional[float]:
    earned_total = 0.0
    max_total = 0.0
    for points_earned, max_points, _ in rows:
        if _is_graded(points_earned, max_points):
            earned_total += points_earned
            max_total += max_points
    return earned_total / max_total * 100 if max_total > 0 else None


def weighted_average(rows: Iterable[GradeRow], weights: Dict[str, float]) -> Optional[float]:
    totals: Dict[str, List[float]] = defaultdict(lambda: [0.0, 0.0])
    for points_earned, max_points, category in rows:
        if _is_graded(points_earned, max_points):
            totals[category][0] += points_earned
            totals[category][1] += max_points

    weighted_sum = 0.0
    total_weight = 0.0
    for category, weight in weights.items():
        if category not in totals:
            continue
        earned, maximum = totals[category]
        if maximum > 0:
            weighted_sum += earned / maximum * 100 * weight
            total_weight += weight

    return weighted_sum / total_weight if total_weight > 0 else None


def average_from_rows(rows: Sequence[GradeRow], scheme: Optional[GradingSchemeModel] = None) -> Optional[float]:
    if not rows:
        return None
    weights = parse_category_weights(scheme.category_weights, scheme.id) if scheme else None
    if weights is not None:
        return weighted_average(rows, weights)
    return simple_average(rows)


def calculate_subject_average(db: Session, subject_id: str, term_id: Optional[str] = None) -> Optional[float]:
    """Percentage for a subject (optionally one term); None when nothing is computable"""
    rows = fetch_grade_rows(db, subject_id, term_id)
    if not rows:
        return None
    scheme = resolve_grading_scheme(db, subject_id)
    return average_from_rows(rows, scheme)


def calculate_letter_grade(percentage: Optional[float], scheme: Optional[GradingSchemeModel] = None) -> str:
    if percentage is None:
        return "N/A"

    cutoffs = DEFAULT_LETTER_CUTOFFS
    if scheme is not None:
        custom = parse_letter_cutoffs(scheme.letter_cutoffs, scheme.id)
        if custom is not None:
            cutoffs = tuple((letter, custom[letter]) for letter, _ in DEFAULT_LETTER_CUTOFFS)

    for letter, minimum in cutoffs:
        if percentage >= minimum:
            return letter
    return "F"


def get_subject_grade_summary(db: Session, subject_id: str, term_id: Optional[str] = None) -> dict:
    """
    percentage is 0 when no average exists while letter_grade stays "N/A";
    callers rely on both behaviours.
    """
    rows = fetch_grade_rows(db, subject_id, term_id)
    scheme = resolve_grading_scheme(db, subject_id)
    average = average_from_rows(rows, scheme)

    assignments = db.query(AssignmentModel.id).filter(AssignmentModel.subject_id == subject_id)
    # assignments with at least one usable grade row
    completed = (
        db.query(func.count(distinct(GradeModel.assignment_id)))
        .join(AssignmentModel, GradeModel.assignment_id == AssignmentModel.id)
        .filter(AssignmentModel.subject_id == subject_id)
        .filter(GradeModel.points_earned.isnot(None))
        .filter(AssignmentModel.max_points > 0)
    )
    if term_id:
        assignments = assignments.filter(AssignmentModel.term_id == term_id)
        completed = completed.filter(AssignmentModel.term_id == term_id)

    return {
        "percentage": average or 0,
        "letter_grade": calculate_letter_grade(average, scheme),
        "total_assignments": assignments.count(),
        "completed_assignments": completed.scalar() or 0,
    }


def gpa_from_percentage(percentage: float) -> float:
    for minimum, points in GPA_BANDS:
        if percentage >= minimum:
            return points
    return 0.0


def calculate_overall_gpa(db: Session, student_id: str, term_id: Optional[str] = None) -> Optional[float]:
    """
    4-point GPA from the mean of subject averages.
    Without term_id every active term adds its own average per subject.
    """
    subject_ids = [row.id for row in db.query(SubjectModel.id).filter(SubjectModel.student_id == student_id).all()]
    if not subject_ids:
        return None

    if term_id:
        term_ids = [term_id]
    else:
        term_ids = [
            row.id for row in
            db.query(TermModel.id)
            .filter(TermModel.student_id == student_id)
            .filter(TermModel.is_active.is_(True))
            .all()
        ]

    averages: List[float] = []
    for subject_id in subject_ids:
        for tid in term_ids:
            average = calculate_subject_average(db, subject_id, tid)
            if average is not None:
                averages.append(average)

    if not averages:
        return None

    mean = sum(averages) / len(averages)
    logger.debug("student %s: %d subject averages, mean %.2f", student_id, len(averages), mean)
    return gpa_from_percentage(mean)
