import json
from datetime import date

import pytest

from models.assignments import Assignment
from models.grades import Grade
from models.grading_schemes import GradingScheme
from models.students import Student
from models.subjects import Subject
from models.terms import Term
from services.grade_calculator import (
    calculate_letter_grade,
    calculate_overall_gpa,
    calculate_subject_average,
    get_subject_grade_summary,
    gpa_from_percentage,
    simple_average,
    weighted_average,
)
from services.grading_schemes import parse_category_weights, parse_letter_cutoffs, resolve_grading_scheme


# ==========================================================
# fixtures
# ==========================================================

@pytest.fixture
def student(db):
    s = Student(first_name="Ada", last_name="Lovelace")
    db.add(s)
    db.commit()
    return s


@pytest.fixture
def subject(db, student):
    s = Subject(student_id=student.id, name="Math")
    db.add(s)
    db.commit()
    return s


@pytest.fixture
def term(db, student):
    t = Term(student_id=student.id, name="Term 1", start_date=date(2024, 1, 1), end_date=date(2024, 6, 30))
    db.add(t)
    db.commit()
    return t


def add_graded(db, subject, term, category, earned, max_points):
    assignment = Assignment(subject_id=subject.id, term_id=term.id, title=category, category=category,
                            max_points=max_points)
    db.add(assignment)
    db.flush()
    db.add(Grade(assignment_id=assignment.id, points_earned=earned))
    db.commit()
    return assignment


def add_scheme(db, student, subject=None, cutoffs=None, weights=None):
    scheme = GradingScheme(
        student_id=student.id,
        subject_id=subject.id if subject else None,
        letter_cutoffs=cutoffs if isinstance(cutoffs, str) else json.dumps(cutoffs or {"A": 90, "B": 80, "C": 70, "D": 60}),
        category_weights=weights if isinstance(weights, str) else json.dumps(weights or {}),
    )
    db.add(scheme)
    db.commit()
    return scheme


# ==========================================================
# pure calculations
# ==========================================================

def test_simple_average_skips_ungraded_rows():
    rows = [(80, 100, "Homework"), (None, 100, "Homework"), (5, 0, "Quiz"), (45, 50, "Test")]
    assert simple_average(rows) == pytest.approx(125 / 150 * 100)


def test_simple_average_none_without_points():
    assert simple_average([(None, 100, "Homework"), (3, None, "Quiz")]) is None


def test_weighted_average_excludes_absent_categories():
    rows = [(80, 100, "Homework"), (18, 20, "Homework")]
    assert weighted_average(rows, {"Homework": 50, "Quiz": 50}) == pytest.approx(98 / 120 * 100)


def test_weighted_average_uses_category_totals():
    rows = [(80, 100, "Homework"), (45, 50, "Test")]
    assert weighted_average(rows, {"Homework": 30, "Test": 70}) == pytest.approx(87)


def test_weighted_average_none_when_no_weighted_category_observed():
    assert weighted_average([(10, 10, "Lesson")], {"Homework": 100}) is None


@pytest.mark.parametrize("percentage, letter", [
    (None, "N/A"),
    (100, "A"),
    (90, "A"),
    (89.99, "B"),
    (80, "B"),
    (70, "C"),
    (60, "D"),
    (59.9, "F"),
    (0, "F"),
])
def test_letter_grade_default_scale(percentage, letter):
    assert calculate_letter_grade(percentage) == letter


@pytest.mark.parametrize("percentage, gpa", [(89.9, 3.0), (90.0, 4.0), (79.99, 2.0), (60, 1.0), (12, 0.0)])
def test_gpa_bands_are_discrete(percentage, gpa):
    assert gpa_from_percentage(percentage) == gpa


# ==========================================================
# scheme resolution / parsing
# ==========================================================

def test_subject_scheme_wins_over_student_default(db, student, subject):
    add_scheme(db, student)
    own = add_scheme(db, student, subject)
    assert resolve_grading_scheme(db, subject.id).id == own.id


def test_student_default_scheme_used_as_fallback(db, student, subject):
    default = add_scheme(db, student)
    assert resolve_grading_scheme(db, subject.id).id == default.id


def test_missing_subject_has_no_scheme(db):
    assert resolve_grading_scheme(db, "does-not-exist") is None


def test_corrupt_scheme_text_is_treated_as_absent(caplog):
    with caplog.at_level("WARNING"):
        assert parse_letter_cutoffs("{not json", "s1") is None
        assert parse_category_weights('["Homework"]', "s1") is None
    assert "s1" in caplog.text


def test_custom_cutoffs_are_inclusive(db, student, subject):
    scheme = add_scheme(db, student, subject, cutoffs={"A": 93, "B": 85, "C": 77, "D": 70})
    assert calculate_letter_grade(93, scheme) == "A"
    assert calculate_letter_grade(92.9, scheme) == "B"
    assert calculate_letter_grade(70, scheme) == "D"
    assert calculate_letter_grade(69.9, scheme) == "F"


def test_corrupt_cutoffs_fall_back_to_default_scale(db, student, subject):
    scheme = add_scheme(db, student, subject, cutoffs="{broken")
    assert calculate_letter_grade(85, scheme) == "B"


# ==========================================================
# database-backed aggregation
# ==========================================================

def test_weighted_subject_average_and_letter(db, student, subject, term):
    add_graded(db, subject, term, "Homework", 80, 100)
    add_graded(db, subject, term, "Test", 45, 50)
    add_scheme(db, student, weights={"Homework": 30, "Test": 70})

    summary = get_subject_grade_summary(db, subject.id)
    assert summary["percentage"] == pytest.approx(87)
    assert summary["letter_grade"] == "B"
    assert summary["total_assignments"] == 2
    assert summary["completed_assignments"] == 2


def test_corrupt_weights_fall_back_to_simple_average(db, student, subject, term):
    add_graded(db, subject, term, "Homework", 80, 100)
    add_graded(db, subject, term, "Test", 45, 50)
    add_scheme(db, student, weights="{oops")

    assert calculate_subject_average(db, subject.id) == pytest.approx(125 / 150 * 100)


def test_summary_reports_zero_when_average_undefined(db, subject, term):
    db.add(Assignment(subject_id=subject.id, term_id=term.id, title="Reading", category="Homework", max_points=10))
    db.commit()

    assert calculate_subject_average(db, subject.id) is None
    summary = get_subject_grade_summary(db, subject.id)
    assert summary["percentage"] == 0
    assert summary["letter_grade"] == "N/A"
    assert summary["total_assignments"] == 1
    assert summary["completed_assignments"] == 0


def test_completed_counts_assignments_not_grade_rows(db, subject, term):
    assignment = add_graded(db, subject, term, "Quiz", 8, 10)
    db.add(Grade(assignment_id=assignment.id, points_earned=9))
    db.commit()

    assert get_subject_grade_summary(db, subject.id)["completed_assignments"] == 1


def test_term_filter(db, student, subject, term):
    other = Term(student_id=student.id, name="Term 2", start_date=date(2024, 7, 1), end_date=date(2024, 12, 31))
    db.add(other)
    db.commit()
    add_graded(db, subject, term, "Homework", 50, 100)
    add_graded(db, subject, other, "Homework", 100, 100)

    assert calculate_subject_average(db, subject.id, term.id) == pytest.approx(50)
    assert calculate_subject_average(db, subject.id, other.id) == pytest.approx(100)
    assert calculate_subject_average(db, subject.id) == pytest.approx(75)


def test_gpa_none_without_subjects(db, student):
    assert calculate_overall_gpa(db, student.id) is None


def test_gpa_none_without_grades(db, subject, student, term):
    assert calculate_overall_gpa(db, student.id) is None


def test_gpa_pools_every_active_term(db, student, subject, term):
    second = Term(student_id=student.id, name="Term 2", start_date=date(2024, 7, 1), end_date=date(2024, 12, 31))
    inactive = Term(student_id=student.id, name="Old", start_date=date(2023, 1, 1), end_date=date(2023, 6, 30),
                    is_active=False)
    db.add_all([second, inactive])
    db.commit()
    add_graded(db, subject, term, "Homework", 95, 100)
    add_graded(db, subject, second, "Homework", 85, 100)
    add_graded(db, subject, inactive, "Homework", 0, 100)

    # (95 + 85) / 2 = 90 -> 4.0, the inactive term is ignored
    assert calculate_overall_gpa(db, student.id) == 4.0
    assert calculate_overall_gpa(db, student.id, second.id) == 3.0
