import csv
import io
from datetime import date

import pytest

from models.attendance import Attendance
from models.students import Student
from scripts.import_attendance import import_attendance
from utils.errors import NotFoundError

CSV_TEXT = """date,status,minutes,notes
2024-03-01,Present,240,fractions
2024-03-02,Absent,,
2024-03-01,Present,,second copy of the same day
2024-03-03,Late,,
03/04/2024,Present,,
2024-03-05,Excused,,
"""


@pytest.fixture
def student(db):
    s = Student(first_name="Ada", last_name="Lovelace")
    db.add(s)
    db.commit()
    return s


def test_import_skips_invalid_and_duplicate_rows(db, student):
    result = import_attendance(db, student.id, csv.DictReader(io.StringIO(CSV_TEXT)))
    assert result == {"imported": 3, "skipped": 3}

    rows = db.query(Attendance).filter(Attendance.student_id == student.id).order_by(Attendance.date).all()
    assert [(r.date, r.status) for r in rows] == [
        (date(2024, 3, 1), "Present"),
        (date(2024, 3, 2), "Absent"),
        (date(2024, 3, 5), "Excused"),
    ]
    assert rows[0].minutes == 240
    assert rows[1].notes is None


def test_import_skips_days_already_recorded(db, student):
    db.add(Attendance(student_id=student.id, date=date(2024, 3, 2), status="Present"))
    db.commit()

    result = import_attendance(db, student.id, csv.DictReader(io.StringIO(CSV_TEXT)))
    assert result == {"imported": 2, "skipped": 4}


def test_import_for_missing_student(db):
    with pytest.raises(NotFoundError):
        import_attendance(db, "nope", [])


def test_command_line_entry_point(db, student, tmp_path, monkeypatch, capsys):
    import scripts.import_attendance as importer
    from conftest import TestingSessionLocal

    csv_path = tmp_path / "attendance.csv"
    csv_path.write_text(CSV_TEXT, encoding="utf-8")
    monkeypatch.setattr(importer, "SessionLocal", TestingSessionLocal)
    monkeypatch.setattr("sys.argv", ["import_attendance", str(csv_path), student.id])

    importer.main()

    assert "3 imported, 3 skipped" in capsys.readouterr().out
    assert f"python -m {importer.__name__} " in importer.__doc__
