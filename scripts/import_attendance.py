"""
Bulk-load attendance from a CSV export.

Columns: date,status[,minutes,notes,time_of_day]
Rows that fail validation or hit an already-recorded day are skipped.

    python -m scripts.import_attendance data/attendance.csv <student_id>
"""

import argparse
import csv
import logging
from typing import Iterable, Mapping

from pydantic import ValidationError as PydanticValidationError
from sqlalchemy.orm import Session

from database.db import SessionLocal
from models.attendance import Attendance as AttendanceModel
from models.students import Student as StudentModel
from schemas.attendance import AttendanceCreate
from utils.errors import NotFoundError

logger = logging.getLogger(__name__)


def import_attendance(db: Session, student_id: str, rows: Iterable[Mapping[str, str]]) -> dict:
    if db.query(StudentModel).filter(StudentModel.id == student_id).first() is None:
        raise NotFoundError("Student")

    recorded = {
        d for (d,) in db.query(AttendanceModel.date).filter(AttendanceModel.student_id == student_id).all()
    }
    imported, skipped = 0, 0

    for line_no, row in enumerate(rows, start=2):       # line 1 is the header
        values = {k: v for k, v in row.items() if k and v not in (None, "")}
        try:
            record = AttendanceCreate.model_validate(values)
        except PydanticValidationError as e:
            logger.warning("line %d skipped: %s", line_no, e.errors()[0].get("msg"))
            skipped += 1
            continue
        if record.date in recorded:
            logger.warning("line %d skipped: %s already recorded", line_no, record.date)
            skipped += 1
            continue

        db.add(AttendanceModel(student_id=student_id, **record.model_dump()))
        recorded.add(record.date)
        imported += 1

    db.commit()
    return {"imported": imported, "skipped": skipped}


def main():
    parser = argparse.ArgumentParser(description="Import attendance rows from CSV")
    parser.add_argument("csv_path", help="Path to the CSV file")
    parser.add_argument("student_id", help="Student the rows belong to")
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO)
    db: Session = SessionLocal()
    try:
        with open(args.csv_path, newline="", encoding="utf-8-sig") as csvfile:
            result = import_attendance(db, args.student_id, csv.DictReader(csvfile))
    finally:
        db.close()
    print(f"✅ attendance CSV -> DB: {result['imported']} imported, {result['skipped']} skipped")


if __name__ == "__main__":
    main()
