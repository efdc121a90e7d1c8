from database.db import Base, engine

# importing the model modules registers every table on Base.metadata
from models.students import Student  # noqa: F401
from models.subjects import Subject  # noqa: F401
from models.terms import Term  # noqa: F401
from models.assignments import Assignment  # noqa: F401
from models.grades import Grade  # noqa: F401
from models.attendance import Attendance  # noqa: F401
from models.service_hours import ServiceHour  # noqa: F401
from models.grading_schemes import GradingScheme  # noqa: F401


def init_db(bind=None):
    """Create any missing tables."""
    Base.metadata.create_all(bind=bind or engine)


if __name__ == "__main__":
    init_db()
    print("✅ tables created")
