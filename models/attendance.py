from sqlalchemy import Column, String, Integer, Text, Date, DateTime, ForeignKey, UniqueConstraint, func
from sqlalchemy.orm import relationship

from database.db import Base
from models.base import new_id


class Attendance(Base):
    __tablename__ = "attendance"  # one record per student per day
    __table_args__ = (
        UniqueConstraint("student_id", "date", name="uq_attendance_student_date"),
    )

    id = Column(String(36), primary_key=True, default=new_id)
    student_id = Column(String(36), ForeignKey("students.id", ondelete="CASCADE"), nullable=False, index=True)
    date = Column(Date, nullable=False)
    status = Column(String(20), nullable=False)                         # Present, Absent, Excused
    time_of_day = Column(String(50))                                    # e.g. "9:00 AM - 2:00 PM"
    minutes = Column(Integer)
    notes = Column(Text)                                                # what was worked on
    created_at = Column(DateTime, server_default=func.now())

    student = relationship("Student", back_populates="attendance")
