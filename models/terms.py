from sqlalchemy import Column, String, Boolean, Date, DateTime, ForeignKey, func
from sqlalchemy.orm import relationship

from database.db import Base
from models.base import new_id


class Term(Base):
    __tablename__ = "terms"  # terms / semesters, date range is inclusive

    id = Column(String(36), primary_key=True, default=new_id)
    student_id = Column(String(36), ForeignKey("students.id", ondelete="CASCADE"), nullable=False, index=True)
    name = Column(String(100), nullable=False)                          # "Term 1", "Fall Semester"
    start_date = Column(Date, nullable=False)
    end_date = Column(Date, nullable=False)
    is_active = Column(Boolean, default=True)                           # several may be active at once
    created_at = Column(DateTime, server_default=func.now())

    student = relationship("Student", back_populates="terms")
    assignments = relationship("Assignment", back_populates="term", cascade="all, delete")
