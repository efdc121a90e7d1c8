from sqlalchemy import Column, String, Text, DateTime, ForeignKey, func
from sqlalchemy.orm import relationship

from database.db import Base
from models.base import new_id


class GradingScheme(Base):
    __tablename__ = "grading_schemes"  # letter cutoffs + category weights

    id = Column(String(36), primary_key=True, default=new_id)
    student_id = Column(String(36), ForeignKey("students.id", ondelete="CASCADE"), nullable=False, index=True)
    subject_id = Column(String(36), ForeignKey("subjects.id", ondelete="CASCADE"), index=True)  # NULL = student default
    letter_cutoffs = Column(Text, nullable=False)                       # JSON: {"A": 90, "B": 80, "C": 70, "D": 60}
    category_weights = Column(Text, nullable=False)                     # JSON: {"Homework": 30, "Test": 70}
    created_at = Column(DateTime, server_default=func.now())

    student = relationship("Student", back_populates="grading_schemes")
    subject = relationship("Subject", back_populates="grading_schemes")
