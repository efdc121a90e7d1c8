from sqlalchemy import Column, String, Boolean, DateTime, ForeignKey, func
from sqlalchemy.orm import relationship

from database.db import Base
from models.base import new_id


class Subject(Base):
    __tablename__ = "subjects"  # subjects taken by one student

    id = Column(String(36), primary_key=True, default=new_id)
    student_id = Column(String(36), ForeignKey("students.id", ondelete="CASCADE"), nullable=False, index=True)
    name = Column(String(100), nullable=False)                          # Reading, Math, ...
    is_active = Column(Boolean, default=True)
    created_at = Column(DateTime, server_default=func.now())

    student = relationship("Student", back_populates="subjects")
    assignments = relationship("Assignment", back_populates="subject", cascade="all, delete")
    grading_schemes = relationship("GradingScheme", back_populates="subject", cascade="all, delete")
