from sqlalchemy import Column, String, Float, Boolean, Date, DateTime, ForeignKey, func
from sqlalchemy.orm import relationship

from database.db import Base
from models.base import new_id


class Assignment(Base):
    __tablename__ = "assignments"  # assignments, also used for Khan Academy lessons

    id = Column(String(36), primary_key=True, default=new_id)
    subject_id = Column(String(36), ForeignKey("subjects.id", ondelete="CASCADE"), nullable=False, index=True)
    term_id = Column(String(36), ForeignKey("terms.id", ondelete="CASCADE"), nullable=False, index=True)
    title = Column(String(200), nullable=False)
    category = Column(String(50), nullable=False)                       # free text in storage
    max_points = Column(Float)
    date_assigned = Column(Date)
    date_due = Column(Date)
    # Khan Academy fields
    lesson_type = Column(String(20))                                    # practice, quiz, test, lesson
    status = Column(String(20))                                         # unfamiliar ... mastered
    is_khan_lesson = Column(Boolean, default=False)
    created_at = Column(DateTime, server_default=func.now())

    subject = relationship("Subject", back_populates="assignments")
    term = relationship("Term", back_populates="assignments")
    grades = relationship("Grade", back_populates="assignment", cascade="all, delete")
