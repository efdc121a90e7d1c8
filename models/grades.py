from sqlalchemy import Column, String, Float, Text, DateTime, ForeignKey, func
from sqlalchemy.orm import relationship

from database.db import Base
from models.base import new_id


class Grade(Base):
    __tablename__ = "grades"  # one submission score for an assignment

    id = Column(String(36), primary_key=True, default=new_id)
    assignment_id = Column(String(36), ForeignKey("assignments.id", ondelete="CASCADE"), nullable=False, index=True)
    points_earned = Column(Float)                                       # NULL = not graded yet
    comment = Column(Text)
    graded_at = Column(DateTime, server_default=func.now())

    assignment = relationship("Assignment", back_populates="grades")
