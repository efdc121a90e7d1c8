from sqlalchemy import Column, String, Float, Text, Date, DateTime, ForeignKey, func
from sqlalchemy.orm import relationship

from database.db import Base
from models.base import new_id

DEFAULT_SERVICE_CATEGORY = "Community Service"


class ServiceHour(Base):
    __tablename__ = "service_hours"  # volunteer / citizenship hours

    id = Column(String(36), primary_key=True, default=new_id)
    student_id = Column(String(36), ForeignKey("students.id", ondelete="CASCADE"), nullable=False, index=True)
    date = Column(Date, nullable=False)
    hours = Column(Float, nullable=False)
    description = Column(Text, nullable=False)
    category = Column(String(100), default=DEFAULT_SERVICE_CATEGORY)
    created_at = Column(DateTime, server_default=func.now())

    student = relationship("Student", back_populates="service_hours")
