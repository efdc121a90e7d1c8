from sqlalchemy import Column, String, Date, DateTime, func
from sqlalchemy.orm import relationship

from database.db import Base
from models.base import new_id


class Student(Base):
    __tablename__ = "students"  # student master table, root owner of every other row

    id = Column(String(36), primary_key=True, default=new_id)          # UUID (Primary Key)
    first_name = Column(String(100), nullable=False)                    # first name
    last_name = Column(String(100), nullable=False)                     # last name
    grade_level = Column(String(10))                                    # K, 1-12
    date_of_birth = Column(Date)                                        # date of birth
    created_at = Column(DateTime, server_default=func.now())

    # deleting a student removes everything it owns
    subjects = relationship("Subject", back_populates="student", cascade="all, delete")
    terms = relationship("Term", back_populates="student", cascade="all, delete")
    attendance = relationship("Attendance", back_populates="student", cascade="all, delete")
    service_hours = relationship("ServiceHour", back_populates="student", cascade="all, delete")
    grading_schemes = relationship("GradingScheme", back_populates="student", cascade="all, delete")
