from sqlalchemy import Column, String, Text, Integer, DateTime, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from emplyo.db.base import Base, generate_uuid, utcnow
from emplyo.db.models.enums import DepartmentType


class Course(Base):
    __tablename__ = "courses"

    id = Column(String(36), primary_key=True, default=generate_uuid)
    title = Column(String, nullable=False, index=True)
    description = Column(Text, nullable=True)
    department = Column(DepartmentType, nullable=False)
    duration_hours = Column(Integer, nullable=True)
    created_at = Column(DateTime(timezone=True), default=utcnow, server_default=func.now())
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow, server_default=func.now())

    questions = relationship("QuizQuestion", back_populates="course", cascade="all, delete-orphan")
    enrollments = relationship("CourseEnrollment", back_populates="course", cascade="all, delete-orphan")


class CourseEnrollment(Base):
    """Ties one employee to one course and tracks completion."""
    __tablename__ = "course_enrollments"

    id = Column(String(36), primary_key=True, default=generate_uuid)
    user_id = Column(String(36), ForeignKey("profiles.id", ondelete="CASCADE"), nullable=False, index=True)
    course_id = Column(String(36), ForeignKey("courses.id", ondelete="CASCADE"), nullable=False, index=True)
    enrolled_at = Column(DateTime(timezone=True), default=utcnow, server_default=func.now())
    completed_at = Column(DateTime(timezone=True), nullable=True)
    quiz_score = Column(Integer, nullable=True)

    profile = relationship("Profile", back_populates="enrollments")
    course = relationship("Course", back_populates="enrollments")
    attempts = relationship("QuizAttempt", back_populates="enrollment", cascade="all, delete-orphan")

    __table_args__ = (
        UniqueConstraint("user_id", "course_id", name="uq_course_enrollments_user_course"),
    )
