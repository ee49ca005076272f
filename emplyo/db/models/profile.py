from sqlalchemy import Column, String, DateTime, Numeric
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from emplyo.db.base import Base, generate_uuid, utcnow
from emplyo.db.models.enums import DepartmentType


class Profile(Base):
    """
    An employee or administrator.

    The profile id doubles as the authentication identity (JWT subject).
    """
    __tablename__ = "profiles"

    id = Column(String(36), primary_key=True, default=generate_uuid)
    full_name = Column(String, nullable=False)
    email = Column(String, unique=True, index=True, nullable=False)
    password_hash = Column(String, nullable=False)
    department = Column(DepartmentType, nullable=True)
    salary = Column(Numeric(12, 2), nullable=True)
    created_at = Column(DateTime(timezone=True), default=utcnow, server_default=func.now())
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow, server_default=func.now())

    roles = relationship("UserRole", back_populates="profile", cascade="all, delete-orphan")
    attendance = relationship("Attendance", back_populates="profile", cascade="all, delete-orphan")
    enrollments = relationship("CourseEnrollment", back_populates="profile", cascade="all, delete-orphan")
