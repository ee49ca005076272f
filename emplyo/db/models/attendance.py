from sqlalchemy import Column, String, Date, DateTime, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from emplyo.db.base import Base, generate_uuid, utcnow


class Attendance(Base):
    """
    One attendance record per employee per day.

    A record without check_out is "open": the employee is checked in.
    """
    __tablename__ = "attendance"

    id = Column(String(36), primary_key=True, default=generate_uuid)
    user_id = Column(String(36), ForeignKey("profiles.id", ondelete="CASCADE"), nullable=False, index=True)
    date = Column(Date, nullable=False, index=True)
    check_in = Column(DateTime(timezone=True), default=utcnow, server_default=func.now())
    check_out = Column(DateTime(timezone=True), nullable=True)
    status = Column(String, default="present", server_default="present")
    created_at = Column(DateTime(timezone=True), default=utcnow, server_default=func.now())

    profile = relationship("Profile", back_populates="attendance")

    __table_args__ = (
        UniqueConstraint("user_id", "date", name="uq_attendance_user_date"),
    )
