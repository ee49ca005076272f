from sqlalchemy import Column, String, Integer, Text, DateTime, ForeignKey, JSON
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from emplyo.db.base import Base, generate_uuid, utcnow


class InterviewQuestion(Base):
    __tablename__ = "interview_questions"

    id = Column(String(36), primary_key=True, default=generate_uuid)
    session_id = Column(String(36), ForeignKey("interview_sessions.id", ondelete="CASCADE"), nullable=False, index=True)
    sort_order = Column(Integer, nullable=False, default=0)  # order as generated
    question_text = Column(Text, nullable=False)
    question_category = Column(String, nullable=False)
    expected_points = Column(JSON, nullable=True)
    created_at = Column(DateTime(timezone=True), default=utcnow, server_default=func.now())

    session = relationship("InterviewSession", back_populates="questions")
    response = relationship(
        "InterviewResponse",
        back_populates="question",
        uselist=False,
        cascade="all, delete-orphan",
    )
