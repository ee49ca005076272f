from sqlalchemy import Column, String, Integer, Text, DateTime
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from emplyo.db.base import Base, generate_uuid, utcnow


class InterviewSession(Base):
    """
    One candidate-evaluation workflow.

    Starts "pending" with its generated questions and moves to "completed"
    exactly once, when every response has been scored.
    """
    __tablename__ = "interview_sessions"

    id = Column(String(36), primary_key=True, default=generate_uuid)
    candidate_name = Column(String, nullable=False)
    candidate_email = Column(String, nullable=False)
    position = Column(String, nullable=False)
    department = Column(String, nullable=False)
    created_by = Column(String(36), nullable=False, index=True)
    status = Column(String, nullable=False, default="pending", server_default="pending")  # pending / completed
    overall_score = Column(Integer, nullable=True)
    recommendation = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), default=utcnow, server_default=func.now(), index=True)
    completed_at = Column(DateTime(timezone=True), nullable=True)

    questions = relationship(
        "InterviewQuestion",
        back_populates="session",
        cascade="all, delete-orphan",
        order_by="InterviewQuestion.sort_order",
    )
