"""
Database models module.

This module imports all database models to ensure they are registered with SQLAlchemy's Base.metadata
before table creation.

All models must be imported here to be included in database migrations and table creation.
"""
from emplyo.db.models.enums import AppRole, Department, InterviewStatus, QuestionCategory
from emplyo.db.models.profile import Profile
from emplyo.db.models.user_role import UserRole
from emplyo.db.models.attendance import Attendance
from emplyo.db.models.course import Course, CourseEnrollment
from emplyo.db.models.quiz import QuizQuestion, QuizAttempt, OPTION_LETTERS
from emplyo.db.models.interview_session import InterviewSession
from emplyo.db.models.interview_question import InterviewQuestion
from emplyo.db.models.interview_response import InterviewResponse

__all__ = [
    "AppRole",
    "Department",
    "InterviewStatus",
    "QuestionCategory",
    "Profile",
    "UserRole",
    "Attendance",
    "Course",
    "CourseEnrollment",
    "QuizQuestion",
    "QuizAttempt",
    "OPTION_LETTERS",
    "InterviewSession",
    "InterviewQuestion",
    "InterviewResponse",
]
