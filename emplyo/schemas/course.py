"""
Pydantic schemas for courses, enrollments and quizzes.
"""
from typing import List, Optional
from datetime import datetime
from pydantic import BaseModel, Field

from emplyo.db.models.enums import Department
from emplyo.db.models.quiz import OPTION_LETTERS

OPTION_PATTERN = f"^[{''.join(OPTION_LETTERS)}]$"


class CourseCreate(BaseModel):
    title: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = None
    department: Department
    duration_hours: Optional[int] = Field(None, ge=0)


class CourseResponse(BaseModel):
    id: str
    title: str
    description: Optional[str] = None
    department: Department
    duration_hours: Optional[int] = None
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class EnrollmentResponse(BaseModel):
    id: str
    user_id: str
    course_id: str
    enrolled_at: Optional[datetime] = None
    completed_at: Optional[datetime] = None
    quiz_score: Optional[int] = None

    class Config:
        from_attributes = True


class CourseWithEnrollment(BaseModel):
    course: CourseResponse
    enrollment: Optional[EnrollmentResponse] = None


class QuizQuestionCreate(BaseModel):
    question_text: str = Field(..., min_length=1)
    option_a: str = Field(..., min_length=1)
    option_b: str = Field(..., min_length=1)
    option_c: str = Field(..., min_length=1)
    option_d: str = Field(..., min_length=1)
    correct_answer: str = Field(..., pattern=OPTION_PATTERN, description="Letter of the correct option")


class QuizQuestionPublic(BaseModel):
    """A question as shown to the quiz taker; the answer is withheld."""
    id: str
    course_id: str
    question_text: str
    option_a: str
    option_b: str
    option_c: str
    option_d: str

    class Config:
        from_attributes = True


class QuizQuestionResponse(QuizQuestionPublic):
    correct_answer: str


class QuizView(BaseModel):
    course: CourseResponse
    questions: List[QuizQuestionPublic]
    enrollment: EnrollmentResponse


class QuizAnswer(BaseModel):
    question_id: str
    selected_answer: str = Field(..., pattern=OPTION_PATTERN)


class QuizSubmission(BaseModel):
    answers: List[QuizAnswer] = Field(..., min_length=1)


class QuizResultItem(BaseModel):
    question_id: str
    selected_answer: str
    correct_answer: str
    is_correct: bool


class QuizResult(BaseModel):
    score: int
    correct_count: int
    total: int
    results: List[QuizResultItem]
    enrollment: EnrollmentResponse
