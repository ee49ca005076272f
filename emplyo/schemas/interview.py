"""
Pydantic schemas for the AI interview workflow.
"""
from typing import List, Optional
from datetime import datetime
from pydantic import BaseModel, EmailStr, Field

from emplyo.db.models.enums import QuestionCategory

QUESTION_COUNT = 5


# ============================================
# Structured model output
# ============================================

class GeneratedQuestion(BaseModel):
    """One question as returned by the model."""
    question: str = Field(..., min_length=1)
    category: QuestionCategory
    expected_points: List[str] = Field(..., min_length=1)


class GeneratedQuestionSet(BaseModel):
    questions: List[GeneratedQuestion] = Field(..., min_length=QUESTION_COUNT, max_length=QUESTION_COUNT)


class ResponseEvaluation(BaseModel):
    score: int = Field(..., ge=0, le=10)
    feedback: str = Field(..., min_length=1)


# ============================================
# Function endpoint contract
# ============================================

class ResponseItem(BaseModel):
    """A candidate answer together with the question it answers."""
    question_id: str
    question: str
    category: str
    expected_points: List[str] = Field(default_factory=list)
    response: str


class GenerateQuestionsRequest(BaseModel):
    action: str = "generate_questions"
    position: str = Field(..., min_length=1)
    department: str = Field(..., min_length=1)


class EvaluateResponsesRequest(BaseModel):
    action: str = "evaluate_responses"
    position: str = Field(..., min_length=1)
    department: str = ""
    responses: List[ResponseItem] = Field(..., min_length=1)


class GenerateQuestionsResponse(BaseModel):
    questions: List[GeneratedQuestion]


class EvaluationResult(BaseModel):
    question_id: str
    score: int
    feedback: str


class EvaluationSummary(BaseModel):
    evaluations: List[EvaluationResult]
    overall_score: int
    recommendation: str


# ============================================
# Persisted interview endpoints
# ============================================

class InterviewCreate(BaseModel):
    candidate_name: str = Field(..., min_length=1, max_length=200)
    candidate_email: EmailStr
    position: str = Field(..., min_length=1, max_length=200)
    department: str = Field(..., min_length=1, max_length=200)

    class Config:
        json_schema_extra = {
            "example": {
                "candidate_name": "Jane Doe",
                "candidate_email": "jane@example.com",
                "position": "Backend Engineer",
                "department": "Engineering"
            }
        }


class InterviewAnswer(BaseModel):
    question_id: str
    response: str = Field(..., min_length=1)


class InterviewCompleteRequest(BaseModel):
    responses: List[InterviewAnswer] = Field(..., min_length=1)


class InterviewResponseOut(BaseModel):
    id: str
    question_id: str
    response_text: str
    score: Optional[int] = None
    feedback: Optional[str] = None

    class Config:
        from_attributes = True


class InterviewQuestionOut(BaseModel):
    id: str
    session_id: str
    question_text: str
    question_category: str
    expected_points: Optional[List[str]] = None
    response: Optional[InterviewResponseOut] = None

    class Config:
        from_attributes = True


class InterviewSessionOut(BaseModel):
    id: str
    candidate_name: str
    candidate_email: str
    position: str
    department: str
    created_by: str
    status: str
    overall_score: Optional[int] = None
    recommendation: Optional[str] = None
    created_at: Optional[datetime] = None
    completed_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class InterviewDetail(InterviewSessionOut):
    questions: List[InterviewQuestionOut] = Field(default_factory=list)


class InterviewCompleteResponse(EvaluationSummary):
    session: InterviewSessionOut
