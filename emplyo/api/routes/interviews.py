"""
Persisted AI interview endpoints (admin only).

POST /interviews creates a session with five generated questions;
POST /interviews/{id}/complete scores the candidate's answers and closes it.
"""
import logging
from typing import List
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from emplyo.core.auth_dependency import get_db, require_admin
from emplyo.core.roles import AuthSession
from emplyo.db.models.interview_session import InterviewSession
from emplyo.llm.openai_provider import get_llm_provider
from emplyo.llm.provider import LLMProvider
from emplyo.schemas.interview import (
    InterviewCompleteRequest,
    InterviewCompleteResponse,
    InterviewCreate,
    InterviewDetail,
    InterviewSessionOut,
)
from emplyo.services import interview_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/interviews", tags=["Interviews"])


def _get_session(db: Session, session_id: str) -> InterviewSession:
    session = db.query(InterviewSession).filter(InterviewSession.id == session_id).first()
    if not session:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Interview not found")
    return session


@router.get("", response_model=List[InterviewSessionOut])
def list_interviews(
    admin: AuthSession = Depends(require_admin),
    db: Session = Depends(get_db)
):
    """All interview sessions, newest first."""
    sessions = db.query(InterviewSession).order_by(
        InterviewSession.created_at.desc(), InterviewSession.id
    ).all()
    return [InterviewSessionOut.model_validate(s) for s in sessions]


@router.get("/{session_id}", response_model=InterviewDetail)
def get_interview(
    session_id: str,
    admin: AuthSession = Depends(require_admin),
    db: Session = Depends(get_db)
):
    return InterviewDetail.model_validate(_get_session(db, session_id))


@router.post("", status_code=status.HTTP_201_CREATED, response_model=InterviewDetail)
async def start_interview(
    data: InterviewCreate,
    admin: AuthSession = Depends(require_admin),
    db: Session = Depends(get_db),
    provider: LLMProvider = Depends(get_llm_provider)
):
    session = await interview_service.start_interview(db, provider, admin.user_id, data)
    return InterviewDetail.model_validate(session)


@router.post("/{session_id}/complete", response_model=InterviewCompleteResponse)
async def complete_interview(
    session_id: str,
    request: InterviewCompleteRequest,
    admin: AuthSession = Depends(require_admin),
    db: Session = Depends(get_db),
    provider: LLMProvider = Depends(get_llm_provider)
):
    session = _get_session(db, session_id)
    try:
        session, summary = await interview_service.complete_interview(db, provider, session, request.responses)
    except IntegrityError:
        # A concurrent completion already stored responses for these questions
        db.rollback()
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="Interview already completed")

    return InterviewCompleteResponse(
        evaluations=summary.evaluations,
        overall_score=summary.overall_score,
        recommendation=summary.recommendation,
        session=InterviewSessionOut.model_validate(session),
    )
