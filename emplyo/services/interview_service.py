"""
AI interview workflow.

Two stateless operations drive the model gateway:

* ``generate_questions`` asks for exactly five categorized questions.
* ``evaluate_responses`` scores every answer concurrently (one call per
  answer, fail-fast), averages the scores and asks for a short hiring
  recommendation.

``start_interview`` and ``complete_interview`` wrap them with persistence.
Each writes in a single transaction and only after the model calls have
succeeded, so a failure never leaves partial rows behind.
"""
import logging
from datetime import datetime, timezone
from typing import List, Sequence, Tuple

from fastapi import HTTPException, status
from sqlalchemy.orm import Session

from emplyo.db.models.interview_question import InterviewQuestion
from emplyo.db.models.interview_response import InterviewResponse
from emplyo.db.models.interview_session import InterviewSession
from emplyo.db.models.enums import InterviewStatus
from emplyo.llm.errors import LLMGenerationError
from emplyo.llm.prompts import (
    RETURN_EVALUATION,
    RETURN_QUESTIONS,
    evaluation_messages,
    question_generation_messages,
    recommendation_messages,
)
from emplyo.llm.provider import LLMProvider
from emplyo.llm.router import (
    INTERVIEW_EVALUATION,
    INTERVIEW_QUESTIONS,
    INTERVIEW_RECOMMENDATION,
    get_model_for_feature,
)
from emplyo.llm.structured import Invalid, decode_tool_arguments
from emplyo.schemas.interview import (
    QUESTION_COUNT,
    EvaluationResult,
    EvaluationSummary,
    GeneratedQuestion,
    GeneratedQuestionSet,
    InterviewAnswer,
    InterviewCreate,
    ResponseEvaluation,
    ResponseItem,
)
from emplyo.services.batch import gather_all_or_nothing
from emplyo.services.scoring import average_score

logger = logging.getLogger(__name__)


# ============================================
# Model calls
# ============================================

async def generate_questions(provider: LLMProvider, position: str, department: str) -> List[GeneratedQuestion]:
    """
    Generate exactly ``QUESTION_COUNT`` interview questions.

    Raises:
        LLMRateLimitError / LLMPaymentRequiredError: passed through
        LLMGenerationError: upstream failure or malformed output
    """
    messages = question_generation_messages(position, department, QUESTION_COUNT)
    try:
        response = await provider.call_tool(messages, get_model_for_feature(INTERVIEW_QUESTIONS), RETURN_QUESTIONS)
    except LLMGenerationError as e:
        raise LLMGenerationError("Failed to generate questions") from e

    result = decode_tool_arguments(response.tool_arguments, GeneratedQuestionSet)
    if isinstance(result, Invalid):
        logger.error(f"Rejected generated questions: {result.reason}")
        raise LLMGenerationError("Failed to generate questions")

    logger.info(f"Generated {QUESTION_COUNT} questions: position={position!r}, department={department!r}")
    return result.payload.questions


async def evaluate_response(provider: LLMProvider, item: ResponseItem) -> EvaluationResult:
    """Score a single answer on a 0-10 scale with written feedback."""
    messages = evaluation_messages(item.question, item.category, item.expected_points, item.response)
    try:
        response = await provider.call_tool(messages, get_model_for_feature(INTERVIEW_EVALUATION), RETURN_EVALUATION)
    except LLMGenerationError as e:
        raise LLMGenerationError("Failed to evaluate response") from e

    result = decode_tool_arguments(response.tool_arguments, ResponseEvaluation)
    if isinstance(result, Invalid):
        logger.error(f"Rejected evaluation for question {item.question_id}: {result.reason}")
        raise LLMGenerationError("Failed to evaluate response")

    return EvaluationResult(
        question_id=item.question_id,
        score=result.payload.score,
        feedback=result.payload.feedback,
    )


async def generate_recommendation(provider: LLMProvider, overall_score: int, question_count: int, position: str) -> str:
    messages = recommendation_messages(overall_score, question_count, position)
    try:
        response = await provider.chat(messages=messages, model=get_model_for_feature(INTERVIEW_RECOMMENDATION))
    except LLMGenerationError as e:
        raise LLMGenerationError("Failed to generate recommendation") from e

    recommendation = response.content.strip()
    if not recommendation:
        raise LLMGenerationError("Failed to generate recommendation")
    return recommendation


async def evaluate_responses(
    provider: LLMProvider,
    position: str,
    department: str,
    items: Sequence[ResponseItem],
) -> EvaluationSummary:
    """
    Evaluate a batch of answers and produce the aggregate verdict.

    All per-answer calls run concurrently; the first failure aborts the
    whole batch and is re-raised.

    Raises:
        ValueError: ``items`` is empty
    """
    if not items:
        raise ValueError("At least one response is required")

    outcome = await gather_all_or_nothing(evaluate_response(provider, item) for item in items)
    evaluations = outcome.unwrap()

    overall_score = average_score([evaluation.score for evaluation in evaluations])
    recommendation = await generate_recommendation(provider, overall_score, len(evaluations), position)

    logger.info(
        f"Evaluated {len(evaluations)} responses: position={position!r}, "
        f"department={department!r}, overall_score={overall_score}"
    )
    return EvaluationSummary(
        evaluations=evaluations,
        overall_score=overall_score,
        recommendation=recommendation,
    )


# ============================================
# Persisted workflow
# ============================================

async def start_interview(
    db: Session,
    provider: LLMProvider,
    created_by: str,
    data: InterviewCreate,
) -> InterviewSession:
    """Generate questions, then create the pending session and its questions together."""
    questions = await generate_questions(provider, data.position, data.department)

    session = InterviewSession(
        candidate_name=data.candidate_name,
        candidate_email=data.candidate_email,
        position=data.position,
        department=data.department,
        created_by=created_by,
        status=InterviewStatus.PENDING.value,
    )
    session.questions = [
        InterviewQuestion(
            sort_order=index,
            question_text=question.question,
            question_category=question.category.value,
            expected_points=list(question.expected_points),
        )
        for index, question in enumerate(questions)
    ]
    db.add(session)
    db.commit()
    db.refresh(session)

    logger.info(f"Interview session created: session_id={session.id}, questions={len(session.questions)}")
    return session


def _response_items(session: InterviewSession, answers: Sequence[InterviewAnswer]) -> List[ResponseItem]:
    """Pair each answer with its stored question, rejecting foreign or repeated ids."""
    questions = {question.id: question for question in session.questions}
    seen = set()
    items = []
    for answer in answers:
        question = questions.get(answer.question_id)
        if question is None:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=f"Question {answer.question_id} does not belong to this interview"
            )
        if answer.question_id in seen:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=f"Question {answer.question_id} answered more than once"
            )
        seen.add(answer.question_id)
        items.append(ResponseItem(
            question_id=question.id,
            question=question.question_text,
            category=question.question_category,
            expected_points=question.expected_points or [],
            response=answer.response,
        ))
    return items


async def complete_interview(
    db: Session,
    provider: LLMProvider,
    session: InterviewSession,
    answers: Sequence[InterviewAnswer],
) -> Tuple[InterviewSession, EvaluationSummary]:
    """
    Score the answers and close the session.

    Response rows and the session update are committed together; if any
    evaluation fails nothing is written and the session stays pending.
    """
    if session.status != InterviewStatus.PENDING.value:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Interview already completed"
        )

    items = _response_items(session, answers)
    summary = await evaluate_responses(provider, session.position, session.department, items)

    # The status check above ran before the model calls; claim the session
    # only if it is still pending
    session_id = session.id
    claimed = db.query(InterviewSession).filter(
        InterviewSession.id == session_id,
        InterviewSession.status == InterviewStatus.PENDING.value,
    ).update({
        InterviewSession.status: InterviewStatus.COMPLETED.value,
        InterviewSession.completed_at: datetime.now(timezone.utc),
        InterviewSession.overall_score: summary.overall_score,
        InterviewSession.recommendation: summary.recommendation,
    }, synchronize_session=False)
    if claimed == 0:
        db.rollback()
        logger.warning(f"Interview completed concurrently: session_id={session_id}")
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Interview already completed"
        )

    answers_by_question = {item.question_id: item.response for item in items}
    for evaluation in summary.evaluations:
        db.add(InterviewResponse(
            question_id=evaluation.question_id,
            response_text=answers_by_question[evaluation.question_id],
            score=evaluation.score,
            feedback=evaluation.feedback,
        ))
    db.commit()
    db.refresh(session)

    logger.info(f"Interview completed: session_id={session.id}, overall_score={summary.overall_score}")
    return session, summary
