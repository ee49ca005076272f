"""
Tests for the interview workflow against the fake gateway.
"""
import asyncio
import json

import pytest
from fastapi import HTTPException

from emplyo.db.models.interview_response import InterviewResponse
from emplyo.db.models.interview_session import InterviewSession
from emplyo.llm.errors import LLMGenerationError, LLMPaymentRequiredError, LLMRateLimitError
from emplyo.schemas.interview import InterviewAnswer, InterviewCreate, ResponseItem
from emplyo.services import interview_service

from conftest import TestSessionLocal, question_set


def _item(question_id, response):
    return ResponseItem(
        question_id=question_id,
        question="Describe a hard bug you fixed.",
        category="behavioral",
        expected_points=["root cause", "verification"],
        response=response,
    )


def test_generate_questions(provider):
    questions = asyncio.run(interview_service.generate_questions(provider, "Backend Engineer", "Engineering"))

    assert len(questions) == 5
    assert questions[0].category.value == "technical"
    assert provider.calls == ["return_questions"]


def test_generate_questions_rejects_wrong_count(provider):
    provider.tool_arguments["return_questions"] = json.dumps(question_set(3))

    with pytest.raises(LLMGenerationError) as exc_info:
        asyncio.run(interview_service.generate_questions(provider, "Backend Engineer", "Engineering"))
    assert exc_info.value.message == "Failed to generate questions"


def test_generate_questions_without_tool_call(provider):
    provider.tool_arguments["return_questions"] = None

    with pytest.raises(LLMGenerationError):
        asyncio.run(interview_service.generate_questions(provider, "Backend Engineer", "Engineering"))


def test_generate_questions_passes_rate_limit_through(provider):
    provider.errors["return_questions"] = LLMRateLimitError("Rate limit exceeded. Please try again later.")

    with pytest.raises(LLMRateLimitError):
        asyncio.run(interview_service.generate_questions(provider, "Backend Engineer", "Engineering"))


def test_evaluate_responses_averages_and_recommends(provider):
    items = [_item("q1", "answer 7"), _item("q2", "answer 8")]

    summary = asyncio.run(interview_service.evaluate_responses(provider, "Backend Engineer", "Engineering", items))

    assert [e.question_id for e in summary.evaluations] == ["q1", "q2"]
    assert [e.score for e in summary.evaluations] == [7, 8]
    assert summary.overall_score == 8
    assert summary.recommendation == provider.recommendation
    assert provider.calls.count("return_evaluation") == 2
    assert provider.calls[-1] == "chat"


def test_evaluate_responses_requires_items(provider):
    with pytest.raises(ValueError):
        asyncio.run(interview_service.evaluate_responses(provider, "Backend Engineer", "Engineering", []))
    assert provider.calls == []


def test_invalid_evaluation_fails_whole_batch(provider):
    def evaluations(messages):
        if "answer 2" in messages[-1]["content"]:
            return '{"score": 42, "feedback": "off the scale"}'
        return '{"score": 5, "feedback": "fine"}'

    provider.tool_arguments["return_evaluation"] = evaluations
    items = [_item("q1", "answer 1"), _item("q2", "answer 2"), _item("q3", "answer 3")]

    with pytest.raises(LLMGenerationError) as exc_info:
        asyncio.run(interview_service.evaluate_responses(provider, "Backend Engineer", "Engineering", items))
    assert exc_info.value.message == "Failed to evaluate response"
    assert "chat" not in provider.calls


def test_payment_required_passes_through(provider):
    provider.errors["return_evaluation"] = LLMPaymentRequiredError("Payment required.")

    with pytest.raises(LLMPaymentRequiredError):
        asyncio.run(interview_service.evaluate_responses(
            provider, "Backend Engineer", "Engineering", [_item("q1", "answer")]
        ))


def test_empty_recommendation_is_an_error(provider):
    provider.recommendation = "   "

    with pytest.raises(LLMGenerationError):
        asyncio.run(interview_service.evaluate_responses(
            provider, "Backend Engineer", "Engineering", [_item("q1", "answer")]
        ))


def test_stale_session_cannot_complete_twice(db, provider, admin_user):
    candidate = InterviewCreate(
        candidate_name="Jane Doe",
        candidate_email="jane@example.com",
        position="Backend Engineer",
        department="Engineering",
    )
    stale = asyncio.run(interview_service.start_interview(db, provider, admin_user.id, candidate))
    first_question, second_question = stale.questions[0].id, stale.questions[1].id

    # Another worker completes the interview while this one still holds it as pending
    other = TestSessionLocal()
    try:
        fresh = other.query(InterviewSession).filter(InterviewSession.id == stale.id).first()
        asyncio.run(interview_service.complete_interview(
            other, provider, fresh, [InterviewAnswer(question_id=first_question, response="a 2")]
        ))
    finally:
        other.close()

    assert stale.status == "pending"
    with pytest.raises(HTTPException) as exc_info:
        asyncio.run(interview_service.complete_interview(
            db, provider, stale, [InterviewAnswer(question_id=second_question, response="b 9")]
        ))
    assert exc_info.value.status_code == 409

    db.expire_all()
    session = db.query(InterviewSession).filter(InterviewSession.id == stale.id).first()
    assert session.status == "completed"
    assert session.overall_score == 2
    assert [r.score for r in db.query(InterviewResponse).all()] == [2]
