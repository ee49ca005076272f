"""
Tests for strict decoding of tool-call arguments.
"""
import json

from emplyo.llm.structured import Invalid, Valid, decode_tool_arguments
from emplyo.schemas.interview import GeneratedQuestionSet, ResponseEvaluation

from conftest import question_set


def test_decodes_valid_evaluation():
    result = decode_tool_arguments('{"score": 7, "feedback": "Solid"}', ResponseEvaluation)

    assert isinstance(result, Valid)
    assert result.payload.score == 7


def test_missing_tool_call():
    result = decode_tool_arguments(None, ResponseEvaluation)

    assert isinstance(result, Invalid)
    assert result.reason == "No tool call in response"


def test_malformed_json():
    assert isinstance(decode_tool_arguments('{"score": 7,', ResponseEvaluation), Invalid)


def test_score_out_of_range():
    assert isinstance(decode_tool_arguments('{"score": 11, "feedback": "Great"}', ResponseEvaluation), Invalid)
    assert isinstance(decode_tool_arguments('{"score": -1, "feedback": "Poor"}', ResponseEvaluation), Invalid)


def test_missing_feedback():
    assert isinstance(decode_tool_arguments('{"score": 5}', ResponseEvaluation), Invalid)


def test_question_set_must_have_five_questions():
    assert isinstance(decode_tool_arguments(json.dumps(question_set(5)), GeneratedQuestionSet), Valid)
    assert isinstance(decode_tool_arguments(json.dumps(question_set(4)), GeneratedQuestionSet), Invalid)
    assert isinstance(decode_tool_arguments(json.dumps(question_set(6)), GeneratedQuestionSet), Invalid)


def test_question_category_must_be_known():
    payload = question_set()
    payload["questions"][0]["category"] = "trivia"

    assert isinstance(decode_tool_arguments(json.dumps(payload), GeneratedQuestionSet), Invalid)
