"""
Stateless AI interview function.

A single action-tagged endpoint:

    {"action": "generate_questions", "position": ..., "department": ...}
    {"action": "evaluate_responses", "position": ..., "department": ..., "responses": [...]}

Nothing is persisted here; errors are answered as ``{"error": message}``.
"""
import logging
from fastapi import APIRouter, Depends, Request, Response
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from emplyo.llm.errors import LLMError
from emplyo.llm.openai_provider import get_llm_provider
from emplyo.llm.provider import LLMProvider
from emplyo.schemas.interview import (
    EvaluateResponsesRequest,
    GenerateQuestionsRequest,
    GenerateQuestionsResponse,
)
from emplyo.services import interview_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/functions", tags=["AI Interview"])

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "authorization, x-client-info, apikey, content-type",
    "Access-Control-Allow-Methods": "POST, OPTIONS",
}


def _error(message: str, status_code: int) -> JSONResponse:
    return JSONResponse({"error": message}, status_code=status_code, headers=CORS_HEADERS)


@router.options("/ai-interview")
def ai_interview_preflight():
    return Response(status_code=200, headers=CORS_HEADERS)


@router.post("/ai-interview")
async def ai_interview(request: Request, provider: LLMProvider = Depends(get_llm_provider)):
    try:
        body = await request.json()
    except ValueError:
        # Malformed JSON or a body that is not UTF-8
        return _error("Request body must be valid JSON", 400)
    if not isinstance(body, dict):
        return _error("Request body must be a JSON object", 400)

    action = body.get("action")
    try:
        if action == "generate_questions":
            payload = GenerateQuestionsRequest.model_validate(body)
            questions = await interview_service.generate_questions(provider, payload.position, payload.department)
            result = GenerateQuestionsResponse(questions=questions)
        elif action == "evaluate_responses":
            payload = EvaluateResponsesRequest.model_validate(body)
            result = await interview_service.evaluate_responses(
                provider, payload.position, payload.department, payload.responses
            )
        else:
            return _error("Invalid action", 400)
    except LLMError as e:
        logger.error(f"Error in ai-interview function: {e.message}")
        return _error(e.message, e.status_code)
    except ValidationError as e:
        logger.info(f"Rejected {action} request: {e.error_count()} validation error(s)")
        return _error(f"Invalid request: {e.errors()[0]['msg']}", 400)

    return JSONResponse(result.model_dump(mode="json"), headers=CORS_HEADERS)
