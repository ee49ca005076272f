"""
Prompt builders and tool schemas for the interview workflow.
"""
from typing import Dict, List

from emplyo.llm.provider import ToolSpec

QUESTION_CATEGORIES = ["technical", "behavioral", "situational"]

RETURN_QUESTIONS = ToolSpec(
    name="return_questions",
    description="Returns the generated interview questions",
    parameters={
        "type": "object",
        "properties": {
            "questions": {
                "type": "array",
                "items": {
                    "type": "object",
                    "properties": {
                        "question": {"type": "string"},
                        "category": {"type": "string", "enum": QUESTION_CATEGORIES},
                        "expected_points": {"type": "array", "items": {"type": "string"}},
                    },
                    "required": ["question", "category", "expected_points"],
                    "additionalProperties": False,
                },
            }
        },
        "required": ["questions"],
        "additionalProperties": False,
    },
)

RETURN_EVALUATION = ToolSpec(
    name="return_evaluation",
    description="Returns the evaluation of the candidate's response",
    parameters={
        "type": "object",
        "properties": {
            "score": {"type": "integer", "minimum": 0, "maximum": 10},
            "feedback": {"type": "string"},
        },
        "required": ["score", "feedback"],
        "additionalProperties": False,
    },
)


def question_generation_messages(position: str, department: str, count: int) -> List[Dict[str, str]]:
    return [
        {
            "role": "system",
            "content": "You are an expert HR interviewer. Generate technical and behavioral "
                       "interview questions for hiring candidates.",
        },
        {
            "role": "user",
            "content": f"Generate {count} interview questions for a {position} position in the "
                       f"{department} department.\n"
                       "For each question, provide:\n"
                       "1. The question text\n"
                       "2. The category (technical, behavioral, or situational)\n"
                       "3. 3-5 key points that a good answer should cover",
        },
    ]


def evaluation_messages(
    question: str,
    category: str,
    expected_points: List[str],
    response: str,
) -> List[Dict[str, str]]:
    return [
        {
            "role": "system",
            "content": "You are an expert HR evaluator. Evaluate candidate interview responses objectively.",
        },
        {
            "role": "user",
            "content": f"Question: {question}\n"
                       f"Category: {category}\n"
                       f"Expected points: {', '.join(expected_points)}\n\n"
                       f"Candidate's response: {response}\n\n"
                       "Evaluate this response and provide:\n"
                       "1. A score from 0-10\n"
                       "2. Detailed feedback on strengths and areas for improvement",
        },
    ]


def recommendation_messages(average_score: int, question_count: int, position: str) -> List[Dict[str, str]]:
    return [
        {
            "role": "system",
            "content": "You are an expert HR evaluator providing hiring recommendations.",
        },
        {
            "role": "user",
            "content": f"Based on an average score of {average_score}/10 across {question_count} "
                       f"interview questions for a {position} position, provide a brief hiring "
                       "recommendation (2-3 sentences). Be objective and professional.",
        },
    ]
