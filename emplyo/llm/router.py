"""
Model router for selecting the model used by each AI feature.
"""
from emplyo.core import config

INTERVIEW_QUESTIONS = "interview_questions"
INTERVIEW_EVALUATION = "interview_evaluation"
INTERVIEW_RECOMMENDATION = "interview_recommendation"

# Feature -> model; None falls back to the configured gateway model
MODEL_ROUTING = {
    INTERVIEW_QUESTIONS: None,
    INTERVIEW_EVALUATION: None,
    INTERVIEW_RECOMMENDATION: None,
}


def get_model_for_feature(feature: str) -> str:
    """
    Get the model identifier for a feature.

    Args:
        feature: Feature name (e.g., "interview_questions")

    Returns:
        Model identifier string
    """
    return MODEL_ROUTING.get(feature) or config.LLM_MODEL
