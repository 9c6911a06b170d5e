"""
AI study recommendations: prompt construction and response handling.
"""

from studystats.recommendations.prompt import (
    SYSTEM_PROMPT,
    InsufficientSessionsError,
    RecommendationPrompt,
    RecommendationResponseError,
    build_chat_payload,
    build_recommendation_prompt,
    extract_recommendations,
    parse_recommendation_request,
)

__all__ = [
    "SYSTEM_PROMPT",
    "InsufficientSessionsError",
    "RecommendationPrompt",
    "RecommendationResponseError",
    "build_chat_payload",
    "build_recommendation_prompt",
    "extract_recommendations",
    "parse_recommendation_request",
]
