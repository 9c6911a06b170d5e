"""
Contract Validation Module

JSON Schema контракты записей сессий и запроса рекомендаций.
"""

from .validators import (
    RECOMMENDATION_REQUEST_SCHEMA,
    SCHEMA_DIR,
    STUDY_SESSION_SCHEMA,
    ContractValidator,
    RecommendationRequestValidator,
    SchemaLoader,
    StudySessionValidator,
    recommendation_request_errors,
    validate_recommendation_request,
    validate_study_session,
)

__all__ = [
    # Constants
    "SCHEMA_DIR",
    "STUDY_SESSION_SCHEMA",
    "RECOMMENDATION_REQUEST_SCHEMA",
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "StudySessionValidator",
    "RecommendationRequestValidator",
    # Functions
    "validate_study_session",
    "validate_recommendation_request",
    "recommendation_request_errors",
]
