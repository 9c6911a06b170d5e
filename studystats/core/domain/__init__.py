"""
Domain models and value objects.

Contains MeasuredQuantity (RealNumber) and the StudySession record.
"""

from studystats.core.domain.measured_quantity import MeasuredQuantity, RealNumber
from studystats.core.domain.study_session import (
    CREATED_AT,
    WEEKDAY_NAMES,
    NewStudySession,
    SessionMetric,
    StudySession,
    extract_metric,
    filter_by_date_range,
    filter_by_min_score,
    sessions_in_week,
    sort_sessions,
    week_bounds,
    week_start_for,
)

__all__ = [
    # Measured quantity
    "MeasuredQuantity",
    "RealNumber",
    # Study session model
    "NewStudySession",
    "CREATED_AT",
    "SessionMetric",
    "StudySession",
    "WEEKDAY_NAMES",
    # Weeks
    "week_bounds",
    "week_start_for",
    # List operations
    "extract_metric",
    "filter_by_date_range",
    "filter_by_min_score",
    "sessions_in_week",
    "sort_sessions",
]
