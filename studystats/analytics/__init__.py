"""
Analytics over study sessions.

Сводки для дашборда и недельной истории, тренды, серии графика и
подготовка данных формы. Все числа считаются через core.math.real_stats.
"""

from studystats.analytics.intake import InvalidSessionInput, prepare_new_session
from studystats.analytics.summary import (
    EFFICIENCY_RANGE,
    MOOD_FOCUS_RANGE,
    ChartPoint,
    SessionSummary,
    WeeklySummary,
    chart_points,
    compute_session_summary,
    compute_weekly_summary,
    efficiency_trend,
)

__all__ = [
    # Constants
    "EFFICIENCY_RANGE",
    "MOOD_FOCUS_RANGE",
    # Types
    "ChartPoint",
    "SessionSummary",
    "WeeklySummary",
    # Exceptions
    "InvalidSessionInput",
    # Functions
    "chart_points",
    "compute_session_summary",
    "compute_weekly_summary",
    "efficiency_trend",
    "prepare_new_session",
]
