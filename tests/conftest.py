"""
Общие фикстуры: неделя занятий 1-4 декабря 2025 (понедельник-четверг).

Длительности 90/120/30/180 минут дают часы [1.5, 2.0, 0.5, 3.0].
"""

from datetime import datetime, timezone

import pytest

from studystats.core.domain import StudySession


def make_session(
    session_id: str,
    created_at: datetime,
    duration_minutes: int,
    efficiency_score: float = 0.5,
    mood_score: float = 5.0,
    focus_score: float = 5.0,
    notes: str | None = None,
) -> StudySession:
    return StudySession(
        id=session_id,
        duration_minutes=duration_minutes,
        mood_score=mood_score,
        focus_score=focus_score,
        efficiency_score=efficiency_score,
        notes=notes,
        created_at=created_at,
    )


@pytest.fixture
def week_sessions() -> list[StudySession]:
    """Четыре сессии одной недели в хронологическом порядке."""
    utc = timezone.utc
    return [
        make_session("s1", datetime(2025, 12, 1, 9, 0, tzinfo=utc), 90, 0.8, 7.0, 8.0),
        make_session("s2", datetime(2025, 12, 2, 14, 0, tzinfo=utc), 120, 0.6, 6.0, 7.0),
        make_session("s3", datetime(2025, 12, 3, 20, 0, tzinfo=utc), 30, 0.4, 5.0, 4.0),
        make_session("s4", datetime(2025, 12, 4, 10, 0, tzinfo=utc), 180, 0.9, 8.0, 9.0),
    ]


@pytest.fixture
def next_week_session() -> StudySession:
    """Сессия следующей недели (вторник 9 декабря)."""
    return make_session("s5", datetime(2025, 12, 9, 8, 0, tzinfo=timezone.utc), 60, 0.7)
