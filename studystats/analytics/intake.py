"""
Session Intake - Подготовка данных формы перед сохранением

Длительность проходит через create_real (NaN/Inf/отрицательные отклоняются),
оценки ограничиваются своими шкалами через clamp_real.
"""

import logging
from typing import Optional

from studystats.core.domain.study_session import NewStudySession
from studystats.core.math.numerical_safeguards import round_half_away
from studystats.core.math.real_stats import clamp_real, create_real

logger = logging.getLogger(__name__)


class InvalidSessionInput(ValueError):
    """Данные формы не прошли валидацию (сообщение пригодно для показа)."""

    pass


def prepare_new_session(
    duration_minutes: float,
    mood_score: float,
    focus_score: float,
    efficiency_score: float,
    notes: Optional[str] = None,
) -> NewStudySession:
    """
    Валидация и нормализация формы новой сессии.

    Args:
        duration_minutes: Длительность в минутах (как ввёл пользователь)
        mood_score: Настроение, ограничивается [0, 10]
        focus_score: Фокус, ограничивается [0, 10]
        efficiency_score: Эффективность, ограничивается [0, 1]
        notes: Заметки (пустая строка -> None)

    Returns:
        NewStudySession, готовая к сохранению

    Raises:
        InvalidSessionInput: Если длительность невалидна
    """
    duration = create_real(duration_minutes)
    if not duration.is_valid:
        logger.info("Rejected session duration %r: %s", duration_minutes, duration.error_message)
        raise InvalidSessionInput(duration.error_message)

    return NewStudySession(
        # Колонка duration_minutes целочисленная
        duration_minutes=int(round_half_away(duration.value, 0)),
        mood_score=clamp_real(mood_score, 0, 10),
        focus_score=clamp_real(focus_score, 0, 10),
        efficiency_score=clamp_real(efficiency_score, 0, 1),
        notes=notes,
    )
