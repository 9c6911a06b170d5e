"""
Session Summary - Общие агрегаты дашборда, недельной истории, отчёта и промпта

Все числа, которые видит пользователь, считаются здесь и только через
real_stats. Отчёт и AI-промпт берут SessionSummary отсюда же, поэтому
значения в них совпадают с карточками дашборда.
"""

from datetime import date, datetime, timezone
from typing import NamedTuple, Optional, Sequence

from studystats.core.domain.study_session import (
    CREATED_AT,
    WEEKDAY_NAMES,
    SessionMetric,
    StudySession,
    extract_metric,
    sessions_in_week,
    sort_sessions,
    week_bounds,
)
from studystats.core.math.numerical_safeguards import round_half_away
from studystats.core.math.real_stats import (
    DEFAULT_SMOOTHING_ALPHA,
    Observer,
    calculate_mean,
    calculate_std_dev,
    calculate_variance,
    calculate_z_score,
    find_infimum,
    find_supremum,
    moving_average,
    normalize,
    simple_integration,
)

# Диапазоны оценок для нормализации в проценты графика
MOOD_FOCUS_RANGE: tuple[float, float] = (0.0, 10.0)
EFFICIENCY_RANGE: tuple[float, float] = (0.0, 1.0)


class SessionSummary(NamedTuple):
    """Агрегаты по набору сессий (все длительности - в часах)."""

    session_count: int
    total_hours: float  # Σ(xi × 1)
    avg_duration: float  # μ
    sup_duration: float  # max{xi}
    inf_duration: float  # min{xi}
    avg_efficiency: float  # μ(ε), доля [0, 1]
    avg_mood: float  # μ(m), шкала [0, 10]
    avg_focus: float  # μ(f), шкала [0, 10]
    variance: float  # σ²
    std_dev: float  # σ
    latest_z_score: float  # z последней сессии


class WeeklySummary(NamedTuple):
    """Недельная сводка для панели истории."""

    week_start: datetime
    week_end: datetime
    summary: SessionSummary
    sessions_by_day: dict[str, list[StudySession]]
    day_totals: dict[str, float]  # часы по дням, Σ(xi × 1)
    newest_first: list[StudySession]


class ChartPoint(NamedTuple):
    """Точка графика одной сессии."""

    label: str
    duration_hours: float
    efficiency_pct: float
    mood_pct: float
    focus_pct: float


def compute_session_summary(
    sessions: Sequence[StudySession],
    observer: Optional[Observer] = None,
) -> SessionSummary:
    """
    Агрегаты для карточек дашборда и таблицы отчёта.

    Пустой список даёт нулевую сводку (агрегаты тотальны). Z-score
    считается для последней сессии в порядке списка.

    Args:
        sessions: Сессии в хронологическом порядке
        observer: Получатель диагностики real_stats (optional)

    Returns:
        SessionSummary
    """
    durations = extract_metric(sessions, SessionMetric.DURATION_HOURS)
    efficiencies = extract_metric(sessions, SessionMetric.EFFICIENCY)
    moods = extract_metric(sessions, SessionMetric.MOOD)
    focuses = extract_metric(sessions, SessionMetric.FOCUS)

    avg_duration = calculate_mean(durations, observer=observer)
    std_dev = calculate_std_dev(durations, observer=observer)

    latest_z_score = 0.0
    if durations:
        latest_z_score = calculate_z_score(
            durations[-1], avg_duration, std_dev, observer=observer
        )

    return SessionSummary(
        session_count=len(sessions),
        total_hours=simple_integration(durations, 1, observer=observer),
        avg_duration=avg_duration,
        sup_duration=find_supremum(durations, observer=observer),
        inf_duration=find_infimum(durations, observer=observer),
        avg_efficiency=calculate_mean(efficiencies, observer=observer),
        avg_mood=calculate_mean(moods, observer=observer),
        avg_focus=calculate_mean(focuses, observer=observer),
        variance=calculate_variance(durations, observer=observer),
        std_dev=std_dev,
        latest_z_score=latest_z_score,
    )


def compute_weekly_summary(
    sessions: Sequence[StudySession],
    reference_day: date,
    tz: timezone = timezone.utc,
    observer: Optional[Observer] = None,
) -> WeeklySummary:
    """
    Сводка недели (понедельник-воскресенье), содержащей reference_day.

    sessions_by_day и day_totals содержат все семь дней, в том числе
    пустые (итог 0). newest_first - сессии недели от новых к старым.
    """
    start, end = week_bounds(reference_day, tz)
    week_sessions = sessions_in_week(sessions, reference_day, tz)

    by_day: dict[str, list[StudySession]] = {name: [] for name in WEEKDAY_NAMES}
    for session in week_sessions:
        day_name = WEEKDAY_NAMES[session.created_at.astimezone(tz).weekday()]
        by_day[day_name].append(session)

    day_totals = {
        name: simple_integration(
            extract_metric(day_sessions, SessionMetric.DURATION_HOURS), observer=observer
        )
        for name, day_sessions in by_day.items()
    }

    return WeeklySummary(
        week_start=start,
        week_end=end,
        summary=compute_session_summary(week_sessions, observer=observer),
        sessions_by_day=by_day,
        day_totals=day_totals,
        newest_first=sort_sessions(week_sessions, CREATED_AT, descending=True),
    )


def efficiency_trend(
    sessions: Sequence[StudySession],
    alpha: float = DEFAULT_SMOOTHING_ALPHA,
    observer: Optional[Observer] = None,
) -> list[float]:
    """
    Сглаженный тренд эффективности.

    Первое значение - эффективность первой сессии, далее
    L_k = moving_average(L_{k-1}, ε_k, α).
    """
    efficiencies = extract_metric(sessions, SessionMetric.EFFICIENCY)
    if not efficiencies:
        return []

    trend = [efficiencies[0]]
    for value in efficiencies[1:]:
        trend.append(moving_average(trend[-1], value, alpha, observer=observer))
    return trend


def chart_points(sessions: Sequence[StudySession]) -> list[ChartPoint]:
    """
    Серии графика: длительность в часах, оценки в процентах.

    Настроение и фокус нормализуются из [0, 10], эффективность - из [0, 1].
    Часы округляются до 2 знаков, проценты - до 1.
    """
    points = []
    for session in sessions:
        points.append(
            ChartPoint(
                label=session.created_at.strftime("%b %d"),
                duration_hours=round_half_away(session.duration_hours, 2),
                efficiency_pct=_as_percent(session.efficiency_score, EFFICIENCY_RANGE),
                mood_pct=_as_percent(session.mood_score, MOOD_FOCUS_RANGE),
                focus_pct=_as_percent(session.focus_score, MOOD_FOCUS_RANGE),
            )
        )
    return points


def _as_percent(value: float, bounds: tuple[float, float]) -> float:
    return round_half_away(normalize(value, *bounds) * 100, 1)
