"""
StudySession - Модель сессии обучения

Immutable Pydantic модель записи study_sessions, как её отдаёт хранилище.
Производные поля (duration_hours, week_start) вычисляются так же, как это
делают триггеры базы: часы = минуты / 60 без округления, начало недели -
понедельник.

Здесь же простые операции над списками сессий: выборка по неделе,
по диапазону дат, по порогу оценки и устойчивая сортировка.
"""

from datetime import date, datetime, time, timedelta, timezone
from enum import Enum
from typing import Iterable, Optional

from pydantic import BaseModel, Field, field_validator, model_validator

# Названия дней недели в порядке понедельник..воскресенье (локаль дашборда)
WEEKDAY_NAMES: tuple[str, ...] = (
    "Senin",
    "Selasa",
    "Rabu",
    "Kamis",
    "Jumat",
    "Sabtu",
    "Minggu",
)


# =============================================================================
# ENUMS
# =============================================================================


class SessionMetric(str, Enum):
    """Числовые поля сессии, из которых строятся последовательности."""

    DURATION_MINUTES = "duration_minutes"
    DURATION_HOURS = "duration_hours"
    MOOD = "mood_score"
    FOCUS = "focus_score"
    EFFICIENCY = "efficiency_score"


# =============================================================================
# НЕДЕЛИ
# =============================================================================


def week_start_for(day: date) -> date:
    """
    Понедельник недели, содержащей day.

    Examples:
        >>> week_start_for(date(2025, 12, 4))  # четверг
        datetime.date(2025, 12, 1)
    """
    if isinstance(day, datetime):
        day = day.date()
    return day - timedelta(days=day.weekday())


def week_bounds(day: date, tz: timezone = timezone.utc) -> tuple[datetime, datetime]:
    """
    Границы недели: понедельник 00:00:00 - воскресенье 23:59:59.999999.

    Args:
        day: Любой день недели
        tz: Часовой пояс границ (default: UTC)

    Returns:
        (start, end), обе границы включительно
    """
    monday = week_start_for(day)
    start = datetime.combine(monday, time.min, tzinfo=tz)
    end = datetime.combine(monday + timedelta(days=6), time.max, tzinfo=tz)
    return start, end


# =============================================================================
# MODELS
# =============================================================================


class NewStudySession(BaseModel):
    """
    Данные формы новой сессии (до сохранения).

    Диапазоны совпадают с CHECK-ограничениями таблицы.
    """

    duration_minutes: int = Field(..., ge=0, description="Длительность в минутах")
    mood_score: float = Field(..., ge=0, le=10, description="Настроение (0-10)")
    focus_score: float = Field(..., ge=0, le=10, description="Фокус (0-10)")
    efficiency_score: float = Field(..., ge=0, le=1, description="Эффективность (0-1)")
    notes: Optional[str] = Field(None, description="Заметки (nullable)")

    model_config = {"frozen": True}

    @field_validator("notes")
    @classmethod
    def blank_notes_to_none(cls, v: Optional[str]) -> Optional[str]:
        if v is not None and not v.strip():
            return None
        return v


class StudySession(NewStudySession):
    """
    Сохранённая сессия обучения.

    Immutable модель (frozen=True). duration_hours и week_start можно не
    передавать: они будут вычислены из duration_minutes и created_at.
    """

    id: str = Field(..., min_length=1, description="Идентификатор сессии (UUID)")
    duration_hours: Optional[float] = Field(
        None, ge=0, description="Длительность в часах (минуты / 60)"
    )
    created_at: datetime = Field(..., description="Время создания")
    week_start: Optional[date] = Field(None, description="Понедельник недели created_at")

    @field_validator("created_at")
    @classmethod
    def ensure_timezone(cls, v: datetime) -> datetime:
        """Наивное время трактуется как UTC."""
        if v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        return v

    @model_validator(mode="after")
    def derive_fields(self) -> "StudySession":
        # frozen-модель: производные поля проставляются в обход __setattr__
        if self.duration_hours is None:
            object.__setattr__(self, "duration_hours", self.duration_minutes / 60.0)
        if self.week_start is None:
            object.__setattr__(self, "week_start", week_start_for(self.created_at.date()))
        return self

    def metric(self, field: SessionMetric) -> float:
        """Значение числового поля сессии."""
        return float(getattr(self, SessionMetric(field).value))

    @property
    def weekday_name(self) -> str:
        return WEEKDAY_NAMES[self.created_at.weekday()]


# =============================================================================
# ОПЕРАЦИИ НАД СПИСКАМИ
# =============================================================================


def extract_metric(sessions: Iterable[StudySession], field: SessionMetric) -> list[float]:
    """Последовательность значений одного поля в порядке сессий."""
    return [s.metric(field) for s in sessions]


def filter_by_date_range(
    sessions: Iterable[StudySession],
    start: datetime,
    end: datetime,
) -> list[StudySession]:
    """Сессии с start <= created_at <= end (обе границы включительно)."""
    return [s for s in sessions if start <= s.created_at <= end]


def sessions_in_week(
    sessions: Iterable[StudySession],
    day: date,
    tz: timezone = timezone.utc,
) -> list[StudySession]:
    """Сессии недели (понедельник-воскресенье), содержащей day."""
    start, end = week_bounds(day, tz)
    return filter_by_date_range(sessions, start, end)


def filter_by_min_score(
    sessions: Iterable[StudySession],
    field: SessionMetric,
    threshold: float,
) -> list[StudySession]:
    """Сессии, у которых значение поля >= threshold."""
    return [s for s in sessions if s.metric(field) >= threshold]


# Ключ сортировки по времени создания (не числовое поле, в SessionMetric не входит)
CREATED_AT = "created_at"


def sort_sessions(
    sessions: Iterable[StudySession],
    field: SessionMetric | str,
    descending: bool = False,
) -> list[StudySession]:
    """
    Устойчивая сортировка сессий по числовому полю или по CREATED_AT.

    Тот же порядок, что у sort_reals: по возрастанию значения, равные
    сохраняют входной порядок (в том числе при descending=True).
    sort_sessions(sessions, CREATED_AT, descending=True) - новые первыми.
    """
    if field == CREATED_AT:
        return sorted(sessions, key=lambda s: s.created_at, reverse=descending)
    return sorted(sessions, key=lambda s: s.metric(field), reverse=descending)
