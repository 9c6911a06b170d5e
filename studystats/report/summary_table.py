"""
Study Report - Содержимое экспортируемого отчёта

Таблицы и тексты отчёта в виде готовых строк. Отрисовка PDF и графика
остаётся за внешней библиотекой: она получает StudyReport и только
раскладывает строки по странице.

Значения берутся из compute_session_summary, поэтому совпадают с
карточками дашборда до последнего знака.
"""

from datetime import datetime
from typing import Final, NamedTuple, Optional, Sequence

from studystats.analytics.summary import (
    EFFICIENCY_RANGE,
    MOOD_FOCUS_RANGE,
    SessionSummary,
    compute_session_summary,
)
from studystats.core.domain.study_session import StudySession
from studystats.core.math.numerical_safeguards import format_fixed
from studystats.core.math.real_stats import normalize

REPORT_TITLE: Final[str] = "Laporan Analisis Belajar"

SUMMARY_SECTION_TITLE: Final[str] = "Ringkasan Statistik Bilangan Real"
SESSIONS_SECTION_TITLE: Final[str] = "Data Sesi Belajar"
RECOMMENDATIONS_SECTION_TITLE: Final[str] = "Rekomendasi AI"

SUMMARY_HEADER: Final[tuple[str, str, str]] = ("Metrik", "Nilai", "Rumus")
SESSION_HEADER: Final[tuple[str, ...]] = ("Tanggal", "Durasi", "Efisiensi", "Mood", "Fokus")

# В таблицу сессий попадают только последние N записей
SESSION_ROWS_LIMIT: Final[int] = 10


class ReportRow(NamedTuple):
    """Строка сводной таблицы: метрика, значение, формула."""

    metric: str
    value: str
    formula: str


class StudyReport(NamedTuple):
    """Всё содержимое отчёта, кроме изображения графика."""

    title: str
    generated_at: datetime
    summary: SessionSummary
    summary_rows: list[ReportRow]
    session_rows: list[tuple[str, ...]]
    recommendations: Optional[str]


def _percent(value: float, bounds: tuple[float, float], places: int) -> str:
    return f"{format_fixed(normalize(value, *bounds) * 100, places)}%"


def build_summary_rows(summary: SessionSummary) -> list[ReportRow]:
    """
    Строки сводной таблицы (без заголовка SUMMARY_HEADER).

    Средние настроения и фокуса (шкала 0-10) переводятся в проценты через
    normalize, как и эффективность (шкала 0-1).
    """
    return [
        ReportRow("Total Waktu Belajar", f"{format_fixed(summary.total_hours, 2)} jam", "Σ(xi)"),
        ReportRow("Rata-rata Durasi (μ)", f"{format_fixed(summary.avg_duration, 4)} jam", "Σ(xi) / n"),
        ReportRow("Supremum (sup)", f"{format_fixed(summary.sup_duration, 2)} jam", "max{xi}"),
        ReportRow("Infimum (inf)", f"{format_fixed(summary.inf_duration, 2)} jam", "min{xi}"),
        ReportRow("Variansi (σ²)", format_fixed(summary.variance, 4), "Σ(xi - μ)² / n"),
        ReportRow("Standar Deviasi (σ)", format_fixed(summary.std_dev, 4), "√σ²"),
        ReportRow("Z-Score Terbaru", format_fixed(summary.latest_z_score, 4), "(x - μ) / σ"),
        ReportRow(
            "Efisiensi Rata-rata",
            _percent(summary.avg_efficiency, EFFICIENCY_RANGE, 1),
            "μ(ε) × 100",
        ),
        ReportRow("Mood Rata-rata", _percent(summary.avg_mood, MOOD_FOCUS_RANGE, 1), "μ(m) × 10"),
        ReportRow("Fokus Rata-rata", _percent(summary.avg_focus, MOOD_FOCUS_RANGE, 1), "μ(f) × 10"),
    ]


def build_session_rows(
    sessions: Sequence[StudySession],
    limit: int = SESSION_ROWS_LIMIT,
) -> list[tuple[str, ...]]:
    """
    Строки таблицы сессий: последние `limit` записей в исходном порядке.

    Дата в формате d/m/yyyy, длительность с 2 знаками, оценки в целых
    процентах. limit <= 0 даёт пустую таблицу.
    """
    # [-0:] вернул бы весь список
    if limit <= 0:
        return []

    rows = []
    for session in list(sessions)[-limit:]:
        created = session.created_at
        rows.append(
            (
                f"{created.day}/{created.month}/{created.year}",
                f"{format_fixed(session.duration_hours, 2)} jam",
                _percent(session.efficiency_score, EFFICIENCY_RANGE, 0),
                _percent(session.mood_score, MOOD_FOCUS_RANGE, 0),
                _percent(session.focus_score, MOOD_FOCUS_RANGE, 0),
            )
        )
    return rows


def build_study_report(
    sessions: Sequence[StudySession],
    recommendations: Optional[str] = None,
    generated_at: Optional[datetime] = None,
) -> StudyReport:
    """
    Сборка отчёта.

    Raises:
        ValueError: Если сессий нет (экспортировать нечего)
    """
    if not sessions:
        raise ValueError("No study sessions to export")

    summary = compute_session_summary(sessions)

    return StudyReport(
        title=REPORT_TITLE,
        generated_at=generated_at or datetime.now().astimezone(),
        summary=summary,
        summary_rows=build_summary_rows(summary),
        session_rows=build_session_rows(sessions),
        recommendations=recommendations or None,
    )
