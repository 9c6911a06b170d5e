"""
Recommendation Prompt - Построение запроса к AI для рекомендаций

Модуль готовит текст запроса к chat completions API (OpenAI-совместимый
формат). Сам HTTP-вызов выполняет внешний сервис.

Агрегаты в промпте берутся из compute_session_summary, то есть это те же
числа, что на дашборде и в отчёте. Язык промпта - индонезийский, как и
интерфейс дашборда.
"""

import logging
from typing import Any, Dict, Final, NamedTuple, Optional, Sequence

import jsonschema

from studystats.analytics.summary import compute_session_summary, efficiency_trend
from studystats.config import Settings, get_settings
from studystats.core.contracts import (
    recommendation_request_errors,
    validate_recommendation_request,
)
from studystats.core.domain.study_session import StudySession
from studystats.core.math.numerical_safeguards import format_fixed

logger = logging.getLogger(__name__)


SYSTEM_PROMPT: Final[str] = """Kamu adalah ahli analisis belajar yang memberikan rekomendasi personal berdasarkan analisis matematika bilangan real.

PENTING: Seluruh respons HARUS dalam Bahasa Indonesia.

Rekomendasi kamu harus:
- Spesifik dan dapat ditindaklanjuti
- Merujuk pada pola data yang sebenarnya
- Menyarankan durasi belajar optimal berdasarkan pola mereka
- Mengidentifikasi waktu performa puncak mereka
- Merekomendasikan peningkatan fokus dan efisiensi
- Ringkas (3-5 poin)
- Gunakan emoji untuk membuat rekomendasi lebih menarik"""


# =============================================================================
# EXCEPTIONS
# =============================================================================


class InsufficientSessionsError(ValueError):
    """Сессий меньше, чем нужно для рекомендаций."""

    def __init__(self, count: int, required: int):
        self.count = count
        self.required = required
        super().__init__(f"Need at least {required} sessions for recommendations, got {count}")


class RecommendationResponseError(ValueError):
    """Ответ AI-сервиса не содержит текста рекомендаций."""

    pass


# =============================================================================
# PROMPT
# =============================================================================


class RecommendationPrompt(NamedTuple):
    """Пара сообщений для chat completions."""

    system: str
    user: str


def _session_block(index: int, session: StudySession) -> str:
    return (
        f"Sesi {index}:\n"
        f"- Durasi: {format_fixed(session.duration_hours, 2)} jam\n"
        f"- Efisiensi: {format_fixed(session.efficiency_score * 100, 1)}%\n"
        f"- Mood: {format_fixed(session.mood_score, 1)}/10\n"
        f"- Fokus: {format_fixed(session.focus_score, 1)}/10\n"
    )


def build_recommendation_prompt(
    sessions: Sequence[StudySession],
    settings: Optional[Settings] = None,
) -> RecommendationPrompt:
    """
    Промпт рекомендаций по истории сессий.

    Args:
        sessions: Сессии в хронологическом порядке
        settings: Настройки (default: get_settings())

    Returns:
        RecommendationPrompt(system, user)

    Raises:
        InsufficientSessionsError: Если сессий меньше
            settings.min_sessions_for_recommendations
    """
    settings = settings or get_settings()

    required = settings.min_sessions_for_recommendations
    if len(sessions) < required:
        raise InsufficientSessionsError(len(sessions), required)

    summary = compute_session_summary(sessions)
    trend = efficiency_trend(sessions, settings.smoothing_alpha)

    recent = list(sessions)[-settings.recent_sessions_in_prompt:]
    recent_blocks = "\n".join(
        _session_block(i, session) for i, session in enumerate(recent, start=1)
    )

    user_prompt = (
        "Analisis pola belajar berikut dan berikan rekomendasi dalam Bahasa Indonesia:\n"
        "\n"
        "Statistik Belajar (Analisis Bilangan Real):\n"
        f"- Total Sesi: {summary.session_count}\n"
        f"- Total Waktu Belajar: {format_fixed(summary.total_hours, 2)} jam (Σxi)\n"
        f"- Rata-rata Durasi: {format_fixed(summary.avg_duration, 2)} jam (μ = Σxi/n)\n"
        f"- Rentang Durasi: [{format_fixed(summary.inf_duration, 2)} jam, "
        f"{format_fixed(summary.sup_duration, 2)} jam] (infimum ke supremum)\n"
        f"- Standar Deviasi Durasi: {format_fixed(summary.std_dev, 4)} jam (σ)\n"
        f"- Rata-rata Efisiensi: {format_fixed(summary.avg_efficiency * 100, 1)}% "
        "(dinormalisasi ke [0,1])\n"
        f"- Tren Efisiensi: {format_fixed(trend[-1] * 100, 1)}% "
        f"(rata-rata bergerak eksponensial, α = {settings.smoothing_alpha})\n"
        f"- Skor Mood Rata-rata: {format_fixed(summary.avg_mood, 1)}/10\n"
        f"- Skor Fokus Rata-rata: {format_fixed(summary.avg_focus, 1)}/10\n"
        "\n"
        f"Sesi Terbaru ({len(recent)} terakhir):\n"
        f"{recent_blocks}\n"
        "Berikan 3-5 rekomendasi spesifik dan dapat ditindaklanjuti untuk meningkatkan "
        "efektivitas belajar mereka. Gunakan Bahasa Indonesia yang baik dan benar."
    )

    logger.debug("Built recommendation prompt from %d sessions", len(sessions))

    return RecommendationPrompt(system=SYSTEM_PROMPT, user=user_prompt)


# =============================================================================
# REQUEST / RESPONSE
# =============================================================================


def build_chat_payload(
    prompt: RecommendationPrompt,
    model: Optional[str] = None,
) -> Dict[str, Any]:
    """Тело запроса chat completions."""
    return {
        "model": model or get_settings().ai_model,
        "messages": [
            {"role": "system", "content": prompt.system},
            {"role": "user", "content": prompt.user},
        ],
    }


def parse_recommendation_request(data: Dict[str, Any]) -> list[StudySession]:
    """
    Разбор тела запроса {"sessions": [...]}.

    Raises:
        jsonschema.ValidationError: Если тело не соответствует контракту
        pydantic.ValidationError: Если запись не собирается в StudySession
    """
    try:
        validate_recommendation_request(data)
    except jsonschema.ValidationError:
        logger.info(
            "Rejected recommendation request: %s",
            "; ".join(recommendation_request_errors(data)),
        )
        raise

    return [StudySession.model_validate(item) for item in data["sessions"]]


def extract_recommendations(response: Dict[str, Any]) -> str:
    """
    Текст рекомендаций из ответа chat completions (choices[0].message.content).

    Raises:
        RecommendationResponseError: Если ответ не содержит текста
    """
    try:
        content = response["choices"][0]["message"]["content"]
    except (KeyError, IndexError, TypeError) as e:
        raise RecommendationResponseError(f"Malformed completion response: {e!r}") from e

    if not isinstance(content, str) or not content.strip():
        raise RecommendationResponseError("Completion response has no content")

    return content
