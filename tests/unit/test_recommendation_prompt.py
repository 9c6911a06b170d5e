"""
Tests for AI recommendation prompt

Проверяет:
1. Минимальное число сессий
2. Агрегаты в тексте промпта совпадают со сводкой
3. Блок последних сессий
4. Тело запроса chat completions
5. Разбор входящего запроса и ответа AI
"""

import pytest
from jsonschema import ValidationError

from studystats.config import Settings
from studystats.recommendations import (
    SYSTEM_PROMPT,
    InsufficientSessionsError,
    RecommendationPrompt,
    RecommendationResponseError,
    build_chat_payload,
    build_recommendation_prompt,
    extract_recommendations,
    parse_recommendation_request,
)


@pytest.fixture
def settings() -> Settings:
    return Settings(
        min_sessions_for_recommendations=3,
        recent_sessions_in_prompt=5,
        smoothing_alpha=0.3,
        ai_model="test/model",
    )


# =============================================================================
# ТЕСТЫ: Промпт
# =============================================================================


class TestBuildRecommendationPrompt:
    """build_recommendation_prompt"""

    def test_too_few_sessions(self, week_sessions, settings):
        with pytest.raises(InsufficientSessionsError) as exc_info:
            build_recommendation_prompt(week_sessions[:2], settings)

        assert exc_info.value.count == 2
        assert exc_info.value.required == 3
        assert isinstance(exc_info.value, ValueError)

    def test_empty_history(self, settings):
        with pytest.raises(InsufficientSessionsError, match="got 0"):
            build_recommendation_prompt([], settings)

    def test_statistics_lines(self, week_sessions, settings):
        prompt = build_recommendation_prompt(week_sessions, settings)

        assert prompt.system == SYSTEM_PROMPT
        assert "- Total Sesi: 4\n" in prompt.user
        assert "- Total Waktu Belajar: 7.00 jam (Σxi)" in prompt.user
        assert "- Rata-rata Durasi: 1.75 jam (μ = Σxi/n)" in prompt.user
        assert "- Rentang Durasi: [0.50 jam, 3.00 jam] (infimum ke supremum)" in prompt.user
        assert "- Standar Deviasi Durasi: 0.9014 jam (σ)" in prompt.user
        assert "- Rata-rata Efisiensi: 67.5%" in prompt.user
        assert "- Tren Efisiensi: 71.7% (rata-rata bergerak eksponensial, α = 0.3)" in prompt.user
        assert "- Skor Mood Rata-rata: 6.5/10" in prompt.user
        assert "- Skor Fokus Rata-rata: 7.0/10" in prompt.user

    def test_recent_sessions_block(self, week_sessions, settings):
        prompt = build_recommendation_prompt(week_sessions, settings)

        assert "Sesi Terbaru (4 terakhir):" in prompt.user
        assert (
            "Sesi 4:\n"
            "- Durasi: 3.00 jam\n"
            "- Efisiensi: 90.0%\n"
            "- Mood: 8.0/10\n"
            "- Fokus: 9.0/10\n"
        ) in prompt.user

    def test_recent_sessions_limited(self, week_sessions):
        settings = Settings(recent_sessions_in_prompt=2)
        prompt = build_recommendation_prompt(week_sessions, settings)

        assert "Sesi Terbaru (2 terakhir):" in prompt.user
        # Первой в блоке идёт предпоследняя сессия (30 минут)
        assert "Sesi 1:\n- Durasi: 0.50 jam" in prompt.user
        assert "Sesi 3:" not in prompt.user

    def test_required_count_from_settings(self, week_sessions):
        settings = Settings(min_sessions_for_recommendations=5)

        with pytest.raises(InsufficientSessionsError, match="Need at least 5 sessions"):
            build_recommendation_prompt(week_sessions, settings)


# =============================================================================
# ТЕСТЫ: Запрос и ответ
# =============================================================================


class TestChatPayload:
    """build_chat_payload"""

    def test_messages(self):
        payload = build_chat_payload(RecommendationPrompt("sys", "usr"), model="test/model")

        assert payload == {
            "model": "test/model",
            "messages": [
                {"role": "system", "content": "sys"},
                {"role": "user", "content": "usr"},
            ],
        }

    def test_default_model_from_settings(self, monkeypatch):
        from studystats.config import get_settings

        monkeypatch.setenv("STUDYSTATS_AI_MODEL", "other/model")
        get_settings.cache_clear()
        try:
            payload = build_chat_payload(RecommendationPrompt("sys", "usr"))
        finally:
            get_settings.cache_clear()

        assert payload["model"] == "other/model"


class TestParseRecommendationRequest:
    """parse_recommendation_request"""

    def test_round_trip_from_json(self, week_sessions):
        body = {"sessions": [s.model_dump(mode="json") for s in week_sessions]}

        sessions = parse_recommendation_request(body)

        assert [s.id for s in sessions] == ["s1", "s2", "s3", "s4"]
        assert [s.duration_hours for s in sessions] == [1.5, 2.0, 0.5, 3.0]
        assert sessions[0].created_at == week_sessions[0].created_at

    def test_derived_fields_filled_when_missing(self):
        body = {
            "sessions": [
                {
                    "id": "a",
                    "duration_minutes": 45,
                    "mood_score": 6,
                    "focus_score": 7,
                    "efficiency_score": 0.5,
                    "created_at": "2025-12-03T10:00:00Z",
                }
            ]
        }

        (session,) = parse_recommendation_request(body)

        assert session.duration_hours == 0.75
        assert session.week_start.isoformat() == "2025-12-01"

    def test_schema_violation(self):
        with pytest.raises(ValidationError):
            parse_recommendation_request({"sessions": [{"id": "a"}]})

    def test_rejection_logged_with_paths(self, caplog):
        body = {"sessions": [], "extra": True}

        with caplog.at_level("INFO", logger="studystats.recommendations.prompt"):
            with pytest.raises(ValidationError):
                parse_recommendation_request(body)

        assert "Rejected recommendation request: $: Additional properties" in caplog.text


class TestExtractRecommendations:
    """extract_recommendations"""

    def test_content(self):
        response = {"choices": [{"message": {"role": "assistant", "content": "1. Belajar pagi"}}]}
        assert extract_recommendations(response) == "1. Belajar pagi"

    @pytest.mark.parametrize(
        "response",
        [
            {},
            {"choices": []},
            {"choices": [{"message": {}}]},
            {"choices": [{"message": {"content": "   "}}]},
            {"choices": [{"message": {"content": None}}]},
        ],
    )
    def test_malformed(self, response):
        with pytest.raises(RecommendationResponseError):
            extract_recommendations(response)
