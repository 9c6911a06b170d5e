"""
Тесты для модуля Numerical Safeguards

Проверяет:
1. Явное округление half away from zero на точном двоичном значении
2. Форматирование с фиксированным числом знаков
3. Проверку конечности (NaN/Inf)
4. Безопасное деление и сравнение с толерантностью
5. Исключение для пустого входа в strict-режиме
"""

import math

import pytest

from studystats.core.math.numerical_safeguards import (
    AGGREGATE_DECIMALS,
    AXIOM_TOLERANCE,
    REAL_DECIMALS,
    UndefinedForEmptyInput,
    format_fixed,
    is_close,
    is_valid_float,
    round_aggregate,
    round_half_away,
    safe_divide,
)
from studystats.core.math.real_stats import calculate_z_score

# =============================================================================
# ТЕСТЫ ОКРУГЛЕНИЯ
# =============================================================================


class TestRoundHalfAway:
    """Тесты для round_half_away"""

    def test_precision_constants(self) -> None:
        """Политика точности: 4 знака для агрегатов, 6 для скаляра"""
        assert AGGREGATE_DECIMALS == 4
        assert REAL_DECIMALS == 6
        assert AXIOM_TOLERANCE == 1e-10

    def test_rounds_to_requested_places(self) -> None:
        assert round_half_away(3.1234567, 6) == 3.123457
        assert round_half_away(0.901387818866, 4) == 0.9014
        assert round_half_away(1.386731, 4) == 1.3867

    def test_half_rounds_away_from_zero(self) -> None:
        """Точные половины уходят от нуля (а не к чётному, как round())"""
        assert round_half_away(0.125, 2) == 0.13
        assert round_half_away(-0.125, 2) == -0.13
        assert round_half_away(2.5, 0) == 3.0
        assert round_half_away(-2.5, 0) == -3.0
        assert round_half_away(0.5, 0) == 1.0

    def test_uses_exact_binary_value(self) -> None:
        """2.675 хранится как 2.67499999..., поэтому даёт 2.67"""
        assert round_half_away(2.675, 2) == 2.67
        assert round_half_away(1.005, 2) == 1.0

    def test_floating_noise_removed(self) -> None:
        assert round_half_away(0.1 + 0.2, 4) == 0.3
        assert round_half_away(5.9000000000000004, 4) == 5.9

    def test_large_values_do_not_overflow_context(self) -> None:
        assert round_half_away(1e300, 4) == 1e300
        assert round_half_away(-1.7976931348623157e308, 6) == -1.7976931348623157e308

    def test_non_finite_returned_unchanged(self) -> None:
        assert math.isnan(round_half_away(float("nan"), 4))
        assert round_half_away(float("inf"), 4) == float("inf")
        assert round_half_away(float("-inf"), 4) == float("-inf")

    def test_negative_places_raises(self) -> None:
        with pytest.raises(ValueError, match="places must be non-negative"):
            round_half_away(1.0, -1)

    def test_round_aggregate_uses_four_places(self) -> None:
        assert round_aggregate(0.33333333) == 0.3333
        assert round_aggregate(0.66666666) == 0.6667
        assert round_aggregate(0.6749999999999999) == 0.675


class TestFormatFixed:
    """Тесты для format_fixed"""

    def test_pads_trailing_zeros(self) -> None:
        assert format_fixed(7.0, 2) == "7.00"
        assert format_fixed(1.75, 4) == "1.7500"
        assert format_fixed(3.0, 0) == "3"

    def test_half_away_not_half_even(self) -> None:
        """'.2f' дал бы '0.12'"""
        assert format_fixed(0.125, 2) == "0.13"
        assert format_fixed(0.5, 0) == "1"

    def test_negative_values(self) -> None:
        assert format_fixed(-1.3867, 2) == "-1.39"

    @pytest.mark.parametrize("value", [-0.0, -0.00001, -0.00004999])
    def test_negative_zero_printed_unsigned(self, value: float) -> None:
        """Значение, округлившееся до -0.0, печатается как '0.0000'"""
        assert format_fixed(value, 4) == "0.0000"

    def test_tiny_negative_z_score_unsigned(self) -> None:
        z_score = calculate_z_score(1.74999, 1.75, 0.9014)

        assert z_score == 0.0
        assert format_fixed(z_score, 4) == "0.0000"


class TestIsValidFloat:
    """Тесты для is_valid_float"""

    def test_is_valid_float(self) -> None:
        assert is_valid_float(0.0)
        assert is_valid_float(-12.5)
        assert not is_valid_float(float("nan"))
        assert not is_valid_float(float("inf"))
        assert not is_valid_float(float("-inf"))


# =============================================================================
# ТЕСТЫ ДЕЛЕНИЯ И СРАВНЕНИЯ
# =============================================================================


class TestSafeDivide:
    """Тесты для safe_divide"""

    def test_normal_division(self) -> None:
        assert safe_divide(10.0, 2.0) == 5.0
        assert safe_divide(-10.0, 4.0) == -2.5

    def test_exact_zero_returns_fallback(self) -> None:
        assert safe_divide(10.0, 0.0) == 0.0
        assert safe_divide(10.0, -0.0) == 0.0
        assert safe_divide(10.0, 0.0, fallback=1.0) == 1.0

    def test_small_denominator_not_replaced(self) -> None:
        """Малый ненулевой знаменатель используется как есть"""
        assert safe_divide(1.0, 1e-20) == pytest.approx(1e20)


class TestIsClose:
    """Тесты для is_close"""

    def test_within_tolerance(self) -> None:
        assert is_close(0.1 + 0.2, 0.3)
        assert is_close(1.0, 1.0)

    def test_outside_tolerance(self) -> None:
        assert not is_close(1.0, 1.0 + 1e-9)

    def test_custom_tolerance_is_strict(self) -> None:
        assert not is_close(1.0, 1.5, tol=0.5)
        assert is_close(1.0, 1.25, tol=0.5)


# =============================================================================
# ТЕСТЫ ИСКЛЮЧЕНИЙ
# =============================================================================


def test_undefined_for_empty_input_is_value_error() -> None:
    assert issubclass(UndefinedForEmptyInput, ValueError)
