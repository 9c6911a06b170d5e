"""
Numerical Safeguards - Rounding and Division Policy

Общие числовые правила статистики сессий:
- Явное десятичное округление до N знаков (half away from zero)
- Строки с фиксированным числом знаков для отчёта и промпта
- Деление с защитой от точного нуля в знаменателе
- Сравнение float с абсолютной толерантностью (демонстрация аксиом)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Округляется точное двоичное значение float, без строкового round-trip
2. Результат округления не зависит от локали и версии интерпретатора
3. (x - μ) / σ считается для любого σ != 0, подмена только для точного нуля
"""

import math
from decimal import ROUND_HALF_UP, Context, Decimal
from typing import Final

# =============================================================================
# ПАРАМЕТРЫ ТОЧНОСТИ
# =============================================================================

# Знаков после запятой у агрегатов (mean, variance, z-score, ...)
AGGREGATE_DECIMALS: Final[int] = 4

# Знаков после запятой у валидированного скаляра (create_real)
REAL_DECIMALS: Final[int] = 6

# Толерантность для демонстрации аксиом (коммутативность и т.д.)
AXIOM_TOLERANCE: Final[float] = 1e-10

# 400 цифр покрывают любой конечный float (max ~1.8e308) вместе с дробной частью
_ROUNDING_CONTEXT: Final[Context] = Context(prec=400, rounding=ROUND_HALF_UP)


# =============================================================================
# EXCEPTIONS
# =============================================================================


class UndefinedForEmptyInput(ValueError):
    """
    Агрегат не определён для пустой последовательности.

    Поднимается только в strict-режиме. По умолчанию все агрегаты
    возвращают 0 для пустого входа.
    """

    pass


# =============================================================================
# ОКРУГЛЕНИЕ
# =============================================================================


def is_valid_float(value: float) -> bool:
    """True для конечного значения (не NaN и не ±Inf)."""
    return math.isfinite(value)


def round_half_away(value: float, places: int) -> float:
    """
    Округление до `places` знаков после запятой, половина - от нуля.

    Decimal(value) переносит точное двоичное значение float, поэтому 1.005
    (хранится как 1.00499999...) даёт 1.0. Встроенный round() здесь не
    годится: он округляет половину к чётному. NaN/Inf возвращаются как есть.

    Args:
        value: Округляемое число
        places: Знаков после запятой (>= 0)

    Returns:
        float, ближайший к десятичному результату

    Raises:
        ValueError: Если places < 0

    Examples:
        >>> round_half_away(3.1234567, 6)
        3.123457
        >>> round_half_away(0.125, 2)
        0.13
        >>> round_half_away(-0.125, 2)
        -0.13
    """
    if places < 0:
        raise ValueError(f"places must be non-negative, got {places}")

    if not is_valid_float(value):
        return value

    quantum = Decimal(1).scaleb(-places)
    rounded = Decimal(value).quantize(quantum, context=_ROUNDING_CONTEXT)
    return float(rounded)


def round_aggregate(value: float) -> float:
    """Округление агрегата до AGGREGATE_DECIMALS знаков."""
    return round_half_away(value, AGGREGATE_DECIMALS)


def format_fixed(value: float, places: int) -> str:
    """
    Строка с фиксированным числом знаков, половина - от нуля.

    Формат-спецификатор '.Nf' сам по себе округляет половину к чётному
    (0.125 -> '0.12'), поэтому значение сначала проходит round_half_away.
    Значение, округлившееся до нуля, печатается без знака ("-0.0000" -> "0.0000").

    Examples:
        >>> format_fixed(0.125, 2)
        '0.13'
        >>> format_fixed(7.0, 1)
        '7.0'
        >>> format_fixed(-0.00001, 4)
        '0.0000'
    """
    # -0.0 + 0.0 == +0.0
    rounded = round_half_away(value, places) + 0.0
    return f"{rounded:.{places}f}"


# =============================================================================
# ДЕЛЕНИЕ И СРАВНЕНИЕ
# =============================================================================


def safe_divide(numerator: float, denominator: float, fallback: float = 0.0) -> float:
    """
    numerator / denominator, либо fallback при denominator == 0 (включая -0.0).

    Малые ненулевые знаменатели не подменяются epsilon: z-score должен
    быть точным для любого σ != 0.

    Examples:
        >>> safe_divide(10.0, 4.0)
        2.5
        >>> safe_divide(10.0, 0.0, fallback=1.0)
        1.0
    """
    if denominator == 0:
        return fallback
    return numerator / denominator


def is_close(a: float, b: float, tol: float = AXIOM_TOLERANCE) -> bool:
    """
    Сравнение с абсолютной толерантностью: |a - b| < tol.

    Строгое неравенство: разница ровно tol считается расхождением.
    """
    return abs(a - b) < tol
