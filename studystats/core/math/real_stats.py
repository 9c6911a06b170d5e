"""
RealNumberStats - Descriptive Statistics over Study Metrics

Единственная реализация агрегатов, которую используют дашборд, недельная
история, отчёт и построение AI-промпта. Все вызывающие стороны получают
одинаковые числа с одинаковым округлением.

Модуль содержит:
- Валидированный конструктор неотрицательной величины (create_real)
- Clamp и нормализацию в [0, 1]
- Среднее, дисперсию (генеральную), стандартное отклонение, z-score
- Supremum / infimum конечной выборки
- Сумму Римана (левые точки, ширина интервала по умолчанию 1)
- Экспоненциальное сглаживание
- Устойчивую сортировку по возрастанию
- Демонстрацию аксиом сложения и умножения (только для отображения)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Агрегаты тотальны: пустой вход -> 0, вырожденный диапазон -> 0, σ = 0 -> 0
2. Агрегаты округляются до 4 знаков, create_real - до 6 (half away from zero)
3. Суммирование строго слева направо, без компенсации
4. Функции чистые: диагностика уходит в observer или в DEBUG-лог модуля

ФОРМУЛЫ:
    μ = Σxi / n
    σ² = Σ(xi - μ)² / n        (μ - уже округлённое среднее)
    σ = √σ²
    z = (x - μ) / σ
    S = Σ(xi × Δ)
    L = (1 - α)·L_prev + α·x
"""

import logging
import math
from typing import Callable, Final, NamedTuple, Optional, Sequence

from studystats.core.domain.measured_quantity import MeasuredQuantity
from studystats.core.math.numerical_safeguards import (
    AXIOM_TOLERANCE,
    REAL_DECIMALS,
    UndefinedForEmptyInput,
    is_close,
    round_aggregate,
    round_half_away,
    safe_divide,
)

logger = logging.getLogger(__name__)

# Наблюдатель диагностических сообщений (например, print или list.append)
Observer = Callable[[str], None]

# =============================================================================
# ПАРАМЕТРЫ ПО УМОЛЧАНИЮ
# =============================================================================

# Коэффициент сглаживания α для moving_average
DEFAULT_SMOOTHING_ALPHA: Final[float] = 0.3

# Ширина интервала суммы Римана (1 = обычное суммирование часов)
DEFAULT_INTERVAL: Final[float] = 1.0

MINUTES_PER_HOUR: Final[float] = 60.0


# =============================================================================
# ДИАГНОСТИКА
# =============================================================================


def _trace(observer: Optional[Observer], template: str, *args: object) -> None:
    """
    Отправка диагностического сообщения.

    Без observer сообщение уходит в DEBUG-лог модуля (форматируется лениво).
    Ошибка внутри observer логируется и не прерывает вычисление.
    """
    if observer is None:
        logger.debug(template, *args)
        return

    try:
        observer(template % args)
    except Exception:
        logger.warning("Diagnostic observer failed", exc_info=True)


class _Joined:
    """Значения через разделитель; строка собирается только при подстановке в %s."""

    __slots__ = ("values", "separator")

    def __init__(self, values: Sequence[float], separator: str):
        self.values = values
        self.separator = separator

    def __str__(self) -> str:
        return self.separator.join(str(v) for v in self.values)


def _join(values: Sequence[float], separator: str) -> _Joined:
    return _Joined(values, separator)


def _require_values(values: Sequence[float], name: str, strict: bool) -> bool:
    """
    True если последовательность непустая.

    В strict-режиме пустой вход поднимает UndefinedForEmptyInput вместо
    возврата нулевого значения по умолчанию.
    """
    if len(values) > 0:
        return True
    if strict:
        raise UndefinedForEmptyInput(f"{name} is undefined for an empty sequence")
    return False


# =============================================================================
# АКСИОМЫ (демонстрация)
# =============================================================================


class CommutativeCheck(NamedTuple):
    """a + b против b + a."""

    result: float
    commutative: bool


class AssociativeCheck(NamedTuple):
    """(a + b) + c против a + (b + c)."""

    result1: float
    result2: float
    associative: bool


class DistributiveCheck(NamedTuple):
    """a × (b + c) против a × b + a × c."""

    result1: float
    result2: float
    distributive: bool


def add_real(a: float, b: float, observer: Optional[Observer] = None) -> CommutativeCheck:
    """
    Сложение с проверкой коммутативности: a + b = b + a.

    Только для отображения. Не использовать как проверку данных.
    """
    sum1 = a + b
    sum2 = b + a

    commutative = is_close(sum1, sum2, AXIOM_TOLERANCE)

    _trace(observer, "Commutative property: %s + %s = %s, %s + %s = %s", a, b, sum1, b, a, sum2)

    return CommutativeCheck(result=sum1, commutative=commutative)


def associative_addition(
    a: float, b: float, c: float, observer: Optional[Observer] = None
) -> AssociativeCheck:
    """
    Проверка ассоциативности сложения: (a + b) + c = a + (b + c).

    Examples:
        >>> associative_addition(0.1, 0.2, 0.3).associative
        True
    """
    result1 = (a + b) + c
    result2 = a + (b + c)

    associative = is_close(result1, result2, AXIOM_TOLERANCE)

    _trace(
        observer,
        "Associative property: (%s + %s) + %s = %s, %s + (%s + %s) = %s",
        a, b, c, result1, a, b, c, result2,
    )

    return AssociativeCheck(result1=result1, result2=result2, associative=associative)


def distributive_property(
    a: float, b: float, c: float, observer: Optional[Observer] = None
) -> DistributiveCheck:
    """Проверка дистрибутивности: a × (b + c) = a × b + a × c."""
    result1 = a * (b + c)
    result2 = a * b + a * c

    distributive = is_close(result1, result2, AXIOM_TOLERANCE)

    _trace(
        observer,
        "Distributive property: %s x (%s + %s) = %s, %s x %s + %s x %s = %s",
        a, b, c, result1, a, b, a, c, result2,
    )

    return DistributiveCheck(result1=result1, result2=result2, distributive=distributive)


# =============================================================================
# ВАЛИДАЦИЯ И ОГРАНИЧЕНИЕ
# =============================================================================


def create_real(value: float) -> MeasuredQuantity:
    """
    Валидированный конструктор неотрицательной величины.

    Единственная функция модуля, которая сообщает об ошибке - через флаг
    is_valid и error_message, без исключения.

    Args:
        value: Кандидат (float)

    Returns:
        MeasuredQuantity:
        - NaN -> invalid, "Value is NaN"
        - ±Inf -> invalid, "Value is Infinity"
        - < 0 -> invalid, "Negative values not allowed"
        - иначе valid, значение округлено до 6 знаков

    Examples:
        >>> create_real(3.1234567).value
        3.123457
        >>> create_real(-1).is_valid
        False
    """
    if math.isnan(value):
        return MeasuredQuantity(value=0.0, is_valid=False, error_message="Value is NaN")

    if math.isinf(value):
        return MeasuredQuantity(value=0.0, is_valid=False, error_message="Value is Infinity")

    if value < 0:
        return MeasuredQuantity(
            value=0.0, is_valid=False, error_message="Negative values not allowed"
        )

    return MeasuredQuantity(value=round_half_away(value, REAL_DECIMALS), is_valid=True)


def clamp_real(value: float, min_value: float, max_value: float) -> float:
    """
    Ограничение значения диапазоном [min_value, max_value].

    Строгие сравнения: NaN ни меньше, ни больше границ и возвращается
    без изменений.

    Examples:
        >>> clamp_real(15, 0, 10)
        10
        >>> clamp_real(-5, 0, 10)
        0
        >>> clamp_real(5, 0, 10)
        5
    """
    if value < min_value:
        return min_value
    if value > max_value:
        return max_value
    return value


def normalize(value: float, min_value: float, max_value: float) -> float:
    """
    Аффинная нормализация в [0, 1]: (x - min) / (max - min), затем clamp.

    Вырожденный диапазон (max == min) даёт 0. Результат НЕ округляется.

    Examples:
        >>> normalize(5.0, 0.0, 10.0)
        0.5
        >>> normalize(12.0, 0.0, 10.0)
        1.0
        >>> normalize(3.0, 4.0, 4.0)
        0.0
    """
    if max_value == min_value:
        return 0.0

    normalized = (value - min_value) / (max_value - min_value)

    return clamp_real(normalized, 0.0, 1.0)


# =============================================================================
# КОНВЕРСИЯ ЕДИНИЦ
# =============================================================================


def minutes_to_hours(minutes: float) -> float:
    """
    Минуты -> часы, округление до 4 знаков.

    Examples:
        >>> minutes_to_hours(90)
        1.5
        >>> minutes_to_hours(20)
        0.3333
    """
    return round_aggregate(minutes / MINUTES_PER_HOUR)


# =============================================================================
# ОПИСАТЕЛЬНАЯ СТАТИСТИКА
# =============================================================================


def calculate_mean(
    values: Sequence[float],
    observer: Optional[Observer] = None,
    strict: bool = False,
) -> float:
    """
    Среднее арифметическое: μ = Σxi / n.

    Суммирование выполняется циклом слева направо. Встроенный sum() не
    используется: начиная с Python 3.12 он применяет компенсированное
    суммирование и может дать другой последний бит.

    Args:
        values: Последовательность значений
        observer: Получатель диагностического сообщения (optional)
        strict: Поднимать UndefinedForEmptyInput для пустого входа

    Returns:
        μ, округлённое до 4 знаков; 0 для пустого входа
    """
    if not _require_values(values, "mean", strict):
        return 0.0

    total = 0.0
    for v in values:
        total = total + v

    mean = total / len(values)

    _trace(observer, "Mean calculation: (%s) / %s = %s", _join(values, " + "), len(values), mean)

    return round_aggregate(mean)


def find_supremum(
    values: Sequence[float],
    observer: Optional[Observer] = None,
    strict: bool = False,
) -> float:
    """
    Supremum конечной выборки (максимум).

    Линейный проход со строгим '>': при равенстве остаётся первое вхождение.
    Результат не округляется (это одно из входных значений).
    Для пустого входа возвращается 0, а не -inf.
    """
    if not _require_values(values, "supremum", strict):
        return 0.0

    sup = values[0]
    for v in values[1:]:
        if v > sup:
            sup = v

    _trace(observer, "Supremum of [%s] = %s", _join(values, ", "), sup)
    return sup


def find_infimum(
    values: Sequence[float],
    observer: Optional[Observer] = None,
    strict: bool = False,
) -> float:
    """
    Infimum конечной выборки (минимум).

    Линейный проход со строгим '<'. Для пустого входа возвращается 0.
    """
    if not _require_values(values, "infimum", strict):
        return 0.0

    inf = values[0]
    for v in values[1:]:
        if v < inf:
            inf = v

    _trace(observer, "Infimum of [%s] = %s", _join(values, ", "), inf)
    return inf


def calculate_variance(
    values: Sequence[float],
    observer: Optional[Observer] = None,
    strict: bool = False,
) -> float:
    """
    Генеральная дисперсия: σ² = Σ(xi - μ)² / n (деление на n, не n - 1).

    μ берётся из calculate_mean, то есть уже округлённым до 4 знаков.

    Returns:
        σ², округлённая до 4 знаков; 0 для пустого входа
    """
    if not _require_values(values, "variance", strict):
        return 0.0

    mean = calculate_mean(values, observer=observer)

    sum_squared_diff = 0.0
    for v in values:
        diff = v - mean
        sum_squared_diff += diff * diff

    variance = sum_squared_diff / len(values)

    _trace(observer, "Variance: sum((xi - %s)^2) / %s = %s", mean, len(values), variance)

    return round_aggregate(variance)


def calculate_std_dev(
    values: Sequence[float],
    observer: Optional[Observer] = None,
    strict: bool = False,
) -> float:
    """
    Стандартное отклонение: σ = √σ².

    Дисперсия всегда пересчитывается из values (и среднее вместе с ней).

    Returns:
        σ, округлённое до 4 знаков; 0 для пустого входа
    """
    variance = calculate_variance(values, observer=observer, strict=strict)
    std_dev = math.sqrt(variance)

    return round_aggregate(std_dev)


def calculate_z_score(
    value: float,
    mean: float,
    std_dev: float,
    observer: Optional[Observer] = None,
) -> float:
    """
    Z-score: z = (x - μ) / σ.

    При σ = 0 возвращается 0 (без Inf/NaN и без исключения).

    Examples:
        >>> calculate_z_score(3.0, 1.75, 0.9014)
        1.3867
        >>> calculate_z_score(3.0, 1.75, 0.0)
        0.0
    """
    if std_dev == 0:
        return 0.0

    z_score = safe_divide(value - mean, std_dev)

    _trace(observer, "Z-score: (%s - %s) / %s = %s", value, mean, std_dev, z_score)

    return round_aggregate(z_score)


# =============================================================================
# ИНТЕГРИРОВАНИЕ И СГЛАЖИВАНИЕ
# =============================================================================


def simple_integration(
    values: Sequence[float],
    interval: float = DEFAULT_INTERVAL,
    observer: Optional[Observer] = None,
    strict: bool = False,
) -> float:
    """
    Сумма Римана по левым точкам: S = Σ(xi × Δ).

    С Δ = 1 это обычная сумма, так считается общее время занятий в часах.

    Returns:
        S, округлённая до 4 знаков; 0 для пустого входа
    """
    if not _require_values(values, "integration", strict):
        return 0.0

    total = 0.0
    for v in values:
        total += v * interval

    _trace(observer, "Integration (Riemann sum): sum(value x %s) = %s", interval, total)

    return round_aggregate(total)


def moving_average(
    previous_average: float,
    new_value: float,
    alpha: float = DEFAULT_SMOOTHING_ALPHA,
    observer: Optional[Observer] = None,
) -> float:
    """
    Экспоненциальное сглаживание: L = (1 - α)·L_prev + α·x.

    Состояние не хранится: вызывающая сторона передаёт предыдущее значение.
    α не валидируется и не ограничивается.

    Examples:
        >>> moving_average(5.0, 8.0, 0.3)
        5.9
    """
    smoothed = (1 - alpha) * previous_average + alpha * new_value

    _trace(
        observer,
        "Moving avg: (1 - %s) x %s + %s x %s = %s",
        alpha, previous_average, alpha, new_value, smoothed,
    )

    return round_aggregate(smoothed)


# =============================================================================
# УПОРЯДОЧЕНИЕ
# =============================================================================


def sort_reals(values: Sequence[float], observer: Optional[Observer] = None) -> list[float]:
    """
    Сортировка по возрастанию (новый список, вход не изменяется).

    sorted() устойчив: равные элементы сохраняют входной порядок.
    Порядок для входа с NaN не определён, такие значения следует
    отсеивать через create_real до вызова.

    Examples:
        >>> sort_reals([3.0, 1.0, 2.0])
        [1.0, 2.0, 3.0]
    """
    result = sorted(values)

    _trace(observer, "Sorted (ordering): [%s] -> [%s]", _join(values, ", "), _join(result, ", "))

    return result
