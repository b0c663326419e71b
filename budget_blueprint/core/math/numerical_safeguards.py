"""
Numerical Safeguards — безопасные денежные примитивы

Модуль обеспечивает численную устойчивость всех денежных вычислений движка:
- Санитизация NaN/Inf и отрицательных сумм (clamp к нулю)
- Clamp долей (savings/wants sliders) в диапазон [0, 1]
- Округление до центов (round half up)
- Безопасное деление с fallback при нулевом знаменателе

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Деление на ноль никогда не происходит (возвращается fallback)
2. NaN/Inf никогда не пропагируют (заменяются на fallback)
3. Денежные суммы после clamp_currency всегда >= 0 и конечны
4. Все операции детерминированы и воспроизводимы
"""

import math
from typing import Final, Iterable

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Количество центов в одном долларе (шаг округления 0.01)
CENTS_PER_UNIT: Final[int] = 100


# =============================================================================
# NaN/Inf САНИТИЗАЦИЯ
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли значение конечным числом (не NaN, не Inf).

    Нечисловые значения (None, строки) и int вне диапазона float
    считаются невалидными.
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    try:
        return math.isfinite(value)
    except OverflowError:
        return False


def sanitize_float(value: float, fallback: float = 0.0) -> float:
    """
    Санитизация float: замена NaN/Inf на fallback значение.

    Examples:
        >>> sanitize_float(10.0)
        10.0
        >>> sanitize_float(float('nan'))
        0.0
        >>> sanitize_float(float('-inf'), fallback=-1.0)
        -1.0
    """
    if is_valid_float(value):
        return float(value)
    return fallback


def clamp_currency(value: float) -> float:
    """
    Денежная сумма, ограниченная снизу нулём.

    Любое значение, не являющееся конечным положительным числом,
    превращается в 0.0.

    Examples:
        >>> clamp_currency(12.5)
        12.5
        >>> clamp_currency(-3.0)
        0.0
        >>> clamp_currency(float('inf'))
        0.0
    """
    if is_valid_float(value) and value > 0:
        return float(value)
    return 0.0


def clamp(
    value: float,
    min_value: float | None = None,
    max_value: float | None = None,
) -> float:
    """
    Ограничение значения в заданном диапазоне.

    Examples:
        >>> clamp(5.0, 0.0, 10.0)
        5.0
        >>> clamp(-1.0, 0.0, 10.0)
        0.0
    """
    result = value

    if min_value is not None:
        result = max(result, min_value)

    if max_value is not None:
        result = min(result, max_value)

    return result


def clamp_rate(value: float, min_value: float = 0.0, max_value: float = 1.0) -> float:
    """
    Доля (slider) в диапазоне [min_value, max_value].

    Невалидное значение (NaN/Inf/не число) даёт min_value.

    Examples:
        >>> clamp_rate(0.2)
        0.2
        >>> clamp_rate(1.7)
        1.0
        >>> clamp_rate(float('nan'))
        0.0
    """
    if not is_valid_float(value):
        return min_value
    return clamp(float(value), min_value, max_value)


# =============================================================================
# ОКРУГЛЕНИЕ ДО ЦЕНТОВ
# =============================================================================


def round_currency(value: float) -> float:
    """
    Округление суммы до центов (round half up, половина от нуля).

    Делим на CENTS_PER_UNIT, а не умножаем на 0.01: так результат
    совпадает с ближайшим представимым float для двух знаков.

    Examples:
        >>> round_currency(937.188)
        937.19
        >>> round_currency(0.125)
        0.13
        >>> round_currency(-0.125)
        -0.13
    """
    if not is_valid_float(value):
        return 0.0

    scaled = value * CENTS_PER_UNIT
    if scaled >= 0:
        steps = math.floor(scaled + 0.5)
    else:
        steps = math.ceil(scaled - 0.5)

    return steps / CENTS_PER_UNIT


def sum_currency(values: Iterable[float]) -> float:
    """
    Сумма денежных значений; каждое слагаемое предварительно clamp_currency.

    Examples:
        >>> sum_currency([10.0, -5.0, float('nan'), 2.5])
        12.5
    """
    return sum((clamp_currency(v) for v in values), 0.0)


# =============================================================================
# БЕЗОПАСНОЕ ДЕЛЕНИЕ
# =============================================================================


def safe_divide(
    numerator: float,
    denominator: float,
    fallback: float = 0.0,
) -> float:
    """
    Безопасное деление с защитой от деления на ноль и NaN/Inf.

    Args:
        numerator: Числитель
        denominator: Знаменатель
        fallback: Значение при нулевом/невалидном знаменателе (default: 0.0)

    Returns:
        Результат деления или fallback

    Examples:
        >>> safe_divide(10.0, 2.0)
        5.0
        >>> safe_divide(10.0, 0.0)
        0.0
    """
    num_clean = sanitize_float(numerator, fallback=0.0)
    denom_clean = sanitize_float(denominator, fallback=0.0)

    if denom_clean == 0.0:
        return fallback

    return sanitize_float(num_clean / denom_clean, fallback=fallback)
