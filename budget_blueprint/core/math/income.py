"""
Income Normalizer — нормализация нерегулярных зарплат в месячный доход

Модуль превращает историю выплат в месячный доход:
- average: среднее по истории выплат (невалидные суммы считаются нулём)
- monthly_from_pay: среднее × коэффициент частоты выплат, округление до центов

ФОРМУЛЫ:
    Semimonthly: monthly = avg × 2
    Weekly:      monthly = avg × 52 / 12
    Biweekly:    monthly = avg × 26 / 12
"""

from typing import Final, Iterable

from budget_blueprint.core.domain.profile import PayPeriod, PersonFinancialProfile
from budget_blueprint.core.math.numerical_safeguards import (
    clamp_currency,
    round_currency,
)

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

MONTHS_IN_YEAR: Final[int] = 12

MONTHLY_FACTORS: Final[dict[PayPeriod, float]] = {
    PayPeriod.SEMIMONTHLY: 2.0,
    PayPeriod.WEEKLY: 52 / MONTHS_IN_YEAR,
    PayPeriod.BIWEEKLY: 26 / MONTHS_IN_YEAR,
}


# =============================================================================
# EXCEPTIONS
# =============================================================================


class UnsupportedPayPeriodError(ValueError):
    """
    Частота выплат вне закрытого перечисления PayPeriod.

    Недостижимо при корректной валидации на границе: сигнализирует
    об ошибке программиста, а не пользователя.
    """

    pass


# =============================================================================
# НОРМАЛИЗАЦИЯ
# =============================================================================


def average(paychecks: Iterable[float]) -> float:
    """
    Среднее арифметическое выплат.

    Отрицательные и нечисловые (NaN/Inf) суммы считаются нулём,
    но участвуют в количестве. Пустая история даёт 0.0.

    Examples:
        >>> average([])
        0.0
        >>> average([100.0, 200.0])
        150.0
        >>> average([100.0, -50.0])
        50.0
    """
    cleaned = [clamp_currency(value) for value in paychecks]
    if not cleaned:
        return 0.0
    return sum(cleaned) / len(cleaned)


def resolve_pay_period(pay_period: PayPeriod | str) -> PayPeriod:
    """
    Приведение значения к PayPeriod.

    Raises:
        UnsupportedPayPeriodError: Если значение не входит в перечисление
    """
    try:
        return PayPeriod(pay_period)
    except ValueError:
        raise UnsupportedPayPeriodError(f"Unknown pay period: {pay_period!r}") from None


def monthly_from_pay(average_paycheck: float, pay_period: PayPeriod | str) -> float:
    """
    Месячный доход из средней выплаты.

    Args:
        average_paycheck: Средняя выплата (clamp к >= 0)
        pay_period: Частота выплат (PayPeriod или его строковое значение)

    Returns:
        Месячный доход, округлённый до центов

    Raises:
        UnsupportedPayPeriodError: Если частота выплат неизвестна

    Examples:
        >>> monthly_from_pay(2342.97, PayPeriod.SEMIMONTHLY)
        4685.94
        >>> monthly_from_pay(1200.0, "Weekly")
        5200.0
    """
    normalized = clamp_currency(average_paycheck)
    factor = MONTHLY_FACTORS[resolve_pay_period(pay_period)]
    return round_currency(normalized * factor)


def monthly_income(profile: PersonFinancialProfile) -> float:
    """Месячный доход участника: monthly_from_pay(average(paychecks), pay_period)."""
    return monthly_from_pay(average(profile.paychecks), profile.pay_period)
