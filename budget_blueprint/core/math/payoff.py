"""
Debt Payoff Scheduler — график погашения долга фиксированным платежом

Без процентов: баланс уменьшается на monthly_payment каждый месяц.

    months = ceil(debt / payment)
    balance(m) = max(0, debt − payment × m),  m = 0..months

Последняя точка графика принудительно равна 0, чтобы ряд всегда
заканчивался нулём, а не остатком округления.

Вырожденные случаи (не ошибки):
- debt <= 0    → months = 0, пустой ряд ("долга нет")
- payment <= 0 → months = inf, пустой ряд ("не погасится никогда")
"""

import math
from dataclasses import dataclass
from typing import Iterator, NamedTuple

from budget_blueprint.core.math.numerical_safeguards import (
    clamp_currency,
    round_currency,
)


class DebtPoint(NamedTuple):
    """Остаток долга на конец месяца."""

    month: int
    amount: float


@dataclass(frozen=True)
class PayoffResult:
    """
    Результат планирования погашения.

    months: int, либо math.inf если долг никогда не погасится.
    starting_debt / monthly_payment: очищенные входы графика.

    Ряд остатков не хранится: число точек равно months + 1 и не ограничено
    сверху (долг 1e9 при платеже 0.01 даёт ~1e11 месяцев), поэтому он
    строится по запросу через iter_debt_series().
    """

    months: int | float
    starting_debt: float = 0.0
    monthly_payment: float = 0.0

    @property
    def is_debt_free(self) -> bool:
        """Долга нет с самого начала."""
        return self.months == 0

    @property
    def never_pays_off(self) -> bool:
        """Платёж не покрывает долг (months = inf)."""
        return not math.isfinite(self.months)

    def iter_debt_series(self) -> Iterator[DebtPoint]:
        """Ленивый ряд остатков: месяцы 0..months, последняя точка равна 0."""
        if self.never_pays_off or self.months <= 0 or self.monthly_payment <= 0:
            return
        last = int(self.months)
        for month in range(last):
            remaining = max(0.0, self.starting_debt - self.monthly_payment * month)
            yield DebtPoint(month, round_currency(remaining))
        yield DebtPoint(last, 0.0)

    @property
    def debt_series(self) -> tuple[DebtPoint, ...]:
        """Полный ряд остатков (материализует iter_debt_series)."""
        return tuple(self.iter_debt_series())


def payoff_months(starting_debt: float, monthly_payment: float) -> PayoffResult:
    """
    Число месяцев до нулевого долга и график остатков.

    Args:
        starting_debt: Начальный долг (clamp к >= 0)
        monthly_payment: Ежемесячный платёж (clamp к >= 0)

    Returns:
        PayoffResult; O(1) по времени и памяти независимо от срока

    Examples:
        >>> payoff_months(0, 100).months
        0
        >>> payoff_months(1000, 0).months
        inf
        >>> payoff_months(1200, 100).months
        12
    """
    debt = clamp_currency(starting_debt)
    payment = clamp_currency(monthly_payment)

    if debt == 0:
        return PayoffResult(months=0)

    if payment <= 0:
        return PayoffResult(months=math.inf)

    return PayoffResult(
        months=math.ceil(debt / payment),
        starting_debt=debt,
        monthly_payment=payment,
    )
