"""
Savings Projector — помесячный прогноз сбережений

Каждый месяц баланс растёт на monthly_savings. Когда долг погашен,
бывший платёж по долгу ("snowball") перенаправляется в сбережения
до конца горизонта:

    balance_m = balance_{m-1} + monthly_savings
              + debt_contribution, если month > payoff.months

Условия переноса платежа по долгу:
- payoff.months конечно (inf никогда не переносится)
- debt_contribution > 0
- month > payoff.months

При payoff.months == 0 (долга нет изначально) условие month > 0 истинно
с первого месяца: высвобожденная сумма доступна сразу.

monthly_savings и debt_contribution должны быть непересекающимися
аллокациями (Budget Allocator строит их как отдельные категории).
"""

import math
from typing import NamedTuple

from budget_blueprint.core.math.numerical_safeguards import (
    clamp_currency,
    round_currency,
)
from budget_blueprint.core.math.payoff import PayoffResult


class SavingsPoint(NamedTuple):
    """Баланс сбережений на конец месяца."""

    month: int
    amount: float


def savings_projection(
    starting_savings: float,
    monthly_savings: float,
    months: int,
    debt_contribution: float,
    payoff: PayoffResult,
) -> tuple[SavingsPoint, ...]:
    """
    Прогноз баланса сбережений на months месяцев.

    Args:
        starting_savings: Текущие сбережения (не входят в ряд как точка)
        monthly_savings: Ежемесячный взнос
        months: Горизонт (точки 1..months; <= 0 даёт пустой ряд)
        debt_contribution: Платёж по долгу, переходящий в сбережения
        payoff: График погашения от payoff_months

    Returns:
        Кортеж SavingsPoint, месяцы 1..months

    Examples:
        >>> from budget_blueprint.core.math.payoff import payoff_months
        >>> points = savings_projection(500, 100, 12, 0, payoff_months(0, 0))
        >>> len(points), points[-1].amount
        (12, 1700.0)
    """
    balance = clamp_currency(starting_savings)
    monthly = clamp_currency(monthly_savings)
    debt_roll = clamp_currency(debt_contribution)
    payoff_finite = math.isfinite(payoff.months)

    points = []
    for month in range(1, months + 1):
        balance += monthly
        if payoff_finite and debt_roll > 0 and month > payoff.months:
            balance += debt_roll
        balance = round_currency(balance)
        points.append(SavingsPoint(month, balance))

    return tuple(points)
