"""
Budget Allocator — распределение месячного дохода одного участника

Для одного профиля и уже рассчитанной доли аренды:
1. bills     = Σ платежей (округление до центов)
2. groceries, gas = clamp + округление
3. savings   = income × clamp(savings_rate, 0, 1)
4. wants     = income × clamp(wants_rate, 0, 1)
5. debt      = max(0, income − (rent + bills + groceries + gas + savings + wants))

Платёж по долгу ("snowball") никогда не задаётся напрямую: это остаток
дохода после финансирования всех остальных категорий. Если категории
съедают весь доход или больше, debt = 0 (отрицательных аллокаций нет).

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. debt >= 0
2. Σ категорий == income, если первые шесть категорий <= income
3. Функция чистая: одинаковый вход даёт идентичный результат
"""

from dataclasses import dataclass
from enum import Enum
from typing import Final

from budget_blueprint.core.domain.profile import PersonFinancialProfile
from budget_blueprint.core.math.income import monthly_income
from budget_blueprint.core.math.numerical_safeguards import (
    clamp_currency,
    clamp_rate,
    round_currency,
    sum_currency,
)

# Верхняя граница процента категории (защита от дрейфа округления)
PERCENTAGE_CAP: Final[float] = 100.0


class BudgetCategory(str, Enum):
    """Категории бюджета в порядке отображения."""

    RENT = "Rent"
    BILLS = "Bills"
    GROCERIES = "Groceries"
    GAS = "Gas"
    SAVINGS = "Savings"
    WANTS = "Wants"
    DEBT = "Debt"


NEEDS_CATEGORIES: Final[tuple[BudgetCategory, ...]] = (
    BudgetCategory.RENT,
    BudgetCategory.BILLS,
    BudgetCategory.GROCERIES,
    BudgetCategory.GAS,
)


@dataclass(frozen=True)
class BudgetPersonResult:
    """
    Полная разбивка бюджета одного участника.

    Производный результат: пересчитывается при каждом вызове и никогда
    не сохраняется (сохраняются входные данные).
    """

    monthly_income: float

    rent: float
    bills: float
    groceries: float
    gas: float
    savings: float
    wants: float
    debt: float

    # Ключи: значения BudgetCategory ("Rent", "Bills", ...)
    totals: dict[str, float]
    percentages: dict[str, float]

    needs_percentage: float
    wants_percentage: float
    savings_debt_percentage: float

    @property
    def needs(self) -> float:
        """Rent + Bills + Groceries + Gas."""
        return self.rent + self.bills + self.groceries + self.gas

    @property
    def allocated_total(self) -> float:
        """Сумма всех семи категорий."""
        return self.needs + self.savings + self.wants + self.debt


def category_percentage(value: float, monthly_income: float) -> float:
    """
    Процент категории от дохода: min(100, round(value / max(income, 1) × 100, 2)).

    max(income, 1) защищает от деления на нулевой доход; доход меньше
    одного доллара тоже считается от базы 1.
    """
    base = max(monthly_income, 1.0)
    return min(PERCENTAGE_CAP, round_currency(value / base * 100))


def _aggregate_percentage(value: float, monthly_income: float) -> float:
    if monthly_income <= 0:
        return 0.0
    return round_currency(value / monthly_income * 100)


def compute_budget_person(
    profile: PersonFinancialProfile,
    rent_share: float,
) -> BudgetPersonResult:
    """
    Расчёт бюджета одного участника.

    Args:
        profile: Валидированный финансовый профиль
        rent_share: Доля аренды участника (от Rent Allocator)

    Returns:
        BudgetPersonResult с категориями, процентами и агрегатами

    Никогда не выбрасывает исключений для числовых входов: вырожденные
    входы дают нулевые результаты.
    """
    income = monthly_income(profile)

    rent = clamp_currency(rent_share)
    bills = round_currency(sum_currency(bill.amount for bill in profile.bills))
    groceries = round_currency(clamp_currency(profile.groceries))
    gas = round_currency(clamp_currency(profile.gas))
    savings = round_currency(clamp_currency(income * clamp_rate(profile.savings_rate)))
    wants = round_currency(clamp_currency(income * clamp_rate(profile.wants_rate)))

    remaining = income - (rent + bills + groceries + gas + savings + wants)
    debt = round_currency(remaining if remaining > 0 else 0.0)

    totals = {
        BudgetCategory.RENT.value: rent,
        BudgetCategory.BILLS.value: bills,
        BudgetCategory.GROCERIES.value: groceries,
        BudgetCategory.GAS.value: gas,
        BudgetCategory.SAVINGS.value: savings,
        BudgetCategory.WANTS.value: wants,
        BudgetCategory.DEBT.value: debt,
    }
    percentages = {
        category: category_percentage(value, income) for category, value in totals.items()
    }

    needs = rent + bills + groceries + gas

    return BudgetPersonResult(
        monthly_income=income,
        rent=rent,
        bills=bills,
        groceries=groceries,
        gas=gas,
        savings=savings,
        wants=wants,
        debt=debt,
        totals=totals,
        percentages=percentages,
        needs_percentage=_aggregate_percentage(needs, income),
        wants_percentage=_aggregate_percentage(wants, income),
        savings_debt_percentage=_aggregate_percentage(savings + debt, income),
    )
