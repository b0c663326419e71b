"""Household Planner — полный расчёт плана домохозяйства.

Связывает компоненты движка в однонаправленный поток:
    paychecks → Income Normalizer → Rent Allocator (все доходы)
             → Budget Allocator (доход + доля аренды)
             → Debt Payoff Scheduler (debt из бюджета)
             → Savings Projector (savings из бюджета + график погашения)

Planner stateless: evaluate() пересчитывает всё с нуля при каждом вызове,
поэтому его можно вызывать на каждое изменение ввода.
"""

import logging
import math
from dataclasses import dataclass
from typing import Optional

from budget_blueprint.core.domain import HouseholdState, PersonState
from budget_blueprint.core.math.budget import BudgetPersonResult, compute_budget_person
from budget_blueprint.core.math.income import monthly_income
from budget_blueprint.core.math.payoff import PayoffResult, payoff_months
from budget_blueprint.core.math.projection import SavingsPoint, savings_projection
from budget_blueprint.core.math.rent import RentAllocation, allocate_rent
from budget_blueprint.planner.config import PlannerConfig

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PersonPlan:
    """План одного участника."""

    person: PersonState
    rent_share: float
    budget: BudgetPersonResult
    payoff: PayoffResult
    savings: tuple[SavingsPoint, ...]

    @property
    def final_savings(self) -> float:
        """Последняя точка прогноза, либо стартовые сбережения при пустом прогнозе."""
        if not self.savings:
            return self.person.starting_savings
        return self.savings[-1].amount


@dataclass(frozen=True)
class FastestPayoff:
    """Участник, который быстрее всех погашает долг."""

    person_id: str
    name: str
    months: int
    monthly_debt: float


@dataclass(frozen=True)
class BreakdownRow:
    """Строка сравнения с ориентиром 50/30/20.

    values: процент дохода по id участника.
    """

    category: str
    recommended: float
    values: dict[str, float]


@dataclass(frozen=True)
class HouseholdSummary:
    """Сводные показатели домохозяйства."""

    combined_income: float
    combined_starting_savings: float
    combined_final_savings: float
    savings_gain: float
    total_monthly_savings: float
    total_monthly_debt: float
    total_bill_spend: float
    fastest_payoff: Optional[FastestPayoff]


@dataclass(frozen=True)
class HouseholdPlan:
    """Результат HouseholdPlanner.evaluate()."""

    state: HouseholdState
    rent: RentAllocation
    persons: tuple[PersonPlan, ...]
    summary: HouseholdSummary
    breakdown: tuple[BreakdownRow, ...]


class HouseholdPlanner:
    """Расчёт плана домохозяйства.

    Порядок:
    1. Месячный доход каждого участника
    2. Разделение аренды (обе политики, активная по rent_mode)
    3. Бюджет каждого участника
    4. График погашения долга платежом debt
    5. Прогноз сбережений с переносом платежа по долгу
    6. Сводка и сравнение с 50/30/20
    """

    def __init__(self, config: Optional[PlannerConfig] = None):
        self.config = config or PlannerConfig()

    def evaluate(self, state: HouseholdState) -> HouseholdPlan:
        """Полный пересчёт плана для снапшота входных данных."""
        incomes = [monthly_income(person) for person in state.persons]

        rent = allocate_rent(
            incomes,
            state.rent,
            mode=state.rent_mode,
            affordability_ratio=self.config.affordability_ratio,
        )

        persons = tuple(
            self._plan_person(person, share)
            for person, share in zip(state.persons, rent.shares)
        )

        summary = self._summarize(persons, rent)
        breakdown = self._breakdown(persons)

        logger.debug(
            "Evaluated household plan: persons=%d, rent=%.2f, mode=%s, verdict=%s",
            len(persons),
            rent.rent,
            rent.mode.value,
            rent.verdict,
        )

        return HouseholdPlan(
            state=state,
            rent=rent,
            persons=persons,
            summary=summary,
            breakdown=breakdown,
        )

    def _plan_person(self, person: PersonState, rent_share: float) -> PersonPlan:
        budget = compute_budget_person(person, rent_share)
        payoff = payoff_months(person.starting_debt, budget.debt)
        savings = savings_projection(
            starting_savings=person.starting_savings,
            monthly_savings=budget.savings,
            months=self.config.savings_months,
            debt_contribution=budget.debt,
            payoff=payoff,
        )
        return PersonPlan(
            person=person,
            rent_share=rent_share,
            budget=budget,
            payoff=payoff,
            savings=savings,
        )

    @staticmethod
    def _fastest_payoff(persons: tuple[PersonPlan, ...]) -> Optional[FastestPayoff]:
        # Только конечные положительные сроки; при равенстве побеждает первый
        candidates = [
            plan for plan in persons
            if math.isfinite(plan.payoff.months) and plan.payoff.months > 0
        ]
        if not candidates:
            return None
        best = min(candidates, key=lambda plan: plan.payoff.months)
        return FastestPayoff(
            person_id=best.person.id,
            name=best.person.name,
            months=int(best.payoff.months),
            monthly_debt=best.budget.debt,
        )

    def _summarize(
        self, persons: tuple[PersonPlan, ...], rent: RentAllocation
    ) -> HouseholdSummary:
        combined_starting = sum(plan.person.starting_savings for plan in persons)
        combined_final = sum(plan.final_savings for plan in persons)

        return HouseholdSummary(
            combined_income=rent.total_income,
            combined_starting_savings=combined_starting,
            combined_final_savings=combined_final,
            savings_gain=max(combined_final - combined_starting, 0.0),
            total_monthly_savings=sum(plan.budget.savings for plan in persons),
            total_monthly_debt=sum(plan.budget.debt for plan in persons),
            total_bill_spend=sum(plan.budget.bills for plan in persons),
            fastest_payoff=self._fastest_payoff(persons),
        )

    def _breakdown(self, persons: tuple[PersonPlan, ...]) -> tuple[BreakdownRow, ...]:
        rows = []
        for category, recommended in self.config.recommended_breakdown.items():
            values = {}
            for plan in persons:
                if category == "Needs":
                    values[plan.person.id] = plan.budget.needs_percentage
                elif category == "Wants":
                    values[plan.person.id] = plan.budget.wants_percentage
                else:
                    values[plan.person.id] = plan.budget.savings_debt_percentage
            rows.append(BreakdownRow(category=category, recommended=recommended, values=values))
        return tuple(rows)
