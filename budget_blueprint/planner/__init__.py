"""Planner — расчёт полного плана домохозяйства поверх финансового движка."""

from .config import RECOMMENDED_BREAKDOWN_DEFAULT, PlannerConfig
from .household_planner import (
    BreakdownRow,
    FastestPayoff,
    HouseholdPlan,
    HouseholdPlanner,
    HouseholdSummary,
    PersonPlan,
)

__all__ = [
    "RECOMMENDED_BREAKDOWN_DEFAULT",
    "PlannerConfig",
    "BreakdownRow",
    "FastestPayoff",
    "HouseholdPlan",
    "HouseholdPlanner",
    "HouseholdSummary",
    "PersonPlan",
]
