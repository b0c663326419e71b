"""
Budget Blueprint — household budget planning engine.

Pure, stateless financial computations: income normalization, rent
splitting, budget allocation, debt payoff scheduling and savings projection.
"""

from budget_blueprint.core.math import (
    BudgetPersonResult,
    PayoffResult,
    RentAllocation,
    SavingsPoint,
    UnsupportedPayPeriodError,
    allocate_rent,
    average,
    compute_budget_person,
    format_currency,
    monthly_from_pay,
    monthly_income,
    payoff_months,
    savings_projection,
)
from budget_blueprint.core.domain import (
    BillItem,
    HouseholdState,
    PayPeriod,
    PersonFinancialProfile,
    PersonState,
    RentMode,
    create_default_state,
)
from budget_blueprint.planner import HouseholdPlan, HouseholdPlanner, PlannerConfig
from budget_blueprint.state import (
    HouseholdStateRepository,
    InMemoryStore,
    dump_household_state,
    load_household_state,
    sanitize_household_state,
)

__version__ = "0.1.0"

__all__ = [
    # Engine
    "average",
    "monthly_from_pay",
    "monthly_income",
    "allocate_rent",
    "compute_budget_person",
    "payoff_months",
    "savings_projection",
    "format_currency",
    "UnsupportedPayPeriodError",
    # Results
    "BudgetPersonResult",
    "PayoffResult",
    "RentAllocation",
    "SavingsPoint",
    # Domain
    "BillItem",
    "HouseholdState",
    "PayPeriod",
    "PersonFinancialProfile",
    "PersonState",
    "RentMode",
    "create_default_state",
    # Planner
    "HouseholdPlan",
    "HouseholdPlanner",
    "PlannerConfig",
    # State
    "HouseholdStateRepository",
    "InMemoryStore",
    "dump_household_state",
    "load_household_state",
    "sanitize_household_state",
]
