"""
Core math modules для Budget Blueprint

Денежные примитивы и чистые функции финансового движка.
"""

# Numerical Safeguards
from budget_blueprint.core.math.numerical_safeguards import (
    CENTS_PER_UNIT,
    clamp,
    clamp_currency,
    clamp_rate,
    is_valid_float,
    round_currency,
    safe_divide,
    sanitize_float,
    sum_currency,
)

# Income Normalizer
from budget_blueprint.core.math.income import (
    MONTHLY_FACTORS,
    MONTHS_IN_YEAR,
    UnsupportedPayPeriodError,
    average,
    monthly_from_pay,
    monthly_income,
    resolve_pay_period,
)

# Rent Allocator
from budget_blueprint.core.math.rent import (
    AFFORDABILITY_RATIO_DEFAULT,
    VERDICT_AFFORDABLE,
    VERDICT_STRETCH,
    RentAllocation,
    RentComparisonRow,
    allocate_rent,
    equal_shares,
    fair_shares,
)

# Budget Allocator
from budget_blueprint.core.math.budget import (
    NEEDS_CATEGORIES,
    BudgetCategory,
    BudgetPersonResult,
    category_percentage,
    compute_budget_person,
)

# Debt Payoff Scheduler
from budget_blueprint.core.math.payoff import DebtPoint, PayoffResult, payoff_months

# Savings Projector
from budget_blueprint.core.math.projection import SavingsPoint, savings_projection

# Formatting
from budget_blueprint.core.math.formatting import format_currency

__all__ = [
    # Numerical Safeguards
    "CENTS_PER_UNIT",
    "clamp",
    "clamp_currency",
    "clamp_rate",
    "is_valid_float",
    "round_currency",
    "safe_divide",
    "sanitize_float",
    "sum_currency",
    # Income Normalizer
    "MONTHLY_FACTORS",
    "MONTHS_IN_YEAR",
    "UnsupportedPayPeriodError",
    "average",
    "monthly_from_pay",
    "monthly_income",
    "resolve_pay_period",
    # Rent Allocator
    "AFFORDABILITY_RATIO_DEFAULT",
    "VERDICT_AFFORDABLE",
    "VERDICT_STRETCH",
    "RentAllocation",
    "RentComparisonRow",
    "allocate_rent",
    "equal_shares",
    "fair_shares",
    # Budget Allocator
    "NEEDS_CATEGORIES",
    "BudgetCategory",
    "BudgetPersonResult",
    "category_percentage",
    "compute_budget_person",
    # Debt Payoff Scheduler
    "DebtPoint",
    "PayoffResult",
    "payoff_months",
    # Savings Projector
    "SavingsPoint",
    "savings_projection",
    # Formatting
    "format_currency",
]
