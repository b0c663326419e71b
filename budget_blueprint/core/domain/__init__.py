"""
Domain models and value objects.

Validated input models of the budget engine: person profiles, bills,
the persisted household document and the built-in templates.
"""

from budget_blueprint.core.domain.household_state import HouseholdState, RentMode
from budget_blueprint.core.domain.profile import (
    BillItem,
    Currency,
    PayPeriod,
    PersonFinancialProfile,
    PersonState,
    Rate,
)
from budget_blueprint.core.domain.templates import (
    DEFAULT_RENT,
    PERSON_TEMPLATES,
    create_default_state,
    make_bill,
)

__all__ = [
    # Profile models
    "Currency",
    "Rate",
    "PayPeriod",
    "BillItem",
    "PersonFinancialProfile",
    "PersonState",
    # Household state
    "RentMode",
    "HouseholdState",
    # Templates
    "DEFAULT_RENT",
    "PERSON_TEMPLATES",
    "create_default_state",
    "make_bill",
]
