"""
Contract Validation Module

Модуль для валидации JSON контрактов Budget Blueprint.
"""

from .validators import (
    ContractValidator,
    HouseholdStateValidator,
    SchemaLoader,
    validate_household_state,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "HouseholdStateValidator",
    # Functions
    "validate_household_state",
]
