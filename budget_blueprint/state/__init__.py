"""State — санитизация сохранённых входных данных и слой хранения."""

from .repository import (
    STORAGE_KEY_DEFAULT,
    HouseholdStateRepository,
    InMemoryStore,
    KeyValueStore,
)
from .sanitizer import (
    SanitizeResult,
    Substitution,
    blank_person,
    dump_household_state,
    load_household_state,
    sanitize_household_state,
)

__all__ = [
    "STORAGE_KEY_DEFAULT",
    "HouseholdStateRepository",
    "InMemoryStore",
    "KeyValueStore",
    "SanitizeResult",
    "Substitution",
    "blank_person",
    "dump_household_state",
    "load_household_state",
    "sanitize_household_state",
]
