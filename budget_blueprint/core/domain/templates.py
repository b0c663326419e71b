"""
Built-in templates — профили и состояние по умолчанию

Используются при первом запуске, при "Load defaults" и как fallback
при санитизации повреждённого сохранённого документа.
"""

from typing import Final

from .household_state import HouseholdState, RentMode
from .profile import BillItem, PayPeriod, PersonState

# Аренда по умолчанию (USD в месяц)
DEFAULT_RENT: Final[float] = 2169.17


def make_bill(person_id: str, index: int, label: str, amount: float) -> BillItem:
    """Платёж со стабильным id вида '<person_id>-bill-<n>' (n с единицы)."""
    return BillItem(id=f"{person_id}-bill-{index + 1}", label=label, amount=amount)


def _bills(person_id: str, items: list[tuple[str, float]]) -> tuple[BillItem, ...]:
    return tuple(
        make_bill(person_id, index, label, amount)
        for index, (label, amount) in enumerate(items)
    )


PERSON_TEMPLATES: Final[tuple[PersonState, ...]] = (
    PersonState(
        id="person-1",
        name="Person 1",
        paychecks=(2342.97, 2342.97, 2342.97, 2342.97, 2342.97),
        pay_period=PayPeriod.SEMIMONTHLY,
        bills=_bills(
            "person-1",
            [
                ("Car Payment", 130.0),
                ("Utilities", 228.0),
                ("Phone", 45.0),
                ("Streaming", 16.0),
                ("Cloud Storage", 6.37),
                ("Music", 21.26),
                ("Miscellaneous", 10.0),
            ],
        ),
        groceries=400.0,
        gas=120.0,
        savings_rate=0.2,
        wants_rate=0.2,
        starting_debt=1765.01,
        starting_savings=515.62,
    ),
    PersonState(
        id="person-2",
        name="Person 2",
        paychecks=(
            421.98, 473.98, 599.3, 826.44, 624.78, 873.6,
            451.88, 682.76, 475.8, 730.08, 835.24, 759.2,
        ),
        pay_period=PayPeriod.WEEKLY,
        bills=_bills(
            "person-2",
            [
                ("Car Insurance", 59.44),
                ("Utilities", 150.0),
                ("Subscriptions", 20.0),
                ("Gym", 16.0),
            ],
        ),
        groceries=400.0,
        gas=120.0,
        savings_rate=0.2,
        wants_rate=0.2,
        starting_debt=5000.0,
        starting_savings=11057.34,
    ),
)


def create_default_state() -> HouseholdState:
    """
    Состояние по умолчанию: два шаблонных участника, режим FAIR.

    Модели frozen, поэтому шаблоны разделяются без копирования.
    """
    return HouseholdState(
        rent=DEFAULT_RENT,
        rent_mode=RentMode.FAIR,
        persons=PERSON_TEMPLATES,
    )
