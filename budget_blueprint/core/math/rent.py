"""
Rent Allocator — разделение аренды между участниками

Для каждого участника одновременно считаются обе политики:
- FAIR: пропорционально доходу, rent × income_i / total_income
- EQUAL: поровну, rent / person_count

Обе политики считаются всегда, чтобы вызывающий слой мог показать
таблицу сравнения независимо от активного режима.

Дополнительно проверяется ориентир "30% дохода на жильё":
    cap_i = income_i × 0.30
    affordable = rent <= Σ cap_i
Это ориентир, а не ограничение: ввод дорогой аренды не блокируется.
"""

from dataclasses import dataclass
from typing import Final, Sequence

from budget_blueprint.core.domain.household_state import RentMode
from budget_blueprint.core.math.numerical_safeguards import (
    clamp_currency,
    safe_divide,
)

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Доля дохода, которую ориентир считает допустимой для аренды
AFFORDABILITY_RATIO_DEFAULT: Final[float] = 0.30

VERDICT_AFFORDABLE: Final[str] = "Affordable"
VERDICT_STRETCH: Final[str] = "Stretch"


# =============================================================================
# RESULTS
# =============================================================================


@dataclass(frozen=True)
class RentComparisonRow:
    """Строка таблицы сравнения FAIR/EQUAL для одного участника."""

    income: float
    cap: float
    fair_share: float
    fair_percent: float
    equal_share: float
    equal_percent: float


@dataclass(frozen=True)
class RentAllocation:
    """Результат разделения аренды."""

    rent: float
    mode: RentMode
    total_income: float

    fair_shares: tuple[float, ...]
    equal_shares: tuple[float, ...]
    # Доли активного режима (mode)
    shares: tuple[float, ...]

    # Ориентир 30%
    affordability_caps: tuple[float, ...]
    total_affordable_rent: float
    affordable: bool
    verdict: str

    rows: tuple[RentComparisonRow, ...]


# =============================================================================
# ALLOCATION
# =============================================================================


def fair_shares(incomes: Sequence[float], rent: float) -> tuple[float, ...]:
    """
    Доли аренды пропорционально доходу.

    При total_income <= 0 аренда делится поровну (без деления на ноль).
    Доли не округляются: сумма равна rent с точностью float.
    """
    rent = clamp_currency(rent)
    cleaned = [clamp_currency(income) for income in incomes]
    total_income = sum(cleaned)
    person_count = len(cleaned) or 1

    if total_income <= 0:
        return tuple(rent / person_count for _ in cleaned)

    return tuple(income / total_income * rent for income in cleaned)


def equal_shares(person_count: int, rent: float) -> tuple[float, ...]:
    """Равные доли аренды; ноль участников считается как один."""
    rent = clamp_currency(rent)
    divisor = person_count if person_count > 0 else 1
    return tuple(rent / divisor for _ in range(person_count))


def allocate_rent(
    incomes: Sequence[float],
    rent: float,
    mode: RentMode | str = RentMode.FAIR,
    affordability_ratio: float = AFFORDABILITY_RATIO_DEFAULT,
) -> RentAllocation:
    """
    Разделение аренды по обеим политикам и проверка ориентира 30%.

    Args:
        incomes: Месячные доходы участников (в порядке участников)
        rent: Общая аренда в месяц
        mode: Активная политика (FAIR/EQUAL)
        affordability_ratio: Доля дохода для ориентира (default: 0.30)

    Returns:
        RentAllocation с долями обеих политик, активными долями,
        ориентиром и строками таблицы сравнения
    """
    mode = RentMode(mode)
    rent = clamp_currency(rent)
    cleaned = tuple(clamp_currency(income) for income in incomes)
    total_income = sum(cleaned)

    fair = fair_shares(cleaned, rent)
    equal = equal_shares(len(cleaned), rent)
    active = fair if mode == RentMode.FAIR else equal

    caps = tuple(income * affordability_ratio for income in cleaned)
    total_affordable = sum(caps)
    affordable = rent <= total_affordable

    rows = tuple(
        RentComparisonRow(
            income=income,
            cap=cap,
            fair_share=fair_share,
            fair_percent=safe_divide(fair_share, income) * 100,
            equal_share=equal_share,
            equal_percent=safe_divide(equal_share, income) * 100,
        )
        for income, cap, fair_share, equal_share in zip(cleaned, caps, fair, equal)
    )

    return RentAllocation(
        rent=rent,
        mode=mode,
        total_income=total_income,
        fair_shares=fair,
        equal_shares=equal,
        shares=active,
        affordability_caps=caps,
        total_affordable_rent=total_affordable,
        affordable=affordable,
        verdict=VERDICT_AFFORDABLE if affordable else VERDICT_STRETCH,
        rows=rows,
    )
