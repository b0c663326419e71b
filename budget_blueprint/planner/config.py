"""
Planner Config — параметры расчёта плана домохозяйства

Значения по умолчанию: горизонт 12 месяцев, ориентир аренды 30% дохода,
рекомендуемое распределение 50/30/20.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

from budget_blueprint.core.math.rent import AFFORDABILITY_RATIO_DEFAULT

# Ориентир 50/30/20: Needs / Wants / Savings & Debt (% дохода)
RECOMMENDED_BREAKDOWN_DEFAULT: Mapping[str, float] = MappingProxyType(
    {
        "Needs": 50.0,
        "Wants": 30.0,
        "Savings & Debt": 20.0,
    }
)


@dataclass(frozen=True)
class PlannerConfig:
    """Конфигурация расчёта плана домохозяйства.

    - savings_months: горизонт прогноза сбережений (месяцы)
    - affordability_ratio: доля дохода для ориентира по аренде
    - recommended_breakdown: рекомендуемое распределение для сравнения
    """

    savings_months: int = 12
    affordability_ratio: float = AFFORDABILITY_RATIO_DEFAULT
    recommended_breakdown: Mapping[str, float] = field(
        default_factory=lambda: RECOMMENDED_BREAKDOWN_DEFAULT
    )

    def __post_init__(self) -> None:
        if self.savings_months < 0:
            raise ValueError(f"savings_months must be non-negative, got {self.savings_months}")
        if not 0 <= self.affordability_ratio <= 1:
            raise ValueError(
                f"affordability_ratio must be in [0, 1], got {self.affordability_ratio}"
            )
