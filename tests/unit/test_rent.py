"""
Тесты для Rent Allocator

Проверяет:
1. FAIR: пропорционально доходу, fallback на равные доли при нулевом доходе
2. EQUAL: равные доли, ноль участников
3. Ориентир 30% и вердикт
4. Строки таблицы сравнения
"""

import pytest

from budget_blueprint.core.domain import RentMode
from budget_blueprint.core.math.rent import (
    VERDICT_AFFORDABLE,
    VERDICT_STRETCH,
    allocate_rent,
    equal_shares,
    fair_shares,
)


class TestFairShares:
    """Тесты для fair_shares"""

    def test_proportional_to_income(self) -> None:
        assert fair_shares([3000.0, 1000.0], 2000.0) == pytest.approx((1500.0, 500.0))

    @pytest.mark.parametrize(
        "incomes,rent",
        [
            ([4685.94, 2800.43], 2169.17),
            ([1000.0, 1000.0, 1000.0], 1000.0),
            ([123.45, 6789.01, 42.0], 1999.99),
        ],
    )
    def test_shares_sum_to_rent(self, incomes: list[float], rent: float) -> None:
        assert sum(fair_shares(incomes, rent)) == pytest.approx(rent)

    def test_equal_income_equal_ratio(self) -> None:
        shares = fair_shares([2000.0, 2000.0, 1000.0], 1000.0)
        assert shares[0] / 2000.0 == pytest.approx(shares[1] / 2000.0)

    def test_zero_total_income_splits_evenly(self) -> None:
        assert fair_shares([0.0, 0.0], 1000.0) == (500.0, 500.0)

    def test_negative_income_treated_as_zero(self) -> None:
        assert fair_shares([-100.0, 1000.0], 600.0) == pytest.approx((0.0, 600.0))


class TestEqualShares:
    """Тесты для equal_shares"""

    def test_split_evenly(self) -> None:
        assert equal_shares(4, 1000.0) == (250.0, 250.0, 250.0, 250.0)

    def test_zero_persons(self) -> None:
        assert equal_shares(0, 1000.0) == ()


class TestAllocateRent:
    """Тесты для allocate_rent"""

    def test_both_policies_always_computed(self) -> None:
        result = allocate_rent([3000.0, 1000.0], 2000.0, mode=RentMode.EQUAL)

        assert result.fair_shares == pytest.approx((1500.0, 500.0))
        assert result.equal_shares == (1000.0, 1000.0)
        assert result.shares == result.equal_shares

    def test_fair_mode_uses_fair_shares(self) -> None:
        result = allocate_rent([3000.0, 1000.0], 2000.0)

        assert result.mode == RentMode.FAIR
        assert result.shares == result.fair_shares

    def test_mode_string_accepted(self) -> None:
        assert allocate_rent([1000.0], 500.0, mode="equal").mode == RentMode.EQUAL

    def test_affordable_verdict(self) -> None:
        result = allocate_rent([3000.0, 1000.0], 1000.0)

        assert result.affordability_caps == pytest.approx((900.0, 300.0))
        assert result.total_affordable_rent == pytest.approx(1200.0)
        assert result.affordable is True
        assert result.verdict == VERDICT_AFFORDABLE

    def test_stretch_verdict(self) -> None:
        result = allocate_rent([3000.0, 1000.0], 1500.0)

        assert result.affordable is False
        assert result.verdict == VERDICT_STRETCH

    def test_custom_affordability_ratio(self) -> None:
        result = allocate_rent([3000.0, 1000.0], 1500.0, affordability_ratio=0.40)
        assert result.verdict == VERDICT_AFFORDABLE

    def test_no_persons_never_divides_by_zero(self) -> None:
        result = allocate_rent([], 1000.0)

        assert result.shares == ()
        assert result.total_income == 0.0
        assert result.verdict == VERDICT_STRETCH

    def test_negative_rent_clamped(self) -> None:
        result = allocate_rent([1000.0, 1000.0], -500.0)
        assert result.rent == 0.0
        assert result.shares == (0.0, 0.0)

    def test_comparison_rows(self) -> None:
        result = allocate_rent([3000.0, 0.0], 1200.0)
        high, zero = result.rows

        assert high.income == 3000.0
        assert high.cap == pytest.approx(900.0)
        assert high.fair_share == pytest.approx(1200.0)
        assert high.fair_percent == pytest.approx(40.0)
        assert high.equal_share == 600.0
        assert high.equal_percent == pytest.approx(20.0)

        # Нулевой доход: проценты равны 0, а не делению на ноль
        assert zero.fair_percent == 0.0
        assert zero.equal_percent == 0.0
