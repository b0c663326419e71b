"""
Тесты для State Sanitizer

Проверяет:
1. Отсутствующий / повреждённый документ → шаблон целиком
2. Чистый документ принимается без подстановок
3. Независимую проверку каждого поля с подстановкой из шаблона
4. Санитизацию платежей (объекты, голые числа, сверх шаблона)
5. Участников сверх шаблонного списка
6. Журнал подстановок и логирование
"""

import json
import logging

import pytest

from budget_blueprint.core.contracts import HouseholdStateValidator
from budget_blueprint.core.domain import PayPeriod, RentMode, create_default_state
from budget_blueprint.state import (
    dump_household_state,
    load_household_state,
    sanitize_household_state,
)


@pytest.fixture
def document() -> dict:
    """Сохранённый документ шаблонного состояния"""
    return create_default_state().to_document()


def _paths(result) -> list[str]:
    return [substitution.path for substitution in result.substitutions]


# =============================================================================
# ДОКУМЕНТ ЦЕЛИКОМ
# =============================================================================


class TestWholesaleFallback:
    """Документ, который нельзя использовать, заменяется шаблоном"""

    @pytest.mark.parametrize("raw", [None, [], "text", 42, {"rent": 1000}, {"persons": "x"}])
    def test_malformed_document(self, raw) -> None:
        result = sanitize_household_state(raw)

        assert result.used_defaults is True
        assert result.state == create_default_state()
        assert result.is_clean is False

    def test_empty_text(self) -> None:
        assert load_household_state("").used_defaults is True
        assert load_household_state(None).used_defaults is True

    def test_invalid_json_logged(self, caplog) -> None:
        with caplog.at_level(logging.ERROR, logger="budget_blueprint.state.sanitizer"):
            result = load_household_state("{not json")

        assert result.used_defaults is True
        assert "Failed to parse budget state" in caplog.text

    def test_malformed_document_logged(self, caplog) -> None:
        with caplog.at_level(logging.WARNING, logger="budget_blueprint.state.sanitizer"):
            sanitize_household_state({"persons": None})

        assert "malformed" in caplog.text

    def test_deeply_nested_json(self, caplog) -> None:
        text = "[" * 100_000 + "]" * 100_000
        with caplog.at_level(logging.ERROR, logger="budget_blueprint.state.sanitizer"):
            result = load_household_state(text)

        assert result.used_defaults is True
        assert result.state == create_default_state()
        assert "Failed to parse budget state" in caplog.text


class TestCleanDocument:
    """Валидный документ принимается как есть"""

    def test_template_round_trip(self, document: dict) -> None:
        result = sanitize_household_state(document)

        assert result.is_clean is True
        assert result.state == create_default_state()

    def test_text_round_trip(self) -> None:
        state = create_default_state()
        assert load_household_state(dump_household_state(state)).state == state

    def test_empty_persons_keeps_templates(self, document: dict) -> None:
        document["persons"] = []
        result = sanitize_household_state(document)

        assert result.state.persons == create_default_state().persons
        assert _paths(result) == ["persons[0]", "persons[1]"]
        assert {s.reason for s in result.substitutions} == {"missing"}


# =============================================================================
# ПОЛЯ
# =============================================================================


class TestFieldSubstitution:
    """Каждое поле проверяется независимо"""

    def test_negative_currency_replaced(self, document: dict) -> None:
        document["persons"][0]["gas"] = -5
        document["persons"][0]["groceries"] = 275
        result = sanitize_household_state(document)

        person = result.state.persons[0]
        assert person.gas == 120.0
        assert person.groceries == 275.0
        assert _paths(result) == ["persons[0].gas"]
        assert result.substitutions[0].reason == "not_finite_non_negative"

    def test_wrong_type_replaced(self, document: dict) -> None:
        document["persons"][1]["startingDebt"] = "5000"
        document["persons"][1]["startingSavings"] = True
        result = sanitize_household_state(document)

        assert result.state.persons[1].starting_debt == 5000.0
        assert result.state.persons[1].starting_savings == 11057.34
        assert _paths(result) == ["persons[1].startingDebt", "persons[1].startingSavings"]

    def test_short_persons_list_filled_from_template(self, document: dict) -> None:
        document["persons"] = document["persons"][:1]

        result = sanitize_household_state(document)

        assert result.state.persons[1] == create_default_state().persons[1]
        assert [s.path for s in result.substitutions] == ["persons[1]"]
        assert result.substitutions[0].reason == "missing"

    def test_missing_field_replaced(self, document: dict) -> None:
        del document["persons"][0]["wantsRate"]
        result = sanitize_household_state(document)

        assert result.state.persons[0].wants_rate == 0.2
        assert result.substitutions[0].reason == "missing"

    def test_rate_clamped_to_unit_interval(self, document: dict) -> None:
        document["persons"][0]["savingsRate"] = 1.5
        document["persons"][0]["wantsRate"] = -0.2
        result = sanitize_household_state(document)

        person = result.state.persons[0]
        assert person.savings_rate == 1.0
        assert person.wants_rate == 0.0
        assert {s.reason for s in result.substitutions} == {"out_of_range"}

    def test_non_finite_rate_replaced(self, document: dict) -> None:
        document["persons"][0]["savingsRate"] = float("nan")
        result = sanitize_household_state(document)

        assert result.state.persons[0].savings_rate == 0.2

    def test_pay_period_replaced(self, document: dict) -> None:
        document["persons"][1]["payPeriod"] = "Monthly"
        result = sanitize_household_state(document)

        assert result.state.persons[1].pay_period == PayPeriod.WEEKLY
        assert result.substitutions[0].reason == "unsupported_pay_period"

    def test_blank_name_replaced(self, document: dict) -> None:
        document["persons"][0]["name"] = "   "
        assert sanitize_household_state(document).state.persons[0].name == "Person 1"

    def test_template_id_wins(self, document: dict) -> None:
        document["persons"][0]["id"] = "renamed"
        result = sanitize_household_state(document)

        assert result.state.persons[0].id == "person-1"

    def test_paychecks_entries_clamped(self, document: dict) -> None:
        document["persons"][0]["paychecks"] = [100, -5, "x"]
        result = sanitize_household_state(document)

        assert result.state.persons[0].paychecks == (100.0, 0.0, 0.0)
        assert _paths(result) == ["persons[0].paychecks[1]", "persons[0].paychecks[2]"]

    def test_empty_paychecks_replaced(self, document: dict) -> None:
        document["persons"][0]["paychecks"] = []
        result = sanitize_household_state(document)

        assert result.state.persons[0].paychecks == create_default_state().persons[0].paychecks

    def test_rent_replaced(self) -> None:
        result = load_household_state('{"rent": NaN, "rentMode": "equal", "persons": []}')

        assert result.state.rent == 2169.17
        assert result.state.rent_mode == RentMode.EQUAL
        assert _paths(result) == ["persons[0]", "persons[1]", "rent"]

    def test_integer_beyond_float_range_replaced(self, document: dict) -> None:
        text = json.dumps(document).replace('"rent": 2169.17', '"rent": 1' + "0" * 400, 1)
        result = load_household_state(text)

        assert result.state.rent == 2169.17
        assert _paths(result) == ["rent"]
        assert result.substitutions[0].reason == "not_finite_non_negative"

    def test_huge_paycheck_replaced(self, document: dict) -> None:
        document["persons"][0]["paychecks"] = [10**400, 100]
        result = sanitize_household_state(document)

        assert result.state.persons[0].paychecks == (0.0, 100.0)
        assert _paths(result) == ["persons[0].paychecks[0]"]

    def test_unknown_rent_mode_becomes_fair(self, document: dict) -> None:
        document["rentMode"] = "weighted"
        result = sanitize_household_state(document)

        assert result.state.rent_mode == RentMode.FAIR
        assert _paths(result) == ["rentMode"]

    def test_non_object_person_replaced(self, document: dict) -> None:
        document["persons"][1] = 7
        result = sanitize_household_state(document)

        assert result.state.persons[1] == create_default_state().persons[1]
        assert _paths(result) == ["persons[1]"]

    def test_substitutions_logged(self, document: dict, caplog) -> None:
        document["persons"][0]["gas"] = -5
        with caplog.at_level(logging.DEBUG, logger="budget_blueprint.state.sanitizer"):
            sanitize_household_state(document)

        assert "persons[0].gas" in caplog.text


# =============================================================================
# ПЛАТЕЖИ
# =============================================================================


class TestBills:
    """Санитизация платежей"""

    def test_empty_bills_replaced(self, document: dict) -> None:
        document["persons"][1]["bills"] = []
        result = sanitize_household_state(document)

        assert result.state.persons[1].bills == create_default_state().persons[1].bills

    def test_object_entry_keeps_valid_fields(self, document: dict) -> None:
        document["persons"][0]["bills"] = [{"label": "Renters Insurance", "amount": 12}]
        bill = sanitize_household_state(document).state.persons[0].bills[0]

        assert bill.id == "person-1-bill-1"
        assert bill.label == "Renters Insurance"
        assert bill.amount == 12.0

    def test_object_entry_invalid_amount(self, document: dict) -> None:
        document["persons"][0]["bills"] = [{"id": "x", "label": "Phone", "amount": -1}]
        bill = sanitize_household_state(document).state.persons[0].bills[0]

        assert (bill.id, bill.label, bill.amount) == ("x", "Phone", 130.0)

    def test_bare_amount_entry(self, document: dict) -> None:
        document["persons"][0]["bills"] = [25, 30]
        bills = sanitize_household_state(document).state.persons[0].bills

        assert [(b.label, b.amount) for b in bills] == [("Car Payment", 25.0), ("Utilities", 30.0)]

    def test_entries_beyond_template(self, document: dict) -> None:
        document["persons"][1]["bills"] = [5, 6, 7, 8, 9]
        bills = sanitize_household_state(document).state.persons[1].bills

        assert len(bills) == 5
        assert bills[4].id == "person-2-bill-5"
        assert bills[4].label == "Bill 5"
        assert bills[4].amount == 9.0


# =============================================================================
# УЧАСТНИКИ СВЕРХ ШАБЛОНА
# =============================================================================


class TestExtraPersons:
    """Участники сверх шаблонного списка сохраняются"""

    def test_extra_person_sanitized_against_blank(self, document: dict) -> None:
        document["persons"].append(
            {"id": "roommate", "name": "Alex", "paychecks": [900], "payPeriod": "Weekly", "gas": -1}
        )
        result = sanitize_household_state(document)

        extra = result.state.persons[2]
        assert extra.id == "roommate"
        assert extra.name == "Alex"
        assert extra.pay_period == PayPeriod.WEEKLY
        assert extra.gas == 0.0
        assert extra.bills[0].id == "roommate-bill-1"

    def test_duplicate_id_replaced(self, document: dict) -> None:
        copy = dict(document["persons"][1], name="Person 3")
        document["persons"].append(copy)
        result = sanitize_household_state(document)

        ids = [person.id for person in result.state.persons]
        assert ids == ["person-1", "person-2", "person-3"]
        assert _paths(result) == ["persons[2].id"]
        assert result.substitutions[0].reason == "duplicate_id"

    def test_generated_id_skips_taken(self, document: dict) -> None:
        document["persons"].append({"id": "person-4", "name": "Sam"})
        document["persons"].append({"name": "Kim"})
        result = sanitize_household_state(document)

        ids = [person.id for person in result.state.persons]
        assert ids == ["person-1", "person-2", "person-4", "person-4-2"]
        assert len(set(ids)) == len(ids)

    def test_result_satisfies_contract(self, document: dict) -> None:
        document["persons"].append({})
        document["persons"][0]["bills"] = [{"label": ""}]
        result = sanitize_household_state(document)

        assert HouseholdStateValidator().is_valid(result.state.to_document())
        assert result.state.persons[2].id == "person-3"

    def test_sanitize_is_deterministic(self, document: dict) -> None:
        document["persons"][0]["gas"] = "oops"
        first = sanitize_household_state(json.loads(json.dumps(document)))
        second = sanitize_household_state(json.loads(json.dumps(document)))

        assert first == second
