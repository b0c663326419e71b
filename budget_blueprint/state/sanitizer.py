"""
State Sanitizer — валидация сохранённого документа на границе

Сохранённый JSON документ может быть отсутствующим, повреждённым или
частично невалидным. Санитизация превращает произвольный разобранный JSON
в валидный HouseholdState и возвращает список решений о подстановках:

- Документ отсутствует / не объект / persons не список → шаблон целиком
- Участники выравниваются по индексу с шаблонными; id шаблона всегда побеждает
- Каждое поле проверяется независимо; невалидное значение заменяется
  значением шаблона и записывается как Substitution
- Платежи санитизируются поштучно (объект или голое число)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Результат всегда проходит Pydantic и JSON Schema валидацию
2. Движок никогда не получает невалидный профиль
3. Санитизация детерминирована: одинаковый вход даёт одинаковый результат
"""

import json
import logging
from dataclasses import dataclass, field
from typing import Any, Final

from budget_blueprint.core.contracts import validate_household_state
from budget_blueprint.core.domain import (
    BillItem,
    HouseholdState,
    PayPeriod,
    PersonState,
    RentMode,
    create_default_state,
    make_bill,
)
from budget_blueprint.core.math.numerical_safeguards import clamp, is_valid_float

logger = logging.getLogger(__name__)

_MISSING: Final = object()


# =============================================================================
# RESULTS
# =============================================================================


@dataclass(frozen=True)
class Substitution:
    """
    Решение о подстановке для одного поля.

    path: JSON-путь поля ('persons[0].gas', 'rent', ...)
    reason: причина ('missing', 'not_finite_non_negative', ...)
    value: подставленное значение
    """

    path: str
    reason: str
    value: Any


@dataclass(frozen=True)
class SanitizeResult:
    """Результат санитизации: валидное состояние и журнал подстановок."""

    state: HouseholdState
    substitutions: tuple[Substitution, ...] = field(default_factory=tuple)
    used_defaults: bool = False

    @property
    def is_clean(self) -> bool:
        """Документ принят без единой подстановки."""
        return not self.substitutions and not self.used_defaults


# =============================================================================
# FIELD SANITIZERS
# =============================================================================


class _Collector:
    """Накопитель подстановок с логированием."""

    def __init__(self) -> None:
        self.items: list[Substitution] = []

    def add(self, path: str, reason: str, value: Any) -> Any:
        logger.debug("Substituted %s (%s) with %r", path, reason, value)
        self.items.append(Substitution(path=path, reason=reason, value=value))
        return value


def _is_number(value: Any) -> bool:
    return is_valid_float(value)


def _currency(raw: Any, fallback: float, path: str, log: _Collector) -> float:
    if raw is _MISSING:
        return log.add(path, "missing", fallback)
    if not _is_number(raw) or raw < 0:
        return log.add(path, "not_finite_non_negative", fallback)
    return float(raw)


def _rate(raw: Any, fallback: float, path: str, log: _Collector) -> float:
    if raw is _MISSING:
        return log.add(path, "missing", fallback)
    if not _is_number(raw):
        return log.add(path, "not_finite", fallback)
    clamped = clamp(float(raw), 0.0, 1.0)
    if clamped != raw:
        log.add(path, "out_of_range", clamped)
    return clamped


def _text(raw: Any, fallback: str, path: str, log: _Collector) -> str:
    if isinstance(raw, str) and raw.strip():
        return raw
    return log.add(path, "missing" if raw is _MISSING else "blank_or_not_string", fallback)


def _pay_period(raw: Any, fallback: PayPeriod, path: str, log: _Collector) -> PayPeriod:
    if isinstance(raw, str):
        try:
            return PayPeriod(raw)
        except ValueError:
            pass
    return log.add(path, "missing" if raw is _MISSING else "unsupported_pay_period", fallback)


def _paychecks(
    raw: Any, fallback: tuple[float, ...], path: str, log: _Collector
) -> tuple[float, ...]:
    if not isinstance(raw, list) or not raw:
        return log.add(path, "missing" if raw is _MISSING else "empty_or_not_list", fallback)
    return tuple(
        _currency(value, 0.0, f"{path}[{index}]", log) for index, value in enumerate(raw)
    )


def _bill(
    raw: Any, fallback: BillItem, path: str, log: _Collector
) -> BillItem:
    if isinstance(raw, dict):
        raw_id = raw.get("id", _MISSING)
        if isinstance(raw_id, str) and raw_id:
            bill_id = raw_id
        else:
            bill_id = log.add(f"{path}.id", "missing" if raw_id is _MISSING else "empty_or_not_string", fallback.id)
        label = _text(raw.get("label", _MISSING), fallback.label, f"{path}.label", log)
        amount = _currency(raw.get("amount", _MISSING), fallback.amount, f"{path}.amount", log)
        return BillItem(id=bill_id, label=label, amount=amount)

    # Голое число: id и label берутся из шаблона
    amount = _currency(raw, fallback.amount, f"{path}.amount", log)
    if _is_number(raw):
        log.add(f"{path}.label", "bare_amount", fallback.label)
    return BillItem(id=fallback.id, label=fallback.label, amount=amount)


def _bills(
    raw: Any,
    fallback: tuple[BillItem, ...],
    person_id: str,
    path: str,
    log: _Collector,
) -> tuple[BillItem, ...]:
    if not isinstance(raw, list) or not raw:
        return log.add(path, "missing" if raw is _MISSING else "empty_or_not_list", fallback)

    bills = []
    for index, entry in enumerate(raw):
        if index < len(fallback):
            template = fallback[index]
        else:
            template = make_bill(person_id, index, f"Bill {index + 1}", 0.0)
        bills.append(_bill(entry, template, f"{path}[{index}]", log))
    return tuple(bills)


# =============================================================================
# DOCUMENT SANITIZER
# =============================================================================


def blank_person(index: int, person_id: str | None = None) -> PersonState:
    """
    Пустой участник для записей сверх шаблонного списка.

    Одна нулевая выплата и один нулевой платёж: минимальный валидный профиль.
    """
    person_id = person_id or f"person-{index + 1}"
    return PersonState(
        id=person_id,
        name=f"Person {index + 1}",
        paychecks=(0.0,),
        pay_period=PayPeriod.SEMIMONTHLY,
        bills=(make_bill(person_id, 0, "Bill 1", 0.0),),
    )


def _unique_person_id(index: int, used_ids: set[str]) -> str:
    """Свободный id вида person-N (с суффиксом -2, -3... при коллизии)."""
    candidate = f"person-{index + 1}"
    suffix = 2
    while candidate in used_ids:
        candidate = f"person-{index + 1}-{suffix}"
        suffix += 1
    return candidate


def _sanitize_person(
    raw: Any, fallback: PersonState, path: str, log: _Collector
) -> PersonState:
    """
    Санитизация одного участника против его шаблона.

    Args:
        raw: Разобранный JSON участника
        fallback: Шаблонный участник (источник подстановок)
        path: JSON-путь для журнала подстановок
        log: Накопитель подстановок

    id всегда берётся из fallback.
    """
    if not isinstance(raw, dict):
        log.add(path, "missing" if raw is _MISSING else "not_object", fallback.id)
        return fallback

    person_id = fallback.id

    return PersonState(
        id=person_id,
        name=_text(raw.get("name", _MISSING), fallback.name, f"{path}.name", log),
        paychecks=_paychecks(raw.get("paychecks", _MISSING), fallback.paychecks, f"{path}.paychecks", log),
        pay_period=_pay_period(raw.get("payPeriod", _MISSING), fallback.pay_period, f"{path}.payPeriod", log),
        bills=_bills(raw.get("bills", _MISSING), fallback.bills, person_id, f"{path}.bills", log),
        groceries=_currency(raw.get("groceries", _MISSING), fallback.groceries, f"{path}.groceries", log),
        gas=_currency(raw.get("gas", _MISSING), fallback.gas, f"{path}.gas", log),
        savings_rate=_rate(raw.get("savingsRate", _MISSING), fallback.savings_rate, f"{path}.savingsRate", log),
        wants_rate=_rate(raw.get("wantsRate", _MISSING), fallback.wants_rate, f"{path}.wantsRate", log),
        starting_debt=_currency(raw.get("startingDebt", _MISSING), fallback.starting_debt, f"{path}.startingDebt", log),
        starting_savings=_currency(
            raw.get("startingSavings", _MISSING), fallback.starting_savings, f"{path}.startingSavings", log
        ),
    )


def sanitize_household_state(
    raw: Any, defaults: HouseholdState | None = None
) -> SanitizeResult:
    """
    Санитизация разобранного сохранённого документа.

    Args:
        raw: Результат json.loads (или None, если документа нет)
        defaults: Шаблонное состояние (default: create_default_state())

    Returns:
        SanitizeResult с валидным состоянием и журналом подстановок

    Raises:
        jsonschema.ValidationError: Если результат нарушает контракт
            (ошибка программиста, не пользователя)
    """
    defaults = defaults or create_default_state()

    if not isinstance(raw, dict) or not isinstance(raw.get("persons"), list):
        if raw is not None:
            logger.warning("Persisted household state is malformed, using defaults")
        return SanitizeResult(state=defaults, used_defaults=True)

    log = _Collector()
    stored_persons = raw["persons"]
    persons = []

    for index, fallback in enumerate(defaults.persons):
        stored = stored_persons[index] if index < len(stored_persons) else _MISSING
        persons.append(_sanitize_person(stored, fallback, f"persons[{index}]", log))

    # Участники без шаблона сохраняют свой id, если он свободен
    used_ids = {person.id for person in persons}
    for index in range(len(defaults.persons), len(stored_persons)):
        stored = stored_persons[index]
        path = f"persons[{index}]"
        stored_id = stored.get("id") if isinstance(stored, dict) else None
        person_id = stored_id if isinstance(stored_id, str) and stored_id else None
        if person_id in used_ids:
            person_id = log.add(f"{path}.id", "duplicate_id", _unique_person_id(index, used_ids))
        elif person_id is None:
            person_id = _unique_person_id(index, used_ids)
        used_ids.add(person_id)
        persons.append(_sanitize_person(stored, blank_person(index, person_id), path, log))

    raw_mode = raw.get("rentMode", _MISSING)
    if raw_mode == RentMode.EQUAL.value:
        rent_mode = RentMode.EQUAL
    else:
        rent_mode = RentMode.FAIR
        if raw_mode != RentMode.FAIR.value:
            log.add("rentMode", "missing" if raw_mode is _MISSING else "unsupported_rent_mode", RentMode.FAIR)

    state = HouseholdState(
        rent=_currency(raw.get("rent", _MISSING), defaults.rent, "rent", log),
        rent_mode=rent_mode,
        persons=tuple(persons),
    )
    validate_household_state(state.to_document())

    if log.items:
        logger.info("Sanitized household state with %d substitution(s)", len(log.items))

    return SanitizeResult(state=state, substitutions=tuple(log.items))


# =============================================================================
# JSON I/O
# =============================================================================


def load_household_state(
    text: str | None, defaults: HouseholdState | None = None
) -> SanitizeResult:
    """
    Разбор и санитизация сохранённого JSON документа.

    Отсутствующий документ, невалидный JSON или JSON со слишком глубокой
    вложенностью дают шаблон целиком.
    """
    if not text:
        return SanitizeResult(state=defaults or create_default_state(), used_defaults=True)

    try:
        raw = json.loads(text)
    except (ValueError, RecursionError) as e:
        logger.error("Failed to parse budget state: %s", e)
        return SanitizeResult(state=defaults or create_default_state(), used_defaults=True)

    return sanitize_household_state(raw, defaults)


def dump_household_state(state: HouseholdState) -> str:
    """Сериализация состояния в JSON документ (camelCase ключи)."""
    return json.dumps(state.to_document())
