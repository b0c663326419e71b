"""
Household State Repository — сохранение входных данных через внешнее хранилище

Движок не работает с хранилищем: репозиторий получает key-value хранилище
снаружи (dependency injection) и сохраняет только входные данные
(HouseholdState), никогда не результаты расчётов.
"""

import logging
from typing import Final, Protocol

from budget_blueprint.core.domain import HouseholdState, create_default_state
from budget_blueprint.state.sanitizer import (
    SanitizeResult,
    dump_household_state,
    load_household_state,
)

logger = logging.getLogger(__name__)

# Ключ документа в хранилище
STORAGE_KEY_DEFAULT: Final[str] = "budget-blueprint-state-v1"


class KeyValueStore(Protocol):
    """Минимальный интерфейс долговременного строкового key-value хранилища."""

    def get(self, key: str) -> str | None: ...

    def set(self, key: str, value: str) -> None: ...

    def delete(self, key: str) -> None: ...


class InMemoryStore:
    """Key-value хранилище в памяти процесса."""

    def __init__(self, initial: dict[str, str] | None = None):
        self._data: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def delete(self, key: str) -> None:
        self._data.pop(key, None)

    def __contains__(self, key: str) -> bool:
        return key in self._data


class HouseholdStateRepository:
    """
    Загрузка/сохранение HouseholdState в injected хранилище.

    Загрузка всегда проходит санитизацию: вызывающий слой получает
    только валидное состояние.
    """

    def __init__(
        self,
        store: KeyValueStore,
        key: str = STORAGE_KEY_DEFAULT,
        defaults: HouseholdState | None = None,
    ):
        self.store = store
        self.key = key
        self._defaults = defaults

    def defaults(self) -> HouseholdState:
        """Шаблонное состояние репозитория."""
        return self._defaults or create_default_state()

    def load_with_report(self) -> SanitizeResult:
        """Загрузка с журналом подстановок."""
        return load_household_state(self.store.get(self.key), self.defaults())

    def load(self) -> HouseholdState:
        """Загрузка валидного состояния (шаблон, если документа нет)."""
        return self.load_with_report().state

    def save(self, state: HouseholdState) -> None:
        """Сохранение входных данных."""
        self.store.set(self.key, dump_household_state(state))
        logger.debug("Saved household state under %r", self.key)

    def reset(self) -> HouseholdState:
        """Перезапись хранилища шаблонным состоянием ("Load defaults")."""
        state = self.defaults()
        self.save(state)
        return state

    def clear(self) -> None:
        """Удаление сохранённого документа ("Clear saved inputs")."""
        self.store.delete(self.key)
        logger.debug("Cleared household state under %r", self.key)
