"""
HouseholdState — Модель сохраняемого состояния домохозяйства

Immutable Pydantic модель единственного JSON документа, который
сохраняет внешний слой: общая аренда, режим разделения и участники.
Сам движок состояние не хранит: он получает HouseholdState на вход.
"""

from enum import Enum

from pydantic import BaseModel, Field, field_validator
from pydantic.alias_generators import to_camel

from .profile import Currency, PersonState


class RentMode(str, Enum):
    """
    Политика разделения аренды.

    FAIR — пропорционально доходу, EQUAL — поровну.
    """

    FAIR = "fair"
    EQUAL = "equal"


class HouseholdState(BaseModel):
    """
    Снапшот входных данных домохозяйства.

    Сериализуется by_alias в camelCase (rentMode, payPeriod, ...).
    """

    rent: Currency = Field(..., description="Общая аренда в месяц (USD)")
    rent_mode: RentMode = Field(RentMode.FAIR, description="Активный режим разделения")
    persons: tuple[PersonState, ...] = Field(..., description="Участники бюджета")

    model_config = {
        "frozen": True,
        "alias_generator": to_camel,
        "populate_by_name": True,
    }

    @field_validator("persons")
    @classmethod
    def validate_unique_person_ids(cls, v: tuple[PersonState, ...]) -> tuple[PersonState, ...]:
        """id участников уникальны: по ним ключуются результаты планировщика."""
        ids = [person.id for person in v]
        if len(ids) != len(set(ids)):
            raise ValueError(f"person ids must be unique, got {ids}")
        return v

    def to_document(self) -> dict:
        """JSON-совместимый dict в формате сохранённого документа."""
        return self.model_dump(mode="json", by_alias=True)
