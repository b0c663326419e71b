"""
PersonFinancialProfile — Модель финансового профиля участника бюджета

Immutable Pydantic модели входных данных движка:
- PayPeriod: закрытое перечисление частот выплат
- BillItem: фиксированный ежемесячный платёж (label + amount)
- PersonFinancialProfile: всё, что нужно для расчёта бюджета одного человека
- PersonState: профиль + идентификатор и имя (единица сохранения)

Все денежные поля конечны и >= 0, доли (sliders) в [0, 1].
Полная совместимость с JSON Schema (contracts/schema/household_state.json):
сериализация by_alias даёт camelCase ключи сохранённого документа.
"""

from enum import Enum
from typing import Annotated

from pydantic import BaseModel, Field, field_validator
from pydantic.alias_generators import to_camel


# =============================================================================
# TYPES
# =============================================================================

# Денежная сумма: конечная, неотрицательная
Currency = Annotated[float, Field(ge=0, allow_inf_nan=False)]

# Доля дохода (slider): [0, 1]
Rate = Annotated[float, Field(ge=0, le=1, allow_inf_nan=False)]


# =============================================================================
# ENUMS
# =============================================================================


class PayPeriod(str, Enum):
    """
    Частота выплат зарплаты.

    Значения совпадают с написанием в сохранённом документе.
    """

    SEMIMONTHLY = "Semimonthly"
    WEEKLY = "Weekly"
    BIWEEKLY = "Biweekly"


# =============================================================================
# MODELS
# =============================================================================


class BillItem(BaseModel):
    """
    Фиксированный ежемесячный платёж.

    label используется только для отображения и не обязан быть уникальным.
    """

    id: str = Field(..., min_length=1, description="Идентификатор платежа")
    label: str = Field(..., min_length=1, description="Название платежа")
    amount: Currency = Field(..., description="Сумма платежа в месяц (USD)")

    model_config = {"frozen": True}

    @field_validator("label")
    @classmethod
    def validate_label_not_blank(cls, v: str) -> str:
        """Название не может состоять только из пробелов."""
        if not v.strip():
            raise ValueError("label must not be blank")
        return v


class PersonFinancialProfile(BaseModel):
    """
    Финансовый профиль одного участника бюджета.

    Immutable модель (frozen=True): любое изменение ввода создаёт
    новый экземпляр, движок пересчитывает результат с нуля.
    """

    # Доход
    paychecks: tuple[Currency, ...] = Field(
        ..., description="Суммы последних зарплат (порядок не важен)"
    )
    pay_period: PayPeriod = Field(..., description="Частота выплат")

    # Обязательные расходы
    bills: tuple[BillItem, ...] = Field(
        default=(), description="Фиксированные ежемесячные платежи"
    )
    groceries: Currency = Field(0.0, description="Продукты в месяц (USD)")
    gas: Currency = Field(0.0, description="Топливо в месяц (USD)")

    # Sliders
    savings_rate: Rate = Field(0.0, description="Доля дохода на сбережения")
    wants_rate: Rate = Field(0.0, description="Доля дохода на желания")

    # Стартовые балансы
    starting_debt: Currency = Field(0.0, description="Текущий долг (USD)")
    starting_savings: Currency = Field(0.0, description="Текущие сбережения (USD)")

    model_config = {
        "frozen": True,
        "alias_generator": to_camel,
        "populate_by_name": True,
    }


class PersonState(PersonFinancialProfile):
    """
    Профиль участника с идентификатором и отображаемым именем.

    Единица хранения в сохранённом документе (persons[]).
    """

    id: str = Field(..., min_length=1, description="Стабильный идентификатор участника")
    name: str = Field(..., min_length=1, description="Отображаемое имя")

    @field_validator("name")
    @classmethod
    def validate_name_not_blank(cls, v: str) -> str:
        """Имя не может состоять только из пробелов."""
        if not v.strip():
            raise ValueError("name must not be blank")
        return v
