"""
Currency Formatting — отображение денежных сумм

Формат USD с группировкой разрядов en-US ($1,234.56, -$12.00).
Округление half up на Decimal, а не на float.
"""

from decimal import ROUND_HALF_UP, Decimal
from typing import Final

from budget_blueprint.core.math.numerical_safeguards import is_valid_float

CURRENCY_SYMBOL: Final[str] = "$"

# Стандартное число знаков после запятой для USD
CURRENCY_MINOR_DIGITS: Final[int] = 2


def format_currency(value: float, maximum_fraction_digits: int = CURRENCY_MINOR_DIGITS) -> str:
    """
    Форматирование суммы как строки USD.

    Округление half up (от нуля) на десятичном значении. Показывается минимум
    min(2, maximum_fraction_digits) знаков после запятой, лишние нули сверх
    этого отбрасываются. NaN/Inf форматируются как ноль.

    Raises:
        ValueError: Если maximum_fraction_digits < 0

    Examples:
        >>> format_currency(1234.5)
        '$1,234.50'
        >>> format_currency(-12)
        '-$12.00'
        >>> format_currency(1234.567, maximum_fraction_digits=0)
        '$1,235'
    """
    if maximum_fraction_digits < 0:
        raise ValueError(f"maximum_fraction_digits must be non-negative, got {maximum_fraction_digits}")

    amount = Decimal(repr(float(value))) if is_valid_float(value) else Decimal(0)
    quantum = Decimal(1).scaleb(-maximum_fraction_digits)
    rounded = amount.quantize(quantum, rounding=ROUND_HALF_UP)

    minimum_fraction_digits = min(CURRENCY_MINOR_DIGITS, maximum_fraction_digits)
    text = f"{abs(rounded):,.{maximum_fraction_digits}f}"
    if maximum_fraction_digits > minimum_fraction_digits:
        whole, _, fraction = text.partition(".")
        fraction = fraction.rstrip("0").ljust(minimum_fraction_digits, "0")
        text = f"{whole}.{fraction}" if fraction else whole

    sign = "-" if rounded < 0 else ""
    return f"{sign}{CURRENCY_SYMBOL}{text}"
