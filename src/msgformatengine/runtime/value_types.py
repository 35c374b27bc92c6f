"""Core value types for the rendering runtime.

Defines the argument values callers pass to render():
    - Money: Monetary amount with an optional ISO 4217 currency code
    - ArgumentValue: Union of all renderable value types

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, time
from decimal import Decimal, InvalidOperation
from typing import TypeAlias

__all__ = [
    "ArgumentValue",
    "Money",
    "NumericValue",
    "type_name",
]


@dataclass(frozen=True, slots=True)
class Money:
    """Monetary amount for {n,currency} placeholders.

    Attributes:
        amount: Value as Decimal (ints, floats and numeric strings are converted)
        currency: ISO 4217 code (uppercase). None means the locale's own currency.

    Example:
        >>> Money("9876543.21", "BDT")
        Money(amount=Decimal('9876543.21'), currency='BDT')
    """

    amount: Decimal
    currency: str | None = None

    def __init__(self, amount: int | float | Decimal | str, currency: str | None = None) -> None:
        if isinstance(amount, bool):
            msg = "Money amount must be numeric, got bool"
            raise TypeError(msg)
        try:
            # str() keeps the shortest float repr: 0.1 -> Decimal('0.1')
            value = amount if isinstance(amount, Decimal) else Decimal(str(amount))
        except InvalidOperation as e:
            msg = f"Money amount {amount!r} is not a number"
            raise ValueError(msg) from e
        if not value.is_finite():
            msg = f"Money amount must be finite, got {amount!r}"
            raise ValueError(msg)
        if currency is not None and not (
            len(currency) == 3 and currency.isascii() and currency.isalpha()
        ):
            msg = f"Currency must be a 3-letter ISO 4217 code, got {currency!r}"
            raise ValueError(msg)
        object.__setattr__(self, "amount", value)
        object.__setattr__(self, "currency", currency.upper() if currency else None)


NumericValue: TypeAlias = int | float | Decimal
"""Values accepted by number, integer, currency and plural placeholders."""

ArgumentValue: TypeAlias = str | int | float | Decimal | datetime | date | time | Money
"""Everything render() knows how to format. bool is deliberately not a number."""


def type_name(value: object) -> str:
    """Short type name used in TypeMismatch diagnostics."""
    return type(value).__name__
