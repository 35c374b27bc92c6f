"""Enumerations for msgformatengine type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import StrEnum


class ArgumentKind(StrEnum):
    """Formatter kind named by the second field of an argument placeholder.

    StrEnum provides automatic string conversion: str(ArgumentKind.DATE) == "date"
    """

    NONE = "none"
    """Plain substitution: {0}"""

    NUMBER = "number"
    """Decimal number: {0,number}"""

    INTEGER = "integer"
    """Whole number, half-even rounding: {0,integer}"""

    CURRENCY = "currency"
    """Monetary amount: {0,currency}"""

    DATE = "date"
    """Date portion of a date-time: {0,date,long}"""

    TIME = "time"
    """Time portion of a date-time: {0,time,short}"""

    PLURAL = "plural"
    """Branch selection: {0,plural,0:none|1:one|other:many}"""


class DateTimeStyle(StrEnum):
    """Width of a locale date or time pattern."""

    SHORT = "short"
    MEDIUM = "medium"
    LONG = "long"
    FULL = "full"


class NumberStyle(StrEnum):
    """Style keywords accepted by {n,number,style}."""

    INTEGER = "integer"
    PERCENT = "percent"
    CURRENCY = "currency"
    PLAIN = "plain"


class CurrencyDisplay(StrEnum):
    """How the currency itself is shown next to the amount."""

    SYMBOL = "symbol"
    """Locale symbol: 9,876,543.21 -> $9,876,543.21"""

    CODE = "code"
    """ISO 4217 code: USD 9,876,543.21"""

    NAME = "name"
    """Display name: 9,876,543.21 US Dollar"""


__all__ = [
    "ArgumentKind",
    "CurrencyDisplay",
    "DateTimeStyle",
    "NumberStyle",
]
