"""Per-kind argument formatters.

One pure function per placeholder kind, each ``(value, data, style) -> str``.
Formatters read nothing but their arguments: the same value, LocaleData and
style always produce the same text.

Architecture:
    - string_format: ``{0}``, strings only
    - number_format / integer_format: grouping, separators, digits
    - currency_format: pattern affixes, symbol/code/name, minor units
    - date_format / time_format / datetime_format: CLDR patterns
    - plural_format: branch selection over a PluralStyle
    - FORMATTERS: kind -> formatter registry consulted by the renderer

Error Handling:
    Values of the wrong type raise TypeMismatchError. Style strings that no
    compiled template can produce (hand-built segments, direct calls) raise
    ValueError.

Python 3.13+. Uses Babel (via plural_rules) for CLDR plural categories.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Mapping
from datetime import date, datetime, time
from decimal import Decimal
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, TypeAlias

from msgformatengine.constants import DEFAULT_CURRENCY_DIGITS, DEFAULT_MAX_FRACTION_DIGITS
from msgformatengine.diagnostics import ErrorTemplate, TypeMismatchError
from msgformatengine.enums import ArgumentKind, CurrencyDisplay, DateTimeStyle, NumberStyle
from msgformatengine.syntax.ast import PluralStyle

from .date_patterns import format_pattern
from .number_patterns import render_decimal, split_affixes, to_decimal
from .plural_rules import select_plural_category
from .value_types import Money, type_name

if TYPE_CHECKING:
    from .locale_data import LocaleData

__all__ = [
    "FORMATTERS",
    "Formatter",
    "currency_format",
    "date_format",
    "datetime_format",
    "integer_format",
    "number_format",
    "plural_format",
    "string_format",
    "time_format",
]

Formatter: TypeAlias = "Callable[[Any, LocaleData, Any], str]"
"""Signature shared by every registered formatter."""

_NUMBER_TYPES = "int, float or Decimal"
_CURRENCY_SIGNS = re.compile("\xa4+")
_NBSP = "\xa0"


def _mismatch(kind: ArgumentKind, expected: str, value: object) -> TypeMismatchError:
    received = type_name(value)
    return TypeMismatchError(
        ErrorTemplate.type_mismatch(str(kind), expected, received),
        kind=str(kind),
        expected_type=expected,
        received_type=received,
    )


def _require_number(value: object, kind: ArgumentKind) -> Decimal:
    # bool is an int subclass but never a number here
    if isinstance(value, bool) or not isinstance(value, (int, float, Decimal)):
        raise _mismatch(kind, _NUMBER_TYPES, value)
    return to_decimal(value)


def _unknown_style(kind: ArgumentKind, style: object, known: tuple[str, ...]) -> ValueError:
    return ValueError(f"Unknown style {style!r} for '{kind}'; expected one of {', '.join(known)}")


def string_format(value: object, data: LocaleData, style: object = None) -> str:  # noqa: ARG001
    """Render a ``{0}`` placeholder: the value must already be a string."""
    if not isinstance(value, str):
        raise _mismatch(ArgumentKind.NONE, "str", value)
    if style is not None:
        raise _unknown_style(ArgumentKind.NONE, style, ())
    return value


def number_format(value: object, data: LocaleData, style: str | None = None) -> str:
    """Render a ``{0,number[,style]}`` placeholder.

    Args:
        value: int, float or Decimal
        data: Locale rules
        style: None (up to 3 fraction digits), ``integer``, ``percent``,
            ``currency`` or ``plain`` (no grouping)

    Returns:
        Localized number

    Raises:
        TypeMismatchError: If value is not a number
        ValueError: If style is not a number style

    Example:
        >>> from msgformatengine.runtime.locale_data import LocaleData
        >>> number_format(1234567.891, LocaleData("en"))
        '1,234,567.891'
    """
    if style == NumberStyle.CURRENCY:
        return currency_format(value, data, None)
    number = _require_number(value, ArgumentKind.NUMBER)
    match style:
        case None:
            return render_decimal(number, data, maximum_fraction_digits=DEFAULT_MAX_FRACTION_DIGITS)
        case NumberStyle.INTEGER:
            return render_decimal(number, data, maximum_fraction_digits=0)
        case NumberStyle.PLAIN:
            return render_decimal(
                number, data, maximum_fraction_digits=DEFAULT_MAX_FRACTION_DIGITS, use_grouping=False
            )
        case NumberStyle.PERCENT:
            prefix, suffix = split_affixes(data.percent_pattern)
            return render_decimal(
                number * 100,
                data,
                maximum_fraction_digits=0,
                prefix=prefix.replace("%", data.percent_sign),
                suffix=suffix.replace("%", data.percent_sign),
            )
    raise _unknown_style(ArgumentKind.NUMBER, style, tuple(NumberStyle))


def integer_format(value: object, data: LocaleData, style: str | None = None) -> str:
    """Render ``{0,integer}``: half-even to zero fraction digits.

    ``plain`` suppresses grouping.
    """
    number = _require_number(value, ArgumentKind.INTEGER)
    if style not in (None, "plain"):
        raise _unknown_style(ArgumentKind.INTEGER, style, ("plain",))
    return render_decimal(number, data, maximum_fraction_digits=0, use_grouping=style is None)


def _place_currency(affix: str, display: str, *, before_number: bool) -> str:
    if "\xa4" not in affix:
        return affix
    text = _CURRENCY_SIGNS.sub(lambda _m: display, affix)
    # Currency spacing: letters never touch the digits
    if before_number and text.endswith(display) and display[-1:].isalpha():
        return text + _NBSP
    if not before_number and text.startswith(display) and display[:1].isalpha():
        return _NBSP + text
    return text


def currency_format(value: object, data: LocaleData, style: str | None = None) -> str:
    """Render a ``{0,currency[,style]}`` placeholder.

    Fraction digits come from ``data.currency_digits`` (2 when the code is
    absent). A Money value names its currency; a bare number, or Money
    without a code, uses ``data.default_currency``.

    Args:
        value: Money, int, float or Decimal
        data: Locale rules
        style: ``symbol`` (default), ``code`` or ``name``

    Returns:
        Localized amount

    Raises:
        TypeMismatchError: If value is not monetary, or no currency applies
        ValueError: If style is not a currency display

    Example:
        >>> from msgformatengine.runtime.locale_data import LocaleData
        >>> currency_format(Money("-5", "USD"), LocaleData("en"))
        '-$5.00'
    """
    if isinstance(value, Money):
        amount, code = value.amount, value.currency or data.default_currency
    else:
        amount, code = _require_number(value, ArgumentKind.CURRENCY), data.default_currency
    if code is None:
        raise _mismatch(ArgumentKind.CURRENCY, "Money with a currency code", value)

    display_style = style or CurrencyDisplay.SYMBOL
    if display_style not in tuple(CurrencyDisplay):
        raise _unknown_style(ArgumentKind.CURRENCY, style, tuple(CurrencyDisplay))

    digits = data.currency_digits.get(code, DEFAULT_CURRENCY_DIGITS)
    if display_style == CurrencyDisplay.NAME:
        number = render_decimal(
            amount, data, minimum_fraction_digits=digits, maximum_fraction_digits=digits
        )
        return f"{number} {data.currency_names.get(code, code)}"

    display = code if display_style == CurrencyDisplay.CODE else data.currency_symbols.get(code, code)
    prefix, suffix = split_affixes(data.currency_pattern)
    return render_decimal(
        amount,
        data,
        minimum_fraction_digits=digits,
        maximum_fraction_digits=digits,
        prefix=_place_currency(prefix, display, before_number=True),
        suffix=_place_currency(suffix, display, before_number=False),
    )


def _date_time_style(kind: ArgumentKind, style: str | None) -> str:
    chosen = style or DateTimeStyle.MEDIUM
    if chosen not in tuple(DateTimeStyle):
        raise _unknown_style(kind, style, tuple(DateTimeStyle))
    return str(chosen)


def date_format(value: object, data: LocaleData, style: str | None = None) -> str:
    """Render the date portion of a date or datetime (``{0,date[,style]}``)."""
    if not isinstance(value, date):
        raise _mismatch(ArgumentKind.DATE, "date or datetime", value)
    pattern = data.date_patterns[_date_time_style(ArgumentKind.DATE, style)]
    return format_pattern(value, pattern, data)


def time_format(value: object, data: LocaleData, style: str | None = None) -> str:
    """Render the time portion of a datetime or time (``{0,time[,style]}``)."""
    if not isinstance(value, (datetime, time)):
        raise _mismatch(ArgumentKind.TIME, "datetime or time", value)
    pattern = data.time_patterns[_date_time_style(ArgumentKind.TIME, style)]
    return format_pattern(value, pattern, data)


def _fill_glue(glue: str, time_text: str, date_text: str) -> str:
    """Substitute ``{0}`` (time) and ``{1}`` (date) into a CLDR glue pattern."""
    parts: list[str] = []
    in_quote = False
    i = 0
    while i < len(glue):
        char = glue[i]
        if char == "'":
            if glue[i + 1 : i + 2] == "'":
                parts.append("'")
                i += 2
                continue
            in_quote = not in_quote
            i += 1
        elif not in_quote and glue[i : i + 3] in ("{0}", "{1}"):
            parts.append(time_text if glue[i + 1] == "0" else date_text)
            i += 3
        else:
            parts.append(char)
            i += 1
    return "".join(parts)


def datetime_format(
    value: object,
    data: LocaleData,
    *,
    date_style: str = DateTimeStyle.MEDIUM,
    time_style: str = DateTimeStyle.MEDIUM,
    pattern: str | None = None,
) -> str:
    """Render date and time together.

    With ``pattern`` the value is rendered through that CLDR pattern (any of
    datetime, date or time, as long as the pattern only uses fields the value
    has). Otherwise the locale glue pattern for ``date_style`` joins the date
    and time parts.

    Args:
        value: datetime (date or time allowed with ``pattern``)
        data: Locale rules
        date_style: Width of the date part and of the glue pattern
        time_style: Width of the time part
        pattern: Custom CLDR pattern such as ``dd-MMMM-yyyy HH:mm:ss.SSS``

    Returns:
        Localized date-time text

    Raises:
        TypeMismatchError: If value is not a date/time value
        ValueError: If a style is unknown or the pattern is malformed

    Example:
        >>> from msgformatengine.runtime.locale_data import LocaleData
        >>> datetime_format(datetime(2024, 3, 5, 14, 7), LocaleData("en"), date_style="short",
        ...                 time_style="short")
        '3/5/24, 2:07 PM'
    """
    if pattern is not None:
        if not isinstance(value, (date, time)):
            raise _mismatch(ArgumentKind.DATE, "datetime, date or time", value)
        return format_pattern(value, pattern, data)
    if not isinstance(value, datetime):
        raise _mismatch(ArgumentKind.DATE, "datetime", value)
    date_text = date_format(value, data, date_style)
    time_text = time_format(value, data, time_style)
    return _fill_glue(data.datetime_patterns[date_style], time_text, date_text)


def plural_format(value: object, data: LocaleData, style: PluralStyle | None = None) -> str:
    """Render ``{0,plural,...}``: the selected branch text, verbatim.

    Numeric selectors are tried in declared order, then the branch for the
    CLDR category of the value, then ``other``.

    Raises:
        TypeMismatchError: If value is not a number
        ValueError: If style is not a parsed PluralStyle
    """
    number = _require_number(value, ArgumentKind.PLURAL)
    if not isinstance(style, PluralStyle):
        msg = f"plural placeholders need a PluralStyle, got {style!r}"
        raise ValueError(msg)  # noqa: TRY004
    if not number.is_finite():
        return style.other.text
    return style.select(number, select_plural_category(number, data)).text


FORMATTERS: Mapping[ArgumentKind, Formatter] = MappingProxyType({
    ArgumentKind.NONE: string_format,
    ArgumentKind.NUMBER: number_format,
    ArgumentKind.INTEGER: integer_format,
    ArgumentKind.CURRENCY: currency_format,
    ArgumentKind.DATE: date_format,
    ArgumentKind.TIME: time_format,
    ArgumentKind.PLURAL: plural_format,
})
