"""Standalone formatting conveniences.

Format a single value for a locale without compiling a template: the
direct number, currency and date formatter calls hosts make outside of
messages. Each wraps the matching formatter with a provider lookup.

Example:
    >>> format_number(345987.246, "en_US")
    '345,987.246'
    >>> format_datetime(datetime(2024, 3, 5, 14, 7, 9), "en_US", pattern="dd-MMMM-yyyy HH:mm:ss.SSS")
    '05-March-2024 14:07:09.000'

Python 3.13+. Uses Babel (through the shared CLDR provider) by default.
"""

from __future__ import annotations

import logging
from datetime import date, datetime, time
from decimal import Decimal
from typing import TYPE_CHECKING

from msgformatengine.enums import DateTimeStyle

from .formatters import (
    currency_format,
    date_format,
    datetime_format,
    integer_format,
    number_format,
    time_format,
)
from .provider import cldr_provider

if TYPE_CHECKING:
    from msgformatengine.core import LocaleIdentifier

    from .locale_data import LocaleData
    from .provider import LocaleDataProvider
    from .value_types import Money

__all__ = [
    "currency_display_name",
    "format_currency",
    "format_date",
    "format_datetime",
    "format_integer",
    "format_number",
    "format_percent",
    "format_time",
]

logger = logging.getLogger(__name__)


def _data(locale: LocaleIdentifier | str, provider: LocaleDataProvider | None) -> LocaleData:
    return (provider or cldr_provider()).data_for(locale)


def format_number(
    value: int | float | Decimal,
    locale: LocaleIdentifier | str,
    style: str | None = None,
    *,
    provider: LocaleDataProvider | None = None,
) -> str:
    """Format a number with the locale's separators and digits.

    Args:
        value: Number to format
        locale: Target locale
        style: None, ``integer``, ``percent``, ``currency`` or ``plain``
        provider: Locale data source (shared CLDR provider when omitted)

    Returns:
        Localized number with at most 3 fraction digits

    Raises:
        TypeMismatchError: If value is not a number
        UnsupportedLocaleError: If no locale data resolves
    """
    return number_format(value, _data(locale, provider), style)


def format_integer(
    value: int | float | Decimal,
    locale: LocaleIdentifier | str,
    style: str | None = None,
    *,
    provider: LocaleDataProvider | None = None,
) -> str:
    """Format a number rounded half-even to a whole number."""
    return integer_format(value, _data(locale, provider), style)


def format_percent(
    value: int | float | Decimal,
    locale: LocaleIdentifier | str,
    *,
    provider: LocaleDataProvider | None = None,
) -> str:
    """Format a ratio as a percentage (``0.25`` -> ``25%``)."""
    return number_format(value, _data(locale, provider), "percent")


def format_currency(
    value: Money | int | float | Decimal,
    locale: LocaleIdentifier | str,
    style: str | None = None,
    *,
    provider: LocaleDataProvider | None = None,
) -> str:
    """Format a monetary amount.

    Bare numbers use the locale's default currency (the region's tender).

    Args:
        value: Money or number
        locale: Target locale
        style: ``symbol`` (default), ``code`` or ``name``
        provider: Locale data source

    Returns:
        Localized amount with the currency's minor-unit digits

    Raises:
        TypeMismatchError: If value is not monetary or no currency applies
        UnsupportedLocaleError: If no locale data resolves
    """
    return currency_format(value, _data(locale, provider), style)


def format_date(
    value: date,
    locale: LocaleIdentifier | str,
    style: str = DateTimeStyle.MEDIUM,
    *,
    provider: LocaleDataProvider | None = None,
) -> str:
    """Format the date portion of a date or datetime."""
    return date_format(value, _data(locale, provider), style)


def format_time(
    value: datetime | time,
    locale: LocaleIdentifier | str,
    style: str = DateTimeStyle.MEDIUM,
    *,
    provider: LocaleDataProvider | None = None,
) -> str:
    """Format the time portion of a datetime or time."""
    return time_format(value, _data(locale, provider), style)


def format_datetime(
    value: datetime | date | time,
    locale: LocaleIdentifier | str,
    date_style: str = DateTimeStyle.MEDIUM,
    time_style: str = DateTimeStyle.MEDIUM,
    *,
    pattern: str | None = None,
    provider: LocaleDataProvider | None = None,
) -> str:
    """Format date and time joined by the locale's glue pattern.

    Args:
        value: datetime (date or time allowed with ``pattern``)
        locale: Target locale
        date_style: Date width; also selects the glue pattern
        time_style: Time width
        pattern: Custom CLDR pattern, rendered with locale names and digits
        provider: Locale data source

    Returns:
        Localized date-time text

    Raises:
        TypeMismatchError: If value is not a date/time value
        ValueError: If a style or pattern is invalid
        UnsupportedLocaleError: If no locale data resolves
    """
    return datetime_format(
        value,
        _data(locale, provider),
        date_style=date_style,
        time_style=time_style,
        pattern=pattern,
    )


def currency_display_name(
    locale: LocaleIdentifier | str,
    currency: str | None = None,
    *,
    provider: LocaleDataProvider | None = None,
) -> str:
    """Display name of ``currency`` (default: the locale's own) in the locale.

    Codes the locale has no name for are returned as given.

    Raises:
        ValueError: If ``currency`` is omitted and the locale has no default currency
        UnsupportedLocaleError: If no locale data resolves

    Example:
        >>> currency_display_name("en_US", "BDT")
        'Bangladeshi Taka'
    """
    data = _data(locale, provider)
    code = currency.upper() if currency else data.default_currency
    if code is None:
        msg = f"Locale {data.locale} has no default currency; pass a currency code"
        raise ValueError(msg)
    name = data.currency_names.get(code)
    if name is None:
        logger.debug("No display name for %s in %s", code, data.locale)
        return code
    return name
