"""Rendering runtime package.

Provides locale data and its provider, the per-kind formatters, the message
renderer, the compiled-message cache and the standalone format_* functions.
Depends on the syntax package for compiled messages.

Python 3.13+.
"""

from .cache import CompiledMessageCache
from .cache_config import CacheConfig
from .formatters import FORMATTERS, Formatter
from .functions import (
    currency_display_name,
    format_currency,
    format_date,
    format_datetime,
    format_integer,
    format_number,
    format_percent,
    format_time,
)
from .locale_data import LocaleData, cldr_loader
from .plural_rules import select_plural_category
from .provider import LocaleDataLoader, LocaleDataProvider, cldr_provider
from .renderer import render, render_with_data
from .value_types import ArgumentValue, Money

__all__ = [
    "FORMATTERS",
    "ArgumentValue",
    "CacheConfig",
    "CompiledMessageCache",
    "Formatter",
    "LocaleData",
    "LocaleDataLoader",
    "LocaleDataProvider",
    "Money",
    "cldr_loader",
    "cldr_provider",
    "currency_display_name",
    "format_currency",
    "format_date",
    "format_datetime",
    "format_integer",
    "format_number",
    "format_percent",
    "format_time",
    "render",
    "render_with_data",
    "select_plural_category",
]
