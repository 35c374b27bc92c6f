"""Babel locale lookup helpers.

Centralizes the conversion from LocaleIdentifier to Babel's Locale so that
CLDR data is parsed once per identifier.

Python 3.13+.
"""

from __future__ import annotations

import functools
from typing import TYPE_CHECKING

from msgformatengine.constants import MAX_LOCALE_CACHE_SIZE
from msgformatengine.core import LocaleIdentifier

if TYPE_CHECKING:
    from babel import Locale

__all__ = ["get_babel_locale"]


@functools.lru_cache(maxsize=MAX_LOCALE_CACHE_SIZE)
def get_babel_locale(locale: LocaleIdentifier | str) -> Locale:
    """Get a Babel Locale object with caching.

    Parses the locale once and caches the result. This avoids repeated
    parsing overhead when building locale data for many requests.

    Thread-safe via lru_cache internal locking.

    Args:
        locale: LocaleIdentifier or locale string (BCP-47 or POSIX)

    Returns:
        Babel Locale object

    Raises:
        babel.core.UnknownLocaleError: If CLDR has no data for the locale
        LocaleParseError: If a string locale is malformed

    Example:
        >>> get_babel_locale("bn-BD").territory
        'BD'
    """
    # Lazy import: Babel loads CLDR data at import time; defer until needed
    from babel import Locale  # noqa: PLC0415

    return Locale.parse(LocaleIdentifier.coerce(locale).canonical)
