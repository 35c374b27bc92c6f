"""CLDR plural category selection using Babel.

The rules come from LocaleData (CLDR rule text per category), so hosts that
build LocaleData by hand pick their own rules and CLDR-backed data carries
Babel's. Babel evaluates the operands (n, i, v, w, f, t, e).

Python 3.13+. Depends on Babel for CLDR rule evaluation.

Reference: https://www.unicode.org/cldr/charts/47/supplemental/language_plural_rules.html
"""

from __future__ import annotations

import functools
from decimal import Decimal
from typing import TYPE_CHECKING

from babel.plural import PluralRule

from msgformatengine.constants import MAX_LOCALE_CACHE_SIZE

if TYPE_CHECKING:
    from .locale_data import LocaleData

__all__ = ["PLURAL_CATEGORIES", "select_plural_category"]

PLURAL_CATEGORIES = frozenset({"zero", "one", "two", "few", "many", "other"})


@functools.lru_cache(maxsize=MAX_LOCALE_CACHE_SIZE)
def _compiled_rule(rules: tuple[tuple[str, str], ...]) -> PluralRule:
    return PluralRule(dict(rules))


def select_plural_category(n: int | float | Decimal, data: LocaleData) -> str:
    """Select the CLDR plural category of ``n`` under the locale's rules.

    Args:
        n: Number to categorize
        data: Locale whose ``plural_rules`` apply

    Returns:
        Plural category: "zero", "one", "two", "few", "many", or "other"

    Examples:
        >>> from msgformatengine.runtime.locale_data import LocaleData
        >>> select_plural_category(1, LocaleData("en"))
        'one'
        >>> select_plural_category(5, LocaleData("en"))
        'other'
    """
    rule = _compiled_rule(tuple(sorted(data.plural_rules.items())))
    return rule(n)
