"""Decimal rendering over LocaleData.

Turns a Decimal into locale text: half-even rounding to a fraction range,
primary/secondary grouping, locale separators, minus sign and digit glyphs.
CLDR number patterns are consulted only for their prefix and suffix
(``¤#,##0.00`` -> prefix ``¤``, suffix ``""``).

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import functools
from decimal import ROUND_HALF_EVEN, Decimal, localcontext
from typing import TYPE_CHECKING

from msgformatengine.constants import MAX_LOCALE_CACHE_SIZE

if TYPE_CHECKING:
    from .locale_data import LocaleData

__all__ = ["render_decimal", "split_affixes", "to_decimal"]

_NUMBER_CHARS = frozenset("#0123456789,.@")

_INFINITY = "∞"
_NAN = "NaN"


def to_decimal(value: int | float | Decimal) -> Decimal:
    """Convert a numeric argument to Decimal without binary float noise.

    Floats go through ``repr`` so ``345987.246`` stays ``345987.246``.
    """
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        return Decimal(repr(value))
    return Decimal(value)


@functools.lru_cache(maxsize=MAX_LOCALE_CACHE_SIZE)
def split_affixes(pattern: str) -> tuple[str, str]:
    """Split a CLDR number pattern into (prefix, suffix).

    Only the positive subpattern (before an unquoted ``;``) is used. Quoted
    literals are unquoted and ``''`` yields an apostrophe.

    Example:
        >>> split_affixes("#,##0.00\\xa0¤")
        ('', '\\xa0¤')
        >>> split_affixes("¤#,##0.00;(¤#,##0.00)")
        ('¤', '')
    """
    prefix: list[str] = []
    suffix: list[str] = []
    target = prefix
    in_quote = False
    seen_number = False
    i = 0
    while i < len(pattern):
        char = pattern[i]
        if char == "'":
            if i + 1 < len(pattern) and pattern[i + 1] == "'":
                target.append("'")
                i += 2
                continue
            in_quote = not in_quote
        elif in_quote:
            target.append(char)
        elif char == ";":
            break
        elif char in _NUMBER_CHARS:
            if not seen_number:
                seen_number = True
                target = suffix
            elif suffix:
                # Number characters after suffix text are literal
                suffix.append(char)
        else:
            target.append(char)
        i += 1
    return "".join(prefix), "".join(suffix)


def _group(integer_digits: str, primary: int, secondary: int, separator: str) -> str:
    if len(integer_digits) <= primary:
        return integer_digits
    groups = [integer_digits[-primary:]]
    rest = integer_digits[:-primary]
    while rest:
        groups.append(rest[-secondary:])
        rest = rest[:-secondary]
    return separator.join(reversed(groups))


def render_decimal(
    value: Decimal,
    data: LocaleData,
    *,
    minimum_fraction_digits: int = 0,
    maximum_fraction_digits: int = 3,
    use_grouping: bool = True,
    prefix: str = "",
    suffix: str = "",
) -> str:
    """Render ``value`` with the locale's symbols and digits.

    Rounds half-to-even to ``maximum_fraction_digits``, then trims trailing
    fraction zeros down to ``minimum_fraction_digits``. The minus sign goes
    before ``prefix`` so ``-5`` in a ``¤#,##0.00`` pattern reads ``-$5.00``.
    A value that rounds to zero is never signed.

    Args:
        value: Number to render
        data: Locale rules (symbols, grouping, digits)
        minimum_fraction_digits: Fraction digits always shown
        maximum_fraction_digits: Rounding position
        use_grouping: Insert group separators
        prefix: Text before the digits (already localized)
        suffix: Text after the digits (already localized)

    Returns:
        Localized number text

    Raises:
        ValueError: If the fraction digit bounds are negative or inverted
    """
    if minimum_fraction_digits < 0 or maximum_fraction_digits < minimum_fraction_digits:
        msg = (
            "fraction digits must satisfy 0 <= minimum <= maximum, got "
            f"{minimum_fraction_digits}..{maximum_fraction_digits}"
        )
        raise ValueError(msg)

    if value.is_nan():
        return f"{prefix}{_NAN}{suffix}"
    sign = data.minus_sign if value.is_signed() else ""
    if value.is_infinite():
        return f"{sign}{prefix}{_INFINITY}{suffix}"

    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, value.adjusted() + maximum_fraction_digits + 2)
        rounded = abs(value).quantize(
            Decimal(1).scaleb(-maximum_fraction_digits), rounding=ROUND_HALF_EVEN
        )

    text = f"{rounded:f}"
    integer_part, _, fraction_part = text.partition(".")
    fraction_part = fraction_part.rstrip("0")
    if len(fraction_part) < minimum_fraction_digits:
        fraction_part = fraction_part.ljust(minimum_fraction_digits, "0")

    if rounded.is_zero():
        sign = ""

    body = data.localize_digits(integer_part)
    if use_grouping:
        body = _group(body, data.grouping_size, data.secondary_grouping_size, data.group_symbol)
    if fraction_part:
        body = f"{body}{data.decimal_symbol}{data.localize_digits(fraction_part)}"
    return f"{sign}{prefix}{body}{suffix}"
