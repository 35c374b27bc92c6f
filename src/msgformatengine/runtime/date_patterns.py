"""CLDR date/time pattern rendering over LocaleData.

Patterns use the CLDR field letters (``y``, ``M``, ``d``, ``H``, ``a``...)
with ``'quoted'`` literal text and ``''`` for an apostrophe. Names come from
the LocaleData tables and every numeric field is rendered in the locale's
digit glyphs.

Naive values carry no zone; zone fields render them as UTC.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import functools
from datetime import date, datetime, time, timedelta
from typing import TYPE_CHECKING, TypeAlias

from msgformatengine.constants import MAX_LOCALE_CACHE_SIZE

if TYPE_CHECKING:
    from .locale_data import LocaleData

__all__ = ["format_pattern", "tokenize_pattern"]

PatternToken: TypeAlias = str | tuple[str, int]
"""Literal text, or a (field letter, repeat count) pair."""

_DATE_FIELDS = frozenset("GyYuMLdDEecQqw")
_TIME_FIELDS = frozenset("abBhHKkmsSAzvVZOxX")
_ALL_FIELDS = _DATE_FIELDS | _TIME_FIELDS

_NAME_WIDTH_BY_COUNT = {3: "abbreviated", 4: "wide", 5: "narrow"}


@functools.lru_cache(maxsize=MAX_LOCALE_CACHE_SIZE)
def tokenize_pattern(pattern: str) -> tuple[PatternToken, ...]:
    """Split a CLDR pattern into literal runs and field tokens.

    Args:
        pattern: CLDR date/time pattern such as ``dd-MMMM-yyyy HH:mm:ss.SSS``

    Returns:
        Tuple of literal strings and (letter, count) pairs

    Raises:
        ValueError: If the pattern has an unterminated quote or an unknown
            field letter

    Example:
        >>> tokenize_pattern("h 'o''clock'")
        (('h', 1), " o'clock")
    """
    tokens: list[PatternToken] = []
    literal: list[str] = []
    i = 0
    length = len(pattern)
    while i < length:
        char = pattern[i]
        if char == "'":
            if i + 1 < length and pattern[i + 1] == "'":
                literal.append("'")
                i += 2
                continue
            end = pattern.find("'", i + 1)
            # A doubled quote inside a quoted run is an apostrophe
            while end != -1 and end + 1 < length and pattern[end + 1] == "'":
                literal.append(pattern[i + 1 : end] + "'")
                i = end + 1
                end = pattern.find("'", i + 1)
            if end == -1:
                msg = f"Unterminated quote in date pattern {pattern!r}"
                raise ValueError(msg)
            literal.append(pattern[i + 1 : end])
            i = end + 1
        elif char.isascii() and char.isalpha():
            if char not in _ALL_FIELDS:
                msg = f"Unsupported field {char!r} in date pattern {pattern!r}"
                raise ValueError(msg)
            count = 1
            while i + count < length and pattern[i + count] == char:
                count += 1
            if literal:
                tokens.append("".join(literal))
                literal.clear()
            tokens.append((char, count))
            i += count
        else:
            literal.append(char)
            i += 1
    if literal:
        tokens.append("".join(literal))
    return tuple(tokens)


def _pad(value: int, width: int) -> str:
    return str(value).zfill(width)


def _utc_offset(value: datetime | time) -> timedelta:
    offset = value.utcoffset()
    return offset if offset is not None else timedelta(0)


def _offset_parts(offset: timedelta) -> tuple[str, int, int]:
    total_minutes = int(offset.total_seconds()) // 60
    sign = "-" if total_minutes < 0 else "+"
    hours, minutes = divmod(abs(total_minutes), 60)
    return sign, hours, minutes


def _zone_name(value: datetime | time) -> str:
    if value.tzinfo is None:
        return "UTC"
    name = value.tzname()
    return name if name else "UTC"


def _zone_offset(letter: str, count: int, offset: timedelta) -> str:
    sign, hours, minutes = _offset_parts(offset)
    zero = hours == 0 and minutes == 0
    match letter:
        case "Z" if count <= 3:
            return f"{sign}{hours:02d}{minutes:02d}"
        case "Z" if count == 5:
            return "Z" if zero else f"{sign}{hours:02d}:{minutes:02d}"
        case "Z" | "O" if count >= 4:
            return "GMT" if zero else f"GMT{sign}{hours:02d}:{minutes:02d}"
        case "O":
            if zero:
                return "GMT"
            return f"GMT{sign}{hours}" + (f":{minutes:02d}" if minutes else "")
        case _:
            # x / X: ISO 8601 basic (1-2, 4) or extended (3, 5) forms
            if letter == "X" and zero:
                return "Z"
            if count == 1:
                return f"{sign}{hours:02d}" + (f"{minutes:02d}" if minutes else "")
            if count in (2, 4):
                return f"{sign}{hours:02d}{minutes:02d}"
            return f"{sign}{hours:02d}:{minutes:02d}"


def _date_field(letter: str, count: int, value: date, data: LocaleData) -> str:
    match letter:
        case "G":
            era = data.eras[1] if value.year > 0 else data.eras[0]
            return era
        case "y" | "Y" | "u":
            year = value.isocalendar().year if letter == "Y" else value.year
            if count == 2:
                return _pad(year % 100, 2)
            return _pad(year, count)
        case "M" | "L":
            if count <= 2:
                return _pad(value.month, count)
            return data.month_name(value.month, _NAME_WIDTH_BY_COUNT.get(count, "wide"))
        case "d":
            return _pad(value.day, count)
        case "D":
            return _pad(value.timetuple().tm_yday, count)
        case "w":
            return _pad(value.isocalendar().week, count)
        case "Q" | "q":
            quarter = (value.month - 1) // 3 + 1
            return _pad(quarter, count) if count <= 2 else f"Q{quarter}"
        case "e" | "c" if count <= 2:
            return _pad(value.isoweekday(), count)
        case _:
            # E, and e/c with 3+ letters
            width = "abbreviated" if count <= 3 else _NAME_WIDTH_BY_COUNT.get(count, "wide")
            return data.day_name(value.weekday(), width)


def _time_field(letter: str, count: int, value: datetime | time, data: LocaleData) -> str:
    match letter:
        case "a" | "b" | "B":
            return data.periods[0] if value.hour < 12 else data.periods[1]
        case "h":
            return _pad(value.hour % 12 or 12, count)
        case "H":
            return _pad(value.hour, count)
        case "K":
            return _pad(value.hour % 12, count)
        case "k":
            return _pad(value.hour or 24, count)
        case "m":
            return _pad(value.minute, count)
        case "s":
            return _pad(value.second, count)
        case "S":
            # Fraction of a second, truncated (not rounded) to count digits
            return f"{value.microsecond:06d}"[:count].ljust(count, "0")
        case "A":
            millis = ((value.hour * 60 + value.minute) * 60 + value.second) * 1000
            return _pad(millis + value.microsecond // 1000, count)
        case "z" | "v" | "V":
            return _zone_name(value)
        case _:
            return _zone_offset(letter, count, _utc_offset(value))


def format_pattern(value: datetime | date | time, pattern: str, data: LocaleData) -> str:
    """Render ``value`` with a CLDR pattern and the locale's names and digits.

    A ``date`` has no time fields and a ``time`` has no date fields; a
    pattern asking for a field the value lacks is rejected.

    Args:
        value: datetime, date or time
        pattern: CLDR pattern
        data: Locale names, periods, eras and digits

    Returns:
        Formatted text

    Raises:
        ValueError: If the pattern is malformed or needs a field ``value`` lacks

    Example:
        >>> from msgformatengine.runtime.locale_data import LocaleData
        >>> format_pattern(datetime(2024, 3, 5, 14, 7), "dd-MMMM-yyyy HH:mm", LocaleData("en"))
        '05-March-2024 14:07'
    """
    has_date = isinstance(value, date)
    has_time = isinstance(value, (datetime, time))
    parts: list[str] = []
    for token in tokenize_pattern(pattern):
        if isinstance(token, str):
            parts.append(token)
            continue
        letter, count = token
        if letter in _DATE_FIELDS:
            if not has_date:
                msg = f"Pattern field {letter!r} needs a date, got {type(value).__name__}"
                raise ValueError(msg)
            text = _date_field(letter, count, value, data)  # type: ignore[arg-type]
        else:
            if not has_time:
                msg = f"Pattern field {letter!r} needs a time, got {type(value).__name__}"
                raise ValueError(msg)
            text = _time_field(letter, count, value, data)  # type: ignore[arg-type]
        parts.append(data.localize_digits(text) if _is_numeric(letter, count) else text)
    return "".join(parts)


def _is_numeric(letter: str, count: int) -> bool:
    if letter in "ZOxX":
        return True
    if letter in "MLQqec":
        return count <= 2
    return letter not in "GEabBzvV"
