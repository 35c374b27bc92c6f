"""Immutable per-locale formatting rules.

LocaleData is the only input formatters consult for locale behavior: digit
glyphs, separators, grouping, number/percent/currency patterns, date and
time patterns, name tables, currency tables and plural rules.

Instances are either constructed directly (tests, hosts with their own
data) or built from CLDR through Babel with :meth:`LocaleData.from_cldr`.
Field defaults describe English so a minimal record only needs the fields
that differ.

Architecture:
    - LocaleData: frozen record, mappings wrapped read-only
    - from_cldr(): Babel extraction, never mutates Babel state
    - cldr_loader(): loader callable for LocaleDataProvider (None if unknown)

Python 3.13+. Uses Babel for CLDR data.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING

from msgformatengine.core import LocaleIdentifier
from msgformatengine.enums import DateTimeStyle

if TYPE_CHECKING:
    from babel import Locale

__all__ = ["LocaleData", "cldr_loader", "digits_for_numbering_system"]

logger = logging.getLogger(__name__)

_STYLES = tuple(str(s) for s in DateTimeStyle)
_NAME_WIDTHS = ("wide", "abbreviated", "narrow")

# Zero glyph of each CLDR decimal numbering system; the other nine follow
# consecutively in Unicode.
_NUMBERING_SYSTEM_ZEROS: Mapping[str, str] = MappingProxyType({
    "latn": "0",
    "adlm": "\U0001e950",
    "arab": "٠",
    "arabext": "۰",
    "beng": "০",
    "deva": "०",
    "fullwide": "０",
    "gujr": "૦",
    "guru": "੦",
    "khmr": "០",
    "knda": "೦",
    "laoo": "໐",
    "mlym": "൦",
    "mtei": "꯰",
    "mymr": "၀",
    "nkoo": "߀",
    "olck": "᱐",
    "orya": "୦",
    "tamldec": "௦",
    "telu": "౦",
    "thai": "๐",
    "tibt": "༠",
})

_EN_MONTHS = MappingProxyType({
    "wide": (
        "January", "February", "March", "April", "May", "June",
        "July", "August", "September", "October", "November", "December",
    ),
    "abbreviated": (
        "Jan", "Feb", "Mar", "Apr", "May", "Jun",
        "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
    ),
    "narrow": ("J", "F", "M", "A", "M", "J", "J", "A", "S", "O", "N", "D"),
})

# Monday first, matching datetime.weekday()
_EN_DAYS = MappingProxyType({
    "wide": ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"),
    "abbreviated": ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"),
    "narrow": ("M", "T", "W", "T", "F", "S", "S"),
})

_EN_DATE_PATTERNS = MappingProxyType({
    "short": "M/d/yy",
    "medium": "MMM d, y",
    "long": "MMMM d, y",
    "full": "EEEE, MMMM d, y",
})

_EN_TIME_PATTERNS = MappingProxyType({
    "short": "h:mm a",
    "medium": "h:mm:ss a",
    "long": "h:mm:ss a z",
    "full": "h:mm:ss a zzzz",
})

_EN_DATETIME_PATTERNS = MappingProxyType({
    "short": "{1}, {0}",
    "medium": "{1}, {0}",
    "long": "{1} 'at' {0}",
    "full": "{1} 'at' {0}",
})


def digits_for_numbering_system(numbering_system: str) -> str:
    """Return the ten digit glyphs of a CLDR decimal numbering system.

    Args:
        numbering_system: CLDR system id (``latn``, ``beng``, ``arab``, ...)

    Returns:
        String of ten glyphs for 0-9

    Raises:
        KeyError: If the system is not a known decimal numbering system

    Example:
        >>> digits_for_numbering_system("beng")
        '০১২৩৪৫৬৭৮৯'
    """
    zero = ord(_NUMBERING_SYSTEM_ZEROS[numbering_system])
    return "".join(chr(zero + i) for i in range(10))


def _freeze_names(
    table: Mapping[str, Sequence[str]], expected: int, label: str
) -> Mapping[str, tuple[str, ...]]:
    frozen: dict[str, tuple[str, ...]] = {}
    for width, names in table.items():
        names_tuple = tuple(names)
        if len(names_tuple) != expected:
            msg = f"{label}[{width!r}] must have {expected} names, got {len(names_tuple)}"
            raise ValueError(msg)
        frozen[width] = names_tuple
    return MappingProxyType(frozen)


@dataclass(frozen=True, slots=True, eq=False)
class LocaleData:
    """Immutable formatting rules for one locale.

    Number patterns use CLDR syntax: ``#`` and ``0`` are digits, ``,``
    marks grouping, ``.`` the decimal point, ``%`` the percent sign and
    ``¤`` the currency. Only the prefix and suffix around the digits are
    taken from ``percent_pattern`` and ``currency_pattern``; grouping always
    comes from ``grouping_size``/``secondary_grouping_size``.

    Attributes:
        locale: Identifier this record was registered for
        digits: Ten glyphs for 0-9
        decimal_symbol: Decimal separator
        group_symbol: Grouping separator
        minus_sign: Sign prefixed to negative numbers
        percent_sign: Replaces ``%`` in percent_pattern
        grouping_size: Digits in the group nearest the decimal point
        secondary_grouping_size: Digits in every further group (2 for Indian style)
        percent_pattern: CLDR percent pattern (affixes only)
        currency_pattern: CLDR currency pattern (affixes only)
        date_patterns: CLDR date pattern per style
        time_patterns: CLDR time pattern per style
        datetime_patterns: Glue pattern per style, ``{1}`` date and ``{0}`` time
        months: Twelve month names per width (wide, abbreviated, narrow)
        days: Seven weekday names per width, Monday first
        periods: (AM, PM) markers
        eras: (BC, AD) abbreviations
        default_currency: ISO 4217 code used for bare numbers in currency placeholders
        currency_symbols: ISO code -> symbol
        currency_names: ISO code -> display name
        currency_digits: ISO code -> minor units (absent codes use 2)
        plural_rules: CLDR plural category -> rule text
    """

    locale: LocaleIdentifier
    digits: str = "0123456789"
    decimal_symbol: str = "."
    group_symbol: str = ","
    minus_sign: str = "-"
    percent_sign: str = "%"
    grouping_size: int = 3
    secondary_grouping_size: int = 3
    percent_pattern: str = "#,##0%"
    currency_pattern: str = "\xa4#,##0.00"
    date_patterns: Mapping[str, str] = field(default_factory=lambda: _EN_DATE_PATTERNS)
    time_patterns: Mapping[str, str] = field(default_factory=lambda: _EN_TIME_PATTERNS)
    datetime_patterns: Mapping[str, str] = field(default_factory=lambda: _EN_DATETIME_PATTERNS)
    months: Mapping[str, tuple[str, ...]] = field(default_factory=lambda: _EN_MONTHS)
    days: Mapping[str, tuple[str, ...]] = field(default_factory=lambda: _EN_DAYS)
    periods: tuple[str, str] = ("AM", "PM")
    eras: tuple[str, str] = ("BC", "AD")
    default_currency: str | None = None
    currency_symbols: Mapping[str, str] = field(default_factory=lambda: {"USD": "$"})
    currency_names: Mapping[str, str] = field(default_factory=lambda: {"USD": "US Dollar"})
    currency_digits: Mapping[str, int] = field(default_factory=dict)
    plural_rules: Mapping[str, str] = field(default_factory=lambda: {"one": "i = 1 and v = 0"})

    def __post_init__(self) -> None:
        """Validate shape and freeze mappings.

        Raises:
            ValueError: If digits, grouping sizes, patterns or name tables are malformed
        """
        object.__setattr__(self, "locale", LocaleIdentifier.coerce(self.locale))
        if len(self.digits) != 10:
            msg = f"digits must hold exactly 10 glyphs, got {len(self.digits)}"
            raise ValueError(msg)
        if self.grouping_size <= 0 or self.secondary_grouping_size <= 0:
            msg = "grouping sizes must be positive"
            raise ValueError(msg)

        for name in ("date_patterns", "time_patterns", "datetime_patterns"):
            table = dict(getattr(self, name))
            missing = [style for style in _STYLES if style not in table]
            if missing:
                msg = f"{name} is missing styles: {', '.join(missing)}"
                raise ValueError(msg)
            object.__setattr__(self, name, MappingProxyType(table))

        object.__setattr__(self, "months", _freeze_names(self.months, 12, "months"))
        object.__setattr__(self, "days", _freeze_names(self.days, 7, "days"))
        object.__setattr__(self, "periods", tuple(self.periods))
        object.__setattr__(self, "eras", tuple(self.eras))
        for name in ("currency_symbols", "currency_names", "currency_digits", "plural_rules"):
            object.__setattr__(self, name, MappingProxyType(dict(getattr(self, name))))

    def month_name(self, month: int, width: str) -> str:
        """Name of ``month`` (1-12), falling back to the wide table."""
        table = self.months.get(width) or self.months["wide"]
        return table[month - 1]

    def day_name(self, weekday: int, width: str) -> str:
        """Name of ``weekday`` (0 = Monday), falling back to the wide table."""
        table = self.days.get(width) or self.days["wide"]
        return table[weekday]

    def localize_digits(self, text: str) -> str:
        """Replace ASCII digits in ``text`` with this locale's glyphs."""
        if self.digits == "0123456789":
            return text
        return text.translate(str.maketrans("0123456789", self.digits))

    @classmethod
    def from_cldr(cls, locale: LocaleIdentifier | str) -> LocaleData:
        """Build LocaleData from Babel's CLDR database.

        Digits follow the locale's default numbering system (Bengali digits
        for ``bn``); separators come from that system when CLDR defines
        them, else from ``latn``.

        Args:
            locale: Locale to extract

        Returns:
            LocaleData registered under ``locale``

        Raises:
            babel.core.UnknownLocaleError: If CLDR has no data for the locale,
                Babel rejects the identifier, or Babel would substitute a
                script, region or variant the locale names
        """
        # Lazy import: Babel loads CLDR data at import time; defer until needed
        from babel import numbers as babel_numbers  # noqa: PLC0415
        from babel.core import UnknownLocaleError  # noqa: PLC0415

        from msgformatengine.locale_utils import get_babel_locale  # noqa: PLC0415

        loc = LocaleIdentifier.coerce(locale)
        try:
            babel_locale = get_babel_locale(loc)
        except ValueError as e:
            raise UnknownLocaleError(loc.canonical) from e
        if not _covers(babel_locale, loc):
            # Babel reduced the request (en_999 -> en_US); let the fallback chain do it
            raise UnknownLocaleError(loc.canonical)

        numbering = getattr(babel_locale, "default_numbering_system", "latn") or "latn"
        try:
            digits = digits_for_numbering_system(numbering)
        except KeyError:
            logger.warning(
                "Numbering system '%s' of %s is not decimal; using latn digits", numbering, loc
            )
            numbering = "latn"
            digits = digits_for_numbering_system(numbering)

        def symbol(getter: Callable[..., str]) -> str:
            try:
                return getter(babel_locale, numbering_system=numbering)
            except babel_numbers.UnsupportedNumberingSystemError:
                return getter(babel_locale)

        decimal_pattern = babel_locale.decimal_formats.get(None)
        primary, secondary = decimal_pattern.grouping if decimal_pattern is not None else (3, 3)
        percent_pattern = babel_locale.percent_formats.get(None)
        currency_pattern = babel_locale.currency_formats.get("standard")

        currency_symbols = dict(babel_locale.currency_symbols)
        precisions = {code: babel_numbers.get_currency_precision(code) for code in currency_symbols}
        currency_digits = {code: digits for code, digits in precisions.items() if digits != 2}

        default_currency = None
        if loc.region is not None:
            currencies = babel_numbers.get_territory_currencies(loc.region, tender=True)
            default_currency = currencies[0] if currencies else None

        periods = babel_locale.periods
        eras = babel_locale.eras.get("abbreviated", {})

        data = cls(
            locale=loc,
            digits=digits,
            decimal_symbol=symbol(babel_numbers.get_decimal_symbol),
            group_symbol=symbol(babel_numbers.get_group_symbol),
            minus_sign=symbol(babel_numbers.get_minus_sign_symbol),
            percent_sign=symbol(babel_numbers.get_percent_symbol),
            grouping_size=primary if primary < 1000 else 3,
            secondary_grouping_size=secondary if secondary < 1000 else primary,
            percent_pattern=percent_pattern.pattern if percent_pattern is not None else "#,##0%",
            currency_pattern=(
                currency_pattern.pattern if currency_pattern is not None else "\xa4#,##0.00"
            ),
            date_patterns={s: babel_locale.date_formats[s].pattern for s in _STYLES},
            time_patterns={s: babel_locale.time_formats[s].pattern for s in _STYLES},
            datetime_patterns={s: str(babel_locale.datetime_formats[s]) for s in _STYLES},
            months={
                w: tuple(babel_locale.months["format"][w][m] for m in range(1, 13))
                for w in _NAME_WIDTHS
            },
            days={
                w: tuple(babel_locale.days["format"][w][d] for d in range(7))
                for w in _NAME_WIDTHS
            },
            periods=(periods.get("am", "AM"), periods.get("pm", "PM")),
            eras=(eras.get(0, "BC"), eras.get(1, "AD")),
            default_currency=default_currency,
            currency_symbols=currency_symbols,
            currency_names=dict(babel_locale.currencies),
            currency_digits=currency_digits,
            plural_rules=dict(babel_locale.plural_form.rules),
        )
        logger.debug("Built CLDR locale data for %s (numbering=%s)", loc, numbering)
        return data


def cldr_loader(locale: LocaleIdentifier) -> LocaleData | None:
    """Loader for LocaleDataProvider that builds entries from CLDR.

    Returns None when CLDR has no data for ``locale`` so the provider moves on
    to the next identifier in the fallback chain.
    """
    from babel.core import UnknownLocaleError  # noqa: PLC0415

    try:
        return LocaleData.from_cldr(locale)
    except UnknownLocaleError:
        logger.debug("CLDR has no data for %s", locale)
        return None


def _covers(babel_locale: Locale, locale: LocaleIdentifier) -> bool:
    """True when Babel kept the script, region and variant ``locale`` names.

    Babel may add a script (``zh_TW`` -> ``zh_Hant_TW``) or canonicalize a
    language alias, but must not drop or replace a requested subtag.
    """
    requested = (
        (locale.script, babel_locale.script),
        (locale.region, babel_locale.territory),
        (locale.variant, babel_locale.variant),
    )
    return all(
        wanted is None or (got is not None and wanted.lower() == got.lower())
        for wanted, got in requested
    )
