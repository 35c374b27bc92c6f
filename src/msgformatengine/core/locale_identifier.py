"""Immutable locale identifiers and fallback chains.

A LocaleIdentifier is the key every other component resolves against:
locale data, catalog entries and the compiled-message cache. Identifiers are
validated on construction, so an instance is never partially initialized.

Canonical form is ``language[_Script][_REGION][_variant]``. Both ``-`` and
``_`` separators are accepted by :meth:`LocaleIdentifier.parse`.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import functools
from dataclasses import dataclass, replace

from msgformatengine.constants import DEFAULT_LOCALE, MAX_LOCALE_CACHE_SIZE
from msgformatengine.diagnostics import ErrorTemplate, LocaleParseError

__all__ = ["LocaleIdentifier", "fallback_chain", "normalize_locale"]


def normalize_locale(locale_code: str) -> str:
    """Convert BCP-47 separators to the POSIX underscore form.

    Example:
        >>> normalize_locale("en-US")
        'en_US'
    """
    return locale_code.replace("-", "_")


def _is_alpha(text: str) -> bool:
    return text.isascii() and text.isalpha()


def _is_variant(text: str) -> bool:
    if not (text.isascii() and text.isalnum()):
        return False
    return 5 <= len(text) <= 8 or (len(text) == 4 and text[0].isdigit())


@dataclass(frozen=True, slots=True)
class LocaleIdentifier:
    """Immutable (language, script, region, variant) value.

    Two identifiers are equal iff all fields match exactly. Fields must
    already be in canonical case; use :meth:`parse` for user input.

    Attributes:
        language: 2-3 lowercase ASCII letters
        script: 4 letters, titlecase (``Hant``), or None
        region: 2 uppercase letters or 3 digits, or None
        variant: one or more 4-8 character alphanumeric subtags joined by ``_``

    Example:
        >>> loc = LocaleIdentifier.parse("zh-hant-tw")
        >>> str(loc)
        'zh_Hant_TW'
        >>> loc.to_bcp47()
        'zh-Hant-TW'
    """

    language: str
    script: str | None = None
    region: str | None = None
    variant: str | None = None

    def __post_init__(self) -> None:
        """Validate subtags.

        Raises:
            LocaleParseError: If any subtag is malformed or not canonical case
        """
        raw = "_".join(p for p in (self.language, self.script, self.region, self.variant) if p)
        if not self.language:
            raise LocaleParseError(
                ErrorTemplate.invalid_locale(raw, "language subtag is required"),
                input_value=raw,
            )
        if not (_is_alpha(self.language) and 2 <= len(self.language) <= 3):
            raise LocaleParseError(
                ErrorTemplate.invalid_locale(raw, f"language {self.language!r} must be 2-3 letters"),
                input_value=raw,
            )
        if self.language != self.language.lower():
            raise LocaleParseError(
                ErrorTemplate.invalid_locale(raw, "language must be lowercase"),
                input_value=raw,
            )
        if self.script is not None and not (
            _is_alpha(self.script) and len(self.script) == 4 and self.script == self.script.title()
        ):
            raise LocaleParseError(
                ErrorTemplate.invalid_locale(raw, f"script {self.script!r} must be 4 letters"),
                input_value=raw,
            )
        if self.region is not None and not (
            (_is_alpha(self.region) and len(self.region) == 2 and self.region.isupper())
            or (self.region.isascii() and self.region.isdigit() and len(self.region) == 3)
        ):
            raise LocaleParseError(
                ErrorTemplate.invalid_locale(
                    raw, f"region {self.region!r} must be 2 letters or 3 digits"
                ),
                input_value=raw,
            )
        if self.variant is not None and not all(
            _is_variant(part) for part in self.variant.split("_")
        ):
            raise LocaleParseError(
                ErrorTemplate.invalid_locale(raw, f"variant {self.variant!r} is malformed"),
                input_value=raw,
            )

    @classmethod
    def parse(cls, locale_code: str) -> LocaleIdentifier:
        """Parse a locale string such as ``en_US``, ``bn-BD`` or ``zh_Hant_TW``.

        Args:
            locale_code: Locale string with ``_`` or ``-`` separators

        Returns:
            Validated LocaleIdentifier in canonical case

        Raises:
            LocaleParseError: If the language subtag is absent or not
                alphabetic, or any later subtag is malformed
        """
        return _parse_cached(locale_code)

    @classmethod
    def coerce(cls, locale: LocaleIdentifier | str) -> LocaleIdentifier:
        """Return ``locale`` unchanged if already parsed, else parse it."""
        if isinstance(locale, LocaleIdentifier):
            return locale
        return cls.parse(locale)

    @property
    def canonical(self) -> str:
        """Canonical ``language[_Script][_REGION][_variant]`` string."""
        return "_".join(p for p in (self.language, self.script, self.region, self.variant) if p)

    def to_bcp47(self) -> str:
        """Hyphenated form for interchange (``en-US``)."""
        return self.canonical.replace("_", "-")

    def fallback_chain(
        self, default: LocaleIdentifier | str | None = DEFAULT_LOCALE
    ) -> tuple[LocaleIdentifier, ...]:
        """Shortcut for :func:`fallback_chain` on this identifier."""
        return fallback_chain(self, default)

    def __str__(self) -> str:
        return self.canonical


@functools.lru_cache(maxsize=MAX_LOCALE_CACHE_SIZE)
def _parse_cached(locale_code: str) -> LocaleIdentifier:
    if not isinstance(locale_code, str):
        msg = f"Locale code must be a string, got {type(locale_code).__name__}"
        raise TypeError(msg)

    parts = normalize_locale(locale_code).split("_")
    if not parts[0]:
        raise LocaleParseError(
            ErrorTemplate.invalid_locale(locale_code, "language subtag is required"),
            input_value=locale_code,
        )
    if any(not part for part in parts):
        raise LocaleParseError(
            ErrorTemplate.invalid_locale(locale_code, "empty subtag"),
            input_value=locale_code,
        )
    if not _is_alpha(parts[0]):
        raise LocaleParseError(
            ErrorTemplate.invalid_locale(locale_code, "language subtag must be alphabetic"),
            input_value=locale_code,
        )

    language = parts[0].lower()
    rest = parts[1:]
    script = region = None

    if rest and len(rest[0]) == 4 and _is_alpha(rest[0]):
        script = rest.pop(0).title()
    if rest and (
        (len(rest[0]) == 2 and _is_alpha(rest[0]))
        or (len(rest[0]) == 3 and rest[0].isascii() and rest[0].isdigit())
    ):
        region = rest.pop(0).upper()
    variant = "_".join(rest) if rest else None

    return LocaleIdentifier(language=language, script=script, region=region, variant=variant)


def fallback_chain(
    locale: LocaleIdentifier | str,
    default: LocaleIdentifier | str | None = DEFAULT_LOCALE,
) -> tuple[LocaleIdentifier, ...]:
    """Build the resolution order for ``locale``, most specific first.

    Order: full -> drop variant -> drop script -> drop region (script kept)
    -> language only -> the default's own chain. Duplicates are removed while
    preserving first occurrence.

    Args:
        locale: Requested locale
        default: Locale appended at the end (None for no default)

    Returns:
        Tuple of distinct identifiers

    Example:
        >>> [str(x) for x in fallback_chain("zh_Hant_TW", "en_US")]
        ['zh_Hant_TW', 'zh_TW', 'zh_Hant', 'zh', 'en_US', 'en']
    """
    loc = LocaleIdentifier.coerce(locale)
    candidates = [
        loc,
        replace(loc, variant=None),
        replace(loc, variant=None, script=None),
        replace(loc, variant=None, region=None),
        LocaleIdentifier(loc.language),
    ]
    if default is not None:
        default_id = LocaleIdentifier.coerce(default)
        candidates.extend(fallback_chain(default_id, None))
    return tuple(dict.fromkeys(candidates))
