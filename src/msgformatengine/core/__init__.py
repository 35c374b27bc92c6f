"""Core utilities shared across syntax and runtime layers.

This package provides foundational types that the catalog, the locale data
provider and the compiled-message cache all key on. By isolating them here
we maintain a clean dependency graph:

    core <- syntax <- runtime <- localization

Exports:
    LocaleIdentifier: Immutable locale value with canonical form
    fallback_chain: Most-specific-first resolution order for a locale
    normalize_locale: BCP-47 to POSIX separator conversion

Python 3.13+.
"""

from .locale_identifier import LocaleIdentifier, fallback_chain, normalize_locale

__all__ = ["LocaleIdentifier", "fallback_chain", "normalize_locale"]
