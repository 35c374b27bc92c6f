"""Shared constants for msgformatengine.

This module provides centralized configuration constants used across the
syntax and runtime packages. Placing constants here avoids circular imports
and provides a single source of truth.

Constants are grouped by domain:
- Locale defaults: Default locale at the end of every fallback chain
- Cache limits: Memory bounds for caching subsystems
- Number formatting: Fraction precision defaults

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Locale defaults
    "DEFAULT_LOCALE",
    # Cache limits
    "DEFAULT_CACHE_SIZE",
    "MAX_LOCALE_CACHE_SIZE",
    # Number formatting
    "DEFAULT_MAX_FRACTION_DIGITS",
    "DEFAULT_CURRENCY_DIGITS",
    # Template limits
    "MAX_ARGUMENT_INDEX",
]

# ============================================================================
# LOCALE DEFAULTS
# ============================================================================

# Locale appended to every fallback chain when no explicit default is given.
# Its own chain (en_US -> en) is appended, so registering only "en" is enough
# to satisfy the default.
DEFAULT_LOCALE: str = "en_US"

# ============================================================================
# CACHE LIMITS
# ============================================================================

# Default maximum compiled-message cache entries.
# 1000 entries is sufficient for most applications (typical UI has <500 messages).
DEFAULT_CACHE_SIZE: int = 1000

# Maximum memoized CLDR lookups (Babel Locale objects, tokenized patterns).
# 128 covers typical multi-region applications (major locales + variants).
MAX_LOCALE_CACHE_SIZE: int = 128

# ============================================================================
# NUMBER FORMATTING
# ============================================================================

# Plain {n,number} renders at most three fraction digits, trailing zeros trimmed.
DEFAULT_MAX_FRACTION_DIGITS: int = 3

# Minor units used when a currency is absent from the locale's digit table.
DEFAULT_CURRENCY_DIGITS: int = 2

# ============================================================================
# TEMPLATE LIMITS
# ============================================================================

# Largest positional index accepted by the template compiler.
# Argument lists are positional; anything beyond this is malformed input.
MAX_ARGUMENT_INDEX: int = 9999
