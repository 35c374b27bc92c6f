"""msgformatengine - internationalized message formatting.

Selects a locale-specific template, substitutes typed positional arguments
(strings, numbers, currencies, dates, plurals) and renders them with the
locale's digits, separators, date patterns and names. Locale data comes from
CLDR through Babel, or from LocaleData records the host builds itself.

Public API:
    LocaleIdentifier - Immutable locale value with fallback chains
    LocaleData / LocaleDataProvider - Per-locale formatting rules and lookup
    ResourceCatalog - In-memory templates with per-key locale fallback
    MessageEngine - Catalog + compiled-message cache + renderer
    compile_template / render - Template compiler and renderer
    format_number, format_currency, format_date... - Single-value formatting

Exceptions:
    MessageFormatError - Base exception class
    ParseError - Malformed locale identifier or template
    UnsupportedLocaleError - No locale data along the fallback chain
    MissingKeyError - Catalog has no entry for a key
    RenderError - Argument missing or of the wrong type

Submodules:
    msgformatengine.syntax - Compiled message model, compiler, serializer
    msgformatengine.runtime - Locale data, formatters, renderer, caches
    msgformatengine.localization - Catalog and engine
    msgformatengine.diagnostics - Error types and diagnostic formatting
"""

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

from .core import LocaleIdentifier, fallback_chain
from .diagnostics import (
    ArgumentIndexOutOfRangeError,
    LocaleParseError,
    MessageFormatError,
    MissingKeyError,
    ParseError,
    RenderError,
    TemplateSyntaxError,
    TypeMismatchError,
    UnknownFormatterKindError,
    UnsupportedLocaleError,
)
from .localization import MessageEngine, ResourceCatalog
from .runtime import (
    CacheConfig,
    LocaleData,
    LocaleDataProvider,
    Money,
    currency_display_name,
    format_currency,
    format_date,
    format_datetime,
    format_integer,
    format_number,
    format_percent,
    format_time,
    render,
)
from .syntax import CompiledMessage, compile_template, to_pattern

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
try:
    __version__ = _get_version("msgformatengine")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "ArgumentIndexOutOfRangeError",
    "CacheConfig",
    "CompiledMessage",
    "LocaleData",
    "LocaleDataProvider",
    "LocaleIdentifier",
    "LocaleParseError",
    "MessageEngine",
    "MessageFormatError",
    "MissingKeyError",
    "Money",
    "ParseError",
    "RenderError",
    "ResourceCatalog",
    "TemplateSyntaxError",
    "TypeMismatchError",
    "UnknownFormatterKindError",
    "UnsupportedLocaleError",
    "__version__",
    "compile_template",
    "currency_display_name",
    "fallback_chain",
    "format_currency",
    "format_date",
    "format_datetime",
    "format_integer",
    "format_number",
    "format_percent",
    "format_time",
    "render",
    "to_pattern",
]
