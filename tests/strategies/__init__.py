"""Hypothesis strategies for msgformatengine property-based testing.

Strategies are organized by domain:

- locales: locale identifier strings and real CLDR locales
- templates: template text with known renderings

Usage:
    from tests.strategies import locale_strings, literal_templates
"""

from .locales import REAL_LOCALES, locale_strings
from .templates import literal_templates, string_placeholder_templates

__all__ = [
    "REAL_LOCALES",
    "literal_templates",
    "locale_strings",
    "string_placeholder_templates",
]
