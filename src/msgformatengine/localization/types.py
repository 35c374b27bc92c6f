"""Type aliases for the localization domain.

Python 3.13+. Zero external dependencies.
"""

from typing import TypeAlias

__all__ = [
    "BundleName",
    "MessageKey",
    "TemplateText",
]

BundleName: TypeAlias = str
"""Name of a group of locale-specific templates (e.g., 'Greetings')."""

MessageKey: TypeAlias = str
"""Key of a template inside a bundle (e.g., 'greeting', 'spaceships')."""

TemplateText: TypeAlias = str
"""Raw template text before compilation."""
