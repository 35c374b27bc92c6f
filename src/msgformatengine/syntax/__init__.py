"""Template syntax package.

Provides the compiled message model, the template compiler and the
serializer. Separate from runtime so tooling can validate templates without
locale data.

Python 3.13+.
"""

from .ast import Argument, CompiledMessage, Literal, PluralBranch, PluralStyle, Segment
from .compiler import KNOWN_STYLES, KNOWN_TYPES, compile_template
from .cursor import Cursor
from .serializer import SerializationValidationError, to_pattern

__all__ = [
    "KNOWN_STYLES",
    "KNOWN_TYPES",
    "Argument",
    "CompiledMessage",
    "Cursor",
    "Literal",
    "PluralBranch",
    "PluralStyle",
    "Segment",
    "SerializationValidationError",
    "compile_template",
    "to_pattern",
]
