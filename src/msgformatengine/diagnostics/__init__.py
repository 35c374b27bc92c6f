"""Diagnostic system for engine errors.

Provides structured error diagnostics with codes, spans and hints.
Inspired by Rust compiler diagnostics and Elm error messages.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, ErrorCategory, SourceSpan
from .errors import (
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
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "ArgumentIndexOutOfRangeError",
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorCategory",
    "ErrorTemplate",
    "LocaleParseError",
    "MessageFormatError",
    "MissingKeyError",
    "OutputFormat",
    "ParseError",
    "RenderError",
    "SourceSpan",
    "TemplateSyntaxError",
    "TypeMismatchError",
    "UnknownFormatterKindError",
    "UnsupportedLocaleError",
]
