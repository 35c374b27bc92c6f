"""Diagnostic codes and data structures.

Defines error codes, source spans, and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum, StrEnum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "ErrorCategory",
    "SourceSpan",
]


class ErrorCategory(StrEnum):
    """Error categorization for MessageFormatError subclasses.

    Inherits from ``StrEnum`` so that ``str(category)`` and direct string
    comparisons work without accessing ``.value``.

    Categories:
        PARSE: Malformed locale identifier or template syntax
        LOCALE: No locale data resolves for a fallback chain
        CATALOG: Template key absent from the resource catalog
        RENDER: Runtime rendering failure (type mismatch, bad index, unknown kind)
    """

    PARSE = "parse"
    LOCALE = "locale"
    CATALOG = "catalog"
    RENDER = "render"


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Locale identifier and locale data errors
        2000-2999: Catalog errors
        3000-3999: Template syntax errors
        4000-4999: Rendering errors
    """

    # Locale errors (1000-1999)
    LOCALE_INVALID = 1001
    LOCALE_UNSUPPORTED = 1002

    # Catalog errors (2000-2999)
    KEY_NOT_FOUND = 2001

    # Template syntax errors (3000-3999)
    UNMATCHED_OPEN_BRACE = 3001
    UNMATCHED_CLOSE_BRACE = 3002
    INVALID_ARGUMENT_INDEX = 3003
    UNKNOWN_ARGUMENT_TYPE = 3004
    UNKNOWN_ARGUMENT_STYLE = 3005
    INVALID_PLURAL_STYLE = 3006

    # Rendering errors (4000-4999)
    TYPE_MISMATCH = 4001
    ARGUMENT_INDEX_OUT_OF_RANGE = 4002
    UNKNOWN_FORMATTER_KIND = 4003


@dataclass(frozen=True, slots=True)
class SourceSpan:
    """Location of a problem inside a template or locale string.

    Note:
        Python strings measure positions in characters (Unicode code points),
        not bytes.

    Attributes:
        start: Starting character offset (0-indexed)
        end: Ending character offset (exclusive)
    """

    start: int
    end: int

    def __post_init__(self) -> None:
        """Validate SourceSpan invariants.

        Raises:
            ValueError: If start is negative or end precedes start.
        """
        if self.start < 0:
            msg = f"SourceSpan.start must be >= 0, got {self.start}"
            raise ValueError(msg)
        if self.end < self.start:
            msg = f"SourceSpan.end ({self.end}) must be >= start ({self.start})"
            raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Inspired by Rust compiler diagnostics. Provides rich error information
    for both humans and tools.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        span: Location in the offending source (None when not applicable)
        hint: Suggestion for fixing the error
        source: The template or locale string the span points into
        expected_type: Expected value type (type mismatches)
        received_type: Actual value type received (type mismatches)
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    span: SourceSpan | None = None
    hint: str | None = None
    source: str | None = None
    expected_type: str | None = None
    received_type: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Delegates to DiagnosticFormatter for consistent output.

        Example output:
            error[UNKNOWN_ARGUMENT_TYPE]: Unknown argument type 'dat' at offset 3
              --> offset 3
              = help: Use one of: number, integer, currency, date, time, plural

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
