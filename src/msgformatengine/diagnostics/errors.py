"""Exception hierarchy with structured diagnostics.

All exceptions optionally store a Diagnostic object for rich error
information. Every engine operation raises one of these to its caller;
nothing is logged-and-swallowed.

Python 3.13+. Zero external dependencies.
"""

from typing import ClassVar

from .codes import Diagnostic, ErrorCategory

__all__ = [
    "ArgumentIndexOutOfRangeError",
    "LocaleParseError",
    "MessageFormatError",
    "MissingKeyError",
    "ParseError",
    "RenderError",
    "TemplateSyntaxError",
    "TypeMismatchError",
    "UnknownFormatterKindError",
    "UnsupportedLocaleError",
]


class MessageFormatError(Exception):
    """Base exception for all engine errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    category: ClassVar[ErrorCategory]

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize MessageFormatError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class ParseError(MessageFormatError):
    """Malformed input text: locale identifier or template syntax."""

    category = ErrorCategory.PARSE


class LocaleParseError(ParseError, ValueError):
    """Locale identifier string could not be parsed.

    Attributes:
        input_value: The string that failed to parse
    """

    def __init__(self, message: str | Diagnostic, *, input_value: str = "") -> None:
        super().__init__(message)
        self.input_value = input_value


class TemplateSyntaxError(ParseError):
    """Template string violates the placeholder grammar.

    Compilation is atomic: when this is raised no CompiledMessage exists.

    Attributes:
        offset: Character offset of the offending construct
        source: The template text
    """

    def __init__(self, message: str | Diagnostic, *, offset: int, source: str = "") -> None:
        super().__init__(message)
        self.offset = offset
        self.source = source


class UnsupportedLocaleError(MessageFormatError, LookupError):
    """No locale data resolves anywhere in the fallback chain, default included.

    This is a configuration error: the default locale must always be registered.

    Attributes:
        locale_code: Canonical form of the requested locale
    """

    category = ErrorCategory.LOCALE

    def __init__(self, message: str | Diagnostic, *, locale_code: str = "") -> None:
        super().__init__(message)
        self.locale_code = locale_code


class MissingKeyError(MessageFormatError, KeyError):
    """Catalog has no entry for the key after the full fallback walk.

    Attributes:
        bundle: Bundle name that was searched
        locale_code: Canonical form of the requested locale
        key: Template key that was not found
    """

    category = ErrorCategory.CATALOG

    def __init__(
        self,
        message: str | Diagnostic,
        *,
        bundle: str = "",
        locale_code: str = "",
        key: str = "",
    ) -> None:
        super().__init__(message)
        self.bundle = bundle
        self.locale_code = locale_code
        self.key = key

    def __str__(self) -> str:
        # KeyError.__str__ repr()s its argument; keep the readable message.
        return str(self.args[0]) if self.args else ""


class RenderError(MessageFormatError):
    """Runtime failure while rendering a compiled message."""

    category = ErrorCategory.RENDER


class TypeMismatchError(RenderError, TypeError):
    """Argument value type does not fit the requested formatter kind.

    Attributes:
        kind: Formatter kind that rejected the value
        expected_type: Human-readable description of accepted types
        received_type: Python type name of the supplied value
    """

    def __init__(
        self,
        message: str | Diagnostic,
        *,
        kind: str = "",
        expected_type: str = "",
        received_type: str = "",
    ) -> None:
        super().__init__(message)
        self.kind = kind
        self.expected_type = expected_type
        self.received_type = received_type


class ArgumentIndexOutOfRangeError(RenderError, IndexError):
    """Placeholder index has no matching entry in the argument list.

    Attributes:
        index: Index named by the placeholder
        argument_count: Length of the supplied argument list
    """

    def __init__(self, message: str | Diagnostic, *, index: int, argument_count: int) -> None:
        super().__init__(message)
        self.index = index
        self.argument_count = argument_count


class UnknownFormatterKindError(RenderError):
    """Argument segment names a kind with no registered formatter.

    Attributes:
        kind: The unrecognized kind value
    """

    def __init__(self, message: str | Diagnostic, *, kind: str = "") -> None:
        super().__init__(message)
        self.kind = kind
