"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, SourceSpan

__all__ = ["ErrorTemplate"]


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    This provides:
        - Testable error messages
        - Consistent formatting
        - Documentation of all error cases
    """

    @staticmethod
    def invalid_locale(locale_code: str, reason: str) -> Diagnostic:
        """Locale identifier could not be parsed.

        Args:
            locale_code: The rejected input string
            reason: Which subtag was malformed

        Returns:
            Diagnostic for LOCALE_INVALID
        """
        msg = f"Invalid locale identifier {locale_code!r}: {reason}"
        return Diagnostic(
            code=DiagnosticCode.LOCALE_INVALID,
            message=msg,
            hint="Use language[_Script][_REGION][_variant], e.g. 'en_US' or 'zh_Hant_TW'",
            source=locale_code,
        )

    @staticmethod
    def unsupported_locale(locale_code: str, chain: tuple[str, ...]) -> Diagnostic:
        """No locale data for any identifier in the fallback chain.

        Args:
            locale_code: Requested locale (canonical form)
            chain: Every identifier that was tried

        Returns:
            Diagnostic for LOCALE_UNSUPPORTED
        """
        tried = " -> ".join(chain)
        msg = f"No locale data for '{locale_code}' (tried: {tried})"
        return Diagnostic(
            code=DiagnosticCode.LOCALE_UNSUPPORTED,
            message=msg,
            hint="Register data for the default locale at startup",
        )

    @staticmethod
    def key_not_found(bundle: str, locale_code: str, key: str) -> Diagnostic:
        """Catalog key absent in every locale of the chain.

        Args:
            bundle: Bundle name
            locale_code: Requested locale (canonical form)
            key: Template key

        Returns:
            Diagnostic for KEY_NOT_FOUND
        """
        msg = f"Key '{key}' not found in bundle '{bundle}' for locale '{locale_code}'"
        return Diagnostic(
            code=DiagnosticCode.KEY_NOT_FOUND,
            message=msg,
            hint=f"Add '{key}' to the default or root entries of bundle '{bundle}'",
        )

    @staticmethod
    def unmatched_open_brace(source: str, offset: int) -> Diagnostic:
        """Argument placeholder opened but never closed."""
        return Diagnostic(
            code=DiagnosticCode.UNMATCHED_OPEN_BRACE,
            message=f"Unmatched '{{' at offset {offset}",
            span=SourceSpan(offset, offset + 1),
            hint="Close the placeholder with '}' or write '{{' for a literal brace",
            source=source,
        )

    @staticmethod
    def unmatched_close_brace(source: str, offset: int) -> Diagnostic:
        """Closing brace with no placeholder open."""
        return Diagnostic(
            code=DiagnosticCode.UNMATCHED_CLOSE_BRACE,
            message=f"Unmatched '}}' at offset {offset}",
            span=SourceSpan(offset, offset + 1),
            hint="Write '}}' for a literal closing brace",
            source=source,
        )

    @staticmethod
    def invalid_argument_index(source: str, offset: int, text: str) -> Diagnostic:
        """Placeholder index is empty, non-numeric or too large.

        Args:
            source: Template text
            offset: Offset of the index field
            text: The index field as written

        Returns:
            Diagnostic for INVALID_ARGUMENT_INDEX
        """
        msg = f"Invalid argument index {text!r} at offset {offset}"
        return Diagnostic(
            code=DiagnosticCode.INVALID_ARGUMENT_INDEX,
            message=msg,
            span=SourceSpan(offset, offset + len(text)),
            hint="Argument indices are non-negative integers: {0}, {1}, ...",
            source=source,
        )

    @staticmethod
    def unknown_argument_type(
        source: str, offset: int, text: str, known: tuple[str, ...]
    ) -> Diagnostic:
        """Placeholder type keyword is not recognized."""
        msg = f"Unknown argument type {text!r} at offset {offset}"
        return Diagnostic(
            code=DiagnosticCode.UNKNOWN_ARGUMENT_TYPE,
            message=msg,
            span=SourceSpan(offset, offset + len(text)),
            hint=f"Use one of: {', '.join(known)}",
            source=source,
        )

    @staticmethod
    def unknown_argument_style(
        source: str, offset: int, kind: str, text: str, known: tuple[str, ...]
    ) -> Diagnostic:
        """Style keyword not valid for the placeholder's type."""
        msg = f"Unknown style {text!r} for type '{kind}' at offset {offset}"
        hint = f"Styles for '{kind}': {', '.join(known)}" if known else (
            f"Type '{kind}' takes no style"
        )
        return Diagnostic(
            code=DiagnosticCode.UNKNOWN_ARGUMENT_STYLE,
            message=msg,
            span=SourceSpan(offset, offset + len(text)),
            hint=hint,
            source=source,
        )

    @staticmethod
    def invalid_plural_style(source: str, offset: int, reason: str) -> Diagnostic:
        """Plural branch list is malformed."""
        msg = f"Invalid plural style at offset {offset}: {reason}"
        return Diagnostic(
            code=DiagnosticCode.INVALID_PLURAL_STYLE,
            message=msg,
            span=SourceSpan(offset, offset),
            hint="Write branches as selector:text separated by '|', ending with other:text",
            source=source,
        )

    @staticmethod
    def type_mismatch(kind: str, expected_type: str, received_type: str) -> Diagnostic:
        """Argument value cannot be rendered by the formatter kind.

        Args:
            kind: Formatter kind (e.g., "date", "number")
            expected_type: Accepted value types
            received_type: Python type name of the value

        Returns:
            Diagnostic for TYPE_MISMATCH
        """
        msg = f"Type mismatch for '{kind}' argument: expected {expected_type}, got {received_type}"
        return Diagnostic(
            code=DiagnosticCode.TYPE_MISMATCH,
            message=msg,
            hint=f"Pass {expected_type} for '{kind}' placeholders",
            expected_type=expected_type,
            received_type=received_type,
        )

    @staticmethod
    def argument_index_out_of_range(index: int, argument_count: int) -> Diagnostic:
        """Placeholder index beyond the supplied argument list."""
        msg = f"Argument index {index} out of range for {argument_count} argument(s)"
        return Diagnostic(
            code=DiagnosticCode.ARGUMENT_INDEX_OUT_OF_RANGE,
            message=msg,
            hint=f"Supply at least {index + 1} argument(s)",
        )

    @staticmethod
    def unknown_formatter_kind(kind: object) -> Diagnostic:
        """Segment kind with no registered formatter."""
        msg = f"No formatter registered for argument kind {kind!r}"
        return Diagnostic(
            code=DiagnosticCode.UNKNOWN_FORMATTER_KIND,
            message=msg,
            hint="Build segments with compile_template() or an ArgumentKind member",
        )
