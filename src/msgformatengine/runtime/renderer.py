"""Message renderer: compiled segments + arguments -> text.

Literals are copied verbatim; each argument segment fetches its value by
index and dispatches to the formatter registered for its kind. The kind is
checked again here even though compile_template() validated it, so
hand-built segments fail loudly instead of rendering blank.

Python 3.13+.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import TYPE_CHECKING

from msgformatengine.diagnostics import (
    ArgumentIndexOutOfRangeError,
    ErrorTemplate,
    UnknownFormatterKindError,
)
from msgformatengine.enums import ArgumentKind
from msgformatengine.syntax.ast import Argument, CompiledMessage, Literal

from .formatters import FORMATTERS, Formatter
from .provider import cldr_provider

if TYPE_CHECKING:
    from msgformatengine.core import LocaleIdentifier

    from .locale_data import LocaleData
    from .provider import LocaleDataProvider
    from .value_types import ArgumentValue

__all__ = ["render", "render_with_data"]


def _formatter_for(kind: object, formatters: Mapping[ArgumentKind, Formatter]) -> Formatter:
    try:
        key = ArgumentKind(kind)
    except ValueError:
        key = None
    formatter = formatters.get(key) if key is not None else None
    if formatter is None:
        raise UnknownFormatterKindError(
            ErrorTemplate.unknown_formatter_kind(kind), kind=str(kind)
        )
    return formatter


def _argument_value(segment: Argument, arguments: Sequence[ArgumentValue]) -> ArgumentValue:
    if not 0 <= segment.index < len(arguments):
        raise ArgumentIndexOutOfRangeError(
            ErrorTemplate.argument_index_out_of_range(segment.index, len(arguments)),
            index=segment.index,
            argument_count=len(arguments),
        )
    return arguments[segment.index]


def render_with_data(
    message: CompiledMessage,
    data: LocaleData,
    arguments: Sequence[ArgumentValue] = (),
    *,
    formatters: Mapping[ArgumentKind, Formatter] = FORMATTERS,
) -> str:
    """Render ``message`` against explicit locale data.

    Args:
        message: Compiled template
        data: Locale rules for every formatter call
        arguments: Positional argument values
        formatters: Kind -> formatter registry

    Returns:
        Rendered text

    Raises:
        ArgumentIndexOutOfRangeError: If a placeholder index has no argument
        UnknownFormatterKindError: If a segment kind has no formatter
        TypeMismatchError: If an argument does not fit its placeholder kind
    """
    parts: list[str] = []
    for segment in message.segments:
        if Literal.guard(segment):
            parts.append(segment.text)
            continue
        formatter = _formatter_for(segment.kind, formatters)
        value = _argument_value(segment, arguments)
        parts.append(formatter(value, data, segment.style))
    return "".join(parts)


def render(
    message: CompiledMessage,
    locale: LocaleIdentifier | str,
    arguments: Sequence[ArgumentValue] = (),
    *,
    provider: LocaleDataProvider | None = None,
) -> str:
    """Render ``message`` for ``locale``.

    Locale data comes from ``provider`` (the shared CLDR provider when
    omitted), resolved through the locale's fallback chain.

    Args:
        message: Compiled template
        locale: Requested locale
        arguments: Positional argument values
        provider: Locale data source

    Returns:
        Rendered text

    Raises:
        UnsupportedLocaleError: If no locale data resolves
        ArgumentIndexOutOfRangeError: If a placeholder index has no argument
        UnknownFormatterKindError: If a segment kind has no formatter
        TypeMismatchError: If an argument does not fit its placeholder kind

    Example:
        >>> from msgformatengine.syntax import compile_template
        >>> render(compile_template("Welcome to {0}!"), "en_US", ["Mars"])
        'Welcome to Mars!'
    """
    data = (provider or cldr_provider()).data_for(locale)
    return render_with_data(message, data, arguments)
