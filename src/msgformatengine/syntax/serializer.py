"""Serialize a CompiledMessage back to template text.

Output is canonical: no whitespace inside placeholders, ``choice`` written as
``plural`` and literal braces escaped as ``{{``/``}}``. Compiling the output
yields the same segments apart from source offsets.

Python 3.13+.
"""

from __future__ import annotations

from msgformatengine.enums import ArgumentKind

from .ast import Argument, CompiledMessage, Literal, PluralStyle

__all__ = ["SerializationValidationError", "to_pattern"]


class SerializationValidationError(ValueError):
    """Raised when a segment cannot be written as valid template text.

    Only hand-built segments trigger this; compiled ones always serialize.
    Common causes:
    - Negative argument index
    - Plural branch text containing ``{``, ``}`` or ``|``
    """


def _escape(text: str) -> str:
    return text.replace("{", "{{").replace("}", "}}")


def _serialize_plural(style: PluralStyle) -> str:
    parts = []
    for branch in style.branches:
        if any(char in branch.text for char in "{}|"):
            msg = f"Plural branch text {branch.text!r} cannot contain '{{', '}}' or '|'"
            raise SerializationValidationError(msg)
        parts.append(f"{branch.selector}:{branch.text}")
    return "|".join(parts)


def _serialize_argument(argument: Argument) -> str:
    if argument.index < 0:
        msg = f"Argument index must be non-negative, got {argument.index}"
        raise SerializationValidationError(msg)
    if argument.kind == ArgumentKind.NONE:
        return f"{{{argument.index}}}"
    match argument.style:
        case None:
            return f"{{{argument.index},{argument.kind}}}"
        case PluralStyle() as plural:
            return f"{{{argument.index},{argument.kind},{_serialize_plural(plural)}}}"
        case str() as keyword:
            return f"{{{argument.index},{argument.kind},{keyword}}}"
    msg = f"Unsupported style {argument.style!r}"
    raise SerializationValidationError(msg)


def to_pattern(message: CompiledMessage) -> str:
    """Write ``message`` as canonical template text.

    Args:
        message: Compiled (or hand-built) message

    Returns:
        Template text that compiles to equivalent segments

    Raises:
        SerializationValidationError: If a hand-built segment has no
            template representation

    Example:
        >>> from msgformatengine.syntax.compiler import compile_template
        >>> to_pattern(compile_template("{ 0 , number , integer } {{x}}"))
        '{0,number,integer} {{x}}'
    """
    parts: list[str] = []
    for segment in message.segments:
        if Literal.guard(segment):
            parts.append(_escape(segment.text))
        else:
            parts.append(_serialize_argument(segment))
    return "".join(parts)
