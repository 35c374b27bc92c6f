"""Template compiler for the ``{index[,type[,style]]}`` mini-language.

Grammar (informal):
    template    := (literal | escape | placeholder)*
    escape      := "{{" | "}}"
    placeholder := "{" ws index ws ["," ws type ws ["," style]] "}"
    index       := [0-9]+
    type        := number | integer | currency | date | time | plural | choice
    style       := keyword | branch ("|" branch)*       (branches for plural only)
    branch      := ws selector ws ":" text
    selector    := number | number ".." number | zero | one | two | few | many | other

Compilation is single-pass, left-to-right and atomic: the first error raises
TemplateSyntaxError carrying the offending offset and no partial result is
returned. ``choice`` is accepted as an alias of ``plural``.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
from decimal import Decimal, InvalidOperation

from msgformatengine.constants import MAX_ARGUMENT_INDEX
from msgformatengine.diagnostics import Diagnostic, ErrorTemplate, TemplateSyntaxError
from msgformatengine.enums import ArgumentKind, CurrencyDisplay, DateTimeStyle, NumberStyle

from .ast import Argument, CompiledMessage, Literal, PluralBranch, PluralStyle, Segment
from .cursor import Cursor

__all__ = ["KNOWN_STYLES", "KNOWN_TYPES", "compile_template"]

logger = logging.getLogger(__name__)

KNOWN_TYPES: dict[str, ArgumentKind] = {
    "number": ArgumentKind.NUMBER,
    "integer": ArgumentKind.INTEGER,
    "currency": ArgumentKind.CURRENCY,
    "date": ArgumentKind.DATE,
    "time": ArgumentKind.TIME,
    "plural": ArgumentKind.PLURAL,
    "choice": ArgumentKind.PLURAL,
}

KNOWN_STYLES: dict[ArgumentKind, tuple[str, ...]] = {
    ArgumentKind.NONE: (),
    ArgumentKind.NUMBER: tuple(NumberStyle),
    ArgumentKind.INTEGER: ("plain",),
    ArgumentKind.CURRENCY: tuple(CurrencyDisplay),
    ArgumentKind.DATE: tuple(DateTimeStyle),
    ArgumentKind.TIME: tuple(DateTimeStyle),
}

_CATEGORY_SELECTORS = frozenset({"zero", "one", "two", "few", "many", "other"})


def _strip_span(text: str, offset: int) -> tuple[str, int]:
    """Strip whitespace from ``text`` and shift ``offset`` past the leading part."""
    stripped = text.lstrip()
    return stripped.rstrip(), offset + len(text) - len(stripped)


def _syntax_error(diagnostic: Diagnostic, source: str, offset: int) -> TemplateSyntaxError:
    return TemplateSyntaxError(diagnostic, offset=offset, source=source)


def _plural_error(source: str, offset: int, reason: str) -> TemplateSyntaxError:
    return _syntax_error(ErrorTemplate.invalid_plural_style(source, offset, reason), source, offset)


def _parse_number(text: str) -> Decimal | None:
    try:
        value = Decimal(text)
    except InvalidOperation:
        return None
    return value if value.is_finite() else None


def _parse_selector(
    source: str, selector: str, offset: int
) -> tuple[Decimal | None, Decimal | None, str | None]:
    if selector in _CATEGORY_SELECTORS:
        return None, None, selector
    if ".." in selector:
        low_text, _, high_text = selector.partition("..")
        low = _parse_number(low_text.strip())
        high = _parse_number(high_text.strip())
        if low is None or high is None:
            reason = f"range selector {selector!r} needs numeric bounds"
            raise _plural_error(source, offset, reason)
        if low > high:
            reason = f"range selector {selector!r} has low bound above high bound"
            raise _plural_error(source, offset, reason)
        return low, high, None
    exact = _parse_number(selector)
    if exact is None:
        reason = (
            f"selector {selector!r} is not a number, a range or one of "
            f"{', '.join(sorted(_CATEGORY_SELECTORS))}"
        )
        raise _plural_error(source, offset, reason)
    return exact, exact, None


def _parse_plural_style(source: str, style: str, offset: int) -> PluralStyle:
    """Parse ``selector:text|selector:text|...`` starting at ``offset``."""
    if not style.strip():
        raise _plural_error(source, offset, "branch list is empty")

    branches: list[PluralBranch] = []
    branch_offset = offset
    for raw_branch in style.split("|"):
        selector_text, colon, text = raw_branch.partition(":")
        selector, selector_offset = _strip_span(selector_text, branch_offset)
        if not colon:
            reason = f"branch {raw_branch.strip()!r} has no ':' between selector and text"
            raise _plural_error(source, selector_offset, reason)
        if not selector:
            raise _plural_error(source, selector_offset, "empty selector")
        low, high, category = _parse_selector(source, selector, selector_offset)
        branches.append(
            PluralBranch(selector=selector, text=text, low=low, high=high, category=category)
        )
        branch_offset += len(raw_branch) + 1

    if not any(branch.category == "other" for branch in branches):
        raise _plural_error(source, offset, "missing mandatory 'other' branch")
    return PluralStyle(source=style, branches=tuple(branches))


def _parse_placeholder(source: str, start: int, end: int) -> Argument:
    """Compile the placeholder body between ``source[start] == '{'`` and ``end``."""
    body = source[start + 1 : end]
    body_offset = start + 1

    index_text, comma, rest = body.partition(",")
    index_stripped, index_offset = _strip_span(index_text, body_offset)
    if not (index_stripped.isascii() and index_stripped.isdigit()):
        raise _syntax_error(
            ErrorTemplate.invalid_argument_index(source, index_offset, index_stripped),
            source,
            index_offset,
        )
    index = int(index_stripped)
    if index > MAX_ARGUMENT_INDEX:
        raise _syntax_error(
            ErrorTemplate.invalid_argument_index(source, index_offset, index_stripped),
            source,
            index_offset,
        )
    if not comma:
        return Argument(index=index, kind=ArgumentKind.NONE, style=None, offset=start)

    type_offset_base = body_offset + len(index_text) + 1
    type_text, style_comma, style_text = rest.partition(",")
    type_name, type_offset = _strip_span(type_text, type_offset_base)
    kind = KNOWN_TYPES.get(type_name)
    if kind is None:
        raise _syntax_error(
            ErrorTemplate.unknown_argument_type(source, type_offset, type_name, tuple(KNOWN_TYPES)),
            source,
            type_offset,
        )

    style_offset = type_offset_base + len(type_text) + 1
    if kind is ArgumentKind.PLURAL:
        if not style_comma:
            raise _plural_error(source, style_offset - 1, "branch list is empty")
        plural = _parse_plural_style(source, style_text, style_offset)
        return Argument(index=index, kind=kind, style=plural, offset=start)

    if not style_comma:
        return Argument(index=index, kind=kind, style=None, offset=start)

    style, keyword_offset = _strip_span(style_text, style_offset)
    known = KNOWN_STYLES[kind]
    if style not in known:
        raise _syntax_error(
            ErrorTemplate.unknown_argument_style(source, keyword_offset, str(kind), style, known),
            source,
            keyword_offset,
        )
    return Argument(index=index, kind=kind, style=style, offset=start)


def compile_template(source: str) -> CompiledMessage:
    """Compile template text into a CompiledMessage.

    Args:
        source: Template text, e.g.
            ``"At {2,time,short} on {2,date,long}, we detected {1,number,integer} spaceships."``

    Returns:
        CompiledMessage with adjacent literal text merged into one segment

    Raises:
        TemplateSyntaxError: On an unmatched brace, bad index, unknown type or
            style keyword, or malformed plural branch list

    Example:
        >>> compile_template("Hello, {0}!").segments
        (Literal(text='Hello, '), Argument(index=0, kind=<ArgumentKind.NONE: 'none'>, \
style=None, offset=7), Literal(text='!'))
    """
    segments: list[Segment] = []
    literal: list[str] = []
    cursor = Cursor(source)

    while not cursor.is_eof:
        next_brace = cursor.find_any("{}")
        if next_brace == -1:
            literal.append(cursor.slice_to(len(source)))
            break
        literal.append(cursor.slice_to(next_brace))
        cursor = cursor.seek(next_brace)

        if cursor.current == "}":
            if cursor.peek() == "}":
                literal.append("}")
                cursor = cursor.advance(2)
                continue
            raise _syntax_error(
                ErrorTemplate.unmatched_close_brace(source, cursor.pos), source, cursor.pos
            )

        if cursor.peek() == "{":
            literal.append("{")
            cursor = cursor.advance(2)
            continue

        start = cursor.pos
        end = cursor.advance().find_any("{}")
        if end == -1 or source[end] == "{":
            raise _syntax_error(ErrorTemplate.unmatched_open_brace(source, start), source, start)

        if text := "".join(literal):
            segments.append(Literal(text))
            literal.clear()
        segments.append(_parse_placeholder(source, start, end))
        cursor = cursor.seek(end + 1)

    if text := "".join(literal):
        segments.append(Literal(text))

    compiled = CompiledMessage(source=source, segments=tuple(segments))
    logger.debug("Compiled template (%d segments, %d chars)", len(compiled.segments), len(source))
    return compiled
