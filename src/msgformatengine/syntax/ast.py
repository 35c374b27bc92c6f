"""Compiled message node definitions.

A compiled template is a flat, ordered tuple of segments. There is no
nesting: plural branch texts are literal and never compiled themselves.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import TYPE_CHECKING, TypeAlias

if TYPE_CHECKING:
    from typing import TypeIs

from msgformatengine.enums import ArgumentKind

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Segments
    "Literal",
    "Argument",
    # Plural styles
    "PluralBranch",
    "PluralStyle",
    # Compiled result
    "CompiledMessage",
    # Type aliases
    "Segment",
]


# ============================================================================
# SEGMENTS
# ============================================================================


@dataclass(frozen=True, slots=True)
class Literal:
    """Text copied verbatim into the output (escapes already resolved)."""

    text: str

    @staticmethod
    def guard(segment: object) -> TypeIs[Literal]:
        """Type guard for Literal."""
        return isinstance(segment, Literal)


@dataclass(frozen=True, slots=True)
class Argument:
    """Placeholder ``{index[,kind[,style]]}``.

    Attributes:
        index: Position in the runtime argument list
        kind: Formatter kind (ArgumentKind for compiled templates)
        style: Style keyword, the parsed branch list for plural, or None
        offset: Offset of the opening brace in the source template

    Example:
        ``{1,number,integer}`` compiles to
        ``Argument(index=1, kind=ArgumentKind.NUMBER, style="integer", offset=...)``
    """

    index: int
    kind: ArgumentKind | str = ArgumentKind.NONE
    style: str | PluralStyle | None = None
    offset: int = 0

    @staticmethod
    def guard(segment: object) -> TypeIs[Argument]:
        """Type guard for Argument."""
        return isinstance(segment, Argument)


# ============================================================================
# PLURAL STYLES
# ============================================================================


@dataclass(frozen=True, slots=True)
class PluralBranch:
    """One ``selector:text`` entry of a plural style.

    Exactly one of the selector forms is populated:
        - exact number: ``low == high``
        - inclusive range ``a..b``: ``low <= n <= high``
        - CLDR category (``one``, ``few``...) or ``other``: ``category``

    Attributes:
        selector: Selector as written (whitespace stripped)
        text: Branch text, used verbatim
        low: Lower bound for numeric selectors
        high: Upper bound for numeric selectors
        category: Plural category for keyword selectors
    """

    selector: str
    text: str
    low: Decimal | None = None
    high: Decimal | None = None
    category: str | None = None

    @property
    def is_numeric(self) -> bool:
        """True for exact and range selectors."""
        return self.low is not None

    def matches_number(self, n: Decimal) -> bool:
        """Check an exact or range selector against ``n``."""
        if self.low is None or self.high is None:
            return False
        return self.low <= n <= self.high


@dataclass(frozen=True, slots=True)
class PluralStyle:
    """Parsed plural branch list; always contains an ``other`` branch.

    Selection order: numeric selectors in declared order, then the branch for
    the CLDR category, then ``other``.
    """

    source: str
    branches: tuple[PluralBranch, ...]

    @property
    def other(self) -> PluralBranch:
        """The mandatory fallback branch."""
        for branch in self.branches:
            if branch.category == "other":
                return branch
        msg = "plural style has no 'other' branch"
        raise LookupError(msg)

    def select(self, n: Decimal, category: str) -> PluralBranch:
        """Pick the branch for ``n`` whose CLDR category is ``category``."""
        for branch in self.branches:
            if branch.matches_number(n):
                return branch
        for branch in self.branches:
            if branch.category == category:
                return branch
        return self.other

    def __str__(self) -> str:
        return self.source


# ============================================================================
# COMPILED RESULT
# ============================================================================


Segment: TypeAlias = Literal | Argument
"""A compiled template element."""


@dataclass(frozen=True, slots=True)
class CompiledMessage:
    """Immutable compiled template.

    Value-equal for equal sources and hashable, so concurrently compiled
    copies of one template compare equal.

    Attributes:
        source: Template text the message was compiled from
        segments: Literal and argument segments in source order
    """

    source: str
    segments: tuple[Segment, ...]

    @property
    def arguments(self) -> tuple[Argument, ...]:
        """Argument segments in source order."""
        return tuple(s for s in self.segments if Argument.guard(s))

    @property
    def argument_count(self) -> int:
        """Minimum argument list length the message needs."""
        return max((a.index for a in self.arguments), default=-1) + 1

    @property
    def is_static(self) -> bool:
        """True when the message has no placeholders."""
        return not self.arguments
