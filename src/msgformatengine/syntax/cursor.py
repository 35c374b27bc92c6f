"""Immutable cursor for the template compiler.

Python 3.13+. Zero external dependencies.

Design:
    - Cursor is immutable (frozen dataclass)
    - EOF is a state (is_eof), not a return value
    - Every advance() returns a NEW cursor, so a loop that forgets to
      advance cannot silently re-read the same input
"""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["Cursor"]


@dataclass(frozen=True, slots=True)
class Cursor:
    """Immutable source position tracker.

    Example:
        >>> cursor = Cursor("{0}", 0)
        >>> cursor.current
        '{'
        >>> cursor.advance().current
        '0'
        >>> Cursor("ab", 2).is_eof
        True
    """

    source: str
    pos: int = 0

    @property
    def is_eof(self) -> bool:
        """True once every character has been consumed."""
        return self.pos >= len(self.source)

    @property
    def current(self) -> str:
        """Character at the cursor.

        Raises:
            EOFError: If at end of input
        """
        if self.is_eof:
            msg = f"Unexpected EOF at position {self.pos}"
            raise EOFError(msg)
        return self.source[self.pos]

    def peek(self, offset: int = 1) -> str | None:
        """Character ``offset`` positions ahead, or None past EOF."""
        target = self.pos + offset
        if target >= len(self.source):
            return None
        return self.source[target]

    def advance(self, count: int = 1) -> Cursor:
        """Return a new cursor moved forward, clamped to EOF."""
        return Cursor(self.source, min(self.pos + count, len(self.source)))

    def seek(self, pos: int) -> Cursor:
        """Return a new cursor at an absolute position."""
        return Cursor(self.source, min(max(pos, 0), len(self.source)))

    def find_any(self, chars: str) -> int:
        """Offset of the next character in ``chars``, or -1 if none remain."""
        for index in range(self.pos, len(self.source)):
            if self.source[index] in chars:
                return index
        return -1

    def slice_to(self, end_pos: int) -> str:
        """Source text from the cursor up to ``end_pos`` (exclusive)."""
        return self.source[self.pos : end_pos]
