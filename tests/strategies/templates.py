"""Hypothesis strategies for template text.

Events emitted:
- template_kind=literal|placeholders

Python 3.13+.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from hypothesis import event
from hypothesis import strategies as st

if TYPE_CHECKING:
    from hypothesis.strategies import DrawFn

# Literal text without braces; escapes are generated separately
_LITERAL_TEXT = st.text(
    alphabet=st.characters(exclude_characters="{}", exclude_categories=("Cs",)),
    max_size=30,
)


@st.composite
def literal_templates(draw: DrawFn) -> tuple[str, str]:
    """(template, expected rendering) pairs without placeholders.

    Braces appear only as ``{{``/``}}`` escapes.
    """
    pieces = draw(st.lists(st.one_of(_LITERAL_TEXT, st.sampled_from(["{", "}"])), max_size=8))
    event("template_kind=literal")
    template = "".join(p.replace("{", "{{").replace("}", "}}") for p in pieces)
    return template, "".join(pieces)


@st.composite
def string_placeholder_templates(draw: DrawFn) -> tuple[str, list[str], str]:
    """(template, arguments, expected rendering) using ``{n}`` placeholders only."""
    arguments = draw(st.lists(_LITERAL_TEXT, min_size=1, max_size=4))
    template_parts: list[str] = []
    expected_parts: list[str] = []
    for _ in range(draw(st.integers(min_value=1, max_value=6))):
        literal = draw(_LITERAL_TEXT)
        index = draw(st.integers(min_value=0, max_value=len(arguments) - 1))
        template_parts.append(f"{literal}{{{index}}}")
        expected_parts.append(f"{literal}{arguments[index]}")
    event("template_kind=placeholders")
    return "".join(template_parts), arguments, "".join(expected_parts)
