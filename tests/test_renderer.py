"""Tests for message rendering.

Tests verify:
- Literal and argument segments render in order
- Every placeholder kind dispatches to its formatter
- Index, kind and type errors propagate (never rendered as blanks)
- Formatter registry overrides
- Property: string placeholders substitute their arguments
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal

import pytest
from hypothesis import given

from msgformatengine import (
    ArgumentIndexOutOfRangeError,
    LocaleData,
    LocaleDataProvider,
    Money,
    RenderError,
    TypeMismatchError,
    UnknownFormatterKindError,
    UnsupportedLocaleError,
    compile_template,
    render,
)
from msgformatengine.diagnostics import DiagnosticCode
from msgformatengine.enums import ArgumentKind
from msgformatengine.runtime import FORMATTERS, render_with_data
from msgformatengine.runtime.formatters import string_format
from msgformatengine.syntax import Argument, CompiledMessage, Literal
from tests.strategies import literal_templates, string_placeholder_templates

EN = LocaleData("en")
SPACESHIPS = (
    "At {2,time,short} on {2,date,long}, we detected {1,number,integer} "
    "spaceships on the planet {0}."
)
LANDING = datetime(2024, 3, 5, 14, 7)


class TestRenderWithData:
    """render_with_data() over explicit LocaleData."""

    def test_string_substitution(self) -> None:
        """{0} inserts a string."""
        assert render_with_data(compile_template("Welcome to {0}!"), EN, ["Mars"]) == (
            "Welcome to Mars!"
        )

    def test_static_message(self) -> None:
        """No arguments needed."""
        assert render_with_data(compile_template("{{literal}}"), EN) == "{literal}"

    def test_mixed_kinds(self) -> None:
        """Time, date, integer and string in one template."""
        message = compile_template(SPACESHIPS)

        assert render_with_data(message, EN, ["Mars", 1234567, LANDING]) == (
            "At 2:07 PM on March 5, 2024, we detected 1,234,567 spaceships on the planet Mars."
        )

    def test_same_message_other_locale(self, bn_bd: LocaleData) -> None:
        """One compiled message, different locale data."""
        message = compile_template(SPACESHIPS)

        assert render_with_data(message, bn_bd, ["Mars", 1234567, LANDING]) == (
            "At ২:০৭ PM on March ৫, ২০২৪, we detected ১২,৩৪,৫৬৭ spaceships on the planet Mars."
        )

    def test_currency_and_plural(self, en_us: LocaleData) -> None:
        """Money values and plural branches."""
        message = compile_template("{0,plural,1:One item|other:Items} cost {1,currency}.")

        assert render_with_data(message, en_us, [1, Money("9.5")]) == "One item cost $9.50."
        assert render_with_data(message, en_us, [3, Decimal(30)]) == "Items cost $30.00."

    def test_repeated_and_unordered_indices(self) -> None:
        """Indices may repeat and appear in any order."""
        message = compile_template("{1}-{0}-{1}")

        assert render_with_data(message, EN, ["a", "b"]) == "b-a-b"

    def test_extra_arguments_ignored(self) -> None:
        """Unused trailing arguments are allowed."""
        assert render_with_data(compile_template("{0}"), EN, ["x", "unused", 3]) == "x"


class TestRenderErrors:
    """Failures propagate to the caller."""

    def test_type_mismatch(self) -> None:
        """A string in a date placeholder."""
        with pytest.raises(TypeMismatchError) as exc_info:
            render_with_data(compile_template("{0,date}"), EN, ["not-a-date"])

        error = exc_info.value
        assert error.kind == "date"
        assert error.received_type == "str"
        assert error.diagnostic is not None
        assert error.diagnostic.code == DiagnosticCode.TYPE_MISMATCH

    def test_string_placeholder_rejects_numbers(self) -> None:
        """{0} does not stringify arbitrary values."""
        with pytest.raises(TypeMismatchError):
            render_with_data(compile_template("{0}"), EN, [5])

    def test_index_out_of_range(self) -> None:
        """Placeholder beyond the argument list."""
        with pytest.raises(ArgumentIndexOutOfRangeError) as exc_info:
            render_with_data(compile_template("{0} and {3}"), EN, ["a", "b"])

        assert exc_info.value.index == 3
        assert exc_info.value.argument_count == 2
        assert isinstance(exc_info.value, IndexError)

    def test_negative_index(self) -> None:
        """Hand-built negative indices do not wrap around."""
        message = CompiledMessage(source="", segments=(Argument(index=-1),))

        with pytest.raises(ArgumentIndexOutOfRangeError):
            render_with_data(message, EN, ["a"])

    def test_unknown_kind(self) -> None:
        """Hand-built segments with an unregistered kind."""
        message = CompiledMessage(
            source="",
            segments=(Literal("x"), Argument(index=0, kind="spreadsheet")),
        )

        with pytest.raises(UnknownFormatterKindError) as exc_info:
            render_with_data(message, EN, ["a"])

        assert exc_info.value.kind == "spreadsheet"
        assert isinstance(exc_info.value, RenderError)

    def test_kind_missing_from_registry(self) -> None:
        """A registry without the kind's formatter."""
        message = compile_template("{0,number}")

        with pytest.raises(UnknownFormatterKindError):
            render_with_data(message, EN, [1], formatters={ArgumentKind.NONE: string_format})

    def test_kind_checked_before_value(self) -> None:
        """Unknown kind is reported even when the argument is missing."""
        message = CompiledMessage(source="", segments=(Argument(index=5, kind="bogus"),))

        with pytest.raises(UnknownFormatterKindError):
            render_with_data(message, EN, [])


class TestFormatterRegistry:
    """Custom formatter mappings."""

    def test_override(self) -> None:
        """Replacing one formatter leaves the others."""

        def shout(value: object, data: LocaleData, style: object = None) -> str:
            return str(value).upper()

        formatters = {**FORMATTERS, ArgumentKind.NONE: shout}
        message = compile_template("{0}: {1,number}")

        assert render_with_data(message, EN, ["total", 1500], formatters=formatters) == (
            "TOTAL: 1,500"
        )

    def test_default_registry_is_read_only(self) -> None:
        """FORMATTERS cannot be mutated in place."""
        with pytest.raises(TypeError):
            FORMATTERS[ArgumentKind.NONE] = string_format  # type: ignore[index]

    def test_every_kind_registered(self) -> None:
        """Each ArgumentKind has a formatter."""
        assert set(FORMATTERS) == set(ArgumentKind)


class TestRender:
    """render() with a provider."""

    def test_render_resolves_locale(self, provider: LocaleDataProvider) -> None:
        """Locale data comes from the provider."""
        message = compile_template("{0,number} / {1,date,short}")

        assert render(message, "fr_FR", [1234.5, LANDING], provider=provider) == (
            "1 234,5 / 05/03/2024"
        )

    def test_render_falls_back(self, provider: LocaleDataProvider) -> None:
        """Unregistered locales use the chain."""
        message = compile_template("{0,number}")

        assert render(message, "bn", [1234567], provider=provider) == "1,234,567"

    def test_unsupported_locale(self) -> None:
        """No data for the locale or the default."""
        provider = LocaleDataProvider({"fr": LocaleData("fr")}, default="de")

        with pytest.raises(UnsupportedLocaleError):
            render(compile_template("x"), "en_US", provider=provider)


class TestRenderProperties:
    """Property-based rendering tests."""

    @given(case=literal_templates())
    def test_literal_templates_render_their_text(self, case: tuple[str, str]) -> None:
        """Static templates render unescaped text."""
        template, expected = case

        assert render_with_data(compile_template(template), EN) == expected

    @given(case=string_placeholder_templates())
    def test_string_placeholders(self, case: tuple[str, list[str], str]) -> None:
        """{n} placeholders substitute argument n."""
        template, arguments, expected = case

        assert render_with_data(compile_template(template), EN, arguments) == expected
