"""Tests for currency formatting and the Money value type."""

from __future__ import annotations

from decimal import Decimal

import pytest

from msgformatengine import (
    LocaleData,
    LocaleDataProvider,
    Money,
    TypeMismatchError,
    currency_display_name,
    format_currency,
)
from msgformatengine.runtime.formatters import currency_format

EN = LocaleData(
    "en",
    currency_symbols={"USD": "$", "EUR": "€", "JPY": "¥", "BHD": "BHD"},
    currency_names={"USD": "US dollars", "EUR": "euros"},
    currency_digits={"JPY": 0, "BHD": 3},
)


class TestMoney:
    """Money construction and validation."""

    def test_amount_converted_to_decimal(self) -> None:
        """Floats go through str() so 0.1 stays 0.1."""
        assert Money(0.1, "usd") == Money(Decimal("0.1"), "USD")
        assert Money("9876543.21").amount == Decimal("9876543.21")

    def test_currency_optional(self) -> None:
        """None means the locale's own currency."""
        assert Money(5).currency is None

    @pytest.mark.parametrize("currency", ["US", "USDX", "U5D", ""])
    def test_currency_code_validated(self, currency: str) -> None:
        """Three ASCII letters."""
        with pytest.raises(ValueError, match="ISO 4217"):
            Money(1, currency)

    @pytest.mark.parametrize("amount", ["abc", "inf", float("nan")])
    def test_amount_validated(self, amount: object) -> None:
        """Amounts must be finite numbers."""
        with pytest.raises(ValueError, match="Money amount"):
            Money(amount)  # type: ignore[arg-type]

    def test_bool_rejected(self) -> None:
        """bool is not an amount."""
        with pytest.raises(TypeError):
            Money(True)


class TestCurrencyFormat:
    """currency_format() over hand-built data."""

    def test_symbol_prefix(self, en_us: LocaleData) -> None:
        """Symbol before the number with currency minor units."""
        assert currency_format(Money("9876543.21", "USD"), en_us) == "$9,876,543.21"

    def test_bare_number_uses_default_currency(self, en_us: LocaleData) -> None:
        """Region tender applies to plain numbers."""
        assert currency_format(5, en_us) == "$5.00"
        assert currency_format(Decimal("-5"), en_us) == "-$5.00"

    def test_money_without_code_uses_default(self, bn_bd: LocaleData) -> None:
        """Bengali digits, Indian grouping and a suffixed taka sign."""
        assert currency_format(Money("9876543.21"), bn_bd) == "৯৮,৭৬,৫৪৩.২১৳"

    def test_suffix_pattern(self, fr_fr: LocaleData) -> None:
        """French puts the symbol after a no-break space."""
        assert currency_format(Money("1234.5", "EUR"), fr_fr) == "1 234,50\xa0€"
        assert currency_format(Money("1234.5", "USD"), fr_fr) == "1 234,50\xa0$US"

    def test_zero_digit_currency(self) -> None:
        """JPY has no minor units; rounding is half-even."""
        assert currency_format(Money("1234.5", "JPY"), EN) == "¥1,234"

    def test_three_digit_currency_spacing(self) -> None:
        """Alphabetic symbols are separated from the digits."""
        assert currency_format(Money("1.2345", "BHD"), EN) == "BHD\xa01.234"

    def test_code_style(self) -> None:
        """ISO code instead of symbol."""
        assert currency_format(Money(5, "EUR"), EN, "code") == "EUR\xa05.00"

    def test_name_style(self) -> None:
        """Display name after the number."""
        assert currency_format(Money(5, "EUR"), EN, "name") == "5.00 euros"

    def test_unknown_currency_uses_code(self) -> None:
        """Codes without a symbol or name are shown as is."""
        assert currency_format(Money(5, "CHF"), EN) == "CHF\xa05.00"
        assert currency_format(Money(5, "CHF"), EN, "name") == "5.00 CHF"

    def test_no_currency_available(self) -> None:
        """A bare number with no default currency is a mismatch."""
        with pytest.raises(TypeMismatchError) as exc_info:
            currency_format(5, EN)

        assert exc_info.value.kind == "currency"
        assert exc_info.value.expected_type == "Money with a currency code"

    @pytest.mark.parametrize("value", ["5", True, None])
    def test_non_monetary_value(self, value: object, en_us: LocaleData) -> None:
        """Strings, bools and None are rejected."""
        with pytest.raises(TypeMismatchError):
            currency_format(value, en_us)

    def test_unknown_display(self, en_us: LocaleData) -> None:
        """Display styles outside symbol/code/name."""
        with pytest.raises(ValueError, match="Unknown style 'long'"):
            currency_format(5, en_us, "long")


class TestCurrencyFunctions:
    """format_currency and currency_display_name with a provider."""

    def test_format_currency(self, provider: LocaleDataProvider) -> None:
        """Locale resolved through the provider."""
        assert format_currency(Money("1234567", "INR"), "hi_IN", provider=provider) == (
            "₹12,34,567.00"
        )

    def test_format_currency_default(self, provider: LocaleDataProvider) -> None:
        """Bare number in the locale's currency."""
        assert format_currency(12.5, "en_US", "code", provider=provider) == "USD\xa012.50"

    def test_display_name_default_currency(self, provider: LocaleDataProvider) -> None:
        """Omitted code means the locale's own currency."""
        assert currency_display_name("fr_FR", provider=provider) == "euro"

    def test_display_name_explicit(self, provider: LocaleDataProvider) -> None:
        """Codes are upper-cased before lookup."""
        assert currency_display_name("fr_FR", "usd", provider=provider) == (
            "dollar des États-Unis"
        )

    def test_display_name_unknown_code(self, provider: LocaleDataProvider) -> None:
        """Unknown codes are returned unchanged."""
        assert currency_display_name("en_US", "XYZ", provider=provider) == "XYZ"

    def test_display_name_needs_a_currency(self) -> None:
        """Locales without a region have no default currency."""
        provider = LocaleDataProvider({"en": EN}, default="en")

        with pytest.raises(ValueError, match="no default currency"):
            currency_display_name("en", provider=provider)
