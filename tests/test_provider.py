"""Tests for LocaleDataProvider resolution and loading.

Tests verify:
- Fallback along the locale chain to registered data
- UnsupportedLocaleError when even the default has no data
- Startup validation of the default locale
- Loader calls, write-once caching and negative caching
"""

from __future__ import annotations

import threading
from concurrent.futures import ThreadPoolExecutor

import pytest

from msgformatengine import (
    LocaleData,
    LocaleDataProvider,
    LocaleIdentifier,
    UnsupportedLocaleError,
)
from msgformatengine.diagnostics import DiagnosticCode
from msgformatengine.runtime.provider import cldr_provider


class TestProviderResolution:
    """Lookups over a preloaded table."""

    def test_region_falls_back_to_language(self) -> None:
        """Only en registered: en_US resolves to en."""
        en = LocaleData("en")
        provider = LocaleDataProvider({"en": en}, default="en_US")

        assert provider.data_for("en_US") is en
        assert provider.resolve("en_US") == LocaleIdentifier("en")

    def test_exact_match_preferred(self, provider: LocaleDataProvider) -> None:
        """A registered regional record wins over its language."""
        assert provider.resolve("en_US") == LocaleIdentifier("en", region="US")
        assert provider.data_for("fr_FR").decimal_symbol == ","

    def test_unknown_locale_falls_back_to_default(self, provider: LocaleDataProvider) -> None:
        """Locales with no data anywhere in their own chain use the default."""
        assert provider.resolve("ja_JP") == LocaleIdentifier("en", region="US")

    def test_identifier_and_string_keys_equivalent(self) -> None:
        """Table keys and lookups accept both forms."""
        data = LocaleData("bn_BD")
        provider = LocaleDataProvider({LocaleIdentifier("bn", region="BD"): data}, default="bn_BD")

        assert provider.data_for("bn-BD") is data

    def test_locales_lists_available(self, provider: LocaleDataProvider) -> None:
        """locales reports preloaded identifiers."""
        assert LocaleIdentifier("fr", region="FR") in provider.locales
        assert provider.default == LocaleIdentifier("en", region="US")

    def test_unsupported_locale(self) -> None:
        """Nothing in the chain, default included, has data."""
        provider = LocaleDataProvider({"fr": LocaleData("fr")}, default="en_US")

        with pytest.raises(UnsupportedLocaleError) as exc_info:
            provider.data_for("de_DE")

        assert exc_info.value.locale_code == "de_DE"
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code == DiagnosticCode.LOCALE_UNSUPPORTED
        assert isinstance(exc_info.value, LookupError)

    def test_malformed_locale_is_a_parse_error(self, provider: LocaleDataProvider) -> None:
        """Provider does not guess at malformed input."""
        with pytest.raises(ValueError, match="Invalid locale identifier"):
            provider.data_for("1x")


class TestProviderValidation:
    """Default locale checks."""

    def test_strict_default_fails_fast(self) -> None:
        """strict_default validates at construction."""
        with pytest.raises(UnsupportedLocaleError):
            LocaleDataProvider({"fr": LocaleData("fr")}, default="en_US", strict_default=True)

    def test_strict_default_accepts_language_entry(self) -> None:
        """The default may resolve through its own chain."""
        provider = LocaleDataProvider({"en": LocaleData("en")}, strict_default=True)

        assert provider.resolve("en_US") == LocaleIdentifier("en")

    def test_validate_after_construction(self) -> None:
        """validate() can be called explicitly."""
        provider = LocaleDataProvider(default="en_US")

        with pytest.raises(UnsupportedLocaleError):
            provider.validate()


class TestProviderLoader:
    """Lazy loading through a loader callable."""

    def test_loader_called_along_chain(self) -> None:
        """Missing entries are offered to the loader in chain order."""
        calls: list[str] = []

        def loader(locale: LocaleIdentifier) -> LocaleData | None:
            calls.append(str(locale))
            return LocaleData(locale) if locale.language == "en" else None

        provider = LocaleDataProvider(default="en", loader=loader)

        assert provider.resolve("de_DE") == LocaleIdentifier("en")
        assert calls == ["de_DE", "de", "en"]

    def test_negative_results_cached(self) -> None:
        """A locale the loader rejected is not asked for again."""
        calls: list[str] = []

        def loader(locale: LocaleIdentifier) -> LocaleData | None:
            calls.append(str(locale))
            return LocaleData(locale) if locale.language == "en" else None

        provider = LocaleDataProvider(default="en", loader=loader)
        provider.data_for("de_DE")
        provider.data_for("de_DE")

        assert calls == ["de_DE", "de", "en"]

    def test_loaded_data_reused(self) -> None:
        """Every lookup returns the stored record."""
        provider = LocaleDataProvider(default="en", loader=LocaleData)

        first = provider.data_for("fr")
        second = provider.data_for("fr")

        assert first is second
        assert LocaleIdentifier("fr") in provider.locales

    def test_each_distinct_identifier_retained(self) -> None:
        """Hits and misses are kept per requested identifier."""
        calls: list[str] = []

        def loader(locale: LocaleIdentifier) -> LocaleData | None:
            calls.append(str(locale))
            return LocaleData(locale) if locale.region is None else None

        provider = LocaleDataProvider(default="en", loader=loader)
        for code in ("fr_CA", "fr_BE", "fr_CA", "fr_BE"):
            provider.data_for(code)

        assert calls == ["fr_CA", "fr", "fr_BE"]
        assert set(provider.locales) == {LocaleIdentifier("fr")}

    def test_concurrent_first_loads_agree(self) -> None:
        """Racing loads of one locale all receive the first stored record."""
        barrier = threading.Barrier(8, timeout=10)

        def loader(locale: LocaleIdentifier) -> LocaleData:
            return LocaleData(locale)

        provider = LocaleDataProvider(default="en", loader=loader)

        def fetch(_: int) -> LocaleData:
            barrier.wait()
            return provider.data_for("fr_FR")

        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(fetch, range(8)))

        assert all(result is results[0] for result in results)

    def test_loader_exception_propagates(self) -> None:
        """Loader failures are not swallowed."""

        def loader(locale: LocaleIdentifier) -> LocaleData | None:
            msg = f"corrupt data for {locale}"
            raise OSError(msg)

        provider = LocaleDataProvider(default="en", loader=loader)

        with pytest.raises(OSError, match="corrupt data"):
            provider.data_for("fr")


class TestSharedProvider:
    """cldr_provider() singleton."""

    def test_singleton(self) -> None:
        """The same provider is returned each call."""
        assert cldr_provider() is cldr_provider()

    def test_default_locale(self) -> None:
        """The shared provider ends chains in en_US."""
        assert cldr_provider().default == LocaleIdentifier("en", region="US")
