"""Locale data lookup with fallback.

LocaleDataProvider maps a LocaleIdentifier to LocaleData by walking the
fallback chain (``bn_BD`` -> ``bn`` -> ``en_US`` -> ``en``) over a preloaded
table. An optional loader (such as :func:`cldr_loader`) is offered every
chain entry the table lacks; successful loads are cached.

Thread Safety:
    Lookups read a plain dict without locking. Population takes a lock and is
    write-once: when two threads load the same locale concurrently, the first
    stored value wins and both callers receive it.

Python 3.13+.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable, Mapping
from typing import TypeAlias

from msgformatengine.constants import DEFAULT_LOCALE
from msgformatengine.core import LocaleIdentifier, fallback_chain
from msgformatengine.diagnostics import ErrorTemplate, UnsupportedLocaleError

from .locale_data import LocaleData, cldr_loader

__all__ = ["LocaleDataLoader", "LocaleDataProvider", "cldr_provider"]

logger = logging.getLogger(__name__)

LocaleDataLoader: TypeAlias = Callable[[LocaleIdentifier], LocaleData | None]
"""Returns data for an identifier, or None when it has none."""


class LocaleDataProvider:
    """Resolves LocaleData for any locale through its fallback chain.

    Args:
        table: Preloaded data; keys may be identifiers or locale strings
        default: Locale whose chain ends every resolution
        loader: Called for chain entries missing from the table
        strict_default: Validate at construction that the default resolves

    Raises:
        UnsupportedLocaleError: If ``strict_default`` and the default has no data

    Note:
        Loaded entries and loader misses are kept for the provider's lifetime,
        one per distinct identifier requested. With the CLDR loader each entry
        holds full name and currency tables. When locale strings come from
        untrusted input, validate them against a known set first or use a
        provider without a loader.

    Example:
        >>> provider = LocaleDataProvider({"en": LocaleData("en")})
        >>> str(provider.resolve("en_US"))
        'en'
    """

    __slots__ = ("_default", "_entries", "_loader", "_lock", "_missing")

    def __init__(
        self,
        table: Mapping[LocaleIdentifier | str, LocaleData] | None = None,
        *,
        default: LocaleIdentifier | str = DEFAULT_LOCALE,
        loader: LocaleDataLoader | None = None,
        strict_default: bool = False,
    ) -> None:
        self._default = LocaleIdentifier.coerce(default)
        self._entries: dict[LocaleIdentifier, LocaleData] = {
            LocaleIdentifier.coerce(key): data for key, data in (table or {}).items()
        }
        self._loader = loader
        self._lock = threading.Lock()
        self._missing: set[LocaleIdentifier] = set()
        if strict_default:
            self.validate()

    @property
    def default(self) -> LocaleIdentifier:
        """Locale appended to every fallback chain."""
        return self._default

    @property
    def locales(self) -> tuple[LocaleIdentifier, ...]:
        """Identifiers with data available now (preloaded or already loaded)."""
        return tuple(self._entries)

    def _load(self, candidate: LocaleIdentifier) -> LocaleData | None:
        if self._loader is None or candidate in self._missing:
            return None
        # Loader runs unlocked: concurrent first loads may duplicate work
        data = self._loader(candidate)
        with self._lock:
            existing = self._entries.get(candidate)
            if existing is not None:
                return existing
            if data is None:
                self._missing.add(candidate)
                return None
            self._entries[candidate] = data
        logger.debug("Loaded locale data for %s", candidate)
        return data

    def _lookup(self, locale: LocaleIdentifier | str) -> tuple[LocaleIdentifier, LocaleData]:
        requested = LocaleIdentifier.coerce(locale)
        chain = fallback_chain(requested, self._default)
        for candidate in chain:
            data = self._entries.get(candidate)
            if data is None:
                data = self._load(candidate)
            if data is not None:
                if candidate != requested:
                    logger.debug("Locale data for %s resolved via %s", requested, candidate)
                return candidate, data
        raise UnsupportedLocaleError(
            ErrorTemplate.unsupported_locale(
                requested.canonical, tuple(c.canonical for c in chain)
            ),
            locale_code=requested.canonical,
        )

    def data_for(self, locale: LocaleIdentifier | str) -> LocaleData:
        """Return the data of the first chain entry that has any.

        Raises:
            UnsupportedLocaleError: If nothing in the chain resolves, default included
        """
        return self._lookup(locale)[1]

    def resolve(self, locale: LocaleIdentifier | str) -> LocaleIdentifier:
        """Return the identifier whose data :meth:`data_for` would use."""
        return self._lookup(locale)[0]

    def validate(self) -> None:
        """Check that the default locale resolves.

        Call at startup: a provider whose default has no data is a
        configuration error.

        Raises:
            UnsupportedLocaleError: If the default's chain has no data
        """
        chain = fallback_chain(self._default, None)
        for candidate in chain:
            if self._entries.get(candidate) is not None or self._load(candidate) is not None:
                return
        raise UnsupportedLocaleError(
            ErrorTemplate.unsupported_locale(
                self._default.canonical, tuple(c.canonical for c in chain)
            ),
            locale_code=self._default.canonical,
        )


_SHARED_PROVIDER: LocaleDataProvider | None = None
_SHARED_PROVIDER_LOCK = threading.Lock()


def cldr_provider() -> LocaleDataProvider:
    """Shared process-wide provider backed by Babel's CLDR data.

    Empty table, CLDR loader, ``en_US`` default. Created on first call.
    """
    # Lazy initialization of module-level singleton
    global _SHARED_PROVIDER  # noqa: PLW0603
    if _SHARED_PROVIDER is None:
        with _SHARED_PROVIDER_LOCK:
            if _SHARED_PROVIDER is None:
                _SHARED_PROVIDER = LocaleDataProvider(loader=cldr_loader)
    return _SHARED_PROVIDER
