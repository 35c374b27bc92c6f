"""In-memory resource catalog with per-key locale fallback.

Maps (bundle, locale, key) to template text. Each key is resolved
independently along the locale's fallback chain, so a regional bundle may
override only some keys of its language bundle. A root bundle (locale None)
is tried after the whole chain, default locale included.

Reading catalog files is the host's job; the catalog is filled in memory
with add_entries().

Thread Safety:
    Lookups hold the read side of an RWLock; add_entries() holds the write
    side. Concurrent lookups never block each other.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Protocol

from msgformatengine.constants import DEFAULT_LOCALE
from msgformatengine.core import LocaleIdentifier, fallback_chain
from msgformatengine.diagnostics import ErrorTemplate, MissingKeyError
from msgformatengine.runtime.rwlock import RWLock

from .types import BundleName, MessageKey, TemplateText

__all__ = ["CatalogEntry", "CatalogSource", "FallbackInfo", "ResourceCatalog"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class CatalogEntry:
    """Template text together with the locale that supplied it.

    Attributes:
        template: Raw template text
        locale: Identifier the entry was registered under (None for root)
    """

    template: TemplateText
    locale: LocaleIdentifier | None


@dataclass(frozen=True, slots=True)
class FallbackInfo:
    """Information about a locale fallback event.

    Provided to the on_fallback callback when a key is resolved from a less
    specific locale than the one requested.

    Attributes:
        bundle: Bundle that was searched
        key: Template key that was resolved
        requested_locale: Locale the caller asked for
        resolved_locale: Locale that held the key (None for root)

    Example:
        >>> def log_fallback(info: FallbackInfo) -> None:
        ...     print(f"{info.key} resolved from {info.resolved_locale}")
        >>> catalog = ResourceCatalog(on_fallback=log_fallback)
    """

    bundle: BundleName
    key: MessageKey
    requested_locale: LocaleIdentifier
    resolved_locale: LocaleIdentifier | None


class CatalogSource(Protocol):
    """Anything that can resolve templates for the engine.

    ResourceCatalog is the built-in implementation; hosts backed by another
    store implement resolve() with the same contract.
    """

    def resolve(
        self, bundle: BundleName, locale: LocaleIdentifier | str, key: MessageKey
    ) -> CatalogEntry:
        """Find ``key`` for ``locale`` or raise MissingKeyError."""
        ...


class ResourceCatalog:
    """Template catalog keyed by bundle, locale and key.

    Example:
        >>> catalog = ResourceCatalog()
        >>> catalog.add_entries("Greetings", "en", {"greeting": "Hello"})
        >>> catalog.lookup("Greetings", "en_US", "greeting")
        'Hello'
    """

    __slots__ = ("_default", "_entries", "_lock", "_on_fallback")

    def __init__(
        self,
        default: LocaleIdentifier | str = DEFAULT_LOCALE,
        *,
        on_fallback: Callable[[FallbackInfo], None] | None = None,
    ) -> None:
        """Create an empty catalog.

        Args:
            default: Locale whose chain is searched after the requested one
            on_fallback: Called when a key resolves from a less specific locale
        """
        self._default = LocaleIdentifier.coerce(default)
        self._on_fallback = on_fallback
        self._entries: dict[tuple[BundleName, LocaleIdentifier | None], dict[MessageKey, str]] = {}
        self._lock = RWLock()

    @property
    def default(self) -> LocaleIdentifier:
        """Locale searched after the requested locale's own chain."""
        return self._default

    def add_entries(
        self,
        bundle: BundleName,
        locale: LocaleIdentifier | str | None,
        entries: Mapping[MessageKey, TemplateText],
    ) -> None:
        """Register templates for ``bundle`` under ``locale``.

        Keys already registered for the same bundle and locale are replaced.

        Args:
            bundle: Bundle name
            locale: Locale of the templates; None registers the root bundle
            entries: Key -> template text
        """
        loc = None if locale is None else LocaleIdentifier.coerce(locale)
        with self._lock.write():
            self._entries.setdefault((bundle, loc), {}).update(entries)
        logger.debug("Registered %d entries for %s/%s", len(entries), bundle, loc or "root")

    def resolve(
        self, bundle: BundleName, locale: LocaleIdentifier | str, key: MessageKey
    ) -> CatalogEntry:
        """Find ``key`` walking the fallback chain, then the root bundle.

        Args:
            bundle: Bundle name
            locale: Requested locale
            key: Template key

        Returns:
            CatalogEntry with the template and the locale that supplied it

        Raises:
            MissingKeyError: If no chain entry (default and root included) has the key
        """
        requested = LocaleIdentifier.coerce(locale)
        candidates: list[LocaleIdentifier | None] = [*fallback_chain(requested, self._default)]
        candidates.append(None)

        with self._lock.read():
            for candidate in candidates:
                table = self._entries.get((bundle, candidate))
                if table is not None and key in table:
                    entry = CatalogEntry(template=table[key], locale=candidate)
                    break
            else:
                raise MissingKeyError(
                    ErrorTemplate.key_not_found(bundle, requested.canonical, key),
                    bundle=bundle,
                    locale_code=requested.canonical,
                    key=key,
                )

        if entry.locale != requested:
            logger.debug(
                "Key %s/%s for %s resolved from %s", bundle, key, requested, entry.locale or "root"
            )
            if self._on_fallback is not None:
                self._on_fallback(
                    FallbackInfo(
                        bundle=bundle,
                        key=key,
                        requested_locale=requested,
                        resolved_locale=entry.locale,
                    )
                )
        return entry

    def lookup(self, bundle: BundleName, locale: LocaleIdentifier | str, key: MessageKey) -> str:
        """Template text for ``key``; see :meth:`resolve`.

        Raises:
            MissingKeyError: If the key is absent from the whole chain
        """
        return self.resolve(bundle, locale, key).template

    def has_key(self, bundle: BundleName, locale: LocaleIdentifier | str, key: MessageKey) -> bool:
        """True if :meth:`lookup` would succeed, without fallback callbacks."""
        requested = LocaleIdentifier.coerce(locale)
        candidates = [*fallback_chain(requested, self._default), None]
        with self._lock.read():
            return any(
                key in self._entries.get((bundle, candidate), {}) for candidate in candidates
            )

    def bundles(self) -> frozenset[BundleName]:
        """Names of every bundle with at least one registration."""
        with self._lock.read():
            return frozenset(bundle for bundle, _ in self._entries)
