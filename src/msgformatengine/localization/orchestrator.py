"""Message engine: catalog + compiled-message cache + locale data + renderer.

Data flow for :meth:`MessageEngine.format`:
    1. The catalog resolves (bundle, locale, key) to template text and the
       locale that supplied it
    2. The template is compiled once per (bundle, resolved locale, key)
    3. The renderer formats the arguments with the REQUESTED locale's data,
       so an ``en`` template rendered for ``bn_BD`` still uses Bengali digits

Thread Safety:
    MessageEngine holds no mutable state of its own beyond the compiled
    cache, which is safe for concurrent use. Concurrent first compiles of one
    key may duplicate work; every caller receives the same stored message.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING

from msgformatengine.runtime.cache import CompiledMessageCache
from msgformatengine.runtime.cache_config import CacheConfig
from msgformatengine.runtime.provider import cldr_provider
from msgformatengine.runtime.renderer import render_with_data
from msgformatengine.syntax.compiler import compile_template

if TYPE_CHECKING:
    from msgformatengine.core import LocaleIdentifier
    from msgformatengine.runtime.provider import LocaleDataProvider
    from msgformatengine.runtime.value_types import ArgumentValue
    from msgformatengine.syntax.ast import CompiledMessage

    from .catalog import CatalogSource
    from .types import BundleName, MessageKey

__all__ = ["MessageEngine"]

logger = logging.getLogger(__name__)


class MessageEngine:
    """Formats catalog templates for any locale.

    Args:
        catalog: Template source (usually a ResourceCatalog)
        provider: Locale data source (shared CLDR provider when omitted)
        cache: Compiled-message cache settings (CacheConfig() when omitted)

    Example:
        >>> from msgformatengine.localization import ResourceCatalog
        >>> catalog = ResourceCatalog()
        >>> catalog.add_entries("Planets", "en", {"welcome": "Welcome to {0}!"})
        >>> engine = MessageEngine(catalog)
        >>> engine.format("Planets", "en_US", "welcome", ["Mars"])
        'Welcome to Mars!'

    Note:
        Compiled templates are cached for the process lifetime. Replacing a
        catalog entry after it was formatted requires clear_cache().
    """

    __slots__ = ("_cache", "_cache_config", "_catalog", "_provider")

    def __init__(
        self,
        catalog: CatalogSource,
        provider: LocaleDataProvider | None = None,
        *,
        cache: CacheConfig | None = None,
    ) -> None:
        self._catalog = catalog
        self._provider = provider if provider is not None else cldr_provider()
        self._cache_config = cache if cache is not None else CacheConfig()
        self._cache = CompiledMessageCache(self._cache_config.size)

    @property
    def catalog(self) -> CatalogSource:
        """Template source."""
        return self._catalog

    @property
    def provider(self) -> LocaleDataProvider:
        """Locale data source."""
        return self._provider

    def compile(
        self, bundle: BundleName, locale: LocaleIdentifier | str, key: MessageKey
    ) -> CompiledMessage:
        """Resolve and compile a template, using the cache when enabled.

        Raises:
            MissingKeyError: If the catalog has no entry for the key
            TemplateSyntaxError: If the template is malformed (nothing is cached)
        """
        entry = self._catalog.resolve(bundle, locale, key)
        if not self._cache_config.enabled:
            return compile_template(entry.template)
        return self._cache.get_or_compute(
            (bundle, entry.locale, key), lambda: compile_template(entry.template)
        )

    def format(
        self,
        bundle: BundleName,
        locale: LocaleIdentifier | str,
        key: MessageKey,
        arguments: Sequence[ArgumentValue] = (),
    ) -> str:
        """Format a catalog template with positional arguments.

        Args:
            bundle: Bundle name
            locale: Requested locale (also selects the locale data)
            key: Template key
            arguments: Values for ``{0}``, ``{1}``...

        Returns:
            Rendered text

        Raises:
            MissingKeyError: If the catalog has no entry for the key
            TemplateSyntaxError: If the template is malformed
            UnsupportedLocaleError: If no locale data resolves
            RenderError: If an argument is missing or does not fit its placeholder
        """
        compiled = self.compile(bundle, locale, key)
        data = self._provider.data_for(locale)
        return render_with_data(compiled, data, arguments)

    def get_string(
        self, bundle: BundleName, locale: LocaleIdentifier | str, key: MessageKey
    ) -> str:
        """Raw template text for ``key``, uncompiled.

        Raises:
            MissingKeyError: If the catalog has no entry for the key
        """
        return self._catalog.resolve(bundle, locale, key).template

    def clear_cache(self) -> None:
        """Drop every compiled template."""
        self._cache.clear()
        logger.debug("Compiled message cache cleared")

    def cache_stats(self) -> dict[str, int | bool]:
        """Cache counters (size, maxsize, hits, compilations) plus ``enabled``."""
        return {**self._cache.stats(), "enabled": self._cache_config.enabled}
