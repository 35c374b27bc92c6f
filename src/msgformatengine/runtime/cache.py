"""Shared cache of compiled templates.

Cache Key Structure:
    (bundle, resolved_locale, key)
    - bundle: str
    - resolved_locale: LocaleIdentifier the catalog entry was found under
      (or None for the root bundle)
    - key: str

Thread Safety:
    Reads are plain dict lookups and never block. Population is serialized
    by a lock and write-once: a compile racing another for the same key
    returns the entry stored first, so every caller sees equal content.
    Full caches evict the oldest entry (insertion order).

Python 3.13+.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from typing import TYPE_CHECKING, TypeAlias

from msgformatengine.constants import DEFAULT_CACHE_SIZE

if TYPE_CHECKING:
    from msgformatengine.core import LocaleIdentifier
    from msgformatengine.syntax.ast import CompiledMessage

__all__ = ["CacheKey", "CompiledMessageCache"]

logger = logging.getLogger(__name__)

CacheKey: TypeAlias = "tuple[str, LocaleIdentifier | None, str]"


class CompiledMessageCache:
    """Bounded, write-once cache of CompiledMessage objects.

    Attributes:
        maxsize: Maximum number of entries
        compilations: Number of times a factory ran on a miss
    """

    __slots__ = ("_compilations", "_entries", "_hits", "_lock", "_maxsize")

    def __init__(self, maxsize: int = DEFAULT_CACHE_SIZE) -> None:
        """Initialize an empty cache.

        Args:
            maxsize: Maximum number of entries (default: 1000)
        """
        if maxsize <= 0:
            msg = "maxsize must be positive"
            raise ValueError(msg)
        self._entries: dict[CacheKey, CompiledMessage] = {}
        self._maxsize = maxsize
        self._lock = threading.Lock()
        self._compilations = 0
        self._hits = 0

    @property
    def maxsize(self) -> int:
        """Maximum number of entries."""
        return self._maxsize

    @property
    def compilations(self) -> int:
        """Number of factory calls made on cache misses."""
        return self._compilations

    def get(self, key: CacheKey) -> CompiledMessage | None:
        """Cached message for ``key`` or None. Never blocks."""
        return self._entries.get(key)

    def get_or_compute(
        self, key: CacheKey, factory: Callable[[], CompiledMessage]
    ) -> CompiledMessage:
        """Return the cached message, compiling it with ``factory`` on a miss.

        The factory runs outside the lock, so concurrent misses may each
        compile; only the first result is stored and all callers get it.
        Exceptions from the factory propagate and nothing is cached.
        """
        cached = self._entries.get(key)
        if cached is not None:
            # Unlocked increment: hit count is approximate under contention
            self._hits += 1
            return cached

        compiled = factory()
        with self._lock:
            self._compilations += 1
            existing = self._entries.get(key)
            if existing is not None:
                return existing
            while len(self._entries) >= self._maxsize:
                oldest = next(iter(self._entries))
                del self._entries[oldest]
                logger.debug("Evicted compiled message %r", oldest)
            self._entries[key] = compiled
        logger.debug("Cached compiled message %r", key)
        return compiled

    def clear(self) -> None:
        """Drop every entry and reset counters."""
        with self._lock:
            self._entries.clear()
            self._compilations = 0
            self._hits = 0

    def stats(self) -> dict[str, int]:
        """Point-in-time counters: size, maxsize, hits, compilations."""
        with self._lock:
            return {
                "size": len(self._entries),
                "maxsize": self._maxsize,
                "hits": self._hits,
                "compilations": self._compilations,
            }

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries
