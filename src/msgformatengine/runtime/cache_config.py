"""Compiled-message cache configuration.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass

from msgformatengine.constants import DEFAULT_CACHE_SIZE

__all__ = ["CacheConfig"]


@dataclass(frozen=True, slots=True)
class CacheConfig:
    """Immutable configuration for MessageEngine's compiled-message cache.

    ``CacheConfig()`` with no arguments is a usable configuration.

    Attributes:
        size: Maximum cached templates; the oldest entry is evicted first
            (default: 1000).
        enabled: Cache compiled templates at all (default: True). When
            False every call recompiles.

    Example:
        >>> config = CacheConfig(size=500)
        >>> config.size
        500
    """

    size: int = DEFAULT_CACHE_SIZE
    enabled: bool = True

    def __post_init__(self) -> None:
        """Validate configuration values at construction time.

        Raises:
            ValueError: If size is not positive.
        """
        if self.size <= 0:
            msg = "size must be positive"
            raise ValueError(msg)
