"""Tests for CompiledMessageCache."""

from __future__ import annotations

import pytest

from msgformatengine import LocaleIdentifier, compile_template
from msgformatengine.runtime import CompiledMessageCache

EN = LocaleIdentifier("en")


class TestCompiledMessageCache:
    """Write-once bounded cache."""

    def test_miss_then_hit(self) -> None:
        """Factory runs once per key."""
        cache = CompiledMessageCache(maxsize=10)
        calls: list[str] = []

        def factory() -> object:
            calls.append("compile")
            return compile_template("Hi {0}")

        first = cache.get_or_compute(("App", EN, "hi"), factory)  # type: ignore[arg-type]
        second = cache.get_or_compute(("App", EN, "hi"), factory)  # type: ignore[arg-type]

        assert first is second
        assert calls == ["compile"]
        assert cache.stats() == {"size": 1, "maxsize": 10, "hits": 1, "compilations": 1}

    def test_get_and_contains(self) -> None:
        """Non-computing accessors."""
        cache = CompiledMessageCache()
        key = ("App", None, "title")

        assert cache.get(key) is None
        assert key not in cache

        message = cache.get_or_compute(key, lambda: compile_template("Title"))

        assert cache.get(key) is message
        assert key in cache
        assert len(cache) == 1

    def test_fifo_eviction(self) -> None:
        """The first inserted key is evicted first."""
        cache = CompiledMessageCache(maxsize=2)
        keys = [("App", EN, name) for name in ("a", "b", "c")]
        for key in keys:
            cache.get_or_compute(key, lambda: compile_template("x"))

        assert keys[0] not in cache
        assert keys[1] in cache
        assert keys[2] in cache

    def test_factory_error_not_cached(self) -> None:
        """Exceptions propagate and leave no entry."""
        cache = CompiledMessageCache()

        with pytest.raises(ValueError, match="boom"):
            cache.get_or_compute(("App", EN, "bad"), _raise_value_error)

        assert len(cache) == 0
        assert cache.compilations == 0

    def test_first_stored_value_wins(self) -> None:
        """A late compile of an existing key returns the stored message."""
        cache = CompiledMessageCache()
        key = ("App", EN, "k")
        stored = compile_template("stored")

        def racing_factory() -> object:
            # Another thread stores first while this one compiles
            cache.get_or_compute(key, lambda: stored)
            return compile_template("late")

        result = cache.get_or_compute(key, racing_factory)  # type: ignore[arg-type]

        assert result is stored
        assert cache.compilations == 2

    def test_clear(self) -> None:
        """clear() drops entries and counters."""
        cache = CompiledMessageCache()
        cache.get_or_compute(("App", EN, "k"), lambda: compile_template("x"))
        cache.clear()

        assert cache.stats() == {"size": 0, "maxsize": 1000, "hits": 0, "compilations": 0}

    def test_maxsize_validated(self) -> None:
        """Size must be positive."""
        with pytest.raises(ValueError, match="maxsize must be positive"):
            CompiledMessageCache(0)
        assert CompiledMessageCache(5).maxsize == 5


def _raise_value_error() -> object:
    msg = "boom"
    raise ValueError(msg)
