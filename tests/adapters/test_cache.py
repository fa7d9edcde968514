"""Tests for the cache adapters."""

from rideshare.adapters.cache import InMemoryCache, NullCache
from rideshare.domain.models import SearchIntent


def test_set_and_get():
    cache = InMemoryCache(name="test")
    intent = SearchIntent(destination="Pune")

    cache.set("pune", intent)

    assert cache.get("pune") is intent
    assert cache.get("missing") is None
    assert cache.size() == 1


def test_expired_entry_is_dropped():
    cache = InMemoryCache(name="test", default_ttl_seconds=60)

    cache.set("stale", "value", ttl=0)
    cache.set("fresh", "value")

    assert cache.get("stale") is None
    assert cache.get("fresh") == "value"
    assert cache.size() == 1


def test_least_recently_used_is_evicted():
    cache = InMemoryCache(name="test", max_size=2)
    cache.set("a", 1)
    cache.set("b", 2)

    cache.get("a")
    cache.set("c", 3)

    assert cache.size() == 2
    assert cache.get("b") is None
    assert cache.get("a") == 1
    assert cache.get("c") == 3


def test_get_or_compute_skips_none():
    cache = InMemoryCache(name="test")
    calls = []

    def compute():
        calls.append(1)
        return None

    assert cache.get_or_compute("k", compute) is None
    assert cache.get_or_compute("k", compute) is None
    assert len(calls) == 2

    assert cache.get_or_compute("v", lambda: "x") == "x"
    assert cache.get_or_compute("v", lambda: "y") == "x"


def test_invalidate_and_clear():
    cache = InMemoryCache(name="test")
    cache.set("a", 1)
    cache.set("b", 2)

    assert cache.invalidate("a")
    assert not cache.invalidate("a")
    assert cache.clear() == 1
    assert cache.size() == 0


def test_null_cache_never_stores():
    cache = NullCache()
    cache.set("a", 1)

    assert cache.get("a") is None
    assert cache.get_or_compute("a", lambda: 2) == 2
    assert cache.size() == 0
    assert cache.clear() == 0
    assert not cache.invalidate("a")
