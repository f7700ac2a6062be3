"""Tests for the in-memory cache."""

from unittest.mock import patch

import pytest

from ghin.cache import CacheClient, InMemoryCacheClient


@pytest.fixture
def clock():
    """Controllable replacement for time.monotonic."""
    now = [1000.0]
    with patch("ghin.cache.memory.time.monotonic", side_effect=lambda: now[0]):
        yield now

def test_is_a_cache_client():
    assert isinstance(InMemoryCacheClient(), CacheClient)

def test_set_and_get():
    cache = InMemoryCacheClient()
    cache.set("key", {"value": 1})
    assert cache.get("key") == {"value": 1}
    assert cache.get("missing") is None

def test_entries_expire(clock):
    cache = InMemoryCacheClient()
    cache.set("key", "value", ttl=60)

    clock[0] += 59
    assert cache.get("key") == "value"

    clock[0] += 1
    assert cache.get("key") is None
    assert len(cache) == 0

def test_default_ttl_applies(clock):
    cache = InMemoryCacheClient(default_ttl=10)
    cache.set("key", "value")

    clock[0] += 10
    assert cache.get("key") is None

def test_entries_without_ttl_do_not_expire(clock):
    cache = InMemoryCacheClient()
    cache.set("key", "value")

    clock[0] += 10 ** 6
    assert cache.get("key") == "value"

def test_delete_and_clear():
    cache = InMemoryCacheClient()
    cache.set("a", 1)
    cache.set("b", 2)

    cache.delete("a")
    cache.delete("not-there")
    assert cache.get("a") is None
    assert cache.get("b") == 2

    cache.clear()
    assert len(cache) == 0

def test_cleanup_removes_only_expired(clock):
    cache = InMemoryCacheClient()
    cache.set("short", 1, ttl=5)
    cache.set("long", 2, ttl=50)
    cache.set("forever", 3)

    clock[0] += 10
    cache.cleanup()

    assert len(cache) == 2
    assert cache.get("long") == 2
    assert cache.get("forever") == 3
