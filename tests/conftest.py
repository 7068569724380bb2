import pytest

from lfu_cache import LFUCache


class FakeClock:
    def __init__(self, now: float = 1000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float):
        self.now += seconds


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def make_cache(clock):
    caches = []

    def _make(capacity=2, default_ttl=60.0, sweep_interval=0):
        cache = LFUCache(capacity, default_ttl, sweep_interval, clock=clock)
        caches.append(cache)
        return cache

    yield _make
    for cache in caches:
        cache.close()


def assert_consistent(cache: LFUCache):
    """Check the store and frequency buckets agree."""
    groups = cache.freq_index.groups
    if cache.capacity > 0:
        assert len(cache.items) <= cache.capacity
    for key, entry in cache.items.items():
        holders = [f for f, keys in groups.items() if key in keys]
        assert holders == [entry.frequency]
    assert sum(len(keys) for keys in groups.values()) == len(cache.items)
    assert all(groups.values())
    if cache.items:
        assert cache.min_freq == min(groups)
