from siterisk.utils.cache import TTLCache


class FakeClock:
    def __init__(self):
        self.now = 0.0

    def __call__(self):
        return self.now


class TestTTLCache:
    def test_hit_before_expiry(self):
        clock = FakeClock()
        cache = TTLCache(ttl_seconds=300, clock=clock)
        cache.set("k", "v")

        clock.now = 299
        assert cache.get("k") == (True, "v")

    def test_expired_entry_is_evicted(self):
        clock = FakeClock()
        cache = TTLCache(ttl_seconds=300, clock=clock)
        cache.set("k", "v")

        clock.now = 300
        assert cache.get("k") == (False, None)
        assert len(cache) == 0

    def test_cached_none_is_a_hit(self):
        cache = TTLCache(clock=FakeClock())
        cache.set("k", None)
        assert cache.get("k") == (True, None)

    def test_per_entry_ttl(self):
        clock = FakeClock()
        cache = TTLCache(ttl_seconds=300, clock=clock)
        cache.set("short", None, ttl_seconds=60)
        cache.set("long", "addr")

        clock.now = 61
        assert cache.get("short") == (False, None)
        assert cache.get("long") == (True, "addr")

    def test_clear(self):
        cache = TTLCache(clock=FakeClock())
        cache.set("a", 1)
        cache.set("b", 2)
        cache.clear()
        assert len(cache) == 0
        assert cache.get("a") == (False, None)

    def test_unread_expired_entries_are_swept_on_write(self):
        clock = FakeClock()
        cache = TTLCache(ttl_seconds=300, clock=clock)
        for i in range(1000):
            cache.set(f"k{i}", i)

        clock.now = 301
        cache.set("fresh", "v")

        assert len(cache) == 1
        assert cache.get("fresh") == (True, "v")

    def test_sweep_keeps_live_entries(self):
        clock = FakeClock()
        cache = TTLCache(ttl_seconds=300, clock=clock)
        cache.set("short", 1, ttl_seconds=60)
        cache.set("long", 2)

        clock.now = 61
        cache.set("new", 3)

        assert len(cache) == 2
        assert cache.get("long") == (True, 2)
