"""Tests for the TTL verification cache."""

import pytest

from curator.verification.cache import InMemoryVerificationCache, VerificationCache

URL = "https://www.udemy.com/course/complete-python-bootcamp/"


class TestFreshness:
    def test_hit_before_expiry(self, fake_clock, outcome_factory):
        cache = InMemoryVerificationCache(60, clock=fake_clock)
        outcome = outcome_factory(URL)
        cache.put(URL, outcome)

        fake_clock.advance(59.9)
        assert cache.get(URL) is outcome

    def test_miss_exactly_at_expiry(self, fake_clock, outcome_factory):
        cache = InMemoryVerificationCache(60, clock=fake_clock)
        cache.put(URL, outcome_factory(URL))

        fake_clock.advance(60)
        assert cache.get(URL) is None

    def test_expired_entry_evicted_on_read(self, fake_clock, outcome_factory):
        cache = InMemoryVerificationCache(60, clock=fake_clock)
        cache.put(URL, outcome_factory(URL))
        fake_clock.advance(120)

        assert cache.size() == 1
        cache.get(URL)
        assert cache.size() == 0

    def test_zero_ttl_never_serves(self, fake_clock, outcome_factory):
        cache = InMemoryVerificationCache(0, clock=fake_clock)
        cache.put(URL, outcome_factory(URL))
        assert cache.get(URL) is None

    def test_put_replaces_and_restarts_ttl(self, fake_clock, outcome_factory):
        cache = InMemoryVerificationCache(60, clock=fake_clock)
        cache.put(URL, outcome_factory(URL, reachable=False))
        fake_clock.advance(50)

        replacement = outcome_factory(URL, reachable=True)
        cache.put(URL, replacement)
        fake_clock.advance(50)

        assert cache.get(URL) is replacement

    def test_missing_key(self, fake_clock):
        cache = InMemoryVerificationCache(clock=fake_clock)
        assert cache.get("https://example.com/nothing") is None

    def test_negative_ttl_rejected(self):
        with pytest.raises(ValueError):
            InMemoryVerificationCache(-1)


class TestKeys:
    def test_host_case_fragment_and_trailing_slash_ignored(self, fake_clock, outcome_factory):
        cache = InMemoryVerificationCache(clock=fake_clock)
        outcome = outcome_factory("https://Example.com/Docs/")
        cache.put("https://Example.com/Docs/#intro", outcome)

        assert cache.get("https://example.com/Docs") is outcome
        assert cache.size() == 1

    def test_path_case_is_significant(self, fake_clock, outcome_factory):
        cache = InMemoryVerificationCache(clock=fake_clock)
        cache.put("https://example.com/Docs", outcome_factory("https://example.com/Docs"))
        assert cache.get("https://example.com/docs") is None


class TestStats:
    def test_counts_reachable_and_unreachable(self, fake_clock, outcome_factory):
        cache = InMemoryVerificationCache(clock=fake_clock)
        cache.put("https://a.example/1", outcome_factory("https://a.example/1"))
        cache.put("https://a.example/2", outcome_factory("https://a.example/2"))
        cache.put("https://a.example/3", outcome_factory("https://a.example/3", reachable=False))

        assert cache.stats() == {"size": 3, "reachable": 2, "unreachable": 1}

    def test_stats_drop_expired(self, fake_clock, outcome_factory):
        cache = InMemoryVerificationCache(10, clock=fake_clock)
        cache.put("https://a.example/1", outcome_factory("https://a.example/1"))
        fake_clock.advance(5)
        cache.put("https://a.example/2", outcome_factory("https://a.example/2"))
        fake_clock.advance(5)

        assert cache.stats()["size"] == 1
        assert cache.size() == 1

    def test_clear(self, fake_clock, outcome_factory):
        cache = InMemoryVerificationCache(clock=fake_clock)
        cache.put(URL, outcome_factory(URL))
        cache.clear()
        assert cache.size() == 0
        assert cache.get(URL) is None

    def test_is_a_verification_cache(self):
        assert isinstance(InMemoryVerificationCache(), VerificationCache)
