"""
Response Cache Tests - Unit Tests for TTL Expiration and Concurrency

Files that USE this module:
- pytest (test runner executes these tests)

Files that this module USES:
- dolarbot.shared.cache (ResponseCache for testing)
"""
import threading
from datetime import timedelta

import pytest

from conftest import FakeClock
from dolarbot.domain.models import CountryRisk, DollarQuote, DollarType
from dolarbot.shared.cache import ResponseCache


def _quote(sell="105.00"):
    return DollarQuote(buy="100.00", sell=sell, type=DollarType.BLUE)


class TestResponseCache:
    def test_default_ttl_from_settings(self):
        cache = ResponseCache()
        assert cache.ttl.total_seconds() > 0

    def test_rejects_non_positive_ttl(self):
        with pytest.raises(ValueError, match="ttl must be positive"):
            ResponseCache(ttl=timedelta(0))

    def test_get_missing_key(self, clock):
        cache = ResponseCache(ttl=timedelta(minutes=5), clock=clock)
        assert cache.get(DollarType.BLUE) is None

    def test_put_then_get_returns_same_object(self, clock):
        cache = ResponseCache(ttl=timedelta(minutes=5), clock=clock)
        quote = _quote()
        cache.put(DollarType.BLUE, quote)
        assert cache.get(DollarType.BLUE) is quote

    def test_entry_expires_after_ttl(self, clock):
        cache = ResponseCache(ttl=timedelta(minutes=5), clock=clock)
        cache.put(DollarType.BLUE, _quote())

        clock.advance(5 * 60 - 1)
        assert cache.get(DollarType.BLUE) is not None

        clock.advance(1.001)
        assert cache.get(DollarType.BLUE) is None
        assert len(cache) == 0

    def test_put_overwrites_and_restarts_ttl(self, clock):
        cache = ResponseCache(ttl=timedelta(seconds=10), clock=clock)
        cache.put(DollarType.BLUE, _quote("1.00"))
        clock.advance(8)
        newer = _quote("2.00")
        cache.put(DollarType.BLUE, newer)
        clock.advance(8)
        assert cache.get(DollarType.BLUE) is newer

    def test_keys_are_independent(self, clock):
        cache = ResponseCache(ttl=timedelta(seconds=10), clock=clock)
        cache.put(DollarType.BLUE, _quote())
        clock.advance(9)
        cache.put("RiesgoPais", CountryRisk(value="1500"))
        clock.advance(2)
        assert cache.get(DollarType.BLUE) is None
        assert cache.get("RiesgoPais") == CountryRisk(value="1500")

    def test_expected_type_mismatch_is_a_miss(self, clock):
        cache = ResponseCache(ttl=timedelta(seconds=10), clock=clock)
        cache.put("RiesgoPais", CountryRisk(value="1500"))
        assert cache.get("RiesgoPais", DollarQuote) is None
        assert cache.get("RiesgoPais", CountryRisk) is not None

    def test_put_none_rejected(self, clock):
        cache = ResponseCache(ttl=timedelta(seconds=10), clock=clock)
        with pytest.raises(ValueError):
            cache.put(DollarType.BLUE, None)

    def test_clear(self, clock):
        cache = ResponseCache(ttl=timedelta(seconds=10), clock=clock)
        cache.put(DollarType.BLUE, _quote())
        cache.put(DollarType.OFICIAL, _quote())
        assert len(cache) == 2
        cache.clear()
        assert len(cache) == 0

    def test_concurrent_writers_same_key(self):
        cache = ResponseCache(ttl=timedelta(minutes=5), clock=FakeClock())
        quotes = [_quote(f"{i}.00") for i in range(50)]

        errors = []

        def write(q):
            for _ in range(100):
                cache.put(DollarType.BLUE, q)
                if not isinstance(cache.get(DollarType.BLUE), DollarQuote):
                    errors.append(q)

        threads = [threading.Thread(target=write, args=(q,)) for q in quotes]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert errors == []
        assert cache.get(DollarType.BLUE) in quotes
        assert len(cache) == 1
