"""Tests for the in-memory content cache."""

from unittest.mock import patch

import pytest

from kahu_studio.services.content_cache import ContentCache


class TestGetOrCompute:
    def test_second_call_is_cached(self):
        cache = ContentCache(ttl=60)
        calls = []

        def _compute():
            calls.append(1)
            return ["table-iroko"]

        assert cache.get_or_compute("products:all", _compute) == ["table-iroko"]
        assert cache.get_or_compute("products:all", _compute) == ["table-iroko"]
        assert len(calls) == 1

    def test_expired_entry_recomputed(self):
        cache = ContentCache(ttl=60)
        with patch("kahu_studio.services.content_cache.time.monotonic", return_value=1000.0):
            cache.get_or_compute("k", lambda: "old")
        with patch("kahu_studio.services.content_cache.time.monotonic", return_value=1061.0):
            assert cache.get_or_compute("k", lambda: "new") == "new"

    def test_zero_ttl_never_stores(self):
        cache = ContentCache(ttl=0)
        calls = []
        cache.get_or_compute("k", lambda: calls.append(1))
        cache.get_or_compute("k", lambda: calls.append(1))
        assert len(calls) == 2

    def test_failure_not_cached(self):
        cache = ContentCache(ttl=60)

        def _boom():
            raise ValueError("bad payload")

        with pytest.raises(ValueError):
            cache.get_or_compute("k", _boom)
        assert cache.get_or_compute("k", lambda: "ok") == "ok"


class TestInvalidate:
    def test_prefix(self):
        cache = ContentCache(ttl=60)
        cache.get_or_compute("products:all", lambda: 1)
        cache.get_or_compute("products:flash", lambda: 2)
        cache.get_or_compute("projects:all", lambda: 3)
        assert cache.invalidate("products:") == 2
        assert cache.get_or_compute("projects:all", lambda: 99) == 3

    def test_clear_all(self):
        cache = ContentCache(ttl=60)
        cache.get_or_compute("a", lambda: 1)
        cache.get_or_compute("b", lambda: 2)
        assert cache.invalidate() == 2
        assert cache.get_or_compute("a", lambda: 10) == 10
