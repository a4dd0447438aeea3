"""Tests for RequestCache."""
from src.explorer.models import ProbeResult
from src.explorer.request_cache import RequestCache


class TestRequestCache:
    """Test request memoization."""

    def test_miss_returns_none(self):
        assert RequestCache().get("GET", "https://x/tags/") is None

    def test_put_then_get(self):
        cache = RequestCache()
        result = ProbeResult(status=200, status_text="OK", success=True, data_schema="empty array", data_preview=[])

        cache.put("GET", "https://x/tags/", result)

        assert cache.get("GET", "https://x/tags/") is result
        assert "GET:https://x/tags/" in cache
        assert len(cache) == 1

    def test_method_is_part_of_key(self):
        cache = RequestCache()
        cache.put("GET", "https://x/tags/", ProbeResult.failure(405, "Method Not Allowed"))

        assert cache.get("POST", "https://x/tags/") is None

    def test_query_string_is_part_of_key(self):
        cache = RequestCache()
        cache.put("GET", "https://x/tags/?limit=10", ProbeResult.failure(500, "Server Error"))

        assert cache.get("GET", "https://x/tags/") is None
        assert cache.get("GET", "https://x/tags/?limit=10").status == 500
