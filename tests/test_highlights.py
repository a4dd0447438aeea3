"""Tests for the highlights export."""
from unittest.mock import Mock

from config import MatterApiConfig
from src.api.highlights import fetch_highlights
from src.api.matter_client import MatterClient


class TestFetchHighlights:
    """Test paging through the highlights feed."""

    def test_follows_next_links(self):
        client = MatterClient(MatterApiConfig(host="https://api.example.test"), access_token="t")
        pages = {
            "https://api.example.test/library_items/highlights_feed/": {
                "feed": [{"id": "a"}, {"id": "b"}],
                "next": "https://api.example.test/library_items/highlights_feed/?page=2",
            },
            "https://api.example.test/library_items/highlights_feed/?page=2": {
                "feed": [{"id": "c"}],
                "next": None,
            },
        }
        client.get = Mock(side_effect=lambda url: pages[url])

        entries = fetch_highlights(client)

        assert [e["id"] for e in entries] == ["a", "b", "c"]
        assert client.get.call_count == 2

    def test_empty_feed(self):
        client = MatterClient(MatterApiConfig(host="https://api.example.test"))
        client.get = Mock(return_value={"feed": [], "next": None})

        assert fetch_highlights(client) == []
