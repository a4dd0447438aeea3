"""Shared fixtures: a call-counting stand-in for requests.Session."""
import json
from typing import Any, Dict, List, Tuple
from unittest.mock import Mock

import pytest

HOST = "https://api.example.test/api/v11"


def make_response(status_code: int = 200, body: Any = None, reason: str = "OK") -> Mock:
    """Mock requests.Response with a JSON body"""
    response = Mock()
    response.status_code = status_code
    response.reason = reason
    if isinstance(body, Exception):
        response.json.side_effect = body
    else:
        response.json.return_value = body
    return response


class StubHttp:
    """Routes (method, url) to canned responses and records every call"""

    def __init__(self, routes: Dict[Tuple[str, str], Any] = None):
        self.routes = routes or {}
        self.calls: List[Tuple[str, str, Dict[str, Any]]] = []

    def request(self, method, url, **kwargs):
        self.calls.append((method, url, kwargs))
        route = self.routes.get((method, url))
        if isinstance(route, Exception):
            raise route
        if route is None:
            return make_response(404, reason="Not Found")
        return route

    def count(self, method: str, url: str) -> int:
        return sum(1 for m, u, _ in self.calls if m == method and u == url)


@pytest.fixture
def stub_http():
    return StubHttp()


@pytest.fixture
def workspace(tmp_path):
    """Config and output directories with a saved token and a small catalog"""
    config_dir = tmp_path / "config"
    config_dir.mkdir()
    (config_dir / "settings.json").write_text(
        json.dumps({"accessToken": "token-123", "refreshToken": "refresh-456"})
    )
    (config_dir / "endpoints.json").write_text(json.dumps(["tags/{id}/", "tags/"]))
    return tmp_path
