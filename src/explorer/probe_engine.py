"""
Probe Engine - Calls every catalogued endpoint and records what answers.

For each endpoint template the engine:
- resolves {id} placeholders with identifiers collected so far
- sends GET and POST to each resolved path
- sends a GET per registered query-parameter variant
- infers a schema and stores a truncated preview of each JSON response

Requests are issued one at a time. Templates without a placeholder are
probed first so that parameterized ones can use the identifiers they yield.
"""

import logging
import re
from dataclasses import dataclass, field as dataclass_field
from typing import Any, Dict, Iterable, List, Optional, Sequence

import requests

from src.explorer.identifiers import IdentifierStore, extract_ids, is_parameterized, resolve_endpoint
from src.explorer.models import EndpointResult, ProbeResult, ResultSet
from src.explorer.request_cache import RequestCache
from src.explorer.schema_inference import infer_schema
from src.explorer.truncation import truncate

logger = logging.getLogger(__name__)

METHODS = ("GET", "POST")

# Query-parameter variants tried per base endpoint
QUERY_PARAMS: Dict[str, List[str]] = {
    "library_items/highlights_feed/": ["limit=10", "offset=0"],
    "library_items/": ["limit=10", "offset=0", "sort=recent", "sort=oldest", "status=active", "status=archived"],
    "search/": ["q=test", "limit=10"],
    "tags/": ["limit=10", "offset=0"],
    "highlights/": ["limit=10", "offset=0", "sort=recent"],
    "collections/": ["limit=10", "offset=0"],
    "user/reading_history/": ["limit=10", "offset=0"],
    "feeds/home/": ["limit=10", "offset=0"],
}

_PARAM_SUFFIX = re.compile(r"\{id\}.*$")


@dataclass
class ProbeSession:
    """State shared by all requests of one probing run"""
    identifiers: IdentifierStore = dataclass_field(default_factory=IdentifierStore)
    cache: RequestCache = dataclass_field(default_factory=RequestCache)


def order_templates(templates: Iterable[str]) -> List[str]:
    """Templates without a placeholder first, catalog order kept within each group"""
    templates = list(templates)
    return sorted(templates, key=is_parameterized)


def base_path_for_params(template: str) -> str:
    """Key into the query-parameter catalog: the template cut at its placeholder"""
    return _PARAM_SUFFIX.sub("", template)


class ProbeEngine:
    """
    Probes a catalog of Matter API endpoints

    Usage:
    ```python
    engine = ProbeEngine(host="https://api.getmatter.app/api/v11")
    results = engine.probe(access_token, ["tags/", "tags/{id}/"])
    print(f"{len(summarize(results))} working endpoints")
    ```
    """

    def __init__(
        self,
        host: str,
        http: Optional[requests.Session] = None,
        timeout: Optional[float] = None,
    ):
        """
        Initialize Probe Engine

        Args:
            host: API base URL, without trailing slash
            http: requests.Session (or compatible) used to send requests
            timeout: Per-request timeout in seconds, None for no timeout
        """
        self.host = host.rstrip("/")
        self.http = http or requests.Session()
        self.timeout = timeout

    def probe(
        self,
        access_token: str,
        templates: Sequence[str],
        query_params: Optional[Dict[str, List[str]]] = None,
        session: Optional[ProbeSession] = None,
    ) -> ResultSet:
        """
        Probe every template with every method and query variant

        Args:
            access_token: Bearer token
            templates: Endpoint path templates, optionally containing {id}
            query_params: Base path -> query fragments, defaults to QUERY_PARAMS
            session: Identifier store and cache for this run, fresh if omitted

        Returns:
            ResultSet covering every attempted combination
        """
        if query_params is None:
            query_params = QUERY_PARAMS
        session = session or ProbeSession()
        results = ResultSet()

        ordered = order_templates(templates)
        logger.info(f"Testing {len(ordered)} API endpoints")

        for template in ordered:
            params = query_params.get(base_path_for_params(template))

            for path in resolve_endpoint(template, session.identifiers):
                url = f"{self.host}/{path}"
                endpoint_result = results.start(path)

                for method in METHODS:
                    endpoint_result.methods[method] = self.probe_url(access_token, url, method, path, session)

                if params:
                    self._probe_params(access_token, url, path, params, endpoint_result, session)

        return results

    def _probe_params(
        self,
        access_token: str,
        url: str,
        path: str,
        params: List[str],
        endpoint_result: EndpointResult,
        session: ProbeSession,
    ) -> None:
        endpoint_result.with_params = {}
        for param in params:
            endpoint_result.with_params[param] = self.probe_url(
                access_token, f"{url}?{param}", "GET", path, session
            )

    def probe_url(
        self,
        access_token: str,
        url: str,
        method: str,
        path: str,
        session: ProbeSession,
    ) -> ProbeResult:
        """
        Send one request, or reuse the result of an identical earlier one

        Failures (HTTP errors, network errors, invalid JSON) are returned as
        unsuccessful results, never raised.
        """
        cached = session.cache.get(method, url)
        if cached is not None:
            logger.info(f"Using cached response for {method} {url}")
            return cached

        logger.info(f"Testing: {method} {url}")
        result = self._send(access_token, url, method, path, session)
        session.cache.put(method, url, result)
        return result

    def _send(
        self,
        access_token: str,
        url: str,
        method: str,
        path: str,
        session: ProbeSession,
    ) -> ProbeResult:
        headers = {
            "Authorization": f"Bearer {access_token}",
            "Content-Type": "application/json",
        }
        kwargs: Dict[str, Any] = {"headers": headers, "timeout": self.timeout}
        if method == "POST":
            kwargs["json"] = {}

        try:
            response = self.http.request(method, url, **kwargs)
            if not 200 <= response.status_code < 300:
                logger.debug(f"{method} {url} -> {response.status_code} {response.reason}")
                return ProbeResult.failure(response.status_code, response.reason or "")

            data = response.json()
        except requests.exceptions.RequestException as e:
            logger.warning(f"Request failed for {method} {url}: {e}")
            return ProbeResult.error(e)
        except ValueError as e:
            logger.warning(f"Invalid JSON from {method} {url}: {e}")
            return ProbeResult.error(e)

        extract_ids(path, data, session.identifiers)

        return ProbeResult(
            status=response.status_code,
            status_text=response.reason or "",
            success=True,
            data_schema=infer_schema(data),
            data_preview=truncate(data),
        )
