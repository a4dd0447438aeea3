"""
API Explorer - Probes Matter API endpoints and documents their responses.

Supports:
- GET/POST probing of a catalogued endpoint list
- Query-parameter variants per endpoint
- {id} template expansion from identifiers found in earlier responses
- Response schema inference and truncated previews
- Per-run request memoization
"""

from .identifiers import EntityKind, IdentifierStore, extract_ids, resolve_endpoint
from .models import EndpointResult, ProbeResult, ResultSet, summarize
from .probe_engine import METHODS, QUERY_PARAMS, ProbeEngine, ProbeSession
from .request_cache import RequestCache
from .schema_inference import infer_schema
from .truncation import truncate

__all__ = [
    "EntityKind",
    "IdentifierStore",
    "extract_ids",
    "resolve_endpoint",
    "EndpointResult",
    "ProbeResult",
    "ResultSet",
    "summarize",
    "METHODS",
    "QUERY_PARAMS",
    "ProbeEngine",
    "ProbeSession",
    "RequestCache",
    "infer_schema",
    "truncate",
]
