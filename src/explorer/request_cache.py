"""In-run memoization of probe results."""
from typing import Dict, Optional

from src.explorer.models import ProbeResult


class RequestCache:
    """
    Probe results keyed by "METHOD:url".

    Entries never expire and are never evicted; a cache lives for one
    probing run so the same request is never sent twice in that run.
    """

    def __init__(self):
        self._entries: Dict[str, ProbeResult] = {}

    @staticmethod
    def key(method: str, url: str) -> str:
        return f"{method.upper()}:{url}"

    def get(self, method: str, url: str) -> Optional[ProbeResult]:
        return self._entries.get(self.key(method, url))

    def put(self, method: str, url: str, result: ProbeResult) -> None:
        self._entries[self.key(method, url)] = result

    def __contains__(self, key: str) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)
