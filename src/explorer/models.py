"""Probe result models."""
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Union

ERROR_STATUS = "error"
WITH_PARAMS_KEY = "withParams"

# Shape value meaning "no schema recorded" (None is a valid JSON body)
_MISSING = object()


@dataclass(frozen=True)
class ProbeResult:
    """Outcome of one HTTP call against an endpoint."""

    status: Union[int, str]  # HTTP status code, or "error"
    status_text: str
    success: bool
    data_schema: Any = _MISSING
    data_preview: Any = _MISSING

    @classmethod
    def failure(cls, status: Union[int, str], status_text: str) -> "ProbeResult":
        return cls(status=status, status_text=status_text, success=False)

    @classmethod
    def error(cls, exc: Exception) -> "ProbeResult":
        """Result for a request that never produced a usable response."""
        return cls.failure(ERROR_STATUS, str(exc) or type(exc).__name__)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        data = {
            "status": self.status,
            "statusText": self.status_text,
            "success": self.success,
        }
        if self.data_schema is not _MISSING:
            data["dataSchema"] = self.data_schema
        if self.data_preview is not _MISSING:
            data["dataPreview"] = self.data_preview
        return data


@dataclass
class EndpointResult:
    """Per-method results and query variants for one resolved path."""

    methods: Dict[str, ProbeResult] = field(default_factory=dict)
    with_params: Optional[Dict[str, ProbeResult]] = None

    def successful_methods(self) -> List[str]:
        return [method for method, result in self.methods.items() if result.success]

    def successful_params(self) -> List[str]:
        if not self.with_params:
            return []
        return [param for param, result in self.with_params.items() if result.success]

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        data = {method: result.to_dict() for method, result in self.methods.items()}
        if self.with_params is not None:
            data[WITH_PARAMS_KEY] = {
                param: result.to_dict() for param, result in self.with_params.items()
            }
        return data


@dataclass
class ResultSet:
    """Results of one probing run, keyed by resolved endpoint path."""

    endpoints: Dict[str, EndpointResult] = field(default_factory=dict)

    def start(self, path: str) -> EndpointResult:
        """Begin (or restart) the record for a resolved path."""
        self.endpoints[path] = EndpointResult()
        return self.endpoints[path]

    def get(self, path: str) -> Optional[EndpointResult]:
        return self.endpoints.get(path)

    def __contains__(self, path: str) -> bool:
        return path in self.endpoints

    def __len__(self) -> int:
        return len(self.endpoints)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {path: result.to_dict() for path, result in self.endpoints.items()}


def summarize(result_set: ResultSet) -> List[Dict[str, Any]]:
    """
    Working endpoints of a run.

    Returns:
        [{"endpoint": path, "methods": [...], "params": [...]}] for each path
        with at least one successful method or query variant
    """
    summary = []
    for path, result in result_set.endpoints.items():
        methods = result.successful_methods()
        params = result.successful_params()
        if methods or params:
            summary.append({"endpoint": path, "methods": methods, "params": params})
    return summary
