"""Exploration run: preconditions, catalog loading, probing and persistence."""
import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

import requests

from config import AppConfig
from src.auth.settings import SettingsStore
from src.explorer.models import ResultSet, summarize
from src.explorer.probe_engine import ProbeEngine, ProbeSession

logger = logging.getLogger(__name__)


class PreconditionError(RuntimeError):
    """A run cannot start; nothing has been probed."""


class MissingAccessTokenError(PreconditionError):
    """No access token has been saved yet."""


class EndpointCatalogError(PreconditionError):
    """The endpoint catalog is missing, unreadable or empty."""


def load_endpoints(endpoints_file: Path) -> List[str]:
    """
    Load endpoint templates from a JSON array of strings.

    Raises:
        EndpointCatalogError: If the file is missing, invalid or empty
    """
    try:
        with open(endpoints_file, "r") as f:
            endpoints = json.load(f)
    except (OSError, ValueError) as e:
        raise EndpointCatalogError(f"Error loading endpoints from {endpoints_file}: {e}") from e

    if not isinstance(endpoints, list) or not all(isinstance(e, str) for e in endpoints):
        raise EndpointCatalogError(f"{endpoints_file} must contain a JSON array of endpoint paths")
    if not endpoints:
        raise EndpointCatalogError(
            f"No endpoints found in {endpoints_file}. "
            f"Please make sure the file exists and contains valid endpoints."
        )
    return endpoints


def write_json(output_file: Path, data: Any) -> None:
    output_file.parent.mkdir(parents=True, exist_ok=True)
    with open(output_file, "w") as f:
        json.dump(data, f, indent=2)


class ApiExplorer:
    """Runs one exploration of the Matter API and saves its results."""

    def __init__(
        self,
        config: AppConfig,
        settings_store: Optional[SettingsStore] = None,
        http: Optional[requests.Session] = None,
    ):
        self.config = config
        self.settings_store = settings_store or SettingsStore(config.settings_file)
        self.engine = ProbeEngine(
            host=config.matter_api.host,
            http=http,
            timeout=config.matter_api.timeout,
        )
        self.last_session: Optional[ProbeSession] = None

    def run(self) -> List[Dict[str, Any]]:
        """
        Probe the catalog and persist the results.

        Returns:
            Summary of working endpoints

        Raises:
            MissingAccessTokenError: If no access token is saved
            EndpointCatalogError: If the endpoint catalog cannot be used
        """
        settings = self.settings_store.load()
        if not settings.access_token:
            raise MissingAccessTokenError("No access token found. Please authenticate first.")

        endpoints = load_endpoints(self.config.endpoints_file)
        logger.info(f"Testing {len(endpoints)} API endpoints from {self.config.endpoints_file}")

        # Each run starts with an empty identifier store and cache
        self.last_session = ProbeSession()
        results = self.engine.probe(settings.access_token, endpoints, session=self.last_session)

        return self.save(results)

    def save(self, results: ResultSet) -> List[Dict[str, Any]]:
        """Write the result set and its summary, replacing earlier runs."""
        write_json(self.config.results_file, results.to_dict())
        logger.info(f"API exploration complete. Results saved to {self.config.results_file}")

        summary = summarize(results)
        write_json(self.config.summary_file, summary)
        logger.info(f"Summary of successful endpoints saved to {self.config.summary_file}")
        return summary
