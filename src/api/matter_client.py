"""Matter API client."""
import logging
from typing import Any, Dict, Optional

import requests

from config import MatterApiConfig

logger = logging.getLogger(__name__)

QR_LOGIN_TRIGGER = "qr_login/trigger/"
QR_LOGIN_EXCHANGE = "qr_login/exchange/"
HIGHLIGHTS_FEED = "library_items/highlights_feed/"


class MatterClient:
    """Client for the Matter API."""

    def __init__(self, config: MatterApiConfig, access_token: Optional[str] = None):
        """Initialize client."""
        self.config = config
        self.session = requests.Session()
        self.session.headers.update({"Content-Type": "application/json"})

        if access_token:
            self.session.headers.update({"Authorization": f"Bearer {access_token}"})

    def url(self, path: str) -> str:
        """Absolute URL for an API path."""
        return f"{self.config.host}/{path}"

    def get(self, url: str) -> Dict[str, Any]:
        """GET an absolute URL and decode its JSON body."""
        response = self.session.get(url, timeout=self.config.timeout)
        response.raise_for_status()
        return response.json()

    def post(self, path: str, payload: Dict[str, Any]) -> Dict[str, Any]:
        """POST a JSON payload to an API path and decode the JSON reply."""
        response = self.session.post(self.url(path), json=payload, timeout=self.config.timeout)
        response.raise_for_status()
        return response.json()

    def trigger_qr_login(self) -> str:
        """Start a QR login, returns the session token to encode."""
        result = self.post(QR_LOGIN_TRIGGER, {"client_type": self.config.client_type})
        return result["session_token"]

    def exchange_qr_login(self, session_token: str) -> Dict[str, Any]:
        """Poll a QR login once; the reply carries tokens once the code was scanned."""
        response = self.session.post(
            self.url(QR_LOGIN_EXCHANGE),
            json={"session_token": session_token},
            timeout=self.config.timeout,
        )
        try:
            return response.json()
        except ValueError:
            logger.debug(f"Non-JSON exchange reply ({response.status_code})")
            return {}
