"""Export of the highlights feed."""
import logging
from typing import Any, Dict, List

from src.api.matter_client import HIGHLIGHTS_FEED, MatterClient

logger = logging.getLogger(__name__)


def fetch_highlights(client: MatterClient) -> List[Dict[str, Any]]:
    """
    Fetch every highlights feed entry by following the "next" links.

    Args:
        client: Authenticated MatterClient

    Returns:
        Feed entries of all pages, in page order
    """
    url = client.url(HIGHLIGHTS_FEED)
    entries: List[Dict[str, Any]] = []

    while url:
        logger.debug(f"Fetching highlights page {url}")
        page = client.get(url)
        entries.extend(page.get("feed") or [])
        url = page.get("next")

    logger.info(f"Fetched {len(entries)} highlights")
    return entries
