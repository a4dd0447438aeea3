"""
Entity identifiers - Mining IDs from responses and expanding {id} templates.

Identifiers found in early responses (library items, highlights, tags,
collections) are kept in an IdentifierStore and substituted into
parameterized endpoint templates such as "library_items/{id}/".
"""

from dataclasses import dataclass, field as dataclass_field
from enum import Enum
from typing import Any, Dict, List, Optional
import logging

logger = logging.getLogger(__name__)

PLACEHOLDER = "{id}"
UNKNOWN_ID = "unknown-id"

# Entries inspected per response
MAX_ENTRIES = 5
# Identifiers substituted per template
MAX_IDS_PER_TEMPLATE = 2


class EntityKind(str, Enum):
    """Kinds of entities whose identifiers are collected"""
    LIBRARY_ITEM = "library_items"
    HIGHLIGHT = "highlights"
    TAG = "tags"
    COLLECTION = "collections"

    @property
    def prefix(self) -> str:
        return f"{self.value}/"


@dataclass
class IdentifierStore:
    """Insertion-ordered, de-duplicated identifiers per entity kind"""
    ids: Dict[EntityKind, List[str]] = dataclass_field(
        default_factory=lambda: {kind: [] for kind in EntityKind}
    )

    def add(self, kind: EntityKind, identifier: str) -> bool:
        """Add an identifier, returns False if it was already known"""
        known = self.ids.setdefault(kind, [])
        if identifier in known:
            return False
        known.append(identifier)
        return True

    def get(self, kind: EntityKind) -> List[str]:
        return list(self.ids.get(kind, []))

    def to_dict(self) -> Dict[str, List[str]]:
        return {kind.value: list(values) for kind, values in self.ids.items()}


def get_field(value: Any, name: str) -> Optional[Any]:
    """Field of a JSON object, or None when value is not an object or lacks the field"""
    if isinstance(value, dict):
        return value.get(name)
    return None


def as_list(value: Any) -> Optional[List[Any]]:
    """value itself when it is a JSON array, else None"""
    if isinstance(value, list):
        return value
    return None


def as_identifier(value: Any) -> Optional[str]:
    """Normalize an id field to a string, None for empty or non-scalar values"""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return str(value)
    if isinstance(value, str) and value:
        return value
    return None


def extract_ids(endpoint: str, body: Any, store: IdentifierStore) -> None:
    """
    Collect entity identifiers from a successful response into the store

    The endpoint path decides where the identifiers are looked for:
    - library_items/: "feed" entries, their "id" and "content.id"
    - highlights/: "feed" entries, their "id"
    - tags/ and collections/: top-level array entries, their "id"

    Entries that do not have the expected shape are skipped. Errors are
    logged and never propagated to the caller.

    Args:
        endpoint: Resolved endpoint path (or full URL) that produced body
        body: Decoded JSON response
        store: Store to add identifiers to
    """
    try:
        if EntityKind.LIBRARY_ITEM.prefix in endpoint:
            for entry in _first_entries(as_list(get_field(body, "feed"))):
                _collect(store, EntityKind.LIBRARY_ITEM, get_field(entry, "id"))
                _collect(store, EntityKind.LIBRARY_ITEM, get_field(get_field(entry, "content"), "id"))
        elif EntityKind.HIGHLIGHT.prefix in endpoint:
            for entry in _first_entries(as_list(get_field(body, "feed"))):
                _collect(store, EntityKind.HIGHLIGHT, get_field(entry, "id"))
        elif EntityKind.TAG.prefix in endpoint:
            for entry in _first_entries(as_list(body)):
                _collect(store, EntityKind.TAG, get_field(entry, "id"))
        elif EntityKind.COLLECTION.prefix in endpoint:
            for entry in _first_entries(as_list(body)):
                _collect(store, EntityKind.COLLECTION, get_field(entry, "id"))
    except Exception as e:
        logger.warning(f"Error extracting IDs from {endpoint}: {e}")


def _first_entries(entries: Optional[List[Any]]) -> List[Any]:
    if entries is None:
        return []
    return entries[:MAX_ENTRIES]


def _collect(store: IdentifierStore, kind: EntityKind, raw_id: Any) -> None:
    identifier = as_identifier(raw_id)
    if identifier is not None and store.add(kind, identifier):
        logger.debug(f"Stored {kind.value} id: {identifier}")


def kind_for_template(template: str) -> Optional[EntityKind]:
    """Entity kind addressed by a template, from its path prefix"""
    for kind in EntityKind:
        if template.startswith(kind.prefix):
            return kind
    return None


def is_parameterized(template: str) -> bool:
    return PLACEHOLDER in template


def resolve_endpoint(template: str, store: IdentifierStore) -> List[str]:
    """
    Expand an endpoint template into concrete paths

    Templates without {id} are returned as is. Otherwise the placeholder is
    replaced by each of the first stored identifiers of the template's kind.
    When none are known the placeholder becomes "unknown-id", producing a
    request that is expected to fail instead of skipping the endpoint.

    Returns:
        Non-empty list of resolved paths
    """
    if not is_parameterized(template):
        return [template]

    kind = kind_for_template(template)
    if kind is not None:
        ids = store.get(kind)[:MAX_IDS_PER_TEMPLATE]
        if ids:
            return [template.replace(PLACEHOLDER, identifier, 1) for identifier in ids]

    logger.debug(f"No stored IDs for {template}, using {UNKNOWN_ID}")
    return [template.replace(PLACEHOLDER, UNKNOWN_ID, 1)]
