"""Size-bounded previews of JSON responses."""
from typing import Any

MAX_STRING_LENGTH = 100
MAX_ARRAY_ITEMS = 2
ELLIPSIS = "..."


def truncate(value: Any) -> Any:
    """
    Return a copy of a JSON value small enough to store as a preview.

    Long strings are cut to MAX_STRING_LENGTH characters plus an ellipsis,
    arrays keep their first MAX_ARRAY_ITEMS elements and objects keep every key.
    """
    if isinstance(value, str):
        if len(value) > MAX_STRING_LENGTH:
            return value[:MAX_STRING_LENGTH] + ELLIPSIS
        return value

    if isinstance(value, list):
        return [truncate(item) for item in value[:MAX_ARRAY_ITEMS]]

    if isinstance(value, dict):
        return {key: truncate(item) for key, item in value.items()}

    return value
