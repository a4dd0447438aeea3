"""
Schema Inference - Derives a structural shape from a decoded JSON response.

Shapes are plain JSON-serializable values:
- "null", "string", "number", "boolean" for scalars
- "empty array" for []
- [shape] for non-empty arrays (shape of the first element only)
- {field: shape} for objects
"""

from typing import Any

NULL_SHAPE = "null"
EMPTY_ARRAY_SHAPE = "empty array"


def infer_schema(value: Any) -> Any:
    """
    Infer the structural shape of a JSON value

    Arrays are sampled from their first element, so mixed-type arrays are
    under-described. Documentation built from these shapes relies on the
    single-sample output.

    Args:
        value: Decoded JSON value (dict, list, str, int, float, bool or None)

    Returns:
        Schema shape (see module docstring)
    """
    if value is None:
        return NULL_SHAPE

    # bool is a subclass of int, check it first
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"

    if isinstance(value, list):
        if not value:
            return EMPTY_ARRAY_SHAPE
        return [infer_schema(value[0])]

    if isinstance(value, dict):
        return {key: infer_schema(item) for key, item in value.items()}

    raise TypeError(f"Not a JSON value: {type(value).__name__}")
