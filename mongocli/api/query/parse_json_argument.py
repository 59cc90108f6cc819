import json
from typing import Any

from .QueryInputError import QueryInputError


def parse_json_argument(text: str, what: str = "query", allow_array: bool = False) -> Any:
    """Parse a flag-supplied JSON string.

    The parsed structure is returned exactly as decoded.

    Args:
        text: Raw JSON text from the command line.
        what: Name used in error messages ("query", "data", "sort").
        allow_array: Accept a top-level array of objects as well as an object.

    Raises:
        QueryInputError: Malformed JSON or an unexpected top-level type.
    """
    try:
        value = json.loads(text)
    except json.JSONDecodeError as e:
        raise QueryInputError(f"Invalid JSON {what}: {e}") from e

    if isinstance(value, dict):
        return value
    if allow_array and isinstance(value, list):
        if not all(isinstance(item, dict) for item in value):
            raise QueryInputError(f"Invalid JSON {what}: every array element must be an object")
        return value
    expected = "an object or an array of objects" if allow_array else "an object"
    raise QueryInputError(f"Invalid JSON {what}: expected {expected}, got {type(value).__name__}")
