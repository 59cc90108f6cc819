from .parse_json_argument import parse_json_argument
from .QueryInputError import QueryInputError


def parse_sort(text: str | None) -> list[tuple[str, int]]:
    """Parse ``{"field": 1, "other": -1}`` into the driver's list of pairs, keeping key order."""
    if not text:
        return []
    spec = parse_json_argument(text, what="sort")
    pairs = []
    for field, direction in spec.items():
        if isinstance(direction, bool) or direction not in (1, -1):
            raise QueryInputError(f"Invalid JSON sort: direction for {field!r} must be 1 or -1")
        pairs.append((field, int(direction)))
    return pairs
