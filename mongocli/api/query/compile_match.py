import re
from typing import Any

from .MatchType import MatchType


def compile_match(field: str, match_type: MatchType, value: str) -> dict[str, Any]:
    """Filter for one field compared with ``match_type``.

    Non-exact comparators become case-insensitive regular expressions over the
    literal (escaped) value.
    """
    if match_type is MatchType.EXACT:
        return {field: value}
    pattern = re.escape(value)
    if match_type is MatchType.STARTS_WITH:
        pattern = "^" + pattern
    elif match_type is MatchType.ENDS_WITH:
        pattern = pattern + "$"
    return {field: {"$regex": pattern, "$options": "i"}}
