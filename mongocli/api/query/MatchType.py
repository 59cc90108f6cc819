from enum import Enum


class MatchType(str, Enum):
    """Comparators for matching a field value."""

    EXACT = "exact"
    CONTAINS = "contains"
    STARTS_WITH = "starts_with"
    ENDS_WITH = "ends_with"

    @property
    def label(self) -> str:
        return {
            MatchType.EXACT: "Exact match",
            MatchType.CONTAINS: "Contains (case insensitive)",
            MatchType.STARTS_WITH: "Starts with",
            MatchType.ENDS_WITH: "Ends with",
        }[self]
