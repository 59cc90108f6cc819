from enum import Enum


class FilterMethod(str, Enum):
    """Ways of selecting documents interactively."""

    BY_ID = "by_id"
    BY_FIELD = "by_field"
    CUSTOM_JSON = "custom_json"
    MATCH_ALL = "match_all"

    @property
    def label(self) -> str:
        return {
            FilterMethod.BY_ID: "By ID",
            FilterMethod.BY_FIELD: "By field value",
            FilterMethod.CUSTOM_JSON: "Custom JSON query",
            FilterMethod.MATCH_ALL: "ALL documents (DANGEROUS!)",
        }[self]
