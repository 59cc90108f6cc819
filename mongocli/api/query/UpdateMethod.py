from enum import Enum


class UpdateMethod(str, Enum):
    SINGLE_FIELD = "single_field"
    CUSTOM_JSON = "custom_json"

    @property
    def label(self) -> str:
        return {
            UpdateMethod.SINGLE_FIELD: "Update single field",
            UpdateMethod.CUSTOM_JSON: "Custom JSON update",
        }[self]
