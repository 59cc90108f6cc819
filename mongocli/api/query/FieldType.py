from enum import Enum


class FieldType(str, Enum):
    """Value types offered when a field is entered interactively."""

    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    JSON = "json"

    @property
    def label(self) -> str:
        return {
            FieldType.STRING: "String",
            FieldType.NUMBER: "Number",
            FieldType.BOOLEAN: "Boolean",
            FieldType.JSON: "JSON Object",
        }[self]
