import json
from collections.abc import Callable
from typing import Any

from ..prompt.Prompter import Prompter, required
from .convert_value import convert_value
from .FieldType import FieldType
from .QueryInputError import QueryInputError
from .UpdateMethod import UpdateMethod
from .validate_json_object import validate_json_object


def _value_validator(field_type: FieldType) -> Callable[[str], str | None]:
    def _validate(text: str) -> str | None:
        if not text.strip():
            return "Value is required"
        try:
            convert_value(text, field_type)
        except QueryInputError as e:
            return str(e)
        return None

    return _validate


def prompt_update(prompter: Prompter, warn: Callable[[str], None] | None = None) -> dict[str, Any]:
    """Build an update specification: one typed field replacement or free-form JSON."""
    method = prompter.choose("How would you like to specify the update?", list(UpdateMethod))

    if method is UpdateMethod.SINGLE_FIELD:
        field = prompter.text("Field name to update", validate=required("Field name")).strip()
        field_type = prompter.choose("Field type", list(FieldType))
        raw = prompter.text("New value", validate=_value_validator(field_type))
        return {field: convert_value(raw, field_type, warn)}

    text = prompter.text(
        'Enter JSON update (e.g., {"$set": {"name": "NewName"}, "$inc": {"age": 1}})',
        validate=validate_json_object,
    )
    return json.loads(text)
