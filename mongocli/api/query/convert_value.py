import json
import math
import re
from collections.abc import Callable
from typing import Any

from .FieldType import FieldType
from .QueryInputError import QueryInputError

_INTEGER = re.compile(r"[+-]?\d+")


def convert_value(raw: str, field_type: FieldType, warn: Callable[[str], None] | None = None) -> Any:
    """Convert a typed-in value according to the chosen field type.

    - STRING: unchanged
    - NUMBER: int for integral text, float otherwise
    - BOOLEAN: True only for the literal "true" (case-insensitive)
    - JSON: parsed; invalid JSON falls back to the raw string with a warning

    Raises:
        QueryInputError: NUMBER text that is not a finite number.
    """
    if field_type is FieldType.NUMBER:
        text = raw.strip()
        if _INTEGER.fullmatch(text):
            return int(text)
        try:
            number = float(text)
        except ValueError:
            raise QueryInputError(f"Invalid number: {raw!r}") from None
        if not math.isfinite(number):
            raise QueryInputError(f"Invalid number: {raw!r}")
        return number
    if field_type is FieldType.BOOLEAN:
        return raw.strip().lower() == "true"
    if field_type is FieldType.JSON:
        try:
            return json.loads(raw)
        except json.JSONDecodeError:
            if warn:
                warn(f"Invalid JSON {raw!r}, storing as string")
            return raw
    return raw
