from collections.abc import Callable
from typing import Any

from ..prompt.Prompter import Prompter
from .convert_value import convert_value
from .FieldType import FieldType
from .QueryInputError import QueryInputError


def prompt_document(prompter: Prompter, warn: Callable[[str], None] | None = None) -> dict[str, Any]:
    """Collect a flat document field by field; a blank field name ends the loop."""
    document: dict[str, Any] = {}
    prompter.notify("Enter field name and value pairs. Press Enter with empty field name to finish.")

    while True:
        field = prompter.text("Field name (or press Enter to finish)", default="").strip()
        if not field:
            return document

        field_type = prompter.choose(f"Type for field '{field}'", list(FieldType))

        def _validate(text: str, field_type: FieldType = field_type) -> str | None:
            try:
                convert_value(text, field_type)
            except QueryInputError as e:
                return str(e)
            return None

        raw = prompter.text(f"Value for '{field}'", default="", validate=_validate)
        document[field] = convert_value(raw, field_type, warn)
