import json
from pathlib import Path
from typing import Any

from .QueryInputError import QueryInputError


def load_documents_file(path: Path) -> list[dict[str, Any]]:
    """Read documents for a bulk insert.

    A top-level array yields one document per element; an object yields one document.

    Raises:
        QueryInputError: Missing/unreadable file, invalid JSON, or non-object entries.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise QueryInputError(f"Could not read {path}: {e}") from e
    try:
        value = json.loads(text)
    except json.JSONDecodeError as e:
        raise QueryInputError(f"Invalid JSON in {path}: {e}") from e

    documents = value if isinstance(value, list) else [value]
    for index, document in enumerate(documents):
        if not isinstance(document, dict):
            raise QueryInputError(f"Entry {index} in {path} is {type(document).__name__}, expected an object")
    return documents
