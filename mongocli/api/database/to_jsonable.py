from datetime import datetime
from typing import Any

from bson import Decimal128, ObjectId


def to_jsonable(value: Any) -> Any:
    """Convert BSON values inside a document into JSON/YAML friendly ones.

    ObjectId and Decimal128 become strings, datetimes become ISO-8601 strings.
    Containers are converted recursively; everything else is returned as is.
    """
    if isinstance(value, dict):
        return {str(k): to_jsonable(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_jsonable(v) for v in value]
    if isinstance(value, (ObjectId, Decimal128)):
        return str(value)
    if isinstance(value, datetime):
        return value.isoformat()
    return value
