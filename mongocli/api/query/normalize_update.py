from typing import Any

from .QueryInputError import QueryInputError


def normalize_update(update: dict[str, Any]) -> dict[str, Any]:
    """Return an operator-style update.

    Operator documents (``$set``, ``$inc``...) pass through as given; a plain
    field mapping is a set of direct replacements and is wrapped in ``$set``.

    Raises:
        QueryInputError: Empty update, operators mixed with plain fields, or an
            operator whose value is not an object.
    """
    if not update:
        raise QueryInputError("Update data is empty")
    operators = [key for key in update if key.startswith("$")]
    if not operators:
        return {"$set": dict(update)}
    if len(operators) != len(update):
        plain = sorted(key for key in update if not key.startswith("$"))
        raise QueryInputError(f"Update mixes operators with plain fields: {', '.join(plain)}")
    for operator in operators:
        if not isinstance(update[operator], dict):
            raise QueryInputError(
                f"Update operator {operator} needs an object of fields, got {type(update[operator]).__name__}"
            )
    return update
