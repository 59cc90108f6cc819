"""Schema-less collection accessor."""

from datetime import datetime, timezone
from typing import Any

from bson import ObjectId
from pymongo.collection import Collection

CREATED_AT = "createdAt"
UPDATED_AT = "updatedAt"

_LOGICAL_OPERATORS = ("$and", "$or", "$nor")


def _to_object_id(value: Any) -> Any:
    if isinstance(value, str) and ObjectId.is_valid(value):
        return ObjectId(value)
    return value


def _cast_id_condition(condition: Any) -> Any:
    if isinstance(condition, dict):
        cast = {}
        for operator, operand in condition.items():
            if operator in ("$in", "$nin") and isinstance(operand, list):
                cast[operator] = [_to_object_id(item) for item in operand]
            elif operator in ("$eq", "$ne"):
                cast[operator] = _to_object_id(operand)
            else:
                cast[operator] = operand
        return cast
    return _to_object_id(condition)


def cast_filter_ids(filter: dict[str, Any] | None) -> dict[str, Any]:
    """Copy of ``filter`` with 24-hex-digit ``_id`` strings turned into ObjectIds.

    Covers ``_id`` equality, ``$eq``/``$ne``, ``$in``/``$nin`` lists and the same
    inside ``$and``/``$or``/``$nor``. The filter passed in is not modified.
    """
    if not filter:
        return {}
    cast: dict[str, Any] = {}
    for key, value in filter.items():
        if key == "_id":
            cast[key] = _cast_id_condition(value)
        elif key in _LOGICAL_OPERATORS and isinstance(value, list):
            cast[key] = [cast_filter_ids(clause) if isinstance(clause, dict) else clause for clause in value]
        else:
            cast[key] = value
    return cast


class DocumentCollection:
    """Accessor for one named collection that accepts documents of any shape.

    Writes stamp ``createdAt``/``updatedAt`` and filters get their ``_id`` strings
    cast to ObjectId, the way a timestamped ODM schema would. Everything else is
    handed to the driver untouched.
    """

    def __init__(self, collection: Collection):
        self._collection = collection
        self.name: str = collection.name

    @staticmethod
    def _now() -> datetime:
        return datetime.now(timezone.utc)

    def _stamp_new(self, document: dict[str, Any]) -> dict[str, Any]:
        now = self._now()
        stamped = dict(document)
        stamped.setdefault(CREATED_AT, now)
        stamped.setdefault(UPDATED_AT, now)
        return stamped

    def insert_one(self, document: dict[str, Any]) -> Any:
        """Insert a document and return its generated identifier."""
        return self._collection.insert_one(self._stamp_new(document)).inserted_id

    def insert_many(self, documents: list[dict[str, Any]]) -> list[Any]:
        """Insert all documents in one batch and return their identifiers in order."""
        if not documents:
            return []
        return list(self._collection.insert_many([self._stamp_new(d) for d in documents]).inserted_ids)

    def find(
        self,
        filter: dict[str, Any] | None = None,
        sort: list[tuple[str, int]] | None = None,
        skip: int = 0,
        limit: int = 0,
    ) -> list[dict[str, Any]]:
        cursor = self._collection.find(cast_filter_ids(filter))
        if sort:
            cursor = cursor.sort(sort)
        if skip:
            cursor = cursor.skip(skip)
        if limit:
            cursor = cursor.limit(limit)
        return list(cursor)

    def count_documents(self, filter: dict[str, Any] | None = None) -> int:
        return self._collection.count_documents(cast_filter_ids(filter))

    def update_many(self, filter: dict[str, Any], update: dict[str, Any]) -> dict[str, int]:
        """Apply an operator-style update to every match.

        Returns:
            Dict with ``matched_count`` and ``modified_count``.
        """
        result = self._collection.update_many(cast_filter_ids(filter), self._stamp_update(update))
        return {"matched_count": result.matched_count, "modified_count": result.modified_count}

    def delete_many(self, filter: dict[str, Any]) -> int:
        return self._collection.delete_many(cast_filter_ids(filter)).deleted_count

    def _stamp_update(self, update: dict[str, Any]) -> dict[str, Any]:
        # Leave the update alone if any operator already touches updatedAt
        for fields in update.values():
            if isinstance(fields, dict) and UPDATED_AT in fields:
                return update
        current = update.get("$set", {})
        if not isinstance(current, dict):
            raise ValueError(f"$set needs an object of fields, got {type(current).__name__}")
        stamped = dict(update)
        stamped["$set"] = {**current, UPDATED_AT: self._now()}
        return stamped
