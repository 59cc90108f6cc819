from bson import ObjectId


def coerce_object_id(value: str) -> ObjectId | str:
    """ObjectId for 24-hex-digit text, otherwise the text itself."""
    value = value.strip()
    return ObjectId(value) if ObjectId.is_valid(value) else value
