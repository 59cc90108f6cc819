import json


def validate_json_object(text: str) -> str | None:
    """Prompt validator: None when ``text`` is a JSON object, else the problem."""
    try:
        value = json.loads(text)
    except json.JSONDecodeError:
        return "Please enter valid JSON"
    return None if isinstance(value, dict) else "Please enter a JSON object"
