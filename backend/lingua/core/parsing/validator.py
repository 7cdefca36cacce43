"""JSON validity and shape checks."""

import json
from typing import Any, Mapping, Optional


def json_type(value: Any) -> str:
    """Get the JSON type category of a Python value.

    Categories mirror JavaScript's ``typeof``: dicts, lists and None are all
    ``"object"``, and bool is never a number.
    """
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if value is None or isinstance(value, (dict, list)):
        return "object"
    return type(value).__name__


def is_valid_json(value: Any, skeleton: Optional[Mapping[str, Any]] = None) -> bool:
    """Check that a value is valid JSON and optionally matches a skeleton.

    Args:
        value: JSON string, dict or list
        skeleton: Field name to example value. Only the type category of each
            example is compared; extra fields in ``value`` are ignored.

    Returns:
        True if ``value`` is valid JSON and has every skeleton field with a
        matching type category
    """
    if isinstance(value, str):
        try:
            parsed = json.loads(value)
        except json.JSONDecodeError:
            return False
    elif isinstance(value, (dict, list)):
        parsed = value
    else:
        return False

    if not skeleton:
        return True

    if not isinstance(parsed, dict):
        return False

    for key, example in skeleton.items():
        if key not in parsed or json_type(parsed[key]) != json_type(example):
            return False
    return True
