from flask import request

from library_api.errors import ValidationError


def json_object() -> dict:
    """Request body as a dict; a missing body is {}, anything but an object is a 400."""
    data = request.get_json(silent=True)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValidationError("JSON object body required")
    return data


def text_field(data: dict, name: str) -> str:
    value = data.get(name)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValidationError(f"{name} must be a string")
    return value
