from flask import request

from app.services.errors import InvalidParameters


def json_body():
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise InvalidParameters("Request body must be a JSON object.")
    return data


def require_int(data, key, minimum=0, maximum=None):
    value = data.get(key)
    # bool is a subclass of int.
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidParameters(f"'{key}' must be an integer.")
    if minimum is not None and value < minimum:
        raise InvalidParameters(f"'{key}' must be at least {minimum}.")
    if maximum is not None and value > maximum:
        raise InvalidParameters(f"'{key}' must be at most {maximum}.")
    return value


def require_text(data, key, max_length, required=True):
    value = data.get(key)
    if value is None and not required:
        return None
    if not isinstance(value, str):
        raise InvalidParameters(f"'{key}' must be a string.")
    value = value.strip()
    if required and not value:
        raise InvalidParameters(f"'{key}' is required.")
    if len(value) > max_length:
        raise InvalidParameters(f"'{key}' must be at most {max_length} characters.")
    return value
