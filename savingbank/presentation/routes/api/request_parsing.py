"""
Request body helpers for the API

Amounts may exceed what some JSON clients represent exactly, so integer
fields are accepted either as JSON integers or as decimal strings.
"""

from typing import Any, Dict
from flask import request
from werkzeug.exceptions import BadRequest
from savingbank.utils.logging_sanitizer import sanitize_dict

_MISSING = object()


def json_body() -> Dict[str, Any]:
    payload = request.get_json(silent=True)
    if payload is None:
        return {}
    if not isinstance(payload, dict):
        raise BadRequest("Request body must be a JSON object")
    return payload


def loggable(payload: Dict[str, Any]) -> Dict[str, Any]:
    return sanitize_dict(payload)


def parse_int(value: Any, field: str) -> int:
    if isinstance(value, bool):
        raise BadRequest(f"'{field}' must be an integer")
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        text = value.strip()
        digits = text[1:] if text.startswith('-') else text
        # ASCII only: str.isdigit() also accepts characters such as '²'
        if digits.isascii() and digits.isdigit():
            try:
                return int(text)
            except ValueError:
                # past the interpreter's digit limit for str -> int
                raise BadRequest(f"'{field}' is too long")
    raise BadRequest(f"'{field}' must be an integer")


def require_int(payload: Dict[str, Any], field: str, default: Any = _MISSING) -> int:
    value = payload.get(field, default)
    if value is _MISSING or value is None:
        raise BadRequest(f"'{field}' is required")
    return parse_int(value, field)


def require_str(payload: Dict[str, Any], field: str) -> str:
    value = payload.get(field)
    if not isinstance(value, str) or not value.strip():
        raise BadRequest(f"'{field}' is required")
    return value.strip()


def optional_str(payload: Dict[str, Any], field: str):
    value = payload.get(field)
    if value is None:
        return None
    if not isinstance(value, str):
        raise BadRequest(f"'{field}' must be a string or null")
    return value.strip() or None


def require_bool(payload: Dict[str, Any], field: str) -> bool:
    value = payload.get(field)
    if not isinstance(value, bool):
        raise BadRequest(f"'{field}' must be true or false")
    return value


def query_int(name: str, default: Any = _MISSING) -> int:
    raw = request.args.get(name)
    if raw is None:
        if default is _MISSING:
            raise BadRequest(f"'{name}' query parameter is required")
        return default
    return parse_int(raw, name)


def query_flag(name: str, default: bool = False) -> bool:
    raw = request.args.get(name)
    if raw is None:
        return default
    return raw.lower() in ('true', '1', 'yes', 'on')
