"""
Strips credentials from request bodies, query args and headers before they
are logged. An API key is a caller identity, so it never reaches a log file.
"""

from typing import Any, Dict, Mapping

REDACTED = '[REDACTED]'

# Compared lower-case with '-' read as '_', so X-Api-Key matches x_api_key
SENSITIVE_FIELDS = {
    'api_key',
    'apikey',
    'x_api_key',
    'admin_api_key',
    'authorization',
    'cookie',
    'secret',
    'secret_key',
    'token',
    'access_token',
    'refresh_token',
    'session_id',
    'password',
}


def _normalize_key(key) -> str:
    return str(key).lower().replace('-', '_')


def is_sensitive(key) -> bool:
    return _normalize_key(key) in SENSITIVE_FIELDS


def _scrub(value, redact_text):
    if isinstance(value, dict):
        return sanitize_dict(value, redact_text)
    if isinstance(value, list):
        return [_scrub(item, redact_text) for item in value]
    return value


def sanitize_dict(data: Dict[str, Any], redact_text: str = REDACTED) -> Dict[str, Any]:
    """
    Copy of ``data`` with every sensitive key's value replaced.

    Nested dicts, and dicts inside lists, are scrubbed too. Empty or None
    input is returned unchanged.

    >>> sanitize_dict({'plan_id': 1, 'api_key': 'k3y'})
    {'plan_id': 1, 'api_key': '[REDACTED]'}
    """
    if not data:
        return data
    return {
        key: redact_text if is_sensitive(key) else _scrub(value, redact_text)
        for key, value in data.items()
    }


def sanitize_form_data(form_data, redact_text: str = REDACTED) -> Dict[str, Any]:
    """request.form / request.args (first value per key)"""
    return sanitize_dict(form_data.to_dict(), redact_text)


def sanitize_headers(headers: Mapping[str, str], redact_text: str = REDACTED) -> Dict[str, Any]:
    return sanitize_dict(dict(headers.items()), redact_text)


def sanitize_exception_message(exception: Exception) -> str:
    """Exception text, or a placeholder if it mentions a sensitive field."""
    message = str(exception)
    normalized = _normalize_key(message)
    if any(field in normalized for field in SENSITIVE_FIELDS):
        return f"{type(exception).__name__}: [Message contains sensitive data]"
    return message
