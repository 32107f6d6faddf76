"""Redaction of sensitive values in request options before debug output."""

from collections.abc import Mapping
from typing import Any

REDACT_KEYS: frozenset[str] = frozenset({
    "access_token",
    "api_key",
    "authorization",
    "cookie",
    "credentials",
    "password",
    "refresh_token",
    "secret",
    "token",
    "x-api-key",
})

REDACTED_VALUE = "[REDACTED]"


def redact_payload(payload: Mapping[str, Any]) -> dict[str, Any]:
    """Recursively redact sensitive keys from request options.

    Creates a copy - the original options are never mutated. Any mapping
    (including `httpx.Headers`) is converted to a plain dict.

    Args:
        payload: Request options or any nested structure of mappings/lists.

    Returns:
        A new dictionary with sensitive values replaced by "[REDACTED]".
    """
    return _redact_recursive(payload)


def _redact_recursive(obj: Any) -> Any:
    if isinstance(obj, Mapping):
        result = {}
        for key, value in obj.items():
            key_lower = key.lower() if isinstance(key, str) else key
            if key_lower in REDACT_KEYS:
                result[key] = REDACTED_VALUE
            else:
                result[key] = _redact_recursive(value)
        return result
    elif isinstance(obj, (list, tuple)):
        return [_redact_recursive(item) for item in obj]
    else:
        return obj
