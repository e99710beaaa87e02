"""Redaction of credentials in request parameters before they are logged."""

from typing import Any

REDACT_KEYS: frozenset[str] = frozenset({
    "apikey",
    "api_key",
    "sessionid",
    "session_id",
    "token",
    "secret",
    "password",
    "authorization",
    "auth_token",
    "refresh_token",
    "credentials",
})

REDACTED_VALUE = "[REDACTED]"


def redact_params(params: dict[str, Any]) -> dict[str, Any]:
    """Recursively redact credential keys from request parameters.

    Keys are compared case-insensitively, so 'apiKey' and 'sessionID' match.
    The original mapping is never mutated.

    Args:
        params: The parameters to redact.

    Returns:
        A new dictionary with sensitive values replaced by "[REDACTED]".
    """
    return _redact_recursive(params)


def _redact_recursive(obj: Any) -> Any:
    """Recursively redact sensitive keys."""
    if isinstance(obj, dict):
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
