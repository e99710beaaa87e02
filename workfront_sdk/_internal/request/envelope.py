"""Parsing of the ``{"data": ...}`` / ``{"error": ...}`` response envelope."""

import json
from typing import Any

from workfront_sdk.exceptions import ResponseParseError, WorkfrontAPIError


def parse_envelope(text: str) -> dict[str, Any]:
    """Parse a response body into an envelope.

    Args:
        text: Raw response body.

    Returns:
        The decoded envelope object.

    Raises:
        ResponseParseError: If the body is not JSON or not a JSON object. The
            error carries the raw text unchanged.
    """
    try:
        envelope = json.loads(text)
    except ValueError:
        raise ResponseParseError(text) from None
    if not isinstance(envelope, dict):
        raise ResponseParseError(text)
    return envelope


def unwrap_envelope(envelope: dict[str, Any], status_code: int | None = None) -> Any:
    """Return the envelope's ``data`` or raise its ``error``.

    Args:
        envelope: A decoded envelope.
        status_code: HTTP status of the response, if there was one.

    Returns:
        The ``data`` payload (None when absent).

    Raises:
        WorkfrontAPIError: If the envelope carries an ``error``.
    """
    if envelope.get("error") is not None:
        raise WorkfrontAPIError(envelope["error"], envelope=envelope, status_code=status_code)
    return envelope.get("data")
