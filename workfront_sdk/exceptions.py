"""Public exceptions for the Workfront SDK."""

from typing import Any


class WorkfrontError(Exception):
    """Base exception for all Workfront SDK errors."""


class WorkfrontAPIError(WorkfrontError):
    """Error envelope returned by the Workfront API.

    The ``error`` value is surfaced exactly as the service sent it, which may be
    a plain string or a structured object.
    """

    def __init__(
        self,
        error: Any,
        envelope: dict[str, Any] | None = None,
        status_code: int | None = None,
    ) -> None:
        super().__init__(error if isinstance(error, str) else repr(error))
        self.error = error
        self.envelope = envelope if envelope is not None else {"error": error}
        self.status_code = status_code


class ResponseParseError(WorkfrontError):
    """Response body could not be read as a JSON envelope.

    ``str(exc)`` and ``exc.body`` are the raw, unparsed response text.
    """

    def __init__(self, body: str) -> None:
        super().__init__(body)
        self.body = body


class WorkfrontConfigError(WorkfrontError):
    """Configuration error (missing env vars, invalid config)."""


class WorkfrontValidationError(WorkfrontError):
    """Validation error for request data."""
