"""Pydantic models for outgoing Workfront API requests."""

from enum import StrEnum
from typing import Any

from pydantic import BaseModel, Field

from workfront_sdk.exceptions import WorkfrontValidationError

# =============================================================================
# Constants
# =============================================================================

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"

# =============================================================================
# HTTP Methods
# =============================================================================


class Method(StrEnum):
    """HTTP methods accepted by the Workfront API."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"

    @property
    def has_body(self) -> bool:
        """Whether serialized parameters travel in the request body.

        GET and PUT put parameters on the query string; POST and DELETE send
        them as a form-encoded body.
        """
        return self not in (Method.GET, Method.PUT)

    @classmethod
    def coerce(cls, value: "Method | str") -> "Method":
        """Return the enum member for ``value`` (case-insensitive).

        Raises:
            WorkfrontValidationError: If ``value`` is not a supported method.
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).upper())
        except ValueError:
            raise WorkfrontValidationError(f"Unsupported HTTP method: {value!r}") from None


# =============================================================================
# Request Descriptor
# =============================================================================


class RequestDescriptor(BaseModel):
    """Fully built request, ready to hand to a transport.

    Fields:
        method: HTTP method
        path: Request path below the origin, including the query string for
            methods without a body
        headers: Header mapping (config defaults plus computed headers)
        body: Form-encoded body for methods that carry one
        params: Merged call parameters, kept for transports that serialize
            them on their own
    """

    method: Method
    path: str
    headers: dict[str, str] = Field(default_factory=dict)
    body: str | None = None
    params: dict[str, Any] = Field(default_factory=dict)
