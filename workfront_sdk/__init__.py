"""Workfront SDK for Python.

This SDK provides an async client for the Workfront REST API.

Public API:
    Api - Client exposing `request(path, params, fields, method)`
    ApiConfig - Connection settings and instance-level defaults
    Method - Supported HTTP methods

Internal (not for direct use):
    _internal.request - Request building and envelope parsing
    _internal.transport - Server and JSONP transports
"""

from workfront_sdk._version import __version__
from workfront_sdk.client import Api, get_api
from workfront_sdk.config import ApiConfig
from workfront_sdk.exceptions import (
    ResponseParseError,
    WorkfrontAPIError,
    WorkfrontConfigError,
    WorkfrontError,
    WorkfrontValidationError,
)
from workfront_sdk.models import Method

__all__ = [
    "__version__",
    "Api",
    "ApiConfig",
    "Method",
    "get_api",
    "WorkfrontError",
    "WorkfrontAPIError",
    "ResponseParseError",
    "WorkfrontConfigError",
    "WorkfrontValidationError",
]
