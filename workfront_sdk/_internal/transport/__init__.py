"""Transports that carry built requests to the Workfront API."""

from workfront_sdk._internal.transport.base import Transport
from workfront_sdk._internal.transport.jsonp import (
    CallbackRegistry,
    JsonpTransport,
    fetch_script,
)
from workfront_sdk._internal.transport.server import ServerTransport

__all__ = [
    "Transport",
    "ServerTransport",
    "JsonpTransport",
    "CallbackRegistry",
    "fetch_script",
]
