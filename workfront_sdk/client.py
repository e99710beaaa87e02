"""User-facing Api client for the Workfront REST API.

Example usage:
    from workfront_sdk import Api, ApiConfig

    api = Api(ApiConfig(host="acme.my.workfront.com", params={"apiKey": "..."}))

    projects = await api.request("project/search", {"status": "CUR"}, ["name", "ID"])
    task = await api.request("task", {"name": "Review"}, method="POST")
"""

import sys
from collections.abc import Mapping, Sequence
from typing import Any

from workfront_sdk._internal.request.builder import build_request
from workfront_sdk._internal.request.redaction import redact_params
from workfront_sdk._internal.transport import JsonpTransport, ServerTransport, Transport
from workfront_sdk.config import ApiConfig
from workfront_sdk.models import Method


class Api:
    """Client for one Workfront instance.

    Every call goes through `request`, which builds the request from the
    instance config and hands it to the transport chosen at construction:
    `ServerTransport` (httpx) by default, or `JsonpTransport`.

    Use `Api.from_env()` to create a client from environment variables.
    """

    def __init__(self, config: ApiConfig, *, transport: Transport | None = None) -> None:
        """Initialize the client.

        Args:
            config: Connection settings and instance-level defaults.
            transport: Transport strategy. Defaults to a ServerTransport.
        """
        self._config = config
        self._transport = transport if transport is not None else ServerTransport(config)

    @classmethod
    def from_env(cls, *, jsonp: bool = False) -> "Api":
        """Create a client from ``WORKFRONT_API_*`` environment variables.

        Args:
            jsonp: Use the JSONP transport instead of the server transport.

        Raises:
            WorkfrontConfigError: If WORKFRONT_API_HOST is not set.
        """
        config = ApiConfig.from_env()
        transport = JsonpTransport(config) if jsonp else None
        return cls(config, transport=transport)

    @property
    def config(self) -> ApiConfig:
        return self._config

    @property
    def transport(self) -> Transport:
        return self._transport

    def _log_debug(self, message: str) -> None:
        """Log a debug message to stderr if debug mode is enabled."""
        if self._config.debug:
            print(f"[workfront-sdk] {message}", file=sys.stderr)

    async def request(
        self,
        path: str,
        params: Mapping[str, Any] | None = None,
        fields: str | Sequence[str] | None = None,
        method: Method | str | None = None,
    ) -> Any:
        """Send one API call and return the envelope's ``data``.

        Args:
            path: Path below the configured base path. A leading '/' is
                joined without adding another separator.
            params: Call parameters, merged over the instance defaults.
            fields: Field name or ordered field names, sent as 'fields'.
            method: GET, POST, PUT or DELETE. Defaults to the config's method.

        Returns:
            The ``data`` payload of the response envelope.

        Raises:
            WorkfrontAPIError: The response envelope carries an ``error``.
            ResponseParseError: The response body is not a JSON envelope; the
                error holds the raw body.
            WorkfrontValidationError: ``method`` is not supported.
            httpx.TransportError: Connection-level failure, unchanged.
        """
        request = build_request(
            self._config,
            path,
            params,
            fields,
            method,
            append_query=self._transport.append_query,
        )
        self._log_debug(
            f"{request.method.value} {request.path.split('?', 1)[0]} "
            f"params={redact_params(request.params)}"
        )
        return await self._transport.send(request)


def get_api() -> Api:
    """Get an Api client configured from environment variables.

    Returns:
        A configured Api instance using the server transport.
    """
    return Api.from_env()
