"""Server-side transport over httpx."""

from typing import Any

import httpx

from workfront_sdk._internal.http import create_http_client
from workfront_sdk._internal.request.envelope import parse_envelope, unwrap_envelope
from workfront_sdk._internal.transport.base import Transport
from workfront_sdk.config import ApiConfig
from workfront_sdk.models import RequestDescriptor


class ServerTransport(Transport):
    """Issues requests with an ``httpx.AsyncClient``.

    A client is opened per request unless one is injected, in which case the
    caller owns its lifecycle.
    """

    log_prefix = "[workfront-sdk:server]"

    def __init__(self, config: ApiConfig, *, client: httpx.AsyncClient | None = None) -> None:
        super().__init__(config)
        self._client = client

    async def send(self, request: RequestDescriptor) -> Any:
        try:
            if self._client is not None:
                response = await self._request(self._client, request)
            else:
                async with create_http_client(
                    timeout=self._config.timeout_ms / 1000,
                    base_url=self._config.origin,
                ) as client:
                    response = await self._request(client, request)
        except httpx.TransportError as e:
            self._log_debug(f"Transport error: {e!r}")
            raise

        body = response.content.decode("utf-8", errors="replace")
        self._log_debug(f"Response {response.status_code} ({len(body)} chars)")
        return unwrap_envelope(parse_envelope(body), status_code=response.status_code)

    async def _request(self, client: httpx.AsyncClient, request: RequestDescriptor) -> httpx.Response:
        return await client.request(
            request.method.value,
            request.path,
            headers=request.headers,
            content=request.body.encode("utf-8") if request.body is not None else None,
        )
