"""JSONP transport: script-callback requests for hosts without CORS access.

Each call registers a unique callback name, asks the API to wrap its envelope
in a call to that name, then runs the returned script against the registry.
"""

import asyncio
import re
import uuid
from collections.abc import Awaitable, Callable
from functools import partial
from typing import Any

from workfront_sdk._internal.http import DEFAULT_TIMEOUT, create_http_client
from workfront_sdk._internal.request.builder import serialize_params
from workfront_sdk._internal.request.envelope import parse_envelope, unwrap_envelope
from workfront_sdk._internal.transport.base import Transport
from workfront_sdk.config import ApiConfig
from workfront_sdk.exceptions import ResponseParseError, WorkfrontError
from workfront_sdk.models import RequestDescriptor

CALLBACK_PREFIX = "wfjsonp_"

# name({...}); with an optional leading /**/ guard
_CALLBACK_RE = re.compile(
    r"^\s*(?:/\*\*/\s*)?(?P<name>[\w$.]+)\s*\((?P<args>.*)\)\s*;?\s*$",
    re.DOTALL,
)

ScriptLoader = Callable[[str], Awaitable[str]]


async def fetch_script(url: str, *, timeout: float = DEFAULT_TIMEOUT) -> str:
    """Download a JSONP script and return its text."""
    async with create_http_client(timeout=timeout) as client:
        response = await client.get(url)
        return response.content.decode("utf-8", errors="replace")


class CallbackRegistry:
    """Pending JSONP callbacks, keyed by a per-call unique name."""

    def __init__(self) -> None:
        self._pending: dict[str, asyncio.Future[Any]] = {}

    def __contains__(self, callback_id: object) -> bool:
        return callback_id in self._pending

    def __len__(self) -> int:
        return len(self._pending)

    def register(self) -> tuple[str, asyncio.Future[Any]]:
        """Create a callback name and the future it settles."""
        callback_id = f"{CALLBACK_PREFIX}{uuid.uuid4().hex}"
        future = asyncio.get_running_loop().create_future()
        self._pending[callback_id] = future
        return callback_id, future

    def invoke(self, callback_id: str, envelope: dict[str, Any]) -> bool:
        """Settle the callback's future from an envelope.

        A callback fires at most once; unknown or already fired names are
        ignored.

        Returns:
            True if a pending future was settled.
        """
        future = self._pending.pop(callback_id, None)
        if future is None or future.done():
            return False
        try:
            future.set_result(unwrap_envelope(envelope))
        except WorkfrontError as e:
            future.set_exception(e)
        return True

    def unregister(self, callback_id: str) -> None:
        future = self._pending.pop(callback_id, None)
        if future is not None and not future.done():
            future.cancel()


class JsonpTransport(Transport):
    """Sends every call as a JSONP script request.

    Parameters, including ``jsonp`` and the HTTP ``method``, always travel on
    the query string; the script loader fetches the URL with a plain GET.
    """

    append_query = False
    log_prefix = "[workfront-sdk:jsonp]"

    def __init__(
        self,
        config: ApiConfig,
        *,
        loader: ScriptLoader | None = None,
        registry: CallbackRegistry | None = None,
    ) -> None:
        super().__init__(config)
        self._loader = loader or partial(fetch_script, timeout=config.timeout_ms / 1000)
        self.registry = registry if registry is not None else CallbackRegistry()

    def build_url(self, request: RequestDescriptor, callback_id: str) -> str:
        params = {**request.params, "jsonp": callback_id, "method": request.method.value}
        return f"{self._config.origin}{request.path}?{serialize_params(params)}"

    async def send(self, request: RequestDescriptor) -> Any:
        callback_id, future = self.registry.register()
        try:
            url = self.build_url(request, callback_id)
            self._log_debug(f"Loading script for {callback_id}")
            script = await self._loader(url)
            self.run_script(script)
            if not future.done():
                self._log_debug(f"Script never called {callback_id}")
                raise ResponseParseError(script)
            return await future
        finally:
            self.registry.unregister(callback_id)

    def run_script(self, script: str) -> None:
        """Execute a JSONP response by dispatching it to the registry.

        Raises:
            ResponseParseError: If the script is not a single callback call
                with a JSON object argument.
        """
        match = _CALLBACK_RE.match(script)
        if match is None:
            raise ResponseParseError(script)
        try:
            envelope = parse_envelope(match.group("args"))
        except ResponseParseError:
            raise ResponseParseError(script) from None
        if not self.registry.invoke(match.group("name"), envelope):
            self._log_debug(f"Ignoring callback {match.group('name')}")
