"""Transport strategy interface."""

import sys
from abc import ABC, abstractmethod
from typing import Any

from workfront_sdk.config import ApiConfig
from workfront_sdk.models import RequestDescriptor


class Transport(ABC):
    """Sends a built request and returns the envelope's ``data``.

    Subclasses raise ``WorkfrontAPIError`` for error envelopes and
    ``ResponseParseError`` for unreadable bodies, and let transport-level
    errors propagate unchanged.
    """

    #: Whether bodiless methods carry their parameters on the request path.
    append_query: bool = True

    log_prefix = "[workfront-sdk]"

    def __init__(self, config: ApiConfig) -> None:
        self._config = config

    def _log_debug(self, message: str) -> None:
        """Log a debug message to stderr if debug mode is enabled."""
        if self._config.debug:
            print(f"{self.log_prefix} {message}", file=sys.stderr)

    @abstractmethod
    async def send(self, request: RequestDescriptor) -> Any:
        """Send ``request`` and return the response payload."""
