"""Connection settings for a Workfront API instance."""

import os
from typing import Any, Literal

from pydantic import BaseModel, Field, field_validator

from workfront_sdk.exceptions import WorkfrontConfigError
from workfront_sdk.models import Method

DEFAULT_PROTOCOL = "https"
DEFAULT_PATH = "/attask/api"
DEFAULT_TIMEOUT_MS = 30_000
DEFAULT_PORTS = {"http": 80, "https": 443}


class ApiConfig(BaseModel):
    """Transport configuration shared by every request of an ``Api``.

    Required fields:
        host: Hostname of the Workfront instance (e.g. 'acme.my.workfront.com')

    Optional fields:
        protocol: 'http' or 'https' (default: 'https')
        port: TCP port (default: 443 for https, 80 for http)
        path: Base path every request path is joined to (default: '/attask/api')
        headers: Headers sent with every request
        method: Method used when a call does not name one (default: GET)
        params: Instance-level parameters; call parameters override them
        timeout_ms: HTTP client timeout in milliseconds
        debug: Enable debug logging to stderr
    """

    host: str
    protocol: Literal["http", "https"] = DEFAULT_PROTOCOL
    port: int | None = None
    path: str = DEFAULT_PATH
    headers: dict[str, str] = Field(default_factory=dict)
    method: Method = Method.GET
    params: dict[str, Any] = Field(default_factory=dict)
    timeout_ms: int = DEFAULT_TIMEOUT_MS
    debug: bool = False

    model_config = {"frozen": True}

    @field_validator("host")
    @classmethod
    def host_not_empty(cls, v: str) -> str:
        if not v:
            raise ValueError("host must not be empty")
        return v

    @field_validator("method", mode="before")
    @classmethod
    def method_upper(cls, v: Any) -> Any:
        return v.upper() if isinstance(v, str) else v

    @property
    def resolved_port(self) -> int:
        return self.port if self.port is not None else DEFAULT_PORTS[self.protocol]

    @property
    def origin(self) -> str:
        """Scheme, host and port, e.g. 'https://acme.my.workfront.com:443'."""
        return f"{self.protocol}://{self.host}:{self.resolved_port}"

    @classmethod
    def from_env(cls) -> "ApiConfig":
        """Create a config from environment variables.

        Required environment variables:
            WORKFRONT_API_HOST: Hostname of the Workfront instance.

        Optional environment variables:
            WORKFRONT_API_PROTOCOL: 'http' or 'https'.
            WORKFRONT_API_PORT: TCP port.
            WORKFRONT_API_PATH: Base API path.
            WORKFRONT_API_KEY: API key, sent as the default 'apiKey' parameter.
            WORKFRONT_API_TIMEOUT_MS: HTTP client timeout in milliseconds.
            WORKFRONT_API_DEBUG: Set to "1" to enable debug logging.

        Returns:
            A configured ApiConfig.

        Raises:
            WorkfrontConfigError: If WORKFRONT_API_HOST is not set.
            ValueError: If a numeric variable is not a valid integer.
        """
        host = os.environ.get("WORKFRONT_API_HOST")
        if not host:
            raise WorkfrontConfigError("WORKFRONT_API_HOST is not set")

        port = os.environ.get("WORKFRONT_API_PORT")
        api_key = os.environ.get("WORKFRONT_API_KEY")

        return cls(
            host=host,
            protocol=os.environ.get("WORKFRONT_API_PROTOCOL", DEFAULT_PROTOCOL),
            port=int(port) if port else None,
            path=os.environ.get("WORKFRONT_API_PATH", DEFAULT_PATH),
            params={"apiKey": api_key} if api_key else {},
            timeout_ms=int(os.environ.get("WORKFRONT_API_TIMEOUT_MS", str(DEFAULT_TIMEOUT_MS))),
            debug=os.environ.get("WORKFRONT_API_DEBUG", "") == "1",
        )
