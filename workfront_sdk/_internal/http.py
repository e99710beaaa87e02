"""Shared HTTP client configuration."""

import httpx

from workfront_sdk._version import __version__

DEFAULT_TIMEOUT = 30.0


def create_http_client(
    *,
    timeout: float = DEFAULT_TIMEOUT,
    base_url: str | None = None,
    headers: dict[str, str] | None = None,
) -> httpx.AsyncClient:
    """Create configured async HTTP client.

    Args:
        timeout: Request timeout in seconds.
        base_url: Optional base URL for all requests.
        headers: Extra default headers, merged over the User-Agent.

    Returns:
        Configured httpx.AsyncClient instance.
    """
    return httpx.AsyncClient(
        timeout=timeout,
        base_url=base_url or "",
        headers={"User-Agent": f"workfront-sdk/{__version__}", **(headers or {})},
    )
