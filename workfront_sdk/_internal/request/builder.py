"""Request construction shared by every transport."""

from collections.abc import Mapping, Sequence
from typing import Any

import httpx

from workfront_sdk.config import ApiConfig
from workfront_sdk.models import FORM_CONTENT_TYPE, Method, RequestDescriptor


def normalize_fields(fields: str | Sequence[str] | None) -> list[str]:
    """Turn a field selector into a list, keeping the caller's order."""
    if not fields:
        return []
    if isinstance(fields, str):
        return [fields]
    return list(fields)


def merge_params(
    defaults: Mapping[str, Any],
    params: Mapping[str, Any] | None,
) -> dict[str, Any]:
    """Merge call parameters over instance defaults into a new dict.

    Neither argument is mutated.
    """
    merged = dict(defaults)
    merged.update(params or {})
    return merged


def build_path(base_path: str, path: str) -> str:
    """Join a request path to the configured base path.

    A path starting with '/' is appended to the base as is; any other path
    gets exactly one '/' between the two.
    """
    base = base_path.rstrip("/")
    if path.startswith("/"):
        return base + path
    return f"{base}/{path}"


def serialize_params(params: Mapping[str, Any]) -> str:
    """URL-encode parameters into a query string."""
    return str(httpx.QueryParams(params))


def build_request(
    config: ApiConfig,
    path: str,
    params: Mapping[str, Any] | None = None,
    fields: str | Sequence[str] | None = None,
    method: Method | str | None = None,
    *,
    append_query: bool = True,
) -> RequestDescriptor:
    """Build the request for one API call.

    Args:
        config: Instance configuration (base path, default headers/params/method).
        path: Path relative to the base path, or starting with '/'.
        params: Call parameters; they override ``config.params``.
        fields: Field name or ordered field names to request.
        method: HTTP method; defaults to ``config.method``.
        append_query: Whether bodiless methods get the query string appended to
            the path. Transports that serialize parameters themselves pass False.

    Returns:
        The request descriptor.

    Raises:
        WorkfrontValidationError: If ``method`` is not a supported method.
    """
    http_method = Method.coerce(method) if method is not None else config.method
    field_list = normalize_fields(fields)

    call_params = merge_params(config.params, params)
    if field_list:
        call_params["fields"] = ",".join(field_list)

    request_path = build_path(config.path, path)
    headers = dict(config.headers)
    body: str | None = None

    query = serialize_params(call_params)
    if query:
        if http_method.has_body:
            body = query
            headers["Content-Type"] = FORM_CONTENT_TYPE
            headers["Content-Length"] = str(len(query.encode("utf-8")))
        elif append_query:
            request_path += "?" + query

    return RequestDescriptor(
        method=http_method,
        path=request_path,
        headers=headers,
        body=body,
        params=call_params,
    )
