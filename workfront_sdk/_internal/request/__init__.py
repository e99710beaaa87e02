"""Request building and response envelope handling."""

from workfront_sdk._internal.request.builder import (
    build_path,
    build_request,
    merge_params,
    normalize_fields,
    serialize_params,
)
from workfront_sdk._internal.request.envelope import parse_envelope, unwrap_envelope
from workfront_sdk._internal.request.redaction import redact_params

__all__ = [
    "build_path",
    "build_request",
    "merge_params",
    "normalize_fields",
    "serialize_params",
    "parse_envelope",
    "unwrap_envelope",
    "redact_params",
]
