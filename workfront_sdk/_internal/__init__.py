"""Internal modules for Workfront SDK.

WARNING: This package contains the request plumbing behind ``Api.request``.
These are not intended for direct use in application code.

Modules:
    request - Request building, envelope parsing and redaction
    transport - Server (httpx) and JSONP transports
    http - Shared HTTP client configuration
"""
