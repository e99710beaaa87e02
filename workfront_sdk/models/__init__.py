"""Public models for the Workfront SDK."""

from workfront_sdk.models.request import FORM_CONTENT_TYPE, Method, RequestDescriptor

__all__ = ["FORM_CONTENT_TYPE", "Method", "RequestDescriptor"]
