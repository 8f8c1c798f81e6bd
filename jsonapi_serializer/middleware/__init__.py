"""Middleware for serving JSON:API documents."""

from .error_handler import JSONAPI_MEDIA_TYPE, ErrorHandlerMiddleware, JSONAPIResponse

__all__ = ["JSONAPI_MEDIA_TYPE", "ErrorHandlerMiddleware", "JSONAPIResponse"]
