"""Core JSON:API document, error and settings helpers."""

from .document import JSONAPIDocumentBuilder
from .errors import (
    ConfigurationError,
    InvalidQueryError,
    JSONAPIError,
    JSONAPIErrorBuilder,
    MissingIdentifierError,
)
from .settings import JSONAPISettings, configure, get_settings

__all__ = [
    "ConfigurationError",
    "InvalidQueryError",
    "JSONAPIDocumentBuilder",
    "JSONAPIError",
    "JSONAPIErrorBuilder",
    "JSONAPISettings",
    "MissingIdentifierError",
    "configure",
    "get_settings",
]
