"""Serialize in-memory records into JSON:API v1.1 documents."""

from .core.errors import (
    ConfigurationError,
    InvalidQueryError,
    JSONAPIError,
    MissingIdentifierError,
)
from .core.settings import JSONAPISettings, configure, get_settings
from .schemas.context import RequestContext
from .schemas.query import QueryConfig
from .serializers.base import JSONAPISerializer, serialize
from .utils.query_params import parse_query_params, validate_query
from .views.base import (
    DescriptorRegistry,
    JSONAPIView,
    Relationship,
    RelationshipPolicy,
    registry,
)

__all__ = [
    "ConfigurationError",
    "DescriptorRegistry",
    "InvalidQueryError",
    "JSONAPIError",
    "JSONAPISerializer",
    "JSONAPISettings",
    "JSONAPIView",
    "MissingIdentifierError",
    "QueryConfig",
    "Relationship",
    "RelationshipPolicy",
    "RequestContext",
    "configure",
    "get_settings",
    "parse_query_params",
    "registry",
    "serialize",
    "validate_query",
]
