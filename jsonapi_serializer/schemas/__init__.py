"""Pydantic schemas for JSON:API."""

from .context import RequestContext
from .query import QueryConfig
from .resource import (
    JSONAPIDocument,
    JSONAPIRelationship,
    JSONAPIResource,
    JSONAPIResourceIdentifier,
)

__all__ = [
    "JSONAPIDocument",
    "JSONAPIRelationship",
    "JSONAPIResource",
    "JSONAPIResourceIdentifier",
    "QueryConfig",
    "RequestContext",
]
