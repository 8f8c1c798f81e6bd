"""Utilities for field names, links, records and query parameters."""

from .field_transform import get_transform
from .links import LinkBuilder
from .query_params import parse_query_params, validate_query

__all__ = ["LinkBuilder", "get_transform", "parse_query_params", "validate_query"]
