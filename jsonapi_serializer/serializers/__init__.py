"""Serialization of records into JSON:API documents."""

from .base import JSONAPISerializer, serialize
from .inclusion import IncludedRegistry, include_prefixes

__all__ = ["IncludedRegistry", "JSONAPISerializer", "include_prefixes", "serialize"]
