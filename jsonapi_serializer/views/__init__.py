"""Resource descriptor declarations."""

from .base import (
    DescriptorRegistry,
    JSONAPIView,
    Relationship,
    RelationshipPolicy,
    ResourceDescriptor,
    registry,
)

__all__ = [
    "DescriptorRegistry",
    "JSONAPIView",
    "Relationship",
    "RelationshipPolicy",
    "ResourceDescriptor",
    "registry",
]
