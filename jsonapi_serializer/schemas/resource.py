"""Pydantic schemas describing serialized JSON:API documents."""

from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel


class JSONAPIResourceIdentifier(BaseModel):
    """Resource identifier object: type + id."""

    type: str
    id: str


class JSONAPIRelationship(BaseModel):
    """Relationship object: linkage plus links."""

    data: Union[JSONAPIResourceIdentifier, List[JSONAPIResourceIdentifier], None] = None
    links: Dict[str, str] = {}


class JSONAPIResource(BaseModel):
    """Resource object with attributes and relationships."""

    type: str
    id: str
    attributes: Dict[str, Any] = {}
    relationships: Dict[str, JSONAPIRelationship] = {}
    links: Dict[str, str] = {}
    meta: Optional[Dict[str, Any]] = None


class JSONAPIDocument(BaseModel):
    """Top-level JSON:API document."""

    data: Union[JSONAPIResource, List[JSONAPIResource]]
    included: List[JSONAPIResource] = []
    meta: Optional[Dict[str, Any]] = None
    links: Dict[str, str] = {}

