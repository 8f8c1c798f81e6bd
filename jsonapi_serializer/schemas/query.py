"""Query configuration consumed by the serializer."""

from __future__ import annotations

from typing import Any, Dict, FrozenSet, List

from fastapi import Request
from pydantic import BaseModel, ConfigDict


class QueryConfig(BaseModel):
    """Normalized include, sparse fieldset, sort, page and filter parameters."""

    model_config = ConfigDict(frozen=True)

    include: FrozenSet[str] = frozenset()
    fields: Dict[str, FrozenSet[str]] = {}
    sort: List[Dict[str, str]] = []
    page: Dict[str, Any] = {}
    filter: Dict[str, Any] = {}

    @classmethod
    def from_request(cls, request: Request) -> "QueryConfig":
        """Parse the query string of a FastAPI/Starlette request."""
        from jsonapi_serializer.utils.query_params import parse_query_params

        return parse_query_params(request.query_params)
