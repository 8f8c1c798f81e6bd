"""Request context consumed for link generation."""

from __future__ import annotations

from typing import Dict, Optional

from fastapi import Request
from pydantic import BaseModel, ConfigDict


class RequestContext(BaseModel):
    """Scheme, host and current path of the request being answered."""

    model_config = ConfigDict(frozen=True)

    scheme: str = "http"
    host: str
    port: Optional[int] = None
    path: str = "/"
    query_params: Dict[str, str] = {}

    @classmethod
    def from_request(cls, request: Request) -> "RequestContext":
        """Build a context from a FastAPI/Starlette request."""
        url = request.url
        return cls(
            scheme=url.scheme,
            host=url.hostname or "localhost",
            port=url.port,
            path=url.path,
            query_params=dict(request.query_params),
        )
