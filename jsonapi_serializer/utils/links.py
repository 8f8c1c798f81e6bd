"""Resource, relationship and pagination link construction."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping
from urllib.parse import urlencode

_DEFAULT_PORTS = {"http": 80, "https": 443}


@dataclass(frozen=True)
class PageLink:
    """A pagination link to the current resource, resolved by the serializer.

    Descriptor ``links`` hooks return these so the link shares the base URL
    and namespace of the call that renders it.
    """

    page: Mapping[str, Any] = field(default_factory=dict)


class LinkBuilder:
    """Build JSON:API links, root-relative or absolute.

    Without a request context every link is a root-relative path
    (``/user/123``). With one, links are prefixed with the context's
    ``scheme://host`` (``http://www.example.com/user/123``). The context
    only needs ``scheme`` and ``host``; ``port`` and ``query_params`` are
    read when present.
    """

    def __init__(self, context: Any = None, *, namespace: str = "") -> None:
        self.context = context
        self.namespace = namespace

    @property
    def base(self) -> str:
        if self.context is None:
            return self.namespace
        scheme = self.context.scheme
        port = getattr(self.context, "port", None)
        if port is None or _DEFAULT_PORTS.get(scheme) == port:
            origin = f"{scheme}://{self.context.host}"
        else:
            origin = f"{scheme}://{self.context.host}:{port}"
        return f"{origin}{self.namespace}"

    def resource_self(self, type_: str, resource_id: str) -> str:
        return f"{self.base}/{type_}/{resource_id}"

    def relationship_self(self, type_: str, resource_id: str, relationship: str) -> str:
        return f"{self.resource_self(type_, resource_id)}/relationships/{relationship}"

    def relationship_related(self, related_type: str, related_id: str) -> str:
        return self.resource_self(related_type, related_id)

    def collection_self(self, type_: str) -> str:
        return f"{self.base}/{type_}"

    def pagination(
        self, type_: str, resource_id: str | None, page: Mapping[str, Any]
    ) -> str:
        """Return the resource (or collection) URL with ``page[...]`` query parameters.

        Non-page query parameters of the current request are carried over
        ahead of the page parameters, which keep ``page``'s key order.
        """
        if resource_id is None:
            path = self.collection_self(type_)
        else:
            path = self.resource_self(type_, resource_id)

        query: list[tuple[str, Any]] = []
        request_query = getattr(self.context, "query_params", None) or {}
        query.extend(
            (key, value) for key, value in request_query.items() if not key.startswith("page[")
        )
        query.extend((f"page[{key}]", value) for key, value in page.items())
        if not query:
            return path
        return f"{path}?{urlencode(query)}"
