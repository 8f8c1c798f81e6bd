"""JSON:API top-level document assembly."""

from typing import Any, Iterable, Mapping


class JSONAPIDocumentBuilder:
    """Build JSON:API v1.1 documents from serialized resource objects."""

    def build_single(
        self,
        resource: Mapping[str, Any] | None,
        *,
        included: Iterable[Mapping[str, Any]] = (),
        links: Mapping[str, Any] | None = None,
        meta: Mapping[str, Any] | None = None,
    ) -> dict[str, Any]:
        """Return a JSON:API document for a single (possibly null) resource object."""
        data = dict(resource) if resource is not None else None
        return self._build(data, included=included, links=links, meta=meta)

    def build_collection(
        self,
        resources: Iterable[Mapping[str, Any]],
        *,
        included: Iterable[Mapping[str, Any]] = (),
        links: Mapping[str, Any] | None = None,
        meta: Mapping[str, Any] | None = None,
    ) -> dict[str, Any]:
        """Return a JSON:API document for an ordered collection of resources."""
        data = [dict(item) for item in resources]
        return self._build(data, included=included, links=links, meta=meta)

    def build_error(self, errors: Iterable[Mapping[str, Any]]) -> dict[str, Any]:
        """Return a JSON:API error document from error objects."""
        return {"errors": [dict(error) for error in errors]}

    def _build(
        self,
        data: Any,
        *,
        included: Iterable[Mapping[str, Any]],
        links: Mapping[str, Any] | None,
        meta: Mapping[str, Any] | None,
    ) -> dict[str, Any]:
        document: dict[str, Any] = {
            "data": data,
            "included": [dict(item) for item in included],
            "links": dict(links or {}),
        }
        if meta is not None:
            document["meta"] = dict(meta)
        return document
