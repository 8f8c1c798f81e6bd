"""Serialize raw records into JSON:API documents."""

from __future__ import annotations

import logging
from typing import Any, Mapping

from jsonapi_serializer.core.document import JSONAPIDocumentBuilder
from jsonapi_serializer.core.errors import ConfigurationError, MissingIdentifierError
from jsonapi_serializer.core.settings import JSONAPISettings, get_settings
from jsonapi_serializer.schemas.query import QueryConfig
from jsonapi_serializer.utils.field_transform import get_transform
from jsonapi_serializer.utils.links import LinkBuilder, PageLink
from jsonapi_serializer.utils.records import MISSING, get_id, get_value, is_collection
from jsonapi_serializer.views.base import (
    DescriptorRegistry,
    Relationship,
    RelationshipPolicy,
    registry as default_registry,
)

from .inclusion import IncludedRegistry, include_prefixes

logger = logging.getLogger(__name__)


class JSONAPISerializer:
    """Serialize records described by a resource descriptor.

    Everything request-specific (context, query, settings) is fixed at
    construction. The ``included`` registry lives only inside one
    :meth:`serialize` call, so an instance can serve concurrent calls.
    """

    document_builder_class: type = JSONAPIDocumentBuilder

    def __init__(
        self,
        descriptor: Any,
        *,
        context: Any = None,
        query: QueryConfig | None = None,
        settings: JSONAPISettings | None = None,
        registry: DescriptorRegistry | None = None,
    ) -> None:
        self.registry = registry or default_registry
        self.settings = settings or get_settings()
        self.descriptor = self.registry.resolve(descriptor)
        self.context = context
        self.query = query or QueryConfig()
        self.transform = get_transform(self.settings.field_transformation)
        self.links = LinkBuilder(context, namespace=self.settings.namespace)
        self._include_paths = include_prefixes(self.query.include)
        self._relationships = self._resolve_graph(self.descriptor)

    def _resolve_graph(self, root: Any) -> dict[str, list[tuple[str, Relationship, Any]]]:
        """Resolve every relationship reachable from ``root`` before any traversal.

        Raises:
            ConfigurationError: a target cannot be resolved, or two distinct
                descriptors in the graph declare the same type name.
        """
        resolved: dict[str, list[tuple[str, Relationship, Any]]] = {}
        owners: dict[str, Any] = {}
        pending = [root]
        while pending:
            descriptor = pending.pop()
            type_name = descriptor.type()
            owner = owners.setdefault(type_name, descriptor)
            if owner is not descriptor:
                raise ConfigurationError(
                    f"Type '{type_name}' is declared by both {owner!r} and {descriptor!r}."
                )
            if type_name in resolved:
                continue
            resolved[type_name] = self.registry.relationships_of(descriptor)
            pending.extend(target for _, _, target in resolved[type_name])
        return resolved

    def serialize(self, data: Any, *, meta: Mapping[str, Any] | None = None) -> dict[str, Any]:
        """Return the document for a single record, a collection or ``None``."""
        type_name = self.descriptor.type()
        included = IncludedRegistry()
        builder = self.document_builder_class()

        if data is None:
            return builder.build_single(None, links={}, meta=meta)

        if is_collection(data):
            records = list(data)
            logger.debug("Serializing %d '%s' resources", len(records), type_name)
            ids = [self._primary_id(record) for record in records]
            for resource_id in ids:
                included.mark_primary((type_name, resource_id))
            resources = [
                self.to_resource(self.descriptor, record, resource_id, (), included)
                for record, resource_id in zip(records, ids)
            ]
            links = {"self": self.links.collection_self(type_name)}
            links.update(self._pagination_links(meta))
            return builder.build_collection(
                resources, included=included.resources, links=links, meta=meta
            )

        resource_id = self._primary_id(data)
        logger.debug("Serializing '%s' resource %s", type_name, resource_id)
        included.mark_primary((type_name, resource_id))
        resource = self.to_resource(self.descriptor, data, resource_id, (), included)
        return builder.build_single(
            resource, included=included.resources, links=resource["links"], meta=meta
        )

    def to_resource(
        self,
        descriptor: Any,
        record: Any,
        resource_id: str,
        path: tuple[str, ...],
        included: IncludedRegistry,
    ) -> dict[str, Any]:
        """Build one resource object; related resources go to ``included``."""
        resource: dict[str, Any] = {
            "id": resource_id,
            "type": descriptor.type(),
            "attributes": self.get_attributes(descriptor, record),
            "relationships": self.get_relationships(
                descriptor, record, resource_id, path, included
            ),
            "links": self.get_links(descriptor, record, resource_id),
        }
        meta = self._call_hook(descriptor, "meta", record)
        if meta is not None:
            resource["meta"] = dict(meta)
        return resource

    def get_attributes(self, descriptor: Any, record: Any) -> dict[str, Any]:
        """Return transformed attributes, restricted by the sparse fieldset of the type."""
        allowed = self.query.fields.get(descriptor.type())
        value_of = getattr(descriptor, "attribute_value", None)
        attributes: dict[str, Any] = {}
        for name in descriptor.attributes():
            if name == "id":
                continue
            key = self.transform(name)
            if allowed is not None and name not in allowed and key not in allowed:
                continue
            if value_of is not None:
                value = value_of(record, name, self.context)
            else:
                value = get_value(record, name)
            if value is MISSING:
                continue
            attributes[key] = value
        return attributes

    def get_relationships(
        self,
        descriptor: Any,
        record: Any,
        resource_id: str,
        path: tuple[str, ...],
        included: IncludedRegistry,
    ) -> dict[str, Any]:
        """Return relationship objects for every relation the record has loaded.

        A relation without a loaded value, or whose single related record
        has no id, is left out. Related records are serialized into
        ``included`` when their include path was requested or the relation
        is always included.
        """
        type_name = descriptor.type()
        relationships: dict[str, Any] = {}
        for name, relationship, target in self._relationships[type_name]:
            value = get_value(record, name)
            if value is MISSING or value is None:
                continue

            key = self.transform(name)
            target_type = target.type()
            links = {"self": self.links.relationship_self(type_name, resource_id, key)}
            many = relationship.many if relationship.many is not None else is_collection(value)
            if many:
                if not is_collection(value):
                    value = [value]
                items = [(get_id(item), item) for item in value]
                items = [(item_id, item) for item_id, item in items if item_id is not None]
                data: Any = [{"type": target_type, "id": item_id} for item_id, _ in items]
                links["related"] = self.links.collection_self(target_type)
            else:
                related_id = get_id(value)
                if related_id is None:
                    continue
                items = [(related_id, value)]
                data = {"type": target_type, "id": related_id}
                links["related"] = self.links.relationship_related(target_type, related_id)
            relationships[key] = {"data": data, "links": links}

            child_path = path + (name,)
            if not self._should_include(relationship, child_path, key, path):
                continue
            for item_id, item in items:
                item_key = (target_type, item_id)
                if not included.claim(item_key):
                    logger.debug("Skipping already serialized %s/%s", *item_key)
                    continue
                included.add(item_key, self.to_resource(target, item, item_id, child_path, included))
        return relationships

    def get_links(self, descriptor: Any, record: Any, resource_id: str) -> dict[str, str]:
        links = {"self": self.links.resource_self(descriptor.type(), resource_id)}
        custom = self._call_hook(descriptor, "links", record) or {}
        for name, link in custom.items():
            if isinstance(link, PageLink):
                link = self.links.pagination(descriptor.type(), resource_id, link.page)
            links[name] = link
        return links

    def _should_include(
        self,
        relationship: Relationship,
        child_path: tuple[str, ...],
        key: str,
        parent_path: tuple[str, ...],
    ) -> bool:
        if relationship.policy is RelationshipPolicy.ALWAYS_INCLUDE:
            return True
        wire_path = tuple(self.transform(part) for part in parent_path) + (key,)
        return child_path in self._include_paths or wire_path in self._include_paths

    def _pagination_links(self, meta: Mapping[str, Any] | None) -> dict[str, str]:
        paginator_factory = getattr(self.descriptor, "paginator", None)
        if paginator_factory is None or not self.query.page:
            return {}
        paginator = paginator_factory()
        if paginator is None:
            return {}
        total = meta.get("total") if meta else None
        if not isinstance(total, int) or isinstance(total, bool):
            total = None
        return paginator.get_links(
            self.links, self.descriptor.type(), self.query.page, total=total
        )

    def _primary_id(self, record: Any) -> str:
        resource_id = get_id(record)
        if resource_id is None:
            raise MissingIdentifierError(self.descriptor.type())
        return resource_id

    def _call_hook(self, descriptor: Any, name: str, record: Any) -> Any:
        hook = getattr(descriptor, name, None)
        if hook is None:
            return None
        return hook(record, self.context)


def serialize(
    descriptor: Any,
    data: Any,
    request_context: Any = None,
    top_level_meta: Mapping[str, Any] | None = None,
    query_config: QueryConfig | None = None,
    *,
    settings: JSONAPISettings | None = None,
    registry: DescriptorRegistry | None = None,
) -> dict[str, Any]:
    """Serialize ``data`` as a JSON:API document described by ``descriptor``.

    Args:
        descriptor: Resource descriptor (instance, class or registered type name).
        data: A single record, an iterable of records, or ``None``.
        request_context: Optional :class:`RequestContext`; links are absolute
            when given and root-relative otherwise.
        top_level_meta: Document ``meta``; omitted when ``None``.
        query_config: Requested include paths, sparse fieldsets and page
            parameters. ``None`` behaves like an empty query.
        settings: Settings to use instead of the process settings.
        registry: Registry resolving type-name relationship targets.

    Raises:
        ConfigurationError: A relationship target cannot be resolved.
        MissingIdentifierError: A primary record has no id.
    """
    serializer = JSONAPISerializer(
        descriptor,
        context=request_context,
        query=query_config,
        settings=settings,
        registry=registry,
    )
    return serializer.serialize(data, meta=top_level_meta)
