"""Resource descriptors: the static serializable shape of each resource type."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping, Protocol, Sequence, runtime_checkable

from jsonapi_serializer.core.errors import ConfigurationError
from jsonapi_serializer.utils.links import PageLink
from jsonapi_serializer.utils.records import get_value

logger = logging.getLogger(__name__)


class RelationshipPolicy(str, Enum):
    """When a related resource is serialized into ``included``."""

    DEFAULT = "default"
    ALWAYS_INCLUDE = "include"


@dataclass(frozen=True)
class Relationship:
    """Relationship declaration: target descriptor, inclusion policy, cardinality.

    ``target`` is a descriptor instance, a descriptor class or a registered
    type name. ``many`` left as ``None`` means the cardinality is taken from
    the shape of the loaded value.
    """

    target: Any
    policy: RelationshipPolicy = RelationshipPolicy.DEFAULT
    many: bool | None = None

    @classmethod
    def coerce(cls, value: Any) -> "Relationship":
        """Accept ``Relationship``, ``(target, policy)`` or a bare target."""
        if isinstance(value, Relationship):
            return value
        if isinstance(value, tuple):
            if len(value) != 2:
                raise ConfigurationError(f"Relationship tuple must be (target, policy), got {value!r}.")
            target, policy = value
            try:
                return cls(target, RelationshipPolicy(policy))
            except ValueError:
                raise ConfigurationError(f"Unknown inclusion policy {policy!r}.") from None
        return cls(value)


@runtime_checkable
class ResourceDescriptor(Protocol):
    """Capabilities the serializer needs from a resource type.

    ``meta(record, context)``, ``links(record, context)``,
    ``attribute_value(record, name, context)`` and ``paginator()`` are
    optional and looked up by name.
    """

    def type(self) -> str: ...

    def attributes(self) -> Sequence[str]: ...

    def relationships(self) -> Mapping[str, Any]: ...


class JSONAPIView:
    """Declarative resource descriptor configured through an inner ``Meta``."""

    class Meta:
        """View metadata (type, fields, relationships, paginator)."""

        type_: str = ""
        fields: list[str] = []
        relationships: dict[str, Any] = {}
        paginator: type | None = None

    def type(self) -> str:
        return getattr(self.Meta, "type_", "")

    def attributes(self) -> list[str]:
        return [field for field in getattr(self.Meta, "fields", []) if field != "id"]

    def relationships(self) -> dict[str, Relationship]:
        declared = getattr(self.Meta, "relationships", {})
        return {name: Relationship.coerce(value) for name, value in declared.items()}

    def paginator(self) -> Any:
        paginator_class = getattr(self.Meta, "paginator", None)
        return paginator_class() if paginator_class else None

    def attribute_value(self, record: Any, name: str, context: Any) -> Any:
        """Return the value of ``name``, preferring a ``get_<name>`` method."""
        getter = getattr(self, f"get_{name}", None)
        if getter is not None:
            return getter(record, context)
        return get_value(record, name)

    def meta(self, record: Any, context: Any) -> Mapping[str, Any] | None:
        return None

    def links(self, record: Any, context: Any) -> Mapping[str, str]:
        return {}

    def pagination_link(self, page: Mapping[str, Any]) -> PageLink:
        """Return a link to this resource with ``page[...]`` query parameters.

        Meant for use in :meth:`links`; the serializer renders it against the
        base URL and namespace of the current call.
        """
        return PageLink(dict(page))


class DescriptorRegistry:
    """Map type names to descriptor instances and resolve relationship targets."""

    def __init__(self) -> None:
        self._descriptors: dict[str, Any] = {}
        self._instances: dict[type, Any] = {}

    def register(self, descriptor: Any) -> Any:
        """Register a descriptor class or instance; usable as a class decorator."""
        instance = self._instantiate(descriptor)
        type_name = instance.type()
        if not type_name:
            raise ConfigurationError(f"{instance!r} declares no resource type.")
        existing = self._descriptors.get(type_name)
        if existing is not None and existing is not instance:
            raise ConfigurationError(f"Resource type '{type_name}' is already registered.")
        self._descriptors[type_name] = instance
        logger.debug("Registered descriptor %s for type '%s'", type(instance).__name__, type_name)
        return descriptor

    def get(self, type_name: str) -> Any | None:
        return self._descriptors.get(type_name)

    def resolve(self, target: Any) -> Any:
        """Return the descriptor instance ``target`` refers to."""
        if isinstance(target, str):
            descriptor = self._descriptors.get(target)
            if descriptor is None:
                raise ConfigurationError(f"No descriptor registered for type '{target}'.")
            return descriptor
        return self._instantiate(target)

    def relationships_of(self, descriptor: Any) -> list[tuple[str, Relationship, Any]]:
        """Return ``(name, relationship, target descriptor)`` for each declared relation."""
        resolved = []
        for name, value in descriptor.relationships().items():
            relationship = Relationship.coerce(value)
            try:
                target = self.resolve(relationship.target)
            except ConfigurationError as exc:
                raise ConfigurationError(
                    f"Relationship '{name}' of '{descriptor.type()}': {exc.detail}"
                ) from exc
            resolved.append((name, relationship, target))
        return resolved

    def _instantiate(self, descriptor: Any) -> Any:
        if isinstance(descriptor, type):
            instance = self._instances.get(descriptor)
            if instance is None:
                instance = self._instances.setdefault(descriptor, descriptor())
            descriptor = instance
        if not isinstance(descriptor, ResourceDescriptor):
            raise ConfigurationError(f"{descriptor!r} is not a resource descriptor.")
        return descriptor


registry = DescriptorRegistry()
