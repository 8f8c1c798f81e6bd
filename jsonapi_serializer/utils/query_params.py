"""Helpers for JSON:API query parameter parsing."""

from __future__ import annotations

import json
import re
from typing import Any, Mapping

from jsonapi_serializer.core.errors import InvalidQueryError
from jsonapi_serializer.core.settings import get_settings
from jsonapi_serializer.schemas.query import QueryConfig

from .field_transform import get_transform

_FILTER_KEY = re.compile(r"^filter\[([^\]]+)\](?:\[([^\]]+)\])?$")


def _split_csv(value: str) -> list[str]:
    return [item for item in (part.strip() for part in value.split(",")) if item]


def _maybe_parse_json(value: str) -> Any:
    """Parse JSON string if it looks like JSON, otherwise return as-is."""
    stripped = value.strip()
    if stripped[:1] in ("[", "{"):
        try:
            return json.loads(stripped)
        except json.JSONDecodeError:
            pass
    return value


def parse_query_params(params: Mapping[str, Any]) -> QueryConfig:
    """Normalize JSON:API query parameter families into a :class:`QueryConfig`."""
    include: set[str] = set()
    fields: dict[str, frozenset[str]] = {}
    sort: list[dict[str, str]] = []
    page: dict[str, Any] = {}
    filters: dict[str, Any] = {}

    for key, value in params.items():
        if value is None:
            continue
        raw_value = str(value)
        if key == "include":
            include.update(_split_csv(raw_value))
        elif key.startswith("fields[") and key.endswith("]"):
            resource_type = key[len("fields[") : -1]
            fields[resource_type] = frozenset(_split_csv(raw_value))
        elif key == "sort":
            sort = [
                {"field": field.lstrip("-"), "direction": "desc" if field.startswith("-") else "asc"}
                for field in _split_csv(raw_value)
            ]
        elif key.startswith("page[") and key.endswith("]"):
            page_key = key[len("page[") : -1]
            try:
                page[page_key] = int(raw_value)
            except ValueError:
                page[page_key] = raw_value
        elif key.startswith("filter"):
            match = _FILTER_KEY.match(key)
            if match is None:
                continue
            field_name, op_name = match.group(1), match.group(2)
            parsed_value = _maybe_parse_json(raw_value)
            if op_name:
                # filter[field][op] syntax: {"field": {"op": "gt", "val": value}}
                if op_name in ("in", "not_in", "between") and isinstance(parsed_value, str):
                    parsed_value = _split_csv(parsed_value)
                filters[field_name] = {"op": op_name, "val": parsed_value}
            else:
                filters[field_name] = parsed_value

    return QueryConfig(
        include=frozenset(include), fields=fields, sort=sort, page=page, filter=filters
    )


def validate_query(query: QueryConfig, descriptor: Any, registry: Any = None) -> None:
    """Reject include paths and sparse fieldsets the descriptor graph cannot satisfy.

    Raises:
        InvalidQueryError: an include segment is not a declared relationship,
            or ``fields[type]`` names an attribute ``type`` does not declare.
    """
    if registry is None:
        from jsonapi_serializer.views.base import registry

    transform = get_transform(get_settings().field_transformation)
    root = registry.resolve(descriptor)
    known_types = {root.type(): root}

    for path in sorted(query.include):
        current = root
        for segment in path.split("."):
            targets = {}
            for name, _, target in registry.relationships_of(current):
                targets[name] = targets[transform(name)] = target
            if segment not in targets:
                raise InvalidQueryError(
                    f"'{current.type()}' has no relationship '{segment}' (include={path}).",
                    parameter="include",
                )
            current = targets[segment]
            known_types.setdefault(current.type(), current)

    for type_name, requested in query.fields.items():
        target = known_types.get(type_name) or registry.get(type_name)
        if target is None:
            continue
        declared = set(target.attributes())
        declared.update(transform(name) for name in list(declared))
        unknown = sorted(set(requested) - declared)
        if unknown:
            raise InvalidQueryError(
                f"'{type_name}' has no attribute(s) {', '.join(unknown)}.",
                parameter=f"fields[{type_name}]",
            )
