"""Call-scoped bookkeeping for the ``included`` section."""

from __future__ import annotations

from typing import Any, Iterable

ResourceKey = tuple[str, str]


def include_prefixes(include: Iterable[str]) -> frozenset[tuple[str, ...]]:
    """Expand dotted include paths into every path they pass through.

    ``{"best_comments.user"}`` gives ``{("best_comments",), ("best_comments", "user")}``.
    """
    prefixes: set[tuple[str, ...]] = set()
    for path in include:
        parts = tuple(part for part in path.split(".") if part)
        for index in range(1, len(parts) + 1):
            prefixes.add(parts[:index])
    return frozenset(prefixes)


class IncludedRegistry:
    """Resources seen during one ``serialize`` call, in first-seen order.

    Primary resources are marked as seen so they are never repeated in
    ``included``. A key is claimed before its resource is built, which
    stops relationship cycles from being traversed twice.
    """

    def __init__(self) -> None:
        self._seen: set[ResourceKey] = set()
        self._order: list[ResourceKey] = []
        self._resources: dict[ResourceKey, dict[str, Any]] = {}

    def __contains__(self, key: ResourceKey) -> bool:
        return key in self._seen

    def mark_primary(self, key: ResourceKey) -> None:
        self._seen.add(key)

    def claim(self, key: ResourceKey) -> bool:
        """Reserve ``key`` for inclusion; False when it was already seen."""
        if key in self._seen:
            return False
        self._seen.add(key)
        self._order.append(key)
        return True

    def add(self, key: ResourceKey, resource: dict[str, Any]) -> None:
        self._resources[key] = resource

    @property
    def resources(self) -> list[dict[str, Any]]:
        return [self._resources[key] for key in self._order if key in self._resources]
