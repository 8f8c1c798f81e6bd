"""Pagination base class for JSON:API collection links."""

from typing import Any, Mapping


class PaginationBase:
    """Define pagination API for JSON:API collections."""

    def get_links(
        self,
        links: Any,
        resource_type: str,
        page: Mapping[str, Any],
        *,
        total: int | None = None,
    ) -> dict[str, str]:
        """Return JSON:API pagination links built with a ``LinkBuilder``."""
        raise NotImplementedError
