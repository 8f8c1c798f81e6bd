"""Offset/limit JSON:API pagination strategy."""

from __future__ import annotations

import logging
from typing import Any, Mapping

from .base import PaginationBase

logger = logging.getLogger(__name__)


def _page_int(page: Mapping[str, Any], key: str, default: int, minimum: int) -> int:
    """Read ``page[key]`` as an int; malformed or out-of-range values give ``default``."""
    raw = page.get(key, default)
    try:
        value = int(raw)
    except (TypeError, ValueError):
        logger.debug("Ignoring malformed page[%s]=%r", key, raw)
        return default
    return value if value >= minimum else default


class StandardPagination(PaginationBase):
    """page[offset]/page[limit] pagination."""

    default_limit = 10

    def get_links(
        self,
        links: Any,
        resource_type: str,
        page: Mapping[str, Any],
        *,
        total: int | None = None,
    ) -> dict[str, str]:
        """Build self/first/prev/next links, plus last when ``total`` is known."""
        offset = _page_int(page, "offset", 0, 0)
        limit = _page_int(page, "limit", self.default_limit, 1)

        def build_url(page_offset: int) -> str:
            query_params = dict(page)
            query_params["offset"] = page_offset
            query_params["limit"] = limit
            return links.pagination(resource_type, None, query_params)

        result = {"self": build_url(offset), "first": build_url(0)}
        prev_offset = offset - limit
        if prev_offset >= 0:
            result["prev"] = build_url(prev_offset)
        if total is None:
            result["next"] = build_url(offset + limit)
            return result
        last_offset = max(0, (max(total - 1, 0) // limit) * limit)
        result["last"] = build_url(last_offset)
        next_offset = offset + limit
        if next_offset <= last_offset:
            result["next"] = build_url(next_offset)
        return result
