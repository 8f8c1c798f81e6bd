"""Pagination strategies for JSON:API collections."""

from .base import PaginationBase
from .standard import StandardPagination

__all__ = ["PaginationBase", "StandardPagination"]
