"""Uniform value lookup over the record shapes the serializer accepts.

Records may be mappings, plain objects or SQLAlchemy mapped instances.
For mapped instances only values already present on the instance are
visible: an attribute SQLAlchemy has not loaded reads as missing rather
than triggering a lazy load.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from pydantic import BaseModel
from sqlalchemy import inspect
from sqlalchemy.orm.attributes import NO_VALUE
from sqlalchemy.orm.state import InstanceState


class _Missing:
    """Marker for a value the record does not carry."""

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING: Any = _Missing()


def get_value(record: Any, name: str) -> Any:
    """Return ``record``'s value for ``name`` or :data:`MISSING`."""
    if isinstance(record, Mapping):
        return record[name] if name in record else MISSING

    state = inspect(record, raiseerr=False)
    if isinstance(state, InstanceState) and name in state.attrs:
        loaded = state.attrs[name].loaded_value
        return MISSING if loaded is NO_VALUE else loaded
    return getattr(record, name, MISSING)


def get_id(record: Any) -> str | None:
    """Return the record id as a string, or ``None`` when it has no usable id."""
    if record is None:
        return None
    value = get_value(record, "id")
    if value is MISSING or value is None or value == "":
        return None
    return str(value)


def is_collection(value: Any) -> bool:
    """Return True for to-many relationship values.

    Mappings, strings, pydantic models and named tuples are records, not
    collections, even though they are iterable. Plain tuples, lists, sets
    and generators are collections.
    """
    if isinstance(value, (Mapping, str, bytes, BaseModel)):
        return False
    if isinstance(value, tuple) and hasattr(value, "_fields"):
        return False
    return isinstance(value, Iterable)
