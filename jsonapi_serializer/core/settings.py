"""Process-wide configuration for the serializer."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, replace
from typing import Any, Mapping

from .errors import ConfigurationError

logger = logging.getLogger(__name__)

FIELD_TRANSFORMATIONS = frozenset({"none", "underscore", "camelize", "dasherize"})


def _normalise_string(value: str | None, *, default: str) -> str:
    if value is None:
        return default

    trimmed = value.strip()
    return trimmed or default


@dataclass(frozen=True)
class JSONAPISettings:
    """Serializer settings shared by every call in the process.

    ``field_transformation`` selects how attribute and relationship names
    are rendered on the wire. ``namespace`` is a path prefix placed in
    front of every generated resource path (``/api`` gives ``/api/user/1``).
    """

    field_transformation: str = "none"
    namespace: str = ""

    def __post_init__(self) -> None:
        if self.field_transformation not in FIELD_TRANSFORMATIONS:
            raise ConfigurationError(
                f"Unknown field transformation '{self.field_transformation}'; "
                f"expected one of {sorted(FIELD_TRANSFORMATIONS)}."
            )
        namespace = self.namespace.strip("/")
        object.__setattr__(self, "namespace", f"/{namespace}" if namespace else "")

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "JSONAPISettings":
        """Return settings populated from ``environ``.

        Args:
            environ: Optional mapping of environment variables. When omitted,
                :data:`os.environ` is used.
        """

        source = environ if environ is not None else os.environ
        return cls(
            field_transformation=_normalise_string(
                source.get("JSONAPI_FIELD_TRANSFORMATION"), default="none"
            ).lower(),
            namespace=_normalise_string(source.get("JSONAPI_NAMESPACE"), default=""),
        )


_settings = JSONAPISettings()


def get_settings() -> JSONAPISettings:
    """Return the active process settings."""
    return _settings


def configure(settings: JSONAPISettings | None = None, **overrides: Any) -> JSONAPISettings:
    """Replace the process settings.

    Meant for application start-up; calls already in flight keep the
    settings they read when they started.
    """
    global _settings
    base = settings if settings is not None else _settings
    new_settings = replace(base, **overrides) if overrides else base
    logger.info(
        "JSON:API settings configured (field_transformation=%s, namespace=%r)",
        new_settings.field_transformation,
        new_settings.namespace,
    )
    _settings = new_settings
    return new_settings
