"""Wire-format key transformations for attribute and relationship names."""

from __future__ import annotations

from typing import Callable

from pydantic.alias_generators import to_camel, to_snake

from jsonapi_serializer.core.errors import ConfigurationError

FieldTransform = Callable[[str], str]


def identity(name: str) -> str:
    return name


def underscore(name: str) -> str:
    """``fullDescription`` and ``full-description`` become ``full_description``."""
    return to_snake(name.replace("-", "_"))


def dasherize(name: str) -> str:
    """``full_description`` becomes ``full-description``."""
    return underscore(name).replace("_", "-")


def camelize(name: str) -> str:
    """``full_description`` becomes ``fullDescription``."""
    return to_camel(underscore(name))


_TRANSFORMS: dict[str, FieldTransform] = {
    "none": identity,
    "underscore": underscore,
    "camelize": camelize,
    "dasherize": dasherize,
}


def get_transform(mode: str) -> FieldTransform:
    """Return the transform for a field transformation mode.

    A transform must map the names declared by one descriptor to distinct
    wire keys; two declared names collapsing onto one key (``fooBar`` and
    ``foo_bar`` under ``underscore``) is a descriptor configuration mistake
    and is not detected here.
    """
    try:
        return _TRANSFORMS[mode]
    except KeyError:
        raise ConfigurationError(f"Unknown field transformation '{mode}'.") from None
