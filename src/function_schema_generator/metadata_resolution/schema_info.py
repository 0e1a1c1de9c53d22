"""Metadata override entities."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import TypeVar

SCHEMA_INFO_ATTRIBUTE = "__schema_info__"
SCHEMA_INFO_METADATA_KEY = "schema_info"

_T = TypeVar("_T", bound=type)


@dataclass(frozen=True)
class SchemaInfo:
    """Declared metadata override for a type or a field.

    Every attribute is optional. Empty text and ``None`` mean "use the default".

    - ``name``, ``description`` and ``required`` apply to types and fields.
    - ``format`` applies to fields only.
    - ``additional_properties`` and ``strict`` apply to types only; they land on
      the ``parameters`` object and the function object respectively.
    """

    name: str | None = None
    description: str | None = None
    required: bool = False
    format: str | None = None
    additional_properties: bool = False
    strict: bool = False


def schema_info(
    *,
    name: str | None = None,
    description: str | None = None,
    additional_properties: bool = False,
    strict: bool = False,
) -> Callable[[_T], _T]:
    """Attach a class-level ``SchemaInfo`` override to the decorated class."""

    def decorate(cls: _T) -> _T:
        setattr(
            cls,
            SCHEMA_INFO_ATTRIBUTE,
            SchemaInfo(
                name=name,
                description=description,
                additional_properties=additional_properties,
                strict=strict,
            ),
        )
        return cls

    return decorate
